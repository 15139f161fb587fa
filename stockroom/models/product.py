from datetime import datetime, timezone

from stockroom.extensions import db


def utcnow() -> datetime:
    # naive UTC, matching what SQLite hands back
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Product(db.Model):
    __tablename__ = "product"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False, index=True)
    description = db.Column(db.String(1000), nullable=True)

    # a category with products cannot be removed
    category_id = db.Column(
        db.Integer,
        db.ForeignKey("category.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    category = db.relationship("Category", back_populates="products")

    stock_quantity = db.Column(db.Integer, nullable=False, default=0, index=True)
    is_published = db.Column(db.Boolean, nullable=False, default=False)

    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=True)

    version_id = db.Column(db.Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version_id}

    def touch(self) -> None:
        self.updated_at = utcnow()

    def __repr__(self) -> str:
        return f"<Product {self.title}>"
