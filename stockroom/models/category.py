from sqlalchemy.orm import validates

from stockroom.extensions import db


def normalize_name(name: str | None) -> str:
    """Case-folded lookup key used for case-insensitive name uniqueness."""
    return (name or "").strip().casefold()


class Category(db.Model):
    __tablename__ = "category"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False, index=True)
    normalized_name = db.Column(db.String(100), nullable=False, unique=True)
    description = db.Column(db.String(500), nullable=True)
    minimum_stock_quantity = db.Column(db.Integer, nullable=False, default=0)
    version_id = db.Column(db.Integer, nullable=False)

    products = db.relationship(
        "Product", back_populates="category", lazy=True, passive_deletes="all"
    )

    __mapper_args__ = {"version_id_col": version_id}

    @validates("name")
    def _sync_normalized_name(self, key, value):
        self.normalized_name = normalize_name(value)
        return value

    def __repr__(self): return f"<Category {self.name}>"
