# tests/test_concurrency.py
import pytest
from sqlalchemy import text
from sqlalchemy.orm.exc import StaleDataError

from stockroom.errors import NotFound
from stockroom.extensions import db
from stockroom.models import Category, Product
from stockroom.services.common import commit_update


@pytest.fixture
def product(app):
    category = Category(name="Kitap", minimum_stock_quantity=0)
    db.session.add(category)
    db.session.flush()
    product = Product(title="Novel", category_id=category.id, stock_quantity=3)
    db.session.add(product)
    db.session.commit()
    return product


def test_versions_are_bumped_on_update(product):
    assert product.version_id == 1
    product.stock_quantity = 4
    commit_update(Product, product.id, "Product not found")
    assert product.version_id == 2


def test_conflicting_write_propagates_when_row_still_exists(product):
    product_id = product.id
    assert product.version_id == 1
    # another writer got there first
    db.session.execute(
        text("UPDATE product SET version_id = version_id + 1 WHERE id = :id"), {"id": product_id}
    )
    product.title = "Stale edit"

    with pytest.raises(StaleDataError):
        commit_update(Product, product_id, "Product not found")

    assert db.session.get(Product, product_id) is not None


def test_conflict_on_deleted_row_is_not_found(product, monkeypatch):
    product_id = product.id
    db.session.execute(text("DELETE FROM product WHERE id = :id"), {"id": product_id})
    db.session.commit()

    def stale_commit():
        raise StaleDataError("UPDATE statement on table 'product' expected to update 1 row(s); 0 were matched.")

    monkeypatch.setattr(db.session, "commit", stale_commit)

    with pytest.raises(NotFound) as exc:
        commit_update(Product, product_id, "Product not found")
    assert exc.value.message == "Product not found"


def test_category_name_race_surfaces_as_duplicate(client, make_category, monkeypatch):
    from stockroom.services import categories

    make_category("Giyim", 10)
    # skip the pre-check so the unique index has to catch it
    monkeypatch.setattr(categories, "_ensure_unique_name", lambda *args, **kwargs: None)

    r = client.post("/api/categories", json={"name": "giyim", "minimumStockQuantity": 1})
    assert r.status_code == 400
    assert r.get_json()["message"] == "A category with this name already exists"
