# tests/conftest.py
import pytest

from stockroom.app import create_app
from stockroom.config import TestingConfig
from stockroom.extensions import db


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_category(client):
    def _make(name="Elektronik", minimum=5, description=None):
        r = client.post(
            "/api/categories",
            json={"name": name, "description": description, "minimumStockQuantity": minimum},
        )
        assert r.status_code == 201, r.get_json()
        return r.get_json()["data"]

    return _make


@pytest.fixture
def make_product(client):
    def _make(category_id, title="Laptop", stock=10, published=False, description=None):
        r = client.post(
            "/api/products",
            json={
                "title": title,
                "description": description,
                "categoryId": category_id,
                "stockQuantity": stock,
                "isPublished": published,
            },
        )
        assert r.status_code == 201, r.get_json()
        return r.get_json()["data"]

    return _make
