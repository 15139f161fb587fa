# tests/test_cli.py
from stockroom.models import Category


def test_seed_categories_is_idempotent(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["seed-categories"])
    assert result.exit_code == 0
    assert "3 default categories added" in result.output

    result = runner.invoke(args=["seed-categories"])
    assert "already present" in result.output

    minimums = {c.name: c.minimum_stock_quantity for c in Category.query.all()}
    assert minimums == {"Elektronik": 5, "Giyim": 10, "Kitap": 3}


def test_init_db_creates_tables_and_seeds(app):
    result = app.test_cli_runner().invoke(args=["init-db"])
    assert result.exit_code == 0
    assert Category.query.count() == 3
