# stockroom/models/__init__.py
from .category import Category
from .product import Product

__all__ = [
    "Category",
    "Product",
]
