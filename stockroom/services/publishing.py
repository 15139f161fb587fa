"""
Publish-eligibility rule.

A product may only be written (and only be published) when it points at an
existing category and its stock covers that category's minimum. Writes check
the stock minimum, which already implies publish eligibility; the publish
check on its own guards state changes of stored products. Everything here is
a pure check on already loaded objects; callers resolve the category
themselves.
"""
from __future__ import annotations

from dataclasses import dataclass

from stockroom.errors import RuleViolation
from stockroom.models import Category, Product

INVALID_CATEGORY = "Invalid category selection"


@dataclass(frozen=True)
class Violation:
    field: str
    message: str

    def to_error(self) -> RuleViolation:
        return RuleViolation(self.message, errors=[self.message], field=self.field)


def stock_violation(category: Category | None, stock_quantity: int) -> Violation | None:
    if category is None:
        return Violation("categoryId", INVALID_CATEGORY)
    minimum = category.minimum_stock_quantity or 0
    if stock_quantity < minimum:
        return Violation("stockQuantity", f"Stock quantity must be at least {minimum}")
    return None


def publish_violation(category: Category | None, stock_quantity: int, is_published: bool) -> Violation | None:
    if not is_published:
        return None
    if category is None:
        return Violation("categoryId", "A product must have a category before it can be published")
    minimum = category.minimum_stock_quantity or 0
    if stock_quantity < minimum:
        return Violation("isPublished", f"Stock quantity must be at least {minimum} to publish the product")
    return None


def can_publish(product: Product) -> bool:
    return publish_violation(product.category, product.stock_quantity, True) is None


def ensure_writable(category: Category | None, stock_quantity: int) -> None:
    """Raise ``RuleViolation`` unless the category exists and the stock covers its minimum."""
    violation = stock_violation(category, stock_quantity)
    if violation is not None:
        raise violation.to_error()
