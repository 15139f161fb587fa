from math import ceil
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# upper bound for every stored integer (ids, stock, minimums, pages)
MAX_INT = 2_147_483_647


class CamelModel(BaseModel):
    """Shared config: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


class ApiResponse(CamelModel):
    success: bool
    message: str
    errors: Optional[List[str]] = None
    data: Any = None


class PageRequest(CamelModel):
    page: int = Field(default=1, ge=1, le=MAX_INT)
    page_size: int = Field(default=10, ge=1, le=100)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


class PaginatedResponse(CamelModel, Generic[T]):
    data: List[T]
    total_count: int
    page_number: int
    page_size: int
    total_pages: int
    has_previous: bool
    has_next: bool

    @classmethod
    def build(cls, items, total_count: int, page: PageRequest):
        total_pages = max(1, ceil(total_count / page.page_size))
        return cls(
            data=items,
            total_count=total_count,
            page_number=page.page,
            page_size=page.page_size,
            total_pages=total_pages,
            has_previous=page.page > 1,
            has_next=page.page < total_pages,
        )


FIELD_LABELS = {
    "name": "Category name",
    "description": "Description",
    "minimumStockQuantity": "Minimum stock quantity",
    "title": "Title",
    "categoryId": "Category",
    "stockQuantity": "Stock quantity",
    "isPublished": "Published",
    "searchKeyword": "Search keyword",
    "minStock": "Minimum stock",
    "maxStock": "Maximum stock",
    "page": "Page",
    "pageSize": "Page size",
}


def _label(field: str) -> str:
    return FIELD_LABELS.get(field) or FIELD_LABELS.get(to_camel(field)) or field


def validation_messages(exc: ValidationError) -> list[str]:
    """Flatten pydantic errors into ``"<Field>: <reason>"`` strings.

    Leading integer locations (list payloads) become an ``Item N - `` prefix.
    """
    messages = []
    for err in exc.errors():
        loc = list(err.get("loc") or ())
        prefix = ""
        if loc and isinstance(loc[0], int):
            prefix = f"Item {loc.pop(0) + 1} - "
        reason = err.get("msg", "Invalid value")
        if reason.startswith("Value error, "):
            reason = reason[len("Value error, "):]
        if loc:
            messages.append(f"{prefix}{_label(str(loc[-1]))}: {reason}")
        else:
            messages.append(f"{prefix}{reason}")
    return messages
