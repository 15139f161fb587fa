from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import Field, field_validator, model_validator

from stockroom.schemas.common import MAX_INT, CamelModel

ProductId = Annotated[int, Field(le=MAX_INT)]


def _blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v


# Schema for Product returned to the client
class ProductDto(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    category_id: int
    category_name: str = ""
    stock_quantity: int
    is_published: bool
    created_at: datetime
    updated_at: Optional[datetime] = None


# Shared properties of create/update payloads
class ProductWrite(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)
    category_id: int = Field(..., le=MAX_INT)
    stock_quantity: int = Field(default=0, ge=0, le=MAX_INT)
    is_published: bool = False

    @field_validator("description", mode="before")
    @classmethod
    def _blank_description(cls, v):
        return _blank_to_none(v)

    @field_validator("category_id", mode="before")
    @classmethod
    def _category_present(cls, v):
        if _blank_to_none(v) is None:
            raise ValueError("Select a valid category")
        return v

    @field_validator("category_id")
    @classmethod
    def _category_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Select a valid category")
        return v


class CreateProductDto(ProductWrite):
    pass


class UpdateProductDto(ProductWrite):
    pass


class ProductFilter(CamelModel):
    search_keyword: Optional[str] = None
    min_stock: Optional[int] = Field(default=None, ge=0, le=MAX_INT)
    max_stock: Optional[int] = Field(default=None, ge=0, le=MAX_INT)
    category_id: Optional[int] = Field(default=None, le=MAX_INT)
    is_published: Optional[bool] = None

    @field_validator(
        "search_keyword", "min_stock", "max_stock", "category_id", "is_published", mode="before"
    )
    @classmethod
    def _blank_is_unset(cls, v):
        return _blank_to_none(v)

    @model_validator(mode="after")
    def _stock_range_ordered(self):
        if self.min_stock is not None and self.max_stock is not None and self.min_stock > self.max_stock:
            raise ValueError("Minimum stock cannot be greater than maximum stock")
        return self


class BulkPublishResult(CamelModel):
    updated_count: int
    errors: List[str] = Field(default_factory=list)
