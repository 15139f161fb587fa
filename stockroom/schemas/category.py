from typing import Optional

from pydantic import Field, field_validator

from stockroom.schemas.common import MAX_INT, CamelModel


class CategoryDto(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    minimum_stock_quantity: int
    product_count: int = 0


class CategoryWrite(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    minimum_stock_quantity: int = Field(default=0, ge=0, le=MAX_INT)

    @field_validator("description", mode="before")
    @classmethod
    def _blank_description(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class CreateCategoryDto(CategoryWrite):
    pass


class UpdateCategoryDto(CategoryWrite):
    pass
