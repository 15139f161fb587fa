from .common import MAX_INT, ApiResponse, PageRequest, PaginatedResponse, validation_messages
from .category import CategoryDto, CreateCategoryDto, UpdateCategoryDto
from .product import (
    BulkPublishResult,
    CreateProductDto,
    ProductDto,
    ProductFilter,
    ProductId,
    UpdateProductDto,
)

__all__ = [
    "MAX_INT",
    "ApiResponse",
    "PageRequest",
    "PaginatedResponse",
    "validation_messages",
    "CategoryDto",
    "CreateCategoryDto",
    "UpdateCategoryDto",
    "BulkPublishResult",
    "CreateProductDto",
    "ProductDto",
    "ProductFilter",
    "ProductId",
    "UpdateProductDto",
]
