# stockroom/mappers.py
from __future__ import annotations

from stockroom.models import Category, Product
from stockroom.schemas import (
    CategoryDto,
    CreateCategoryDto,
    CreateProductDto,
    ProductDto,
    UpdateCategoryDto,
    UpdateProductDto,
)


def category_to_dto(category: Category, product_count: int | None = None) -> CategoryDto:
    if product_count is None:
        product_count = len(category.products or [])
    return CategoryDto(
        id=category.id,
        name=category.name,
        description=category.description,
        minimum_stock_quantity=category.minimum_stock_quantity,
        product_count=product_count,
    )


def category_from_dto(dto: CreateCategoryDto) -> Category:
    return Category(
        name=dto.name,
        description=dto.description,
        minimum_stock_quantity=dto.minimum_stock_quantity,
    )


def update_category_from_dto(category: Category, dto: UpdateCategoryDto) -> None:
    category.name = dto.name
    category.description = dto.description
    category.minimum_stock_quantity = dto.minimum_stock_quantity


def product_to_dto(product: Product) -> ProductDto:
    return ProductDto(
        id=product.id,
        title=product.title,
        description=product.description,
        category_id=product.category_id,
        category_name=product.category.name if product.category else "",
        stock_quantity=product.stock_quantity,
        is_published=product.is_published,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


def product_from_dto(dto: CreateProductDto) -> Product:
    # created_at comes from the column default, updated_at stays empty until the first edit
    return Product(
        title=dto.title,
        description=dto.description,
        category_id=dto.category_id,
        stock_quantity=dto.stock_quantity,
        is_published=dto.is_published,
    )


def update_product_from_dto(product: Product, dto: UpdateProductDto) -> None:
    product.title = dto.title
    product.description = dto.description
    product.category_id = dto.category_id
    product.stock_quantity = dto.stock_quantity
    product.is_published = dto.is_published
    product.touch()
