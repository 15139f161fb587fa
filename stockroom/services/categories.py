"""Category operations shared by the JSON API and the admin pages."""
from __future__ import annotations

from flask import current_app
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from stockroom.errors import InvalidOperation, NotFound, ValidationFailed
from stockroom.extensions import db
from stockroom.mappers import (
    category_from_dto,
    category_to_dto,
    product_to_dto,
    update_category_from_dto,
)
from stockroom.models import Category, Product
from stockroom.models.category import normalize_name
from stockroom.schemas import (
    CategoryDto,
    CreateCategoryDto,
    PageRequest,
    PaginatedResponse,
    ProductDto,
    UpdateCategoryDto,
)
from stockroom.services.common import check_id, commit_update, paginate

CATEGORY_NOT_FOUND = "Category not found"
DUPLICATE_NAME = "A category with this name already exists"

DEFAULT_CATEGORIES = (
    {"name": "Elektronik", "description": "Electronic products", "minimum_stock_quantity": 5},
    {"name": "Giyim", "description": "Clothing", "minimum_stock_quantity": 10},
    {"name": "Kitap", "description": "Books and magazines", "minimum_stock_quantity": 3},
)


def _get_or_404(category_id: int) -> Category:
    category = db.session.get(Category, check_id(category_id))
    if category is None:
        raise NotFound(CATEGORY_NOT_FOUND)
    return category


def _product_count(category_id: int) -> int:
    return Product.query.filter(Product.category_id == category_id).count()


def _ensure_unique_name(name: str, exclude_id: int | None = None) -> None:
    q = Category.query.filter(Category.normalized_name == normalize_name(name))
    if exclude_id is not None:
        q = q.filter(Category.id != exclude_id)
    if q.first() is not None:
        current_app.logger.warning("Duplicate category name: %s", name)
        raise ValidationFailed(DUPLICATE_NAME, errors=[DUPLICATE_NAME], field="name")


def list_categories() -> list[CategoryDto]:
    """All categories ordered by name, each with its product count."""
    rows = (
        db.session.query(Category, func.count(Product.id))
        .outerjoin(Product, Product.category_id == Category.id)
        .group_by(Category.id)
        .order_by(Category.name.asc())
        .all()
    )
    return [category_to_dto(category, count) for category, count in rows]


def list_with_product_counts() -> list[CategoryDto]:
    return list_categories()


def get_category(category_id: int) -> CategoryDto:
    category = _get_or_404(category_id)
    return category_to_dto(category, _product_count(category.id))


def create_category(dto: CreateCategoryDto) -> CategoryDto:
    current_app.logger.info("Creating category: %s", dto.name)
    _ensure_unique_name(dto.name)

    category = category_from_dto(dto)
    db.session.add(category)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ValidationFailed(DUPLICATE_NAME, errors=[DUPLICATE_NAME], field="name")

    current_app.logger.info("Category created. id=%s name=%s", category.id, category.name)
    return category_to_dto(category, 0)


def update_category(category_id: int, dto: UpdateCategoryDto) -> CategoryDto:
    category = _get_or_404(category_id)
    _ensure_unique_name(dto.name, exclude_id=category_id)

    update_category_from_dto(category, dto)
    try:
        commit_update(Category, category_id, CATEGORY_NOT_FOUND)
    except IntegrityError:
        db.session.rollback()
        raise ValidationFailed(DUPLICATE_NAME, errors=[DUPLICATE_NAME], field="name")

    current_app.logger.info("Category updated. id=%s", category_id)
    return category_to_dto(category, _product_count(category_id))


def delete_category(category_id: int) -> None:
    category = _get_or_404(category_id)

    count = _product_count(category_id)
    if count:
        current_app.logger.warning("Refusing to delete category %s with %s products", category_id, count)
        raise InvalidOperation(
            f"This category has {count} product(s). "
            "Move or delete them before deleting the category."
        )

    db.session.delete(category)
    try:
        db.session.commit()
    except IntegrityError:
        # a product was attached between the check and the delete
        db.session.rollback()
        raise InvalidOperation("This category still has products and cannot be deleted.")

    current_app.logger.info("Category deleted. id=%s", category_id)


def list_category_products(category_id: int, page: PageRequest) -> tuple[CategoryDto, PaginatedResponse]:
    category = _get_or_404(category_id)
    query = (
        Product.query.filter(Product.category_id == category_id)
        .order_by(Product.title.asc(), Product.id.asc())
    )
    result = paginate(query, page, ProductDto, product_to_dto)
    return category_to_dto(category, result.total_count), result


def all_categories() -> list[Category]:
    """Plain entities for dropdowns."""
    return Category.query.order_by(Category.name.asc()).all()


def seed_default_categories() -> int:
    """Insert the default categories that are missing; returns how many were added."""
    added = 0
    for data in DEFAULT_CATEGORIES:
        exists = Category.query.filter(Category.normalized_name == normalize_name(data["name"])).first()
        if exists:
            continue
        db.session.add(Category(**data))
        added += 1
    db.session.commit()
    return added
