"""Product operations shared by the JSON API and the admin pages."""
from __future__ import annotations

from flask import current_app
from sqlalchemy import or_
from sqlalchemy.orm import selectinload

from stockroom.errors import InvalidParameter, NotFound, ValidationFailed
from stockroom.extensions import db
from stockroom.mappers import product_from_dto, product_to_dto, update_product_from_dto
from stockroom.models import Category, Product
from stockroom.schemas import (
    BulkPublishResult,
    CreateProductDto,
    PageRequest,
    PaginatedResponse,
    ProductDto,
    ProductFilter,
    UpdateProductDto,
)
from stockroom.services.common import check_id, commit_update, paginate
from stockroom.services.publishing import (
    can_publish,
    ensure_writable,
    stock_violation,
)

PRODUCT_NOT_FOUND = "Product not found"


def _base_query():
    return Product.query.options(selectinload(Product.category))


def _ordered(query):
    return query.order_by(Product.title.asc(), Product.id.asc())


def _get_or_404(product_id: int) -> Product:
    product = db.session.get(Product, check_id(product_id))
    if product is None:
        raise NotFound(PRODUCT_NOT_FOUND)
    return product


def _resolve_category(category_id: int) -> Category | None:
    return db.session.get(Category, category_id)


def _like_pattern(keyword: str) -> str:
    escaped = keyword.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def apply_filter(query, criteria: ProductFilter):
    """AND together every supplied criterion; unset ones are no-ops."""
    keyword = (criteria.search_keyword or "").strip()
    if keyword:
        like = _like_pattern(keyword)
        query = query.join(Product.category).filter(
            or_(
                Product.title.ilike(like, escape="\\"),
                Product.description.ilike(like, escape="\\"),
                Category.name.ilike(like, escape="\\"),
            )
        )
    if criteria.min_stock is not None:
        query = query.filter(Product.stock_quantity >= criteria.min_stock)
    if criteria.max_stock is not None:
        query = query.filter(Product.stock_quantity <= criteria.max_stock)
    if criteria.category_id is not None:
        query = query.filter(Product.category_id == criteria.category_id)
    if criteria.is_published is not None:
        query = query.filter(Product.is_published == criteria.is_published)
    return query


def list_products(page: PageRequest) -> PaginatedResponse:
    return paginate(_ordered(_base_query()), page, ProductDto, product_to_dto)


def filter_products(criteria: ProductFilter, page: PageRequest) -> PaginatedResponse:
    query = _ordered(apply_filter(_base_query(), criteria))
    return paginate(query, page, ProductDto, product_to_dto)


def get_product(product_id: int) -> ProductDto:
    return product_to_dto(_get_or_404(product_id))


def create_product(dto: CreateProductDto) -> ProductDto:
    current_app.logger.info("Creating product: %s", dto.title)

    category = _resolve_category(dto.category_id)
    try:
        ensure_writable(category, dto.stock_quantity)
    except ValidationFailed as exc:
        current_app.logger.warning(
            "Product '%s' rejected (category=%s, stock=%s): %s",
            dto.title, dto.category_id, dto.stock_quantity, exc.message,
        )
        raise

    product = product_from_dto(dto)
    db.session.add(product)
    db.session.commit()

    current_app.logger.info("Product created. id=%s title=%s", product.id, product.title)
    return product_to_dto(product)


def update_product(product_id: int, dto: UpdateProductDto) -> ProductDto:
    product = _get_or_404(product_id)

    category = _resolve_category(dto.category_id)
    try:
        ensure_writable(category, dto.stock_quantity)
    except ValidationFailed as exc:
        current_app.logger.warning("Update of product %s rejected: %s", product_id, exc.message)
        raise

    update_product_from_dto(product, dto)
    commit_update(Product, product_id, PRODUCT_NOT_FOUND)

    current_app.logger.info("Product updated. id=%s", product_id)
    return product_to_dto(product)


def delete_product(product_id: int) -> None:
    product = _get_or_404(product_id)
    db.session.delete(product)
    db.session.commit()
    current_app.logger.info("Product deleted. id=%s", product_id)


def bulk_create(dtos: list[CreateProductDto]) -> list[ProductDto]:
    """All-or-nothing: one bad item rejects the whole batch."""
    if not dtos:
        raise InvalidParameter(errors=["At least one product is required"])

    categories: dict[int, Category | None] = {}
    errors: list[str] = []
    pending: list[Product] = []

    for dto in dtos:
        if dto.category_id not in categories:
            categories[dto.category_id] = _resolve_category(dto.category_id)
        category = categories[dto.category_id]

        violation = stock_violation(category, dto.stock_quantity)
        if violation is not None:
            errors.append(f"'{dto.title}': {violation.message}")
            continue

        pending.append(product_from_dto(dto))

    if errors:
        current_app.logger.warning("Bulk create rejected, %s of %s items invalid", len(errors), len(dtos))
        raise ValidationFailed("Some products could not be created", errors=errors)

    db.session.add_all(pending)
    db.session.commit()

    current_app.logger.info("Bulk created %s products", len(pending))
    return [product_to_dto(p) for p in pending]


def bulk_publish(product_ids: list[int]) -> BulkPublishResult:
    """Publish every qualifying product; the rest are reported and left untouched."""
    if not product_ids:
        raise InvalidParameter(errors=["At least one product id is required"])

    wanted = list(dict.fromkeys(product_ids))
    products = _base_query().filter(Product.id.in_(wanted)).all()
    if not products:
        raise NotFound("The specified products were not found")

    by_id = {p.id: p for p in products}
    errors: list[str] = []
    updated = 0

    for product_id in wanted:
        product = by_id.get(product_id)
        if product is None:
            errors.append(f"Product {product_id} was not found")
            continue

        if not can_publish(product):
            minimum = product.category.minimum_stock_quantity if product.category else 0
            errors.append(f"'{product.title}' does not meet the minimum stock quantity of {minimum}")
            continue

        product.is_published = True
        product.touch()
        updated += 1

    db.session.commit()

    current_app.logger.info("Bulk publish: %s published, %s skipped", updated, len(errors))
    return BulkPublishResult(updated_count=updated, errors=errors)


def bulk_publish_message(result: BulkPublishResult) -> str:
    message = f"{result.updated_count} product(s) published"
    if result.errors:
        message += f", {len(result.errors)} could not be published"
    return message
