from __future__ import annotations

from flask import Blueprint, url_for

from stockroom.api.utils.parsing import page_request, parse_body
from stockroom.api.utils.responses import created, ok
from stockroom.schemas import CreateCategoryDto, UpdateCategoryDto
from stockroom.services import categories

api_categories = Blueprint("api_categories", __name__, url_prefix="/api/categories")


@api_categories.get("")
def list_categories():
    items = categories.list_categories()
    return ok(items, "Categories retrieved successfully")


@api_categories.get("/with-product-counts")
def list_with_product_counts():
    items = categories.list_with_product_counts()
    return ok(items, "Categories and product counts retrieved successfully")


@api_categories.get("/<int:category_id>")
def get_category(category_id: int):
    return ok(categories.get_category(category_id), "Category retrieved successfully")


@api_categories.post("")
def create_category():
    category = categories.create_category(parse_body(CreateCategoryDto))
    location = url_for("api_categories.get_category", category_id=category.id)
    return created(category, "Category created successfully", location=location)


@api_categories.put("/<int:category_id>")
def update_category(category_id: int):
    dto = parse_body(UpdateCategoryDto)
    return ok(categories.update_category(category_id, dto), "Category updated successfully")


@api_categories.delete("/<int:category_id>")
def delete_category(category_id: int):
    categories.delete_category(category_id)
    return ok(None, "Category deleted successfully")


@api_categories.get("/<int:category_id>/products")
def list_category_products(category_id: int):
    page = page_request()
    category, result = categories.list_category_products(category_id, page)
    return ok(result, f"Products in category {category.name} retrieved successfully")
