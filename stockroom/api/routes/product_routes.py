from __future__ import annotations

from typing import List

from flask import Blueprint, url_for

from stockroom.api.utils.parsing import page_request, parse_args, parse_body
from stockroom.api.utils.responses import created, ok
from stockroom.schemas import CreateProductDto, ProductFilter, ProductId, UpdateProductDto
from stockroom.services import products

api_products = Blueprint("api_products", __name__, url_prefix="/api/products")


# ========================= Endpoints =========================

@api_products.get("")
def get_products():
    result = products.list_products(page_request())
    return ok(result, "Products retrieved successfully")


@api_products.get("/<int:product_id>")
def get_product(product_id: int):
    return ok(products.get_product(product_id), "Product retrieved successfully")


@api_products.post("")
def add_product():
    product = products.create_product(parse_body(CreateProductDto))
    location = url_for("api_products.get_product", product_id=product.id)
    return created(product, "Product created successfully", location=location)


@api_products.put("/<int:product_id>")
def update_product(product_id: int):
    dto = parse_body(UpdateProductDto)
    return ok(products.update_product(product_id, dto), "Product updated successfully")


@api_products.delete("/<int:product_id>")
def delete_product(product_id: int):
    products.delete_product(product_id)
    return ok(None, "Product deleted successfully")


@api_products.get("/filter")
def filter_products():
    criteria = parse_args(ProductFilter)
    result = products.filter_products(criteria, page_request())
    return ok(result, "Products filtered successfully")


@api_products.post("/bulk")
def bulk_create():
    dtos = parse_body(List[CreateProductDto])
    items = products.bulk_create(dtos)
    return created(items, f"{len(items)} product(s) created successfully")


@api_products.put("/bulk-publish")
def bulk_publish():
    ids = parse_body(List[ProductId])
    result = products.bulk_publish(ids)
    return ok(result, products.bulk_publish_message(result))
