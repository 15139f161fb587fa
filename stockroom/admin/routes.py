from flask import abort, current_app, flash, redirect, render_template, request, url_for
from pydantic import ValidationError

from . import admin_bp
from .forms import field_errors, service_errors
from stockroom.errors import InvalidArgument, NotFound, ServiceError
from stockroom.schemas import MAX_INT, CreateProductDto, PageRequest, ProductFilter, UpdateProductDto
from stockroom.services import categories as category_service
from stockroom.services import products as product_service

FILTER_FIELDS = ("searchKeyword", "minStock", "maxStock", "categoryId", "isPublished")


def _category_choices():
    choices = category_service.all_categories()
    if not choices:
        flash("No categories exist yet. Create a category before adding products.", "warning")
    return choices


def _product_or_404(product_id):
    try:
        return product_service.get_product(product_id)
    except (NotFound, InvalidArgument):
        abort(404)


def _admin_page() -> PageRequest:
    page = min(max(request.args.get("page", 1, type=int) or 1, 1), MAX_INT)
    return PageRequest(page=page, page_size=current_app.config["ADMIN_PAGE_SIZE"])


@admin_bp.route("/products", endpoint="products")
def product_list():
    filters = {k: request.args.get(k, "") for k in FILTER_FIELDS}
    try:
        criteria = ProductFilter.model_validate(filters)
    except ValidationError as exc:
        for message in field_errors(exc).values():
            flash(message, "danger")
        criteria = ProductFilter()

    result = product_service.filter_products(criteria, _admin_page())
    return render_template(
        "admin/products/list.html",
        result=result,
        categories=category_service.all_categories(),
        filters=filters,
    )


@admin_bp.route("/products/<int:product_id>", endpoint="product_detail")
def product_detail(product_id):
    return render_template("admin/products/detail.html", product=_product_or_404(product_id))


@admin_bp.route("/products/add", methods=["GET", "POST"], endpoint="add_product")
def product_add():
    values = {"stockQuantity": 0}
    errors = {}

    if request.method == "POST":
        values = request.form.to_dict()
        try:
            dto = CreateProductDto.model_validate(values)
            product_service.create_product(dto)
        except ValidationError as exc:
            errors = field_errors(exc)
        except ServiceError as exc:
            errors = service_errors(exc)
        else:
            flash("Product created.", "success")
            return redirect(url_for("admin.products"))

    return render_template(
        "admin/products/form.html",
        categories=_category_choices(),
        values=values,
        errors=errors,
        product=None,
    )


@admin_bp.route("/products/<int:product_id>/edit", methods=["GET", "POST"], endpoint="edit_product")
def product_edit(product_id):
    product = _product_or_404(product_id)
    values = product.model_dump(by_alias=True)
    errors = {}

    if request.method == "POST":
        values = request.form.to_dict()
        try:
            dto = UpdateProductDto.model_validate(values)
            product_service.update_product(product_id, dto)
        except ValidationError as exc:
            errors = field_errors(exc)
        except NotFound:
            abort(404)
        except ServiceError as exc:
            errors = service_errors(exc)
        else:
            flash("Product updated.", "success")
            return redirect(url_for("admin.product_detail", product_id=product_id))

    return render_template(
        "admin/products/form.html",
        categories=_category_choices(),
        values=values,
        errors=errors,
        product=product,
    )


@admin_bp.route("/products/<int:product_id>/delete", methods=["GET", "POST"], endpoint="delete_product")
def product_delete(product_id):
    product = _product_or_404(product_id)

    if request.method == "POST":
        try:
            product_service.delete_product(product_id)
        except NotFound:
            abort(404)
        flash("Product deleted.", "warning")
        return redirect(url_for("admin.products"))

    return render_template("admin/products/delete.html", product=product)
