from flask import abort, flash, redirect, render_template, request, url_for
from pydantic import ValidationError

from . import admin_bp
from .forms import field_errors, service_errors
from stockroom.errors import InvalidArgument, InvalidOperation, NotFound, ServiceError
from stockroom.schemas import CreateCategoryDto, UpdateCategoryDto
from stockroom.services import categories as category_service


@admin_bp.route("/categories", endpoint="list_categories")
def list_categories():
    return render_template(
        "admin/categories/list.html",
        categories=category_service.list_categories(),
    )


@admin_bp.route("/categories/add", methods=["GET", "POST"], endpoint="add_category")
def add_category():
    values = {"minimumStockQuantity": 0}
    errors = {}

    if request.method == "POST":
        values = request.form.to_dict()
        try:
            category_service.create_category(CreateCategoryDto.model_validate(values))
        except ValidationError as exc:
            errors = field_errors(exc)
        except ServiceError as exc:
            errors = service_errors(exc)
        else:
            flash("Category created.", "success")
            return redirect(url_for("admin.list_categories"))

    return render_template("admin/categories/form.html", values=values, errors=errors, category=None)


@admin_bp.route("/categories/<int:category_id>/edit", methods=["GET", "POST"], endpoint="edit_category")
def edit_category(category_id):
    try:
        category = category_service.get_category(category_id)
    except (NotFound, InvalidArgument):
        abort(404)
    values = category.model_dump(by_alias=True)
    errors = {}

    if request.method == "POST":
        values = request.form.to_dict()
        try:
            category_service.update_category(category_id, UpdateCategoryDto.model_validate(values))
        except ValidationError as exc:
            errors = field_errors(exc)
        except NotFound:
            abort(404)
        except ServiceError as exc:
            errors = service_errors(exc)
        else:
            flash("Category updated.", "success")
            return redirect(url_for("admin.list_categories"))

    return render_template("admin/categories/form.html", values=values, errors=errors, category=category)


@admin_bp.route("/categories/<int:category_id>/delete", methods=["POST"], endpoint="delete_category")
def delete_category(category_id):
    try:
        category_service.delete_category(category_id)
    except (NotFound, InvalidArgument):
        abort(404)
    except InvalidOperation as exc:
        flash(exc.message, "danger")
    else:
        flash("Category deleted.", "info")
    return redirect(url_for("admin.list_categories"))
