from flask import Blueprint, request
from pydantic import ValidationError

from expense_tracker.auth.gate import auth_required
from expense_tracker.envelope import json_body, success, validation_error
from expense_tracker.models import db
from .schemas import CategorySchema, CategoryPatchSchema
from .services import CategoryStore

categories_bp = Blueprint("categories", __name__, url_prefix="/api/categories")


def _store():
    return CategoryStore(db.session)


@categories_bp.route("", methods=["POST"])
@auth_required
def create_category(identity):
    try:
        data = CategorySchema.model_validate(json_body())
    except ValidationError as e:
        return validation_error(e)

    category = _store().create(data)
    return success(category.to_dict(), status=201)


@categories_bp.route("", methods=["GET"])
@auth_required
def list_categories(identity):
    categories = _store().list(request.args.get("type") or None)
    return success([c.to_dict() for c in categories])


@categories_bp.route("/<category_id>", methods=["GET"])
@auth_required
def get_category(identity, category_id):
    store = _store()
    category = store.get(category_id)
    transactions = store.transactions_for(category, identity.id)
    return success(category.to_dict(transactions=transactions))


@categories_bp.route("/<category_id>", methods=["PUT"])
@auth_required
def update_category(identity, category_id):
    try:
        data = CategoryPatchSchema.model_validate(json_body())
    except ValidationError as e:
        return validation_error(e)

    category = _store().update(category_id, data)
    return success(category.to_dict())


@categories_bp.route("/<category_id>", methods=["DELETE"])
@auth_required
def delete_category(identity, category_id):
    _store().delete(category_id)
    return success(message="Category deleted successfully")
