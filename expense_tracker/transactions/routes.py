from flask import Blueprint
from pydantic import ValidationError

from expense_tracker.auth.gate import auth_required
from expense_tracker.envelope import json_body, query_args, success, validation_error
from expense_tracker.models import db
from .schemas import DateRangeQuery, TransactionQuery, TransactionSchema
from .services import TransactionStore

transactions_bp = Blueprint("transactions", __name__, url_prefix="/api/transactions")


def _store():
    return TransactionStore(db.session)


@transactions_bp.route("", methods=["POST"])
@auth_required
def create_transaction(identity):
    try:
        data = TransactionSchema.model_validate(json_body())
    except ValidationError as e:
        return validation_error(e)

    transaction = _store().create(data, identity.id)
    return success(transaction.to_dict(), status=201)


@transactions_bp.route("", methods=["GET"])
@auth_required
def list_transactions(identity):
    try:
        query = TransactionQuery.model_validate(query_args())
    except ValidationError as e:
        return validation_error(e)

    transactions, pagination = _store().list(identity.id, query)
    return success(
        {
            "transactions": [t.to_dict() for t in transactions],
            "pagination": pagination,
        }
    )


@transactions_bp.route("/statistics", methods=["GET"])
@auth_required
def transaction_statistics(identity):
    try:
        query = DateRangeQuery.model_validate(query_args())
    except ValidationError as e:
        return validation_error(e)

    return success(_store().statistics(identity.id, query.start_date, query.end_date))


@transactions_bp.route("/<transaction_id>", methods=["GET"])
@auth_required
def get_transaction(identity, transaction_id):
    transaction = _store().get(transaction_id, identity.id)
    return success(transaction.to_dict())


@transactions_bp.route("/<transaction_id>", methods=["PUT"])
@auth_required
def update_transaction(identity, transaction_id):
    try:
        data = TransactionSchema.model_validate(json_body())
    except ValidationError as e:
        return validation_error(e)

    transaction = _store().update(transaction_id, identity.id, data)
    return success(transaction.to_dict())


@transactions_bp.route("/<transaction_id>", methods=["DELETE"])
@auth_required
def delete_transaction(identity, transaction_id):
    _store().delete(transaction_id, identity.id)
    return success(message="Transaction deleted successfully")
