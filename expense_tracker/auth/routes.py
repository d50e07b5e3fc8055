# expense_tracker/auth/routes.py

from flask import Blueprint, current_app
from pydantic import ValidationError

from expense_tracker.envelope import json_body, success, validation_error
from expense_tracker.models import db
from .gate import auth_required
from .limits import auth_limit
from .schemas import SignupSchema, LoginSchema
from .services import CredentialStore
from .tokens import issue_token, set_session_cookie, clear_session_cookie

auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")


def _store():
    return CredentialStore(db.session, rounds=current_app.config["BCRYPT_ROUNDS"])


def _session_response(user, status):
    token = issue_token(user.id)
    response = success({"user": user.to_dict(), "token": token}, status=status)
    return set_session_cookie(response, token)


@auth_bp.route("/signup", methods=["POST"])
@auth_limit
def signup():

    try:
        data = SignupSchema.model_validate(json_body())
    except ValidationError as e:
        return validation_error(e)

    user = _store().signup(data)

    return _session_response(user, 201)


@auth_bp.route("/login", methods=["POST"])
@auth_limit
def login():

    try:
        data = LoginSchema.model_validate(json_body())
    except ValidationError as e:
        return validation_error(e)

    user = _store().login(data)

    return _session_response(user, 200)


@auth_bp.route("/logout", methods=["POST"])
@auth_required
def logout(identity):
    # tokens are stateless; the client discards its copy
    response = success(message="Logged out successfully")
    return clear_session_cookie(response)
