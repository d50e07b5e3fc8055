"""Helpers for the uniform ``{success, data|message|errors}`` response wrapper."""

from flask import jsonify, request


def success(data=None, message=None, status=200):
    body = {"success": True}
    if data is not None:
        body["data"] = data
    if message is not None:
        body["message"] = message
    response = jsonify(body)
    response.status_code = status
    return response


def failure(message, status=400, errors=None):
    body = {"success": False, "message": message}
    if errors:
        body["errors"] = errors
    response = jsonify(body)
    response.status_code = status
    return response


def validation_error(exc):
    return failure(
        "Validation failed",
        400,
        errors=exc.errors(include_url=False, include_context=False, include_input=False),
    )


def json_body():
    return request.get_json(silent=True) or {}


def query_args():
    # empty query values count as absent
    return {key: value for key, value in request.args.items() if value != ""}
