"""
Tests for application wiring: startup checks, fallbacks and error handling.
"""

import importlib

import pytest

from expense_tracker.app import create_app
from expense_tracker.config import TestConfig
from expense_tracker.transactions.services import TransactionStore


def test_refuses_to_start_without_secret():
    class NoSecretConfig(TestConfig):
        JWT_SECRET_KEY = ""

    with pytest.raises(RuntimeError, match="JWT_SECRET"):
        create_app(NoSecretConfig)


def test_index(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "running" in response.get_data(as_text=True)


def test_unknown_path_echoes_url(client):
    response = client.get("/no/such/page")

    assert response.status_code == 404
    assert response.mimetype == "text/html"
    assert "/no/such/page" in response.get_data(as_text=True)


def test_unknown_path_is_escaped(client):
    response = client.get("/<script>alert(1)</script>")

    body = response.get_data(as_text=True)
    assert response.status_code == 404
    assert "<script>" not in body
    assert "&lt;script&gt;" in body


def test_unmatched_method_is_not_found(client):
    response = client.patch("/api/transactions")

    assert response.status_code == 404
    assert "PATCH" in response.get_data(as_text=True)


def test_category_routes_can_be_unmounted():
    class NoCategoriesConfig(TestConfig):
        ENABLE_CATEGORY_ROUTES = False

    app = create_app(NoCategoriesConfig)

    assert app.test_client().get("/api/categories").status_code == 404


def test_unexpected_error_is_generic(client, auth_headers, monkeypatch):
    def explode(self, *args, **kwargs):
        raise RuntimeError("database is on fire")

    monkeypatch.setattr(TransactionStore, "statistics", explode)

    response = client.get("/api/transactions/statistics", headers=auth_headers)

    assert response.status_code == 500
    assert response.get_json() == {"success": False, "message": "Something went wrong"}
    assert "fire" not in response.get_data(as_text=True)


def test_node_env_sets_environment(monkeypatch):
    from expense_tracker import config

    monkeypatch.delenv("ENVIRONMENT", raising=False)
    monkeypatch.setenv("NODE_ENV", "production")
    try:
        reloaded = importlib.reload(config)
        assert reloaded.Config.ENVIRONMENT == "production"
        assert reloaded.Config.JWT_COOKIE_SECURE is True
    finally:
        monkeypatch.undo()
        importlib.reload(config)
