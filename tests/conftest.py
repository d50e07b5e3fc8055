"""
Pytest configuration and fixtures for the expense tracker API tests.
"""

from decimal import Decimal

import pytest

from expense_tracker.app import create_app
from expense_tracker.config import TestConfig
from expense_tracker.models import db, Transaction

PASSWORD = "Secret123"


@pytest.fixture
def app():
    """Fresh application with an in-memory database."""
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def signup(client):
    """Register a user and return (user, token)."""
    counter = {"n": 0}

    def _signup(**overrides):
        counter["n"] += 1
        n = counter["n"]
        payload = {
            "name": f"User {n}",
            "email": f"user{n}@example.com",
            "phone": f"+9198765432{n:02d}",
            "password": PASSWORD,
            "confirmPassword": PASSWORD,
        }
        payload.update(overrides)
        response = client.post("/api/auth/signup", json=payload)
        assert response.status_code == 201, response.get_json()
        data = response.get_json()["data"]
        return data["user"], data["token"]

    return _signup


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(signup):
    """Authorization headers for a freshly registered user."""
    _, token = signup()
    return bearer(token)


@pytest.fixture
def make_category(client, auth_headers):
    def _make(title="Groceries", type="EXPENSE", icon=None):
        payload = {"title": title, "type": type}
        if icon is not None:
            payload["icon"] = icon
        response = client.post("/api/categories", json=payload, headers=auth_headers)
        assert response.status_code == 201, response.get_json()
        return response.get_json()["data"]

    return _make


@pytest.fixture
def transaction_payload():
    def _payload(category_id, **overrides):
        payload = {
            "type": "EXPENSE",
            "category": category_id,
            "amount": 250.5,
            "description": "Weekly shopping",
            "paymentMode": "CASH",
        }
        payload.update(overrides)
        return payload

    return _payload


@pytest.fixture
def insert_transaction(app):
    """Insert a transaction with an explicit date, bypassing the API."""

    def _insert(user_id, category_id, type, amount, date, description="Seeded entry"):
        with app.app_context():
            transaction = Transaction(
                user_id=user_id,
                category_id=category_id,
                type=type,
                amount=Decimal(str(amount)),
                date=date,
                description=description,
                payment_mode="ONLINE",
            )
            db.session.add(transaction)
            db.session.commit()
            return transaction.id

    return _insert
