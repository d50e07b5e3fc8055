import uuid
from datetime import datetime, timezone

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    # stored naive, always UTC
    return datetime.now(timezone.utc).replace(tzinfo=None)


def isoformat(value):
    return value.isoformat() if value is not None else None


from .enums import TransactionType, PaymentMode, Recurrence, Profession  # noqa: E402
from .user_model import User  # noqa: E402
from .category_model import Category  # noqa: E402
from .transaction_model import Transaction  # noqa: E402
