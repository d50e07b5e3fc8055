from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator

from expense_tracker.models import PaymentMode, Recurrence, TransactionType
from expense_tracker.schemas import CamelModel


class TransactionSchema(CamelModel):
    type: TransactionType
    category: str = Field(min_length=1, description="Category id")
    # stored as Numeric(12, 2); sub-cent values would round to zero
    amount: Decimal = Field(gt=0, decimal_places=2)
    # ignored on create, applied on update
    date: Optional[datetime] = None
    description: str = Field(min_length=2)
    payment_mode: PaymentMode
    recurrence: Optional[Recurrence] = None
    related_to: Optional[str] = Field(None, max_length=255)
    is_paid: Optional[bool] = None

    @field_validator("date")
    @classmethod
    def naive_utc(cls, value):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value


class DateRangeQuery(CamelModel):
    """Both ends are inclusive days; the range only applies when both are given."""

    start_date: Optional[date] = None
    end_date: Optional[date] = None


class TransactionQuery(DateRangeQuery):
    type: Optional[TransactionType] = None
    category: Optional[str] = None
    search: Optional[str] = None
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1)
