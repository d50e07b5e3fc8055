from enum import Enum


class TransactionType(str, Enum):
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"
    CREDIT_GIVEN = "CREDIT_GIVEN"
    CREDIT_RECEIVED = "CREDIT_RECEIVED"


class PaymentMode(str, Enum):
    ONLINE = "ONLINE"
    CASH = "CASH"


class Recurrence(str, Enum):
    """Declarative only; nothing schedules recurring transactions."""

    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


class Profession(str, Enum):
    SALARY = "salary"
    BUSINESS = "business"
    STUDENT = "student"
    FREELANCER = "freelancer"
    OTHER = "other"
