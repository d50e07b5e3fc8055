import logging
import math
from datetime import datetime, time, timedelta
from decimal import Decimal

from sqlalchemy import and_, func, or_, select

from expense_tracker.errors import NotFound, ValidationFailed
from expense_tracker.models import Category, Transaction, TransactionType, utcnow

logger = logging.getLogger(__name__)


def date_range_clause(column, start_date, end_date):
    """Inclusive day range, or None unless both ends are set."""
    if start_date is None or end_date is None:
        return None
    return and_(
        column >= datetime.combine(start_date, time.min),
        column < datetime.combine(end_date + timedelta(days=1), time.min),
    )


class TransactionStore:
    """Transactions scoped to their owning user."""

    def __init__(self, session):
        self.session = session

    def _require_category(self, category_id):
        if self.session.get(Category, category_id) is None:
            raise ValidationFailed.for_field("category", "Category not found", "category_not_found")

    def _owned(self, transaction_id, user_id):
        stmt = select(Transaction).where(
            Transaction.id == transaction_id,
            Transaction.user_id == user_id,
        )
        transaction = self.session.scalars(stmt).first()
        # another user's transaction looks exactly like a missing one
        if transaction is None:
            raise NotFound("Transaction not found")
        return transaction

    def create(self, data, user_id) -> Transaction:
        self._require_category(data.category)

        transaction = Transaction(
            user_id=user_id,
            type=data.type,
            category_id=data.category,
            amount=data.amount,
            # FIXME: client-supplied date is discarded, every entry is stamped now.
            # Kept until the intended behaviour is confirmed.
            date=utcnow(),
            description=data.description,
            payment_mode=data.payment_mode,
            recurrence=data.recurrence,
            related_to=data.related_to,
            is_paid=data.is_paid,
        )
        self.session.add(transaction)
        self.session.commit()
        return transaction

    def list(self, user_id, query):
        stmt = (
            select(Transaction)
            .join(Transaction.category)
            .where(Transaction.user_id == user_id)
        )

        if query.type:
            stmt = stmt.where(Transaction.type == query.type)

        in_range = date_range_clause(Transaction.date, query.start_date, query.end_date)
        if in_range is not None:
            stmt = stmt.where(in_range)

        if query.category:
            stmt = stmt.where(Category.title.icontains(query.category, autoescape=True))

        if query.search:
            stmt = stmt.where(
                or_(
                    Transaction.description.icontains(query.search, autoescape=True),
                    Category.title.icontains(query.search, autoescape=True),
                )
            )

        total = self.session.scalar(select(func.count()).select_from(stmt.subquery()))

        offset = (query.page - 1) * query.limit
        transactions = self.session.scalars(
            stmt.order_by(Transaction.date.desc(), Transaction.created_at.desc(), Transaction.id)
            .offset(offset)
            .limit(query.limit)
        ).all()

        pagination = {
            "total": total,
            "page": query.page,
            "limit": query.limit,
            "totalPages": math.ceil(total / query.limit),
        }
        return transactions, pagination

    def statistics(self, user_id, start_date=None, end_date=None):
        stmt = (
            select(Transaction.type, func.sum(Transaction.amount))
            .where(Transaction.user_id == user_id)
            .group_by(Transaction.type)
        )
        in_range = date_range_clause(Transaction.date, start_date, end_date)
        if in_range is not None:
            stmt = stmt.where(in_range)

        sums = {row_type: Decimal(str(total or 0)) for row_type, total in self.session.execute(stmt)}

        income = sums.get(TransactionType.INCOME.value, Decimal(0))
        expense = sums.get(TransactionType.EXPENSE.value, Decimal(0))
        credit_given = sums.get(TransactionType.CREDIT_GIVEN.value, Decimal(0))
        credit_received = sums.get(TransactionType.CREDIT_RECEIVED.value, Decimal(0))

        return {
            "totalIncome": float(income),
            "totalExpense": float(expense),
            "totalCreditGiven": float(credit_given),
            "totalCreditReceived": float(credit_received),
            "balance": float(income - expense),
            "netCredit": float(credit_given - credit_received),
        }

    def get(self, transaction_id, user_id) -> Transaction:
        return self._owned(transaction_id, user_id)

    def update(self, transaction_id, user_id, data) -> Transaction:
        transaction = self._owned(transaction_id, user_id)
        self._require_category(data.category)

        transaction.type = data.type
        transaction.category_id = data.category
        transaction.amount = data.amount
        # Unlike create, an omitted date keeps the stored value instead of
        # resetting it to now; a supplied date is applied as given.
        if data.date is not None:
            transaction.date = data.date
        transaction.description = data.description
        transaction.payment_mode = data.payment_mode
        transaction.recurrence = data.recurrence
        transaction.related_to = data.related_to
        transaction.is_paid = data.is_paid

        self.session.commit()
        return transaction

    def delete(self, transaction_id, user_id) -> None:
        transaction = self._owned(transaction_id, user_id)
        self.session.delete(transaction)
        self.session.commit()
        logger.info("Deleted transaction %s for user %s", transaction_id, user_id)
