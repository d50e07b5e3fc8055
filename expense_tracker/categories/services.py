import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from expense_tracker.errors import Conflict, NotFound
from expense_tracker.models import Category, Transaction

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "Category with this title and type already exists"


class CategoryStore:
    """Shared taxonomy; (title, type) is unique."""

    def __init__(self, session):
        self.session = session

    def _find(self, title, category_type):
        stmt = select(Category).where(Category.title == title, Category.type == category_type)
        return self.session.scalars(stmt).first()

    def _commit(self):
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise Conflict(DUPLICATE_MESSAGE)

    def create(self, data) -> Category:
        if self._find(data.title, data.type):
            raise Conflict(DUPLICATE_MESSAGE)

        category = Category(title=data.title, type=data.type, icon=data.icon)
        self.session.add(category)
        self._commit()
        return category

    def list(self, category_type=None):
        # FIXME: category_type is accepted but never filtered on; callers
        # currently get every category. Needs a decision before it is applied.
        return self.session.scalars(select(Category).order_by(Category.title)).all()

    def get(self, category_id) -> Category:
        category = self.session.get(Category, category_id)
        if category is None:
            raise NotFound("Category not found")
        return category

    def transactions_for(self, category, user_id):
        stmt = (
            select(Transaction)
            .where(Transaction.category_id == category.id, Transaction.user_id == user_id)
            .order_by(Transaction.date.desc())
        )
        return self.session.scalars(stmt).all()

    def update(self, category_id, data) -> Category:
        category = self.get(category_id)
        changes = data.model_dump(exclude_unset=True)

        title = changes.get("title", category.title)
        category_type = changes.get("type", category.type)
        duplicate = self._find(title, category_type)
        if duplicate is not None and duplicate.id != category.id:
            raise Conflict(DUPLICATE_MESSAGE)

        for field, value in changes.items():
            setattr(category, field, value)
        self._commit()
        return category

    def transaction_count(self, category_id) -> int:
        stmt = select(func.count()).select_from(Transaction).where(Transaction.category_id == category_id)
        return self.session.scalar(stmt)

    def delete(self, category_id) -> None:
        if self.transaction_count(category_id) > 0:
            raise Conflict("Cannot delete category with existing transactions")

        category = self.get(category_id)
        self.session.delete(category)
        self.session.commit()
        logger.info("Deleted category %s", category_id)
