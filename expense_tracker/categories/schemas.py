from typing import Optional

from pydantic import Field

from expense_tracker.models import TransactionType
from expense_tracker.schemas import CamelModel


class CategorySchema(CamelModel):
    title: str = Field(min_length=2, max_length=100)
    type: TransactionType
    icon: Optional[str] = Field(None, max_length=100)


class CategoryPatchSchema(CamelModel):
    # title and type may be omitted but not nulled
    title: str = Field(None, min_length=2, max_length=100)
    type: TransactionType = None
    icon: Optional[str] = Field(None, max_length=100)
