# backend/schemas/transaction.py
from pydantic import Field
from datetime import datetime
from typing import Optional

from schemas.base import ORMBase
from schemas.product import ProductOut, ProductSummary
from schemas.user import UserSummary


# Body for recording a stock movement; the actor comes from the token
class TransactionIn(ORMBase):
    product_id: Optional[int] = None
    type: Optional[str] = Field(default=None, description="'in' or 'out'")
    quantity: Optional[int] = None
    notes: Optional[str] = None


# Movement joined with reduced product and user projections
class TransactionOut(ORMBase):
    id: int
    product_id: int
    user_id: int
    type: str
    quantity: int
    notes: Optional[str] = None
    date: datetime
    product: Optional[ProductSummary] = None
    user: Optional[UserSummary] = None


# Single movement lookup carries the whole product record
class TransactionDetail(TransactionOut):
    product: Optional[ProductOut] = None
