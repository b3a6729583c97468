# backend/schemas/product.py
from typing import Optional
from datetime import datetime

from schemas.base import ORMBase


# Request body for create and update. Every field is optional here: required
# fields and limits are checked by utils.validation on the merged record.
class ProductIn(ORMBase):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    quantity: Optional[int] = None
    category: Optional[str] = None
    sku: Optional[str] = None
    image_url: Optional[str] = None


# Full product representation
class ProductOut(ORMBase):
    id: int
    name: str
    description: Optional[str] = None
    price: float
    quantity: int
    category: str
    sku: str
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# Reduced projection embedded in transactions
class ProductSummary(ORMBase):
    id: int
    name: str
    sku: str
