# backend/schemas/supplier.py
from typing import Optional
from datetime import datetime

from schemas.base import ORMBase


# Schema for supplier create/update requests
class SupplierIn(ORMBase):
    name: Optional[str] = None
    contact_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None


# Schema for displaying supplier details
class SupplierOut(ORMBase):
    id: int
    name: str
    contact_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
