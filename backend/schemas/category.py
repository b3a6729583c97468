# backend/schemas/category.py
from typing import Optional
from datetime import datetime

from schemas.base import ORMBase


class CategoryIn(ORMBase):
    name: Optional[str] = None
    description: Optional[str] = None


class CategoryOut(ORMBase):
    id: int
    name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
