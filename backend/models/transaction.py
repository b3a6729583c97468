# backend/models/transaction.py
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, func
from sqlalchemy.orm import relationship
from database import Base


def _utcnow():
    return datetime.now(timezone.utc)


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)
    # Plain reference: deleting a product leaves its transactions in place
    product_id = Column(Integer, nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    # Movement direction: "in" or "out"
    type = Column(String, nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    notes = Column(String(500), nullable=True)

    date = Column(DateTime(timezone=True), default=_utcnow, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    product = relationship(
        "Product",
        primaryjoin="foreign(Transaction.product_id) == Product.id",
        viewonly=True,
    )
    user = relationship("User")
