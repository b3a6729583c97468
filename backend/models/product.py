# backend/models/product.py
from sqlalchemy import Column, Integer, String, Float, DateTime, CheckConstraint, func
from database import Base

# Model Product
# A single stock-keeping item. The quantity column is the on-hand stock,
# changed by product updates and by stock-movement transactions.
class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, index=True)
    description = Column(String(500))

    price = Column(Float, CheckConstraint("price >= 0"), nullable=False)
    # No floor constraint: reversing an "in" movement may take stock below zero.
    quantity = Column(Integer, nullable=False, default=0)

    category = Column(String, nullable=False, index=True)
    sku = Column(String, unique=True, nullable=False, index=True)

    image_url = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
