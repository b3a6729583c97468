# backend/utils/stock.py
import logging
from typing import Optional

from sqlalchemy import update
from sqlalchemy.orm import Session

from models.product import Product
from models.transaction import Transaction

logger = logging.getLogger(__name__)

STOCK_IN = "in"
STOCK_OUT = "out"


class InsufficientStockError(Exception):
    def __init__(self, product_id: int, requested: int):
        super().__init__(f"Insufficient stock for product {product_id}: requested {requested}")
        self.product_id = product_id
        self.requested = requested


def _shift_quantity(db: Session, product_id: int, delta: int, floor: Optional[int] = None) -> int:
    # Single UPDATE so the check and the write cannot interleave with another request
    stmt = (
        update(Product)
        .where(Product.id == product_id)
        .values(quantity=Product.quantity + delta)
        .execution_options(synchronize_session=False)
    )
    if floor is not None:
        stmt = stmt.where(Product.quantity >= floor)
    return db.execute(stmt).rowcount


def apply_movement(db: Session, product: Product, movement_type: str, quantity: int) -> None:
    """Apply a new movement to the product's stock inside the open session.

    "in" adds unconditionally. "out" subtracts only while the stored quantity
    covers it, otherwise InsufficientStockError is raised and nothing changes.
    Any other type leaves the stock untouched. The caller commits.
    """
    if movement_type == STOCK_IN:
        _shift_quantity(db, product.id, quantity)
    elif movement_type == STOCK_OUT:
        if _shift_quantity(db, product.id, -quantity, floor=quantity) == 0:
            raise InsufficientStockError(product.id, quantity)
    else:
        logger.warning("Movement type %r has no stock effect (product %s)", movement_type, product.id)


def reverse_movement(db: Session, transaction: Transaction) -> bool:
    """Undo a recorded movement; False when its product no longer exists.

    Reversing "in" has no floor and may leave negative stock. Every type other
    than "in" is reversed as an "out", i.e. added back.
    """
    product = db.query(Product).filter(Product.id == transaction.product_id).first()
    if product is None:
        logger.info("Product %s of transaction %s is gone, skipping reversal", transaction.product_id, transaction.id)
        return False

    if transaction.type == STOCK_IN:
        delta = -transaction.quantity
    else:
        delta = transaction.quantity
    _shift_quantity(db, product.id, delta)
    return True
