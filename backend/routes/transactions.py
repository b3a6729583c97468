# backend/routes/transactions.py
import logging
import math
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session, joinedload

from database import get_db
from models.transaction import Transaction
from models.product import Product
from models.users import User
from utils.tokenJWT import get_current_user
from utils.responses import ApiError, envelope
from utils.stock import InsufficientStockError, apply_movement, reverse_movement
from utils.validation import validate_transaction
import schemas.transaction as transaction_schemas

router = APIRouter(prefix="/transactions", tags=["Transactions"])
logger = logging.getLogger(__name__)

# Larger page sizes are served at this size
MAX_PAGE_SIZE = 100


def _with_relations(query):
    return query.options(joinedload(Transaction.product), joinedload(Transaction.user))


@router.get("")
def list_transactions(
    product_id: Optional[int] = Query(None, alias="productId"),
    type: Optional[str] = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    query = db.query(Transaction)
    limit = min(limit, MAX_PAGE_SIZE)

    if product_id is not None:
        query = query.filter(Transaction.product_id == product_id)
    if type:
        query = query.filter(Transaction.type == type)

    total = query.count()
    items = (
        _with_relations(query)
        .order_by(Transaction.date.desc(), Transaction.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )

    return envelope(
        count=len(items),
        total=total,
        page=page,
        pages=math.ceil(total / limit),
        data=[transaction_schemas.TransactionOut.model_validate(t) for t in items],
    )


@router.get("/{transaction_id}")
def get_transaction(transaction_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    transaction = _with_relations(db.query(Transaction)).filter(Transaction.id == transaction_id).first()
    if not transaction:
        raise ApiError(404, "Transaction not found")
    return envelope(data=transaction_schemas.TransactionDetail.model_validate(transaction))


@router.post("", status_code=201)
def create_transaction(
    payload: transaction_schemas.TransactionIn,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    result = validate_transaction(payload.model_dump(exclude_unset=True))
    if not result.ok:
        raise ApiError(400, "Error creating transaction", result.summary("Transaction"))
    values = result.values

    product = db.query(Product).filter(Product.id == values["product_id"]).first()
    if not product:
        raise ApiError(404, "Product not found")

    try:
        apply_movement(db, product, values["type"], values["quantity"])
    except InsufficientStockError as e:
        db.rollback()
        logger.warning("%s (user %s)", e, current_user.id)
        raise ApiError(400, "Insufficient stock")

    # Stock change and movement record are committed together
    transaction = Transaction(user_id=current_user.id, **values)
    db.add(transaction)
    db.commit()
    logger.info(
        "Transaction %s: %s %s of product %s by user %s",
        transaction.id, values["type"], values["quantity"], product.id, current_user.id,
    )

    created = _with_relations(db.query(Transaction)).filter(Transaction.id == transaction.id).first()
    return envelope(
        message="Transaction created successfully",
        data=transaction_schemas.TransactionOut.model_validate(created),
    )


@router.delete("/{transaction_id}")
def delete_transaction(transaction_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    transaction = db.query(Transaction).filter(Transaction.id == transaction_id).first()
    if not transaction:
        raise ApiError(404, "Transaction not found")

    reverse_movement(db, transaction)
    db.delete(transaction)
    db.commit()
    logger.info("Transaction %s reversed and deleted by user %s", transaction_id, current_user.id)

    return envelope(message="Transaction deleted successfully", data={})
