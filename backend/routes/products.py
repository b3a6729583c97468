# backend/routes/products.py
import logging
from typing import Optional, List

from fastapi import APIRouter, Depends, Query
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from database import get_db
from utils.tokenJWT import get_current_user
from utils.responses import ApiError, envelope
from utils.validation import PRODUCT_FIELDS, fields_of, validate_product
from models.users import User
from models.product import Product
import schemas.product as product_schemas

router = APIRouter(prefix="/products", tags=["Products"])
logger = logging.getLogger(__name__)


# ---- HELPERS ----
def _get_product_or_404(db: Session, product_id: int) -> Product:
    product = db.query(Product).filter(Product.id == product_id).first()
    if not product:
        raise ApiError(404, "Product not found")
    return product


def _commit_product(db: Session, message: str) -> None:
    # The unique index still guards SKUs written concurrently after validation
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("Product write rejected by the store: %s", e.orig)
        raise ApiError(400, message, str(e.orig))


# =========================
# PRODUCT LIST
# =========================
@router.get("")
def list_products(
    category: Optional[str] = Query(None),
    search: Optional[str] = Query(None, description="Matches name or description"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    query = db.query(Product)

    if category:
        query = query.filter(Product.category == category.strip())
    if search:
        like = f"%{search.strip()}%"
        query = query.filter(or_(Product.name.ilike(like), Product.description.ilike(like)))

    items: List[Product] = query.order_by(Product.name.asc(), Product.id.asc()).all()
    return envelope(
        count=len(items),
        data=[product_schemas.ProductOut.model_validate(p) for p in items],
    )


# =========================
# SINGLE PRODUCT
# =========================
@router.get("/{product_id}")
def get_product(product_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    product = _get_product_or_404(db, product_id)
    return envelope(data=product_schemas.ProductOut.model_validate(product))


# =========================
# CREATE
# =========================
@router.post("", status_code=201)
def create_product(
    payload: product_schemas.ProductIn,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    result = validate_product(payload.model_dump(exclude_unset=True), db)
    if not result.ok:
        logger.warning("Product rejected: %s", result.summary("Product"))
        raise ApiError(400, "Error creating product", result.summary("Product"))

    new_product = Product(**result.values)
    db.add(new_product)
    _commit_product(db, "Error creating product")
    db.refresh(new_product)
    logger.info("Product %s (%s) created by user %s", new_product.id, new_product.sku, current_user.id)

    return envelope(message="Product created successfully", data=product_schemas.ProductOut.model_validate(new_product))


# =========================
# UPDATE (partial fields, full revalidation)
# =========================
@router.put("/{product_id}")
def update_product(
    product_id: int,
    payload: product_schemas.ProductIn,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    product = _get_product_or_404(db, product_id)

    merged = fields_of(product, PRODUCT_FIELDS)
    merged.update(payload.model_dump(exclude_unset=True))
    result = validate_product(merged, db, exclude_id=product.id)
    if not result.ok:
        raise ApiError(400, "Error updating product", result.summary("Product"))

    for key, value in result.values.items():
        setattr(product, key, value)
    _commit_product(db, "Error updating product")
    db.refresh(product)

    return envelope(message="Product updated successfully", data=product_schemas.ProductOut.model_validate(product))


# =========================
# DELETE
# =========================
@router.delete("/{product_id}")
def delete_product(product_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    product = _get_product_or_404(db, product_id)
    # Transactions keep their product reference; nothing cascades
    db.delete(product)
    db.commit()
    logger.info("Product %s deleted by user %s", product_id, current_user.id)
    return envelope(message="Product deleted successfully", data={})
