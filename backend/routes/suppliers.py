# backend/routes/suppliers.py
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_db
from models.supplier import Supplier
from models.users import User
from utils.tokenJWT import get_current_user
from utils.responses import ApiError, envelope
from utils.validation import SUPPLIER_FIELDS, fields_of, validate_supplier
from schemas.supplier import SupplierIn, SupplierOut

router = APIRouter(prefix="/suppliers", tags=["Suppliers"])
logger = logging.getLogger(__name__)

# Supplier directory: same contract as categories


def _get_supplier_or_404(db: Session, supplier_id: int) -> Supplier:
    supplier = db.query(Supplier).filter(Supplier.id == supplier_id).first()
    if not supplier:
        raise ApiError(404, "Supplier not found")
    return supplier


@router.get("")
def list_suppliers(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    suppliers = db.query(Supplier).order_by(Supplier.name.asc(), Supplier.id.asc()).all()
    return envelope(
        count=len(suppliers),
        data=[SupplierOut.model_validate(s) for s in suppliers],
    )


@router.get("/{supplier_id}")
def get_supplier(supplier_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    supplier = _get_supplier_or_404(db, supplier_id)
    return envelope(data=SupplierOut.model_validate(supplier))


@router.post("", status_code=201)
def create_supplier(payload: SupplierIn, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    result = validate_supplier(payload.model_dump(exclude_unset=True))
    if not result.ok:
        raise ApiError(400, "Error creating supplier", result.summary("Supplier"))

    supplier = Supplier(**result.values)
    db.add(supplier)
    db.commit()
    db.refresh(supplier)
    logger.info("Supplier %s created by user %s", supplier.id, current_user.id)

    return envelope(message="Supplier created successfully", data=SupplierOut.model_validate(supplier))


@router.put("/{supplier_id}")
def update_supplier(supplier_id: int, payload: SupplierIn, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    supplier = _get_supplier_or_404(db, supplier_id)

    merged = fields_of(supplier, SUPPLIER_FIELDS)
    merged.update(payload.model_dump(exclude_unset=True))
    result = validate_supplier(merged)
    if not result.ok:
        raise ApiError(400, "Error updating supplier", result.summary("Supplier"))

    for key, value in result.values.items():
        setattr(supplier, key, value)
    db.commit()
    db.refresh(supplier)

    return envelope(message="Supplier updated successfully", data=SupplierOut.model_validate(supplier))


@router.delete("/{supplier_id}")
def delete_supplier(supplier_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    supplier = _get_supplier_or_404(db, supplier_id)
    db.delete(supplier)
    db.commit()
    logger.info("Supplier %s deleted by user %s", supplier_id, current_user.id)
    return envelope(message="Supplier deleted successfully", data={})
