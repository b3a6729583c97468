# backend/routes/categories.py
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_db
from models.category import Category
from models.users import User
from utils.tokenJWT import get_current_user
from utils.responses import ApiError, envelope
from utils.validation import CATEGORY_FIELDS, fields_of, validate_category
from schemas.category import CategoryIn, CategoryOut

router = APIRouter(prefix="/categories", tags=["Categories"])
logger = logging.getLogger(__name__)


def _get_category_or_404(db: Session, category_id: int) -> Category:
    category = db.query(Category).filter(Category.id == category_id).first()
    if not category:
        raise ApiError(404, "Category not found")
    return category


# List all categories alphabetically
@router.get("")
def list_categories(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    categories = db.query(Category).order_by(Category.name.asc(), Category.id.asc()).all()
    return envelope(
        count=len(categories),
        data=[CategoryOut.model_validate(c) for c in categories],
    )


@router.get("/{category_id}")
def get_category(category_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    category = _get_category_or_404(db, category_id)
    return envelope(data=CategoryOut.model_validate(category))


@router.post("", status_code=201)
def create_category(payload: CategoryIn, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    result = validate_category(payload.model_dump(exclude_unset=True))
    if not result.ok:
        raise ApiError(400, "Error creating category", result.summary("Category"))

    category = Category(**result.values)
    db.add(category)
    db.commit()
    db.refresh(category)
    logger.info("Category %s created by user %s", category.id, current_user.id)

    return envelope(message="Category created successfully", data=CategoryOut.model_validate(category))


# Partial update; the merged record is revalidated with the create rules
@router.put("/{category_id}")
def update_category(category_id: int, payload: CategoryIn, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    category = _get_category_or_404(db, category_id)

    merged = fields_of(category, CATEGORY_FIELDS)
    merged.update(payload.model_dump(exclude_unset=True))
    result = validate_category(merged)
    if not result.ok:
        raise ApiError(400, "Error updating category", result.summary("Category"))

    for key, value in result.values.items():
        setattr(category, key, value)
    db.commit()
    db.refresh(category)

    return envelope(message="Category updated successfully", data=CategoryOut.model_validate(category))


@router.delete("/{category_id}")
def delete_category(category_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    category = _get_category_or_404(db, category_id)
    db.delete(category)
    db.commit()
    logger.info("Category %s deleted by user %s", category_id, current_user.id)
    return envelope(message="Category deleted successfully", data={})
