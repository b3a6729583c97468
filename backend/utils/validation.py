# backend/utils/validation.py
"""Field validation for stored records.

Each ``validate_*`` function receives the full set of fields a record will
have once written (stored values overlaid with the request's changes), so
create and update share the same rules. Values are normalised first (strings
trimmed, SKU uppercased) and the result carries both the normalised values
and every rule that failed.
"""
from typing import Any, Dict, List, Optional

from email_validator import validate_email, EmailNotValidError
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from models.product import Product


PRODUCT_FIELDS = ("name", "description", "price", "quantity", "category", "sku", "image_url")
CATEGORY_FIELDS = ("name", "description")
SUPPLIER_FIELDS = ("name", "contact_name", "email", "phone", "address")
TRANSACTION_FIELDS = ("product_id", "type", "quantity", "notes")

# Wire names for error messages
_FIELD_LABELS = {
    "image_url": "imageUrl",
    "contact_name": "contactName",
    "product_id": "productId",
}


class FieldError(BaseModel):
    field: str
    message: str


class ValidationResult(BaseModel):
    values: Dict[str, Any] = Field(default_factory=dict)
    errors: List[FieldError] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def add(self, field: str, message: str) -> None:
        self.errors.append(FieldError(field=_FIELD_LABELS.get(field, field), message=message))

    def summary(self, entity: str) -> str:
        details = ", ".join(f"{e.field}: {e.message}" for e in self.errors)
        return f"{entity} validation failed: {details}"


def fields_of(record, names) -> Dict[str, Any]:
    """Current column values of a stored record, for overlaying an update."""
    return {name: getattr(record, name) for name in names}


def _clean(data: Dict[str, Any], names, untrimmed=()) -> Dict[str, Any]:
    values = {}
    for name in names:
        value = data.get(name)
        if isinstance(value, str) and name not in untrimmed:
            value = value.strip()
        values[name] = value
    return values


def _blank(value) -> bool:
    return value is None or value == ""


def _required(result: ValidationResult, field: str, message: str) -> bool:
    if _blank(result.values.get(field)):
        result.add(field, message)
        return False
    return True


def _max_length(result: ValidationResult, field: str, limit: int, message: str) -> None:
    value = result.values.get(field)
    if isinstance(value, str) and len(value) > limit:
        result.add(field, message)


def _non_negative(result: ValidationResult, field: str, message: str) -> None:
    value = result.values.get(field)
    if value is not None and value < 0:
        result.add(field, message)


def validate_product(data: Dict[str, Any], db: Optional[Session] = None, exclude_id: Optional[int] = None) -> ValidationResult:
    result = ValidationResult(values=_clean(data, PRODUCT_FIELDS))
    values = result.values

    # Default only for an absent field; an explicit null is a missing value
    if "quantity" not in data:
        values["quantity"] = 0
    if isinstance(values["sku"], str):
        values["sku"] = values["sku"].upper()
    # Empty optional strings are stored as missing
    for name in ("description", "image_url"):
        if values[name] == "":
            values[name] = None

    if _required(result, "name", "Product name is required"):
        _max_length(result, "name", 100, "Product name cannot exceed 100 characters")
    _max_length(result, "description", 500, "Description cannot exceed 500 characters")
    if _required(result, "price", "Price is required"):
        _non_negative(result, "price", "Price cannot be negative")
    if _required(result, "quantity", "Quantity is required"):
        _non_negative(result, "quantity", "Quantity cannot be negative")
    _required(result, "category", "Category is required")

    if _required(result, "sku", "SKU is required") and db is not None:
        query = db.query(Product).filter(Product.sku == values["sku"])
        if exclude_id is not None:
            query = query.filter(Product.id != exclude_id)
        if query.first() is not None:
            result.add("sku", f"SKU '{values['sku']}' already exists")

    return result


def validate_category(data: Dict[str, Any]) -> ValidationResult:
    result = ValidationResult(values=_clean(data, CATEGORY_FIELDS))
    if result.values["description"] == "":
        result.values["description"] = None

    if _required(result, "name", "Category name is required"):
        _max_length(result, "name", 50, "Category name cannot exceed 50 characters")
    _max_length(result, "description", 200, "Description cannot exceed 200 characters")
    return result


def validate_supplier(data: Dict[str, Any]) -> ValidationResult:
    result = ValidationResult(values=_clean(data, SUPPLIER_FIELDS))
    values = result.values
    for name in ("contact_name", "email", "phone", "address"):
        if values[name] == "":
            values[name] = None

    if _required(result, "name", "Supplier name is required"):
        _max_length(result, "name", 100, "Supplier name cannot exceed 100 characters")
    _max_length(result, "address", 200, "Address cannot exceed 200 characters")

    if values["email"] is not None:
        try:
            checked = validate_email(values["email"], check_deliverability=False)
            values["email"] = checked.normalized
        except EmailNotValidError:
            result.add("email", "Please provide a valid email")

    return result


def validate_transaction(data: Dict[str, Any]) -> ValidationResult:
    # The movement type is only required to be present and is stored as sent;
    # anything other than exactly "in" or "out" has no stock effect.
    result = ValidationResult(values=_clean(data, TRANSACTION_FIELDS, untrimmed=("type",)))
    if result.values["notes"] == "":
        result.values["notes"] = None

    _required(result, "product_id", "Product is required")
    _required(result, "type", "Transaction type is required")
    _required(result, "quantity", "Quantity is required")
    _max_length(result, "notes", 500, "Notes cannot exceed 500 characters")
    return result
