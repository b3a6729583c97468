# backend/utils/responses.py
from typing import Any, Dict, Optional

from fastapi import HTTPException


class ApiError(HTTPException):
    """HTTP error rendered as a failure envelope.

    ``message`` is the human readable summary ("Category not found"),
    ``error`` the underlying cause when there is one (validation details,
    driver messages).
    """

    def __init__(self, status_code: int, message: str, error: Optional[str] = None, headers: Optional[Dict[str, str]] = None):
        super().__init__(status_code=status_code, detail=message, headers=headers)
        self.message = message
        self.error = error


# Build the uniform response body; keys left as None are dropped
def envelope(success: bool = True, **fields: Any) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": success}
    for key, value in fields.items():
        if value is not None:
            body[key] = value
    return body
