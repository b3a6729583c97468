# backend/schemas/user.py
from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime

from schemas.base import ORMBase

# Schema for user registration requests
class UserCreate(BaseModel):
    username: str = Field(min_length=3, max_length=50)
    email: EmailStr
    # bcrypt only considers the first 72 bytes
    password: str = Field(min_length=6, max_length=72)

# Schema for authentication credentials; either username or email identifies the account
class UserLogin(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None
    password: str

# Output schema for user profile details
class UserOut(ORMBase):
    id: int
    username: str
    email: str
    role: str
    created_at: Optional[datetime] = None

# Reduced projection embedded in transactions
class UserSummary(ORMBase):
    id: int
    username: str
    email: str

# Login response payload
class TokenOut(BaseModel):
    token: str
    user: UserOut
