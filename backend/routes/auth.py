# backend/routes/auth.py
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from utils.hashing import get_password_hash, verify_password
from utils.tokenJWT import create_access_token, get_current_user
from utils.responses import ApiError, envelope
from models.users import User
from schemas import user as schemas
from database import get_db

router = APIRouter(prefix="/auth", tags=["Auth"])
logger = logging.getLogger(__name__)

# Register a new user
@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(user: schemas.UserCreate, db: Session = Depends(get_db)):
    # Normalize identifiers
    username = user.username.strip()
    normalized_email = user.email.strip().lower()

    # Check for existing user
    db_user = db.query(User).filter(
        or_(func.lower(User.email) == normalized_email, User.username == username)
    ).first()
    if db_user:
        logger.warning("Registration refused for %s: account exists", normalized_email)
        raise ApiError(400, "User already exists")

    new_user = User(username=username, email=normalized_email, password_hash=get_password_hash(user.password), role="user")
    db.add(new_user)
    db.commit()
    db.refresh(new_user)
    logger.info("User %s registered", new_user.id)

    return envelope(message="User registered successfully", data=schemas.UserOut.model_validate(new_user))


# Authenticate user and issue JWT token
@router.post("/login")
def login(payload: schemas.UserLogin, db: Session = Depends(get_db)):
    if payload.username:
        db_user = db.query(User).filter(User.username == payload.username.strip()).first()
    elif payload.email:
        db_user = db.query(User).filter(func.lower(User.email) == payload.email.strip().lower()).first()
    else:
        raise ApiError(400, "Please provide a username or email and password")

    # Validate credentials
    if not db_user or not verify_password(payload.password, db_user.password_hash):
        logger.warning("Failed login for %s", payload.username or payload.email)
        raise ApiError(status.HTTP_401_UNAUTHORIZED, "Invalid credentials")

    token = create_access_token(data={"sub": str(db_user.id), "role": db_user.role})
    return envelope(data=schemas.TokenOut(token=token, user=schemas.UserOut.model_validate(db_user)))


# Retrieve current authenticated user details
@router.get("/me")
def me(current_user: User = Depends(get_current_user)):
    return envelope(data=schemas.UserOut.model_validate(current_user))
