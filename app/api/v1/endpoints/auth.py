"""
Authentication Endpoints Module

This module provides endpoints for user registration, login and profile lookup.
Both registration and login answer with a JWT bearer token embedding the user's id,
email and role.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session, select
from app.db.session import get_db
from app.models.user import User, UserRead, UserRole
from app.core.security import verify_password, get_password_hash, create_access_token
from app.schemas.auth import Token, UserLogin
from app.schemas.user import UserCreate
from app.api import deps

logger = logging.getLogger(__name__)

router = APIRouter()


def _issue_token(user: User) -> dict:
    access_token = create_access_token(
        subject=user.id,
        claims={"email": user.email, "role": UserRole(user.role).value},
    )
    return {"access_token": access_token, "token_type": "bearer", "user": UserRead.model_validate(user)}


@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
def register_user(user_in: UserCreate, db: Session = Depends(get_db)):
    """
    Register a new user account.

    Creates a new engineer or manager. The password is hashed before storage and
    the role cannot be changed afterwards.

    Returns:
        Token: Access token plus the newly created user (password excluded)

    Raises:
        HTTPException 400: If a user with this email already exists
    """
    # Check if email is already registered
    user = db.exec(select(User).where(User.email == user_in.email)).first()
    if user:
        raise HTTPException(
            status_code=400,
            detail="User with this email already exists."
        )

    db_user = User(
        **user_in.model_dump(exclude={"password"}),
        password=get_password_hash(user_in.password),  # Hash password using bcrypt
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    logger.info("Registered %s %s", db_user.role, db_user.email)
    return _issue_token(db_user)


@router.post("/login", response_model=Token)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """
    Authenticate a user and issue an access token.

    Raises:
        HTTPException 401: If credentials are invalid
    """
    user = db.exec(select(User).where(User.email == credentials.email)).first()

    # Verify user exists and password is correct
    if not user or not verify_password(credentials.password, user.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return _issue_token(user)


@router.get("/profile", response_model=UserRead)
def read_profile(current_user: User = Depends(deps.get_current_user)):
    """Return the authenticated caller's own record."""
    return current_user
