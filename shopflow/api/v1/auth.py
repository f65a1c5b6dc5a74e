"""
Authentication API endpoints for sign-up, login and session info.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from shopflow.core.database import get_db
from shopflow.core.security import (
    verify_password,
    get_password_hash,
    create_access_token,
    get_current_user
)
from shopflow.error_handlers import AuthenticationError, DuplicateResourceError
from shopflow.logging_config import get_logger
from shopflow.models.user import User
from shopflow.repository import InventoryRepository
from shopflow.schemas.user import (
    SignUpRequest,
    UserResponse,
    LoginRequest,
    LoginResponse
)

logger = get_logger("auth")

router = APIRouter(prefix="/auth", tags=["Authentication"])


def register_user(db: Session, data: SignUpRequest) -> User:
    """Create an account and give it the starter catalog."""
    existing_user = db.scalar(select(User).where(User.email == data.email))
    if existing_user:
        raise DuplicateResourceError(
            "User", "email", data.email,
            message="User with this email already exists"
        )

    new_user = User(
        email=data.email,
        password_hash=get_password_hash(data.password),
        name=data.name,
        shop_name=data.shop_name,
        is_active=True
    )
    db.add(new_user)
    db.commit()
    db.refresh(new_user)

    InventoryRepository(db, new_user.id).seed_defaults()
    logger.info(f"[AUTH] Registered user_id={new_user.id}")
    return new_user


def _login_response(user: User) -> LoginResponse:
    return LoginResponse(
        access_token=create_access_token(subject=user.id),
        token_type="bearer",
        user=UserResponse.model_validate(user)
    )


@router.post("/signup", response_model=LoginResponse, status_code=status.HTTP_201_CREATED)
def signup(
    user_data: SignUpRequest,
    db: Session = Depends(get_db)
):
    """
    Register a new shop account and sign in.

    - **email**: Valid email address
    - **password**: Minimum 6 characters
    - **name**: Owner's name
    - **shop_name**: Shop name shown on the dashboard
    """
    user = register_user(db, user_data)
    return _login_response(user)


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db)
):
    """
    Authenticate user and return an access token.
    """
    user = db.scalar(select(User).where(User.email == credentials.email))

    if not user or not verify_password(credentials.password, user.password_hash):
        logger.warning(f"[AUTH] Failed login for {credentials.email}")
        raise AuthenticationError()

    if not user.is_active:
        raise AuthenticationError("User account is inactive")

    return _login_response(user)


@router.get("/me", response_model=UserResponse)
def get_current_user_info(
    current_user: User = Depends(get_current_user)
):
    """Get the authenticated user's profile."""
    return current_user


@router.post("/logout", status_code=status.HTTP_200_OK)
def logout(
    current_user: User = Depends(get_current_user)
):
    """
    Logout current user.

    Tokens are stateless; the client discards its copy.
    """
    return {"message": "Logged out successfully"}
