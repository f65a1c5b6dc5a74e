"""
Pydantic schemas for User model and authentication.
"""
from datetime import datetime
import uuid
from pydantic import BaseModel, EmailStr, Field, ConfigDict


class UserBase(BaseModel):
    """Base user schema with common fields."""
    email: EmailStr
    name: str = Field(..., min_length=1, max_length=255)
    shop_name: str = Field(..., min_length=1, max_length=255)


class SignUpRequest(UserBase):
    """Schema for account registration."""
    password: str = Field(..., min_length=6, max_length=72)


class UserResponse(UserBase):
    """Schema for user response."""
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    created_at: datetime


class LoginRequest(BaseModel):
    """Schema for login request."""
    email: EmailStr
    password: str


class LoginResponse(BaseModel):
    """Schema for login and sign-up responses."""
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
