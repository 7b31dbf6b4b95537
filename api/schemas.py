"""
Pydantic schemas for request and response bodies.

These classes define the shapes of JSON data sent to and returned from the API
endpoints.  Using Pydantic ensures data validation and automatic docs
generation with FastAPI.
"""
from __future__ import annotations

from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, EmailStr, field_validator


class TokenData(BaseModel):
    user_id: Optional[int] = None


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    email: EmailStr
    password: str = Field(..., min_length=8)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class LoginRequest(BaseModel):
    """Credentials supplied to the login endpoint."""

    email: EmailStr
    password: str


class UserPublic(BaseModel):
    name: str
    email: EmailStr

    model_config = {"from_attributes": True}


class UserRead(UserPublic):
    id: int
    created_at: datetime


class AuthResponse(BaseModel):
    """Access token and user info returned after register or login."""

    success: bool = True
    token: str
    user: UserPublic
    message: str


class ResetRequest(BaseModel):
    email: EmailStr


class ResetRequestResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    accepted: bool = True
    email_sent: bool = Field(default=False, alias="emailSent")
    message: str
    # Only ever populated when development mode exposes codes
    dev_code: Optional[str] = Field(default=None, alias="devCode")


class ResetConfirm(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: EmailStr
    code: str = Field(..., min_length=1, max_length=16)
    new_password: str = Field(..., min_length=1, alias="newPassword")


class SuccessResponse(BaseModel):
    success: bool = True
    message: str


class ProductRead(BaseModel):
    id: int
    name: str
    price: float
    image: Optional[str] = None
    description: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}


class ProductList(BaseModel):
    success: bool = True
    products: List[ProductRead]


class ProductDetail(BaseModel):
    success: bool = True
    product: ProductRead


class OrderItem(BaseModel):
    product_id: Optional[int] = None
    name: str
    price: float = Field(..., ge=0)
    quantity: int = Field(default=1, ge=1)


class OrderCreate(BaseModel):
    items: List[OrderItem] = Field(..., min_length=1)
    total: float = Field(..., ge=0)


class OrderRead(BaseModel):
    id: int
    user_id: int
    items: List[OrderItem]
    total: float
    created_at: datetime

    model_config = {"from_attributes": True}


class OrderResponse(BaseModel):
    success: bool = True
    order: OrderRead


class OrderList(BaseModel):
    success: bool = True
    orders: List[OrderRead]


class ContactRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    email: EmailStr
    message: str = Field(..., min_length=1, max_length=5000)


class EmailTestRequest(BaseModel):
    email: EmailStr


class EmailTestResponse(BaseModel):
    success: bool = True
    message: str
    provider: str
    to: EmailStr
