# market_cart/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List
from datetime import datetime


class CartItemOut(BaseModel):
    """One cart entry with its post (response)."""

    id: int
    post_id: int
    title: str
    author_nickname: str | None = Field(None, alias="authorNickname")
    author_major: str | None = Field(None, alias="authorMajor")
    created_at: datetime = Field(..., alias="createdAt")
    sub_category: str | None = Field(None, alias="subCategory")
    mileage: int
    is_active: bool = Field(..., alias="isActive")

    model_config = ConfigDict(populate_by_name=True)


class CartOut(BaseModel):
    """Whole cart with the total of active entries (response)."""

    cart_items: List[CartItemOut] = Field(..., alias="cartItems")
    total_mileage: int = Field(..., alias="totalMileage")

    model_config = ConfigDict(populate_by_name=True)


class MessageOut(BaseModel):
    message: str


class ToggleOut(BaseModel):
    """Result of an active/inactive flip (response)."""

    message: str
    is_active: bool = Field(..., alias="isActive")
    total_mileage: int = Field(..., alias="totalMileage")

    model_config = ConfigDict(populate_by_name=True)


class HealthOut(BaseModel):
    status: str
