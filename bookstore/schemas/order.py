from datetime import datetime

from pydantic import BaseModel, Field

from bookstore.models.order import OrderStatus


class OrderItemCreate(BaseModel):
    book_id: int
    quantity: int = Field(default=1, ge=1)


class OrderCreate(BaseModel):
    customer_name: str = Field(min_length=2)
    phone: str = Field(min_length=8)
    address: str = Field(min_length=5)
    city: str = Field(min_length=2)
    wilaya_code: int | None = None
    wilaya_name: str | None = None
    baladiya: str | None = None
    notes: str | None = None
    items: list[OrderItemCreate] = Field(min_length=1)


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


class OrderItemOut(BaseModel):
    id: int
    book_id: int | None = None
    book_title_en: str = ""
    book_title_ar: str = ""
    quantity: int
    unit_price: float

    model_config = {"from_attributes": True}


class OrderOut(BaseModel):
    id: int
    user_id: int | None = None
    customer_name: str
    phone: str
    address: str
    city: str
    wilaya_code: int | None = None
    wilaya_name: str | None = None
    baladiya: str | None = None
    shipping_price: float = 0.0
    status: OrderStatus
    subtotal: float
    total: float
    notes: str | None = None
    points_awarded: bool
    points_used: int = 0
    items: list[OrderItemOut]
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class RedeemRequest(BaseModel):
    book_id: int
    quantity: int = Field(default=1, ge=1)


class RedeemOut(BaseModel):
    message: str
    points_used: int
    remaining_points: int
    order: OrderOut
