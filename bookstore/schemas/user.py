from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from bookstore.models.user import UserRole


class LoginRequest(BaseModel):
    username: str  # the account email
    password: str


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)
    name: str = Field(min_length=2)
    phone: str | None = None


class UserOut(BaseModel):
    id: int
    email: str
    role: str
    name: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    enabled: bool = True
    points: int = 0
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class ProfileUpdate(BaseModel):
    name: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    password: str | None = None  # ignored when shorter than 6 characters


# --- Back-office customer management ---

class CustomerCreate(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)
    name: str = Field(min_length=2)
    phone: str | None = None
    address: str | None = None
    city: str | None = None


class CustomerUpdate(BaseModel):
    email: EmailStr | None = None
    name: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    enabled: bool | None = None
    password: str | None = None  # ignored when shorter than 6 characters
    role: str | None = None  # ignored unless a known role

    @field_validator("role")
    @classmethod
    def drop_unknown_role(cls, v):
        if v is not None and v not in {r.value for r in UserRole}:
            return None
        return v


class PointsUpdate(BaseModel):
    points: int = Field(ge=0)


class ActivityLogOut(BaseModel):
    id: int
    admin_id: int
    admin_email: str
    action: str
    entity_type: str | None = None
    entity_id: int | None = None
    details: str | None = None
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class StatsOut(BaseModel):
    total_books: int
    total_orders: int
    total_customers: int
    low_stock_books: int
    revenue: float
