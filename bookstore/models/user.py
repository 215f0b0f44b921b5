from datetime import datetime
from enum import Enum as PyEnum

from sqlalchemy import Boolean, DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore.database import Base


class UserRole(str, PyEnum):
    USER = "user"
    EMPLOYEE = "employee"
    ADMIN = "admin"


STAFF_ROLES = (UserRole.ADMIN.value, UserRole.EMPLOYEE.value)


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String, unique=True, index=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String, nullable=False)
    role: Mapped[str] = mapped_column(String, default=UserRole.USER.value, nullable=False)  # user, employee, admin

    # Profile
    name: Mapped[str | None] = mapped_column(String, nullable=True)
    phone: Mapped[str | None] = mapped_column(String, nullable=True)
    address: Mapped[str | None] = mapped_column(String, nullable=True)
    city: Mapped[str | None] = mapped_column(String, nullable=True)

    enabled: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    points: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    # No delete cascade: orders outlive their customer with user_id nulled
    orders: Mapped[list["Order"]] = relationship("Order", back_populates="user")

    @property
    def is_staff(self) -> bool:
        return self.role in STAFF_ROLES


class ActivityLog(Base):
    """Append-only audit trail of back-office actions."""

    __tablename__ = "activity_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Plain columns rather than FKs so entries survive the actor's deletion
    admin_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    admin_email: Mapped[str] = mapped_column(String, nullable=False)
    action: Mapped[str] = mapped_column(String, nullable=False)
    entity_type: Mapped[str | None] = mapped_column(String, nullable=True)  # book, category, order, user, wilaya, shipping
    entity_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    details: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), index=True)


# Avoid circular import: Order lives in bookstore.models.order
from bookstore.models.order import Order  # noqa: E402, F401
