from datetime import datetime

from sqlalchemy import Boolean, DateTime, Float, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore.database import Base


class Category(Base):
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name_ar: Mapped[str] = mapped_column(String, nullable=False)
    name_en: Mapped[str] = mapped_column(String, nullable=False)
    slug: Mapped[str] = mapped_column(String, unique=True, index=True, nullable=False)

    books: Mapped[list["Book"]] = relationship("Book", back_populates="category_ref")


class Book(Base):
    __tablename__ = "books"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title_ar: Mapped[str] = mapped_column(String, nullable=False)
    title_en: Mapped[str] = mapped_column(String, nullable=False, index=True)
    author: Mapped[str] = mapped_column(String, nullable=False)
    description_ar: Mapped[str] = mapped_column(Text, default="")
    description_en: Mapped[str] = mapped_column(Text, default="")
    price: Mapped[float] = mapped_column(Float, nullable=False)

    # Display name used by the storefront filter; category_id links to the managed list
    category: Mapped[str] = mapped_column(String, nullable=False, index=True)
    category_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True
    )

    image: Mapped[str] = mapped_column(String, default="")
    language: Mapped[str] = mapped_column(String, default="ar")  # ar, en, fr, both
    published: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    isbn: Mapped[str | None] = mapped_column(String, nullable=True)
    stock: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    category_ref: Mapped["Category"] = relationship("Category", back_populates="books")
    # No delete cascade: order items keep their snapshot with book_id nulled
    order_items: Mapped[list["OrderItem"]] = relationship("OrderItem", back_populates="book")


from bookstore.models.order import OrderItem  # noqa: E402, F401
