from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

BookLanguage = Literal["ar", "en", "fr", "both"]


# --- Category schemas ---

class CategoryCreate(BaseModel):
    name_ar: str = Field(min_length=1)
    name_en: str = Field(min_length=1)
    slug: str = Field(min_length=1, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


class CategoryUpdate(BaseModel):
    name_ar: str | None = Field(default=None, min_length=1)
    name_en: str | None = Field(default=None, min_length=1)
    slug: str | None = Field(default=None, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


class CategoryOut(BaseModel):
    id: int
    name_ar: str
    name_en: str
    slug: str

    model_config = {"from_attributes": True}


# --- Book schemas ---

class BookCreate(BaseModel):
    title_ar: str = Field(min_length=1)
    title_en: str = Field(min_length=1)
    author: str = Field(min_length=1)
    description_ar: str = ""
    description_en: str = ""
    price: float = Field(gt=0)
    category: str = Field(min_length=1)
    category_id: int | None = None
    image: str = ""
    language: BookLanguage = "ar"
    published: bool = True
    isbn: str | None = None
    stock: int = Field(default=0, ge=0)


class BookUpdate(BaseModel):
    title_ar: str | None = Field(default=None, min_length=1)
    title_en: str | None = Field(default=None, min_length=1)
    author: str | None = Field(default=None, min_length=1)
    description_ar: str | None = None
    description_en: str | None = None
    price: float | None = Field(default=None, gt=0)
    category: str | None = Field(default=None, min_length=1)
    category_id: int | None = None
    image: str | None = None
    language: BookLanguage | None = None
    published: bool | None = None
    isbn: str | None = None
    stock: int | None = Field(default=None, ge=0)


class BookOut(BaseModel):
    id: int
    title_ar: str
    title_en: str
    author: str
    description_ar: str
    description_en: str
    price: float
    category: str
    category_id: int | None = None
    image: str
    language: str
    published: bool
    isbn: str | None = None
    stock: int
    created_at: datetime | None = None

    model_config = {"from_attributes": True}
