from sqlalchemy import or_
from sqlalchemy.orm import Session

from bookstore.config import settings
from bookstore.models.book import Book, Category
from bookstore.schemas.book import BookCreate, BookUpdate, CategoryCreate, CategoryUpdate

NULLABLE_BOOK_FIELDS = {"category_id", "isbn"}


def _check_category(db: Session, category_id: int | None) -> None:
    if category_id is not None and not get_category(db, category_id):
        raise ValueError(f"Category {category_id} not found")


def create_book(db: Session, data: BookCreate) -> Book:
    _check_category(db, data.category_id)
    book = Book(**data.model_dump())
    db.add(book)
    db.commit()
    db.refresh(book)
    return book


def get_book(db: Session, book_id: int) -> Book | None:
    return db.query(Book).filter(Book.id == book_id).first()


def list_books(db: Session, category: str | None = None, search: str | None = None) -> list[Book]:
    q = db.query(Book)
    if category:
        q = q.filter(Book.category == category)
    if search:
        pattern = f"%{search.strip()}%"
        q = q.filter(
            or_(
                Book.title_ar.ilike(pattern),
                Book.title_en.ilike(pattern),
                Book.author.ilike(pattern),
            )
        )
    return q.order_by(Book.created_at.desc(), Book.id.desc()).all()


def update_book(db: Session, book_id: int, data: BookUpdate) -> Book | None:
    book = get_book(db, book_id)
    if not book:
        return None
    update_data = data.model_dump(exclude_unset=True)
    if "category_id" in update_data:
        _check_category(db, update_data["category_id"])
    for field, value in update_data.items():
        if value is None and field not in NULLABLE_BOOK_FIELDS:
            continue
        setattr(book, field, value)
    db.commit()
    db.refresh(book)
    return book


def delete_book(db: Session, book_id: int) -> bool:
    book = get_book(db, book_id)
    if not book:
        return False
    # Order items keep their price/title snapshot; only the link is cleared
    db.delete(book)
    db.commit()
    return True


def count_books(db: Session) -> int:
    return db.query(Book).count()


def get_low_stock(db: Session, threshold: int | None = None) -> list[Book]:
    if threshold is None:
        threshold = settings.LOW_STOCK_THRESHOLD
    return db.query(Book).filter(Book.stock <= threshold).order_by(Book.stock).all()


# --- Category service ---

def create_category(db: Session, data: CategoryCreate) -> Category:
    if get_category_by_slug(db, data.slug):
        raise ValueError(f"Category slug '{data.slug}' already exists")
    category = Category(**data.model_dump())
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


def get_category(db: Session, category_id: int) -> Category | None:
    return db.query(Category).filter(Category.id == category_id).first()


def get_category_by_slug(db: Session, slug: str) -> Category | None:
    return db.query(Category).filter(Category.slug == slug).first()


def list_categories(db: Session) -> list[Category]:
    return db.query(Category).order_by(Category.id).all()


def update_category(db: Session, category_id: int, data: CategoryUpdate) -> Category | None:
    category = get_category(db, category_id)
    if not category:
        return None
    update_data = data.model_dump(exclude_unset=True)
    new_slug = update_data.get("slug")
    if new_slug and new_slug != category.slug and get_category_by_slug(db, new_slug):
        raise ValueError(f"Category slug '{new_slug}' already exists")
    for field, value in update_data.items():
        if value is not None:
            setattr(category, field, value)
    db.commit()
    db.refresh(category)
    return category


def delete_category(db: Session, category_id: int) -> bool:
    category = get_category(db, category_id)
    if not category:
        return False
    db.delete(category)
    db.commit()
    return True
