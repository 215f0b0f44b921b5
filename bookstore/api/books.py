from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from bookstore.api.auth import require_staff
from bookstore.database import get_db
from bookstore.models.user import User
from bookstore.schemas.book import BookCreate, BookOut, BookUpdate
from bookstore.services import auth_service, book_service

router = APIRouter(prefix="/books", tags=["Books"])


@router.get("", response_model=list[BookOut])
def list_books(category: str | None = None, search: str | None = None, db: Session = Depends(get_db)):
    return book_service.list_books(db, category=category, search=search)


@router.get("/{book_id}", response_model=BookOut)
def get_book(book_id: int, db: Session = Depends(get_db)):
    book = book_service.get_book(db, book_id)
    if not book:
        raise HTTPException(404, "Book not found")
    return book


@router.post("", response_model=BookOut, status_code=201)
def create_book(data: BookCreate, user: User = Depends(require_staff), db: Session = Depends(get_db)):
    try:
        book = book_service.create_book(db, data)
    except ValueError as e:
        raise HTTPException(400, str(e))
    auth_service.log_activity(db, user, "Created book", "book", book.id, book.title_en)
    return book


@router.put("/{book_id}", response_model=BookOut)
def update_book(book_id: int, data: BookUpdate, user: User = Depends(require_staff), db: Session = Depends(get_db)):
    try:
        book = book_service.update_book(db, book_id, data)
    except ValueError as e:
        raise HTTPException(400, str(e))
    if not book:
        raise HTTPException(404, "Book not found")
    auth_service.log_activity(db, user, "Updated book", "book", book.id, book.title_en)
    return book


@router.delete("/{book_id}", status_code=204)
def delete_book(book_id: int, user: User = Depends(require_staff), db: Session = Depends(get_db)):
    book = book_service.get_book(db, book_id)
    if not book:
        raise HTTPException(404, "Book not found")
    title = book.title_en
    book_service.delete_book(db, book_id)
    auth_service.log_activity(db, user, "Deleted book", "book", book_id, title)
    return Response(status_code=204)
