from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from bookstore.api.auth import require_staff
from bookstore.database import get_db
from bookstore.models.user import User
from bookstore.schemas.book import CategoryCreate, CategoryOut, CategoryUpdate
from bookstore.services import auth_service, book_service

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", response_model=list[CategoryOut])
def list_categories(db: Session = Depends(get_db)):
    return book_service.list_categories(db)


@router.post("", response_model=CategoryOut, status_code=201)
def create_category(data: CategoryCreate, user: User = Depends(require_staff), db: Session = Depends(get_db)):
    try:
        category = book_service.create_category(db, data)
    except ValueError as e:
        raise HTTPException(400, str(e))
    auth_service.log_activity(db, user, "Created category", "category", category.id, category.name_en)
    return category


@router.put("/{category_id}", response_model=CategoryOut)
def update_category(
    category_id: int,
    data: CategoryUpdate,
    user: User = Depends(require_staff),
    db: Session = Depends(get_db),
):
    try:
        category = book_service.update_category(db, category_id, data)
    except ValueError as e:
        raise HTTPException(400, str(e))
    if not category:
        raise HTTPException(404, "Category not found")
    auth_service.log_activity(db, user, "Updated category", "category", category.id, category.name_en)
    return category


@router.delete("/{category_id}", status_code=204)
def delete_category(category_id: int, user: User = Depends(require_staff), db: Session = Depends(get_db)):
    if not book_service.delete_category(db, category_id):
        raise HTTPException(404, "Category not found")
    auth_service.log_activity(db, user, "Deleted category", "category", category_id)
    return Response(status_code=204)
