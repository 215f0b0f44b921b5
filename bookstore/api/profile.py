from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from bookstore.api.auth import get_current_user
from bookstore.database import get_db
from bookstore.models.user import User
from bookstore.schemas.order import OrderOut
from bookstore.schemas.user import ProfileUpdate, UserOut
from bookstore.services import customer_service, order_service

router = APIRouter(prefix="/profile", tags=["Profile"])


@router.get("", response_model=UserOut)
def get_profile(user: User = Depends(get_current_user)):
    return user


@router.put("", response_model=UserOut)
def update_profile(data: ProfileUpdate, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return customer_service.update_profile(db, user, data)


@router.get("/orders", response_model=list[OrderOut])
def my_orders(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return order_service.list_orders(db, user_id=user.id)
