from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from bookstore.api.auth import require_staff
from bookstore.database import get_db
from bookstore.models.user import User
from bookstore.schemas.order import OrderOut
from bookstore.schemas.user import CustomerCreate, CustomerUpdate, PointsUpdate, UserOut
from bookstore.services import auth_service, customer_service, order_service

router = APIRouter(prefix="/admin/customers", tags=["Customers"])


@router.get("", response_model=list[UserOut])
def list_customers(user: User = Depends(require_staff), db: Session = Depends(get_db)):
    return auth_service.list_users(db)


@router.get("/{customer_id}", response_model=UserOut)
def get_customer(customer_id: int, user: User = Depends(require_staff), db: Session = Depends(get_db)):
    customer = auth_service.get_user_by_id(db, customer_id)
    if not customer:
        raise HTTPException(404, "Customer not found")
    return customer


@router.get("/{customer_id}/orders", response_model=list[OrderOut])
def customer_orders(customer_id: int, user: User = Depends(require_staff), db: Session = Depends(get_db)):
    if not auth_service.get_user_by_id(db, customer_id):
        raise HTTPException(404, "Customer not found")
    return order_service.list_orders(db, user_id=customer_id)


@router.post("", response_model=UserOut, status_code=201)
def create_customer(data: CustomerCreate, user: User = Depends(require_staff), db: Session = Depends(get_db)):
    try:
        customer = auth_service.create_user(
            db, data.email, data.password,
            name=data.name, phone=data.phone, address=data.address, city=data.city,
        )
    except ValueError:
        raise HTTPException(400, "Email already in use")
    auth_service.log_activity(db, user, "Created customer", "user", customer.id, customer.email)
    return customer


@router.put("/{customer_id}", response_model=UserOut)
def update_customer(
    customer_id: int,
    data: CustomerUpdate,
    user: User = Depends(require_staff),
    db: Session = Depends(get_db),
):
    try:
        customer = customer_service.update_customer(db, customer_id, data)
    except ValueError as e:
        raise HTTPException(400, str(e))
    if not customer:
        raise HTTPException(404, "Customer not found")
    auth_service.log_activity(db, user, "Updated customer", "user", customer.id, customer.email)
    return customer


@router.put("/{customer_id}/points", response_model=UserOut)
def set_points(
    customer_id: int,
    data: PointsUpdate,
    user: User = Depends(require_staff),
    db: Session = Depends(get_db),
):
    customer = customer_service.set_points(db, customer_id, data.points)
    if not customer:
        raise HTTPException(404, "Customer not found")
    auth_service.log_activity(db, user, f"Set points to {data.points}", "user", customer.id, customer.email)
    return customer


@router.delete("/{customer_id}", status_code=204)
def delete_customer(customer_id: int, user: User = Depends(require_staff), db: Session = Depends(get_db)):
    customer = auth_service.get_user_by_id(db, customer_id)
    if not customer:
        raise HTTPException(404, "Customer not found")
    email = customer.email
    try:
        customer_service.delete_customer(db, customer_id)
    except ValueError as e:
        raise HTTPException(400, str(e))
    auth_service.log_activity(db, user, "Deleted customer", "user", customer_id, email)
    return Response(status_code=204)
