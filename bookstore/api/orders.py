from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from bookstore.api.auth import get_current_user, require_staff
from bookstore.database import get_db
from bookstore.models.user import User
from bookstore.schemas.order import OrderCreate, OrderOut, OrderStatusUpdate, RedeemOut, RedeemRequest
from bookstore.services import auth_service, order_service
from bookstore.services.order_service import InsufficientPointsError

router = APIRouter(tags=["Orders"])


@router.post("/orders", response_model=OrderOut, status_code=201)
def create_order(data: OrderCreate, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    try:
        return order_service.create_order(db, user, data)
    except ValueError as e:
        raise HTTPException(400, str(e))


@router.get("/orders", response_model=list[OrderOut])
def list_orders(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    if user.is_staff:
        return order_service.list_orders(db)
    return order_service.list_orders(db, user_id=user.id)


@router.get("/orders/{order_id}", response_model=OrderOut)
def get_order(order_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    order = order_service.get_order(db, order_id)
    # Other customers' orders look the same as missing ones
    if not order or (not user.is_staff and order.user_id != user.id):
        raise HTTPException(404, "Order not found")
    return order


@router.put("/orders/{order_id}/status", response_model=OrderOut)
def update_status(
    order_id: int,
    data: OrderStatusUpdate,
    user: User = Depends(require_staff),
    db: Session = Depends(get_db),
):
    order, awarded = order_service.update_order_status(db, order_id, data.status)
    if not order:
        raise HTTPException(404, "Order not found")
    if awarded:
        auth_service.log_activity(db, user, f"Awarded {awarded} points", "order", order.id)
    auth_service.log_activity(db, user, f"Updated order status to {data.status.value}", "order", order.id)
    return order


@router.delete("/orders/{order_id}", status_code=204)
def delete_order(order_id: int, user: User = Depends(require_staff), db: Session = Depends(get_db)):
    order = order_service.get_order(db, order_id)
    if not order:
        raise HTTPException(404, "Order not found")
    customer_name = order.customer_name
    order_service.delete_order(db, order_id)
    auth_service.log_activity(db, user, "Deleted order", "order", order_id, customer_name)
    return Response(status_code=204)


@router.post("/points/redeem", response_model=RedeemOut)
def redeem_points(data: RedeemRequest, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    try:
        order, points_used = order_service.redeem_points(db, user, data.book_id, data.quantity)
    except InsufficientPointsError as e:
        raise HTTPException(
            400, {"message": str(e), "required": e.required, "available": e.available}
        )
    if not order:
        raise HTTPException(404, "Book not found")
    return RedeemOut(
        message="Points redeemed successfully",
        points_used=points_used,
        remaining_points=user.points,
        order=OrderOut.model_validate(order),
    )
