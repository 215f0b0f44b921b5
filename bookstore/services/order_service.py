import logging
import math

from sqlalchemy.orm import Session

from bookstore.config import settings
from bookstore.models.book import Book
from bookstore.models.order import Order, OrderItem, OrderStatus
from bookstore.models.user import User
from bookstore.schemas.order import OrderCreate
from bookstore.services.shipping_service import get_wilaya_by_code, shipping_price_for

logger = logging.getLogger(__name__)


class InsufficientPointsError(ValueError):
    def __init__(self, required: int, available: int):
        super().__init__("Not enough points")
        self.required = required
        self.available = available


def points_for_amount(amount: float) -> int:
    """Loyalty points earned for a subtotal: one per POINTS_DIVISOR, rounded down."""
    if amount <= 0:
        return 0
    return math.floor(round(amount, 2) / settings.POINTS_DIVISOR)


def points_cost(price: float, quantity: int = 1) -> int:
    """Points needed to redeem a book: its price in points, rounded up, per copy."""
    return math.ceil(round(price, 2) / settings.POINTS_DIVISOR) * quantity


def create_order(db: Session, user: User, data: OrderCreate) -> Order:
    """Price the cart, resolve shipping and persist the order with its items.

    Each item's unit_price is the book price at this moment; it is stored on
    the item and never looked up again. The whole order is committed once, so
    an unknown book leaves nothing behind.
    """
    order = Order(
        user_id=user.id,
        customer_name=data.customer_name,
        phone=data.phone,
        address=data.address,
        city=data.city,
        wilaya_code=data.wilaya_code,
        wilaya_name=data.wilaya_name,
        baladiya=data.baladiya,
        notes=data.notes,
        status=OrderStatus.PENDING,
        total=0.0,
    )
    try:
        db.add(order)
        db.flush()

        subtotal = 0.0
        for item_data in data.items:
            book = db.query(Book).filter(Book.id == item_data.book_id).first()
            if not book:
                raise ValueError(f"Book not found: {item_data.book_id}")
            db.add(OrderItem(
                order_id=order.id,
                book_id=book.id,
                book_title_en=book.title_en,
                book_title_ar=book.title_ar,
                quantity=item_data.quantity,
                unit_price=book.price,
            ))
            subtotal += book.price * item_data.quantity

        shipping_price = shipping_price_for(db, data.wilaya_code)
        if data.wilaya_code is not None and not order.wilaya_name:
            wilaya = get_wilaya_by_code(db, data.wilaya_code)
            if wilaya and wilaya.is_active:
                order.wilaya_name = wilaya.name_en

        order.shipping_price = shipping_price
        order.total = round(subtotal + shipping_price, 2)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(order)
    logger.info("Order %d created for user %d: total=%.2f shipping=%.2f", order.id, user.id, order.total, order.shipping_price)
    return order


def get_order(db: Session, order_id: int) -> Order | None:
    return db.query(Order).filter(Order.id == order_id).first()


def list_orders(db: Session, user_id: int | None = None) -> list[Order]:
    q = db.query(Order)
    if user_id is not None:
        q = q.filter(Order.user_id == user_id)
    return q.order_by(Order.created_at.desc(), Order.id.desc()).all()


def count_orders(db: Session) -> int:
    return db.query(Order).count()


def update_order_status(db: Session, order_id: int, status: OrderStatus) -> tuple[Order | None, int]:
    """Set the order status; award loyalty points on the first confirmation.

    Returns the order and the number of points awarded by this call.
    """
    order = get_order(db, order_id)
    if not order:
        return None, 0

    order.status = status
    awarded = 0
    if status == OrderStatus.CONFIRMED and not order.points_awarded and order.user_id is not None:
        awarded = points_for_amount(order.total - (order.shipping_price or 0.0))
        if awarded > 0:
            # Conditional update: only one confirmation can flip the flag
            claimed = (
                db.query(Order)
                .filter(Order.id == order.id, Order.points_awarded == False)  # noqa: E712
                .update({Order.points_awarded: True}, synchronize_session=False)
            )
            if claimed:
                db.query(User).filter(User.id == order.user_id).update(
                    {User.points: User.points + awarded}, synchronize_session=False
                )
            else:
                awarded = 0

    db.commit()
    db.refresh(order)
    logger.info("Order %d status -> %s", order.id, order.status.value)
    if awarded:
        logger.info("Awarded %d points to user %d for order %d", awarded, order.user_id, order.id)
    return order, awarded


def delete_order(db: Session, order_id: int) -> bool:
    order = get_order(db, order_id)
    if not order:
        return False
    db.delete(order)
    db.commit()
    return True


def redeem_points(db: Session, user: User, book_id: int, quantity: int = 1) -> tuple[Order | None, int]:
    """Exchange points for a book as a zero-total order.

    Returns (None, 0) when the book does not exist. Raises
    InsufficientPointsError when the balance does not cover the cost.
    """
    book = db.query(Book).filter(Book.id == book_id).first()
    if not book:
        return None, 0

    points_needed = points_cost(book.price, quantity)
    available = user.points
    try:
        deducted = (
            db.query(User)
            .filter(User.id == user.id, User.points >= points_needed)
            .update({User.points: User.points - points_needed}, synchronize_session=False)
        )
        if not deducted:
            raise InsufficientPointsError(points_needed, available)

        order = Order(
            user_id=user.id,
            customer_name=user.name or user.email,
            phone=user.phone or "",
            address=user.address or "",
            city=user.city or "",
            notes=f"Points redemption: {points_needed} points used",
            status=OrderStatus.PENDING,
            shipping_price=0.0,
            total=0.0,
            points_used=points_needed,
            # A redemption never earns points itself
            points_awarded=True,
        )
        db.add(order)
        db.flush()
        db.add(OrderItem(
            order_id=order.id,
            book_id=book.id,
            book_title_en=book.title_en,
            book_title_ar=book.title_ar,
            quantity=quantity,
            unit_price=0.0,
        ))
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(order)
    db.refresh(user)
    logger.info("User %d redeemed %d points for book %d", user.id, points_needed, book.id)
    return order, points_needed
