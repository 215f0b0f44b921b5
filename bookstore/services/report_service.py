from sqlalchemy import func
from sqlalchemy.orm import Session

from bookstore.models.order import Order, OrderItem, OrderStatus
from bookstore.services import book_service, customer_service, order_service


def dashboard_stats(db: Session) -> dict:
    revenue = (
        db.query(func.coalesce(func.sum(Order.total), 0.0))
        .filter(Order.status != OrderStatus.CANCELLED)
        .scalar()
    )
    return {
        "total_books": book_service.count_books(db),
        "total_orders": order_service.count_orders(db),
        "total_customers": customer_service.count_customers(db),
        "low_stock_books": len(book_service.get_low_stock(db)),
        "revenue": round(float(revenue or 0.0), 2),
    }


def top_books(db: Session, limit: int = 10) -> list[dict]:
    results = (
        db.query(
            OrderItem.book_id,
            OrderItem.book_title_en,
            func.sum(OrderItem.quantity).label("total_sold"),
            func.sum(OrderItem.quantity * OrderItem.unit_price).label("total_revenue"),
        )
        .join(Order, Order.id == OrderItem.order_id)
        .filter(Order.status != OrderStatus.CANCELLED)
        .group_by(OrderItem.book_id, OrderItem.book_title_en)
        .order_by(func.sum(OrderItem.quantity).desc())
        .limit(limit)
        .all()
    )

    return [
        {
            "book_id": r.book_id,
            "title_en": r.book_title_en,
            "total_sold": int(r.total_sold),
            "total_revenue": round(float(r.total_revenue), 2),
        }
        for r in results
    ]
