"""Shipping zones (wilayas) and their flat delivery prices."""

import logging

from sqlalchemy.orm import Session

from bookstore.models.wilaya import Wilaya
from bookstore.schemas.wilaya import WilayaUpdate
from bookstore.seed_data import ALGERIAN_WILAYAS

logger = logging.getLogger(__name__)


def list_wilayas(db: Session, active_only: bool = False) -> list[Wilaya]:
    q = db.query(Wilaya)
    if active_only:
        q = q.filter(Wilaya.is_active == True)  # noqa: E712
    return q.order_by(Wilaya.code).all()


def get_wilaya(db: Session, wilaya_id: int) -> Wilaya | None:
    return db.query(Wilaya).filter(Wilaya.id == wilaya_id).first()


def get_wilaya_by_code(db: Session, code: int) -> Wilaya | None:
    return db.query(Wilaya).filter(Wilaya.code == code).first()


def shipping_price_for(db: Session, code: int | None) -> float:
    """Delivery price for a zone code; 0 when the zone is missing or inactive."""
    if code is None:
        return 0.0
    wilaya = get_wilaya_by_code(db, code)
    if not wilaya or not wilaya.is_active:
        return 0.0
    return wilaya.shipping_price


def update_wilaya(db: Session, wilaya_id: int, data: WilayaUpdate) -> Wilaya | None:
    wilaya = get_wilaya(db, wilaya_id)
    if not wilaya:
        return None
    for field, value in data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(wilaya, field, value)
    db.commit()
    db.refresh(wilaya)
    return wilaya


def set_default_price(db: Session, price: float) -> int:
    """Apply one shipping price to every zone. Returns the number of zones updated."""
    if price < 0:
        raise ValueError("Shipping price cannot be negative")
    updated = db.query(Wilaya).update({Wilaya.shipping_price: price}, synchronize_session="fetch")
    db.commit()
    return updated


def count_wilayas(db: Session) -> int:
    return db.query(Wilaya).count()


def seed_wilayas(db: Session) -> int:
    """Insert the 58 wilayas with their default prices when the table is empty."""
    if count_wilayas(db) > 0:
        return 0
    for code, name_ar, name_en, price in ALGERIAN_WILAYAS:
        db.add(Wilaya(code=code, name_ar=name_ar, name_en=name_en, shipping_price=price, is_active=True))
    db.commit()
    logger.info("Seeded %d wilayas", len(ALGERIAN_WILAYAS))
    return len(ALGERIAN_WILAYAS)
