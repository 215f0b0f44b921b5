from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from bookstore.api.auth import require_staff
from bookstore.database import get_db
from bookstore.models.user import User
from bookstore.schemas.wilaya import WilayaBulkUpdate, WilayaOut, WilayaUpdate
from bookstore.services import auth_service, shipping_service

router = APIRouter(tags=["Shipping"])


@router.get("/shipping/wilayas", response_model=list[WilayaOut])
def list_wilayas(active: bool = False, db: Session = Depends(get_db)):
    return shipping_service.list_wilayas(db, active_only=active)


@router.get("/shipping/wilayas/{code}", response_model=WilayaOut)
def get_wilaya(code: int, db: Session = Depends(get_db)):
    wilaya = shipping_service.get_wilaya_by_code(db, code)
    if not wilaya:
        raise HTTPException(404, "Wilaya not found")
    return wilaya


@router.put("/admin/shipping/wilayas/{wilaya_id}", response_model=WilayaOut)
def update_wilaya(
    wilaya_id: int,
    data: WilayaUpdate,
    user: User = Depends(require_staff),
    db: Session = Depends(get_db),
):
    wilaya = shipping_service.update_wilaya(db, wilaya_id, data)
    if not wilaya:
        raise HTTPException(404, "Wilaya not found")
    auth_service.log_activity(
        db, user, "Updated shipping", "wilaya", wilaya.id, f"{wilaya.name_en}: {wilaya.shipping_price:g} DZD"
    )
    return wilaya


@router.put("/admin/shipping/wilayas")
def set_default_shipping_price(data: WilayaBulkUpdate, user: User = Depends(require_staff), db: Session = Depends(get_db)):
    try:
        count = shipping_service.set_default_price(db, data.default_price)
    except ValueError as e:
        raise HTTPException(400, str(e))
    auth_service.log_activity(db, user, f"Set default shipping price to {data.default_price:g} DZD", "shipping")
    return {"updated": count}
