from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from bookstore.api.auth import require_staff
from bookstore.config import settings
from bookstore.database import get_db
from bookstore.models.user import User
from bookstore.schemas.user import ActivityLogOut, StatsOut
from bookstore.services import auth_service, report_service

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/activity", response_model=list[ActivityLogOut])
def activity_logs(
    limit: int = Query(settings.ACTIVITY_LOG_LIMIT, ge=1, le=1000),
    user: User = Depends(require_staff),
    db: Session = Depends(get_db),
):
    return auth_service.get_activity_logs(db, limit=limit)


@router.get("/stats", response_model=StatsOut)
def stats(user: User = Depends(require_staff), db: Session = Depends(get_db)):
    return report_service.dashboard_stats(db)


@router.get("/top-books")
def top_books(limit: int = Query(10, ge=1, le=100), user: User = Depends(require_staff), db: Session = Depends(get_db)):
    return report_service.top_books(db, limit=limit)
