import logging
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt
from sqlalchemy.orm import Session

from bookstore.config import settings
from bookstore.models.user import ActivityLog, User, UserRole

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def verify_password(password: str, hashed: str) -> bool:
    return bcrypt.checkpw(password.encode(), hashed.encode())


def create_access_token(user_id: int, role: str) -> str:
    payload = {
        "sub": str(user_id),
        "role": role,
        "exp": datetime.now(timezone.utc) + timedelta(hours=settings.ACCESS_TOKEN_EXPIRE_HOURS),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm="HS256")


def decode_token(token: str) -> dict | None:
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=["HS256"])
    except (jwt.ExpiredSignatureError, jwt.InvalidTokenError):
        return None


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def authenticate(db: Session, email: str, password: str) -> User | None:
    user = get_user_by_email(db, email)
    if not user or not user.enabled or not verify_password(password, user.password_hash):
        return None
    return user


def get_user_by_id(db: Session, user_id: int) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == _normalize_email(email)).first()


def create_user(
    db: Session,
    email: str,
    password: str,
    name: str | None = None,
    phone: str | None = None,
    address: str | None = None,
    city: str | None = None,
    role: str = UserRole.USER.value,
) -> User:
    if get_user_by_email(db, email):
        raise ValueError("Email already registered")
    user = User(
        email=_normalize_email(email),
        password_hash=hash_password(password),
        role=role,
        name=name,
        phone=phone,
        address=address,
        city=city,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Created %s account %s", role, user.email)
    return user


def list_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()


def ensure_default_admin(db: Session) -> User:
    """Create the configured admin account if it does not exist yet."""
    admin = get_user_by_email(db, settings.ADMIN_EMAIL)
    if admin:
        return admin
    return create_user(
        db,
        email=settings.ADMIN_EMAIL,
        password=settings.ADMIN_PASSWORD,
        name="Admin",
        role=UserRole.ADMIN.value,
    )


# Activity logging

def log_activity(
    db: Session,
    admin: User,
    action: str,
    entity_type: str | None = None,
    entity_id: int | None = None,
    details: str | None = None,
) -> ActivityLog:
    entry = ActivityLog(
        admin_id=admin.id,
        admin_email=admin.email,
        action=action,
        entity_type=entity_type,
        entity_id=entity_id,
        details=details,
    )
    db.add(entry)
    db.commit()
    return entry


def get_activity_logs(db: Session, limit: int | None = None) -> list[ActivityLog]:
    limit = limit or settings.ACTIVITY_LOG_LIMIT
    return (
        db.query(ActivityLog)
        .order_by(ActivityLog.created_at.desc(), ActivityLog.id.desc())
        .limit(limit)
        .all()
    )
