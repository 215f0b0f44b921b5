from sqlalchemy.orm import Session

from bookstore.models.user import User, UserRole
from bookstore.schemas.user import CustomerUpdate, ProfileUpdate
from bookstore.services.auth_service import get_user_by_email, get_user_by_id, hash_password

MIN_PASSWORD_LENGTH = 6
NULLABLE_USER_FIELDS = {"name", "phone", "address", "city"}


def _apply_password(user: User, password: str | None) -> None:
    # Short passwords are silently skipped rather than rejected
    if password and len(password) >= MIN_PASSWORD_LENGTH:
        user.password_hash = hash_password(password)


def update_profile(db: Session, user: User, data: ProfileUpdate) -> User:
    update_data = data.model_dump(exclude_unset=True, exclude={"password"})
    for field, value in update_data.items():
        setattr(user, field, value)
    _apply_password(user, data.password)
    db.commit()
    db.refresh(user)
    return user


def update_customer(db: Session, user_id: int, data: CustomerUpdate) -> User | None:
    user = get_user_by_id(db, user_id)
    if not user:
        return None
    update_data = data.model_dump(exclude_unset=True, exclude={"password", "role", "email"})
    if data.email is not None:
        email = data.email.strip().lower()
        existing = get_user_by_email(db, email)
        if existing and existing.id != user.id:
            raise ValueError("Email already in use")
        user.email = email
    if data.role is not None:
        user.role = data.role
    for field, value in update_data.items():
        if value is None and field not in NULLABLE_USER_FIELDS:
            continue
        setattr(user, field, value)
    _apply_password(user, data.password)
    db.commit()
    db.refresh(user)
    return user


def delete_customer(db: Session, user_id: int) -> bool:
    """Delete a non-admin account. Its orders stay with user_id cleared."""
    user = get_user_by_id(db, user_id)
    if not user:
        return False
    if user.role == UserRole.ADMIN.value:
        raise ValueError("Cannot delete admin users")
    db.delete(user)
    db.commit()
    return True


def set_points(db: Session, user_id: int, points: int) -> User | None:
    user = get_user_by_id(db, user_id)
    if not user:
        return None
    if points < 0:
        raise ValueError("Points balance cannot be negative")
    user.points = points
    db.commit()
    db.refresh(user)
    return user


def count_customers(db: Session) -> int:
    return db.query(User).filter(User.role == UserRole.USER.value).count()
