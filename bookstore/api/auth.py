from fastapi import APIRouter, Cookie, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from bookstore.config import settings
from bookstore.database import get_db
from bookstore.models.user import User
from bookstore.schemas.user import LoginRequest, RegisterRequest, UserOut
from bookstore.services import auth_service

router = APIRouter(tags=["Auth"])


def _set_session_cookie(response: Response, user: User) -> None:
    token = auth_service.create_access_token(user.id, user.role)
    response.set_cookie(
        settings.COOKIE_NAME,
        token,
        httponly=True,
        samesite="lax",
        max_age=3600 * settings.ACCESS_TOKEN_EXPIRE_HOURS,
    )


def get_optional_user(
    token: str | None = Cookie(default=None, alias=settings.COOKIE_NAME),
    db: Session = Depends(get_db),
) -> User | None:
    """Dependency: the logged-in user, or None for anonymous requests."""
    if not token:
        return None
    payload = auth_service.decode_token(token)
    if not payload:
        return None
    try:
        user_id = int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        return None
    user = auth_service.get_user_by_id(db, user_id)
    if not user or not user.enabled:
        return None
    return user


def get_current_user(user: User | None = Depends(get_optional_user)) -> User:
    """Dependency: require a logged-in, enabled account."""
    if not user:
        raise HTTPException(401, "Login required")
    return user


def require_staff(user: User = Depends(get_current_user)) -> User:
    """Dependency: require an admin or employee account."""
    if not user.is_staff:
        raise HTTPException(403, "Unauthorized")
    return user


@router.post("/register", response_model=UserOut, status_code=201)
def register(data: RegisterRequest, response: Response, db: Session = Depends(get_db)):
    try:
        user = auth_service.create_user(db, data.email, data.password, name=data.name, phone=data.phone)
    except ValueError as e:
        raise HTTPException(400, str(e))
    _set_session_cookie(response, user)
    return user


@router.post("/login", response_model=UserOut)
def login(data: LoginRequest, response: Response, db: Session = Depends(get_db)):
    user = auth_service.authenticate(db, data.username, data.password)
    if not user:
        raise HTTPException(401, "Invalid credentials")
    _set_session_cookie(response, user)
    return user


@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(settings.COOKIE_NAME)
    return {"ok": True}


@router.get("/user", response_model=UserOut | None)
def me(user: User | None = Depends(get_optional_user)):
    return user
