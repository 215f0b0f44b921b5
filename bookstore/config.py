from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Bookstore"
    DATABASE_URL: str = "sqlite:///./bookstore.db"

    # Auth cookie
    SECRET_KEY: str = "change-me"
    ACCESS_TOKEN_EXPIRE_HOURS: int = 72
    COOKIE_NAME: str = "token"

    # Loyalty: 1 point per POINTS_DIVISOR DZD of confirmed subtotal
    POINTS_DIVISOR: int = 350

    LOW_STOCK_THRESHOLD: int = 5
    ACTIVITY_LOG_LIMIT: int = 200

    # Default admin account, created on startup if missing
    ADMIN_EMAIL: str = "admin@bookstore.dz"
    ADMIN_PASSWORD: str = "admin123"

    # Demo categories/books/test user on an empty catalog
    SEED_DEMO_DATA: bool = False

    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env"}


settings = Settings()
