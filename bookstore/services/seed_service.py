import logging

from sqlalchemy.orm import Session

from bookstore.config import settings
from bookstore.models.book import Book, Category
from bookstore.seed_data import DEMO_BOOKS, DEMO_CATEGORIES, DEMO_USER
from bookstore.services import auth_service, shipping_service

logger = logging.getLogger(__name__)


def seed_demo_data(db: Session) -> bool:
    """Demo categories, books and a test customer, only on an empty catalog."""
    if db.query(Book).count() > 0:
        return False

    by_slug = {}
    for data in DEMO_CATEGORIES:
        category = db.query(Category).filter(Category.slug == data["slug"]).first()
        if not category:
            category = Category(**data)
            db.add(category)
            db.flush()
        by_slug[category.slug] = category

    for data in DEMO_BOOKS:
        fields = {k: v for k, v in data.items() if k != "category_slug"}
        category = by_slug.get(data["category_slug"])
        db.add(Book(**fields, category_id=category.id if category else None))
    db.commit()

    if not auth_service.get_user_by_email(db, DEMO_USER["email"]):
        auth_service.create_user(db, DEMO_USER["email"], DEMO_USER["password"], name=DEMO_USER["name"])

    logger.info("Seeded %d demo categories and %d demo books", len(DEMO_CATEGORIES), len(DEMO_BOOKS))
    return True


def run_startup_seed(db: Session) -> None:
    auth_service.ensure_default_admin(db)
    shipping_service.seed_wilayas(db)
    if settings.SEED_DEMO_DATA:
        seed_demo_data(db)
