import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from bookstore.database import enable_sqlite_foreign_keys, get_db, init_db
from bookstore.main import app
from bookstore.models.book import Book, Category
from bookstore.models.wilaya import Wilaya
from bookstore.services import auth_service

PASSWORD = "secret123"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine, "connect", enable_sqlite_foreign_keys)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_client(session_factory):
    """Factory for independent clients (separate cookie jars) sharing one database."""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db

    def _make(email: str | None = None, password: str = PASSWORD) -> TestClient:
        client = TestClient(app)
        if email:
            resp = client.post("/api/login", json={"username": email, "password": password})
            assert resp.status_code == 200, resp.text
        return client

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client):
    return make_client()


@pytest.fixture
def admin(db):
    return auth_service.create_user(db, "admin@test.dz", PASSWORD, name="Admin", role="admin")


@pytest.fixture
def employee(db):
    return auth_service.create_user(db, "staff@test.dz", PASSWORD, name="Staff", role="employee")


@pytest.fixture
def customer(db):
    return auth_service.create_user(
        db, "reader@test.dz", PASSWORD, name="Reader", phone="0550123456", address="12 Rue Didouche", city="Alger"
    )


@pytest.fixture
def other_customer(db):
    return auth_service.create_user(db, "other@test.dz", PASSWORD, name="Other Reader")


@pytest.fixture
def admin_client(make_client, admin):
    return make_client(admin.email)


@pytest.fixture
def employee_client(make_client, employee):
    return make_client(employee.email)


@pytest.fixture
def customer_client(make_client, customer):
    return make_client(customer.email)


@pytest.fixture
def category(db):
    cat = Category(name_ar="تاريخ", name_en="History", slug="history")
    db.add(cat)
    db.commit()
    db.refresh(cat)
    return cat


@pytest.fixture
def books(db, category):
    items = [
        Book(
            title_ar="مقدمة ابن خلدون", title_en="The Muqaddimah", author="Ibn Khaldun",
            price=2500, category="History", category_id=category.id, language="both", stock=15,
        ),
        Book(
            title_ar="البؤساء", title_en="Les Miserables", author="Victor Hugo",
            price=1800, category="Fiction", language="both", stock=3,
        ),
        Book(
            title_ar="كتاب صغير", title_en="Pocket Guide", author="Anon",
            price=200, category="Fiction", language="ar", stock=40,
        ),
    ]
    db.add_all(items)
    db.commit()
    for b in items:
        db.refresh(b)
    return items


@pytest.fixture
def wilayas(db):
    items = [
        Wilaya(code=16, name_ar="الجزائر", name_en="Algiers", shipping_price=400, is_active=True),
        Wilaya(code=11, name_ar="تمنراست", name_en="Tamanrasset", shipping_price=1500, is_active=False),
        Wilaya(code=31, name_ar="وهران", name_en="Oran", shipping_price=600, is_active=True),
    ]
    db.add_all(items)
    db.commit()
    for w in items:
        db.refresh(w)
    return items


def order_payload(items, wilaya_code=None, **overrides):
    payload = {
        "customer_name": "Reader",
        "phone": "0550123456",
        "address": "12 Rue Didouche Mourad",
        "city": "Alger",
        "items": [{"book_id": book_id, "quantity": qty} for book_id, qty in items],
    }
    if wilaya_code is not None:
        payload["wilaya_code"] = wilaya_code
        payload["baladiya"] = "Sidi M'Hamed"
    payload.update(overrides)
    return payload
