from conftest import PASSWORD

from bookstore.services import auth_service


def test_register_logs_in(client):
    resp = client.post(
        "/api/register",
        json={"email": "New@Reader.dz", "password": "hunter22", "name": "New Reader", "phone": "0661000000"},
    )
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["email"] == "new@reader.dz"
    assert body["role"] == "user"
    assert body["points"] == 0
    assert "password_hash" not in body

    me = client.get("/api/user").json()
    assert me["email"] == "new@reader.dz"


def test_register_duplicate_email(client, customer):
    resp = client.post("/api/register", json={"email": customer.email, "password": "hunter22", "name": "Again"})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Email already registered"


def test_register_validation(client):
    assert client.post("/api/register", json={"email": "x@y.dz", "password": "123", "name": "Shorty"}).status_code == 422
    assert client.post("/api/register", json={"email": "not-an-email", "password": "hunter22", "name": "Nope"}).status_code == 422
    assert client.post("/api/register", json={"email": "x@y.dz", "password": "hunter22", "name": "A"}).status_code == 422


def test_login_and_logout(client, customer):
    assert client.get("/api/user").json() is None

    bad = client.post("/api/login", json={"username": customer.email, "password": "wrong-one"})
    assert bad.status_code == 401

    ok = client.post("/api/login", json={"username": customer.email, "password": PASSWORD})
    assert ok.status_code == 200
    assert client.get("/api/user").json()["id"] == customer.id

    client.post("/api/logout")
    assert client.get("/api/user").json() is None


def test_disabled_account_cannot_log_in(client, customer, db):
    customer.enabled = False
    db.commit()
    resp = client.post("/api/login", json={"username": customer.email, "password": PASSWORD})
    assert resp.status_code == 401


def test_disabling_revokes_existing_session(customer_client, admin_client, customer):
    assert customer_client.get("/api/profile").status_code == 200
    admin_client.put(f"/api/admin/customers/{customer.id}", json={"enabled": False})
    assert customer_client.get("/api/profile").status_code == 401


def test_tampered_token_is_anonymous(client):
    client.cookies.set("token", "not-a-jwt")
    assert client.get("/api/user").json() is None
    assert client.get("/api/profile").status_code == 401


def test_token_round_trip():
    token = auth_service.create_access_token(7, "employee")
    payload = auth_service.decode_token(token)
    assert payload["sub"] == "7"
    assert payload["role"] == "employee"


def test_profile_update(customer_client):
    resp = customer_client.put("/api/profile", json={"city": "Oran", "password": "123"})
    assert resp.status_code == 200
    assert resp.json()["city"] == "Oran"

    # short password was ignored, the old one still works
    customer_client.post("/api/logout")
    again = customer_client.post("/api/login", json={"username": "reader@test.dz", "password": PASSWORD})
    assert again.status_code == 200

    customer_client.put("/api/profile", json={"password": "brand-new-pw"})
    customer_client.post("/api/logout")
    assert customer_client.post("/api/login", json={"username": "reader@test.dz", "password": "brand-new-pw"}).status_code == 200


def test_ensure_default_admin_is_idempotent(db):
    first = auth_service.ensure_default_admin(db)
    second = auth_service.ensure_default_admin(db)
    assert first.id == second.id
    assert first.role == "admin"
