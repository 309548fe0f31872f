from models.restaurant import Restaurant
from utils.security import pwd_context

from conftest import restaurant_payload


def test_signup_returns_created_restaurant_without_password(client):
    response = client.post("/api/restaurants", json=restaurant_payload(bgImage="https://img.test/bg.png"))

    assert response.status_code == 201
    body = response.json()
    assert body["status"] is True
    data = body["data"]
    assert data["name"] == "Spice Route"
    assert data["email"] == "owner@spiceroute.test"
    assert data["phone"] == "555-0100"
    assert data["address"] == "12 Market Street"
    assert data["description"] == "Regional curries"
    assert data["bgImage"] == "https://img.test/bg.png"
    assert data["logo"] is None
    assert data["status"] == "DE_ACTIVE"
    assert isinstance(data["id"], int)
    assert "password" not in data


def test_signup_stores_a_bcrypt_hash(client, db_session):
    client.post("/api/restaurants", json=restaurant_payload())

    stored = db_session.query(Restaurant).one()
    assert stored.password != "s3cret-pass"
    assert stored.password.startswith("$2")
    assert pwd_context.verify("s3cret-pass", stored.password)


def test_duplicate_email_is_a_conflict_and_creates_nothing(client, db_session):
    assert client.post("/api/restaurants", json=restaurant_payload()).status_code == 201

    response = client.post("/api/restaurants", json=restaurant_payload(name="Copycat"))

    assert response.status_code == 409
    body = response.json()
    assert body["status"] is False
    assert body["error"] == "Restaurant with this email already exists"
    assert db_session.query(Restaurant).count() == 1


def test_signup_requires_fields(client):
    payload = restaurant_payload()
    del payload["phone"]

    response = client.post("/api/restaurants", json=payload)

    assert response.status_code == 400
    assert "phone" in response.json()["error"]


def test_signup_rejects_empty_string(client):
    response = client.post("/api/restaurants", json=restaurant_payload(name=""))
    assert response.status_code == 400


def test_signup_rejects_non_string_types(client):
    response = client.post("/api/restaurants", json=restaurant_payload(phone=5550100))
    assert response.status_code == 400


def test_signup_rejects_malformed_email(client):
    for email in ("not-an-email", "a@b", "with space@x.io"):
        response = client.post("/api/restaurants", json=restaurant_payload(email=email))
        assert response.status_code == 400
        assert "Invalid email format" in response.json()["error"]


def test_list_and_filter_by_status(client, restaurant):
    client.post("/api/restaurants", json=restaurant_payload(email="second@spiceroute.test"))
    client.put(f"/api/restaurants/{restaurant['id']}", json={"status": "ACTIVE"})

    everything = client.get("/api/restaurants").json()["data"]
    active = client.get("/api/restaurants", params={"status": "ACTIVE"}).json()["data"]

    assert len(everything) == 2
    assert [r["id"] for r in active] == [restaurant["id"]]
    assert all("password" not in r for r in everything)


def test_approve_restaurant(client, restaurant):
    response = client.put(f"/api/restaurants/{restaurant['id']}", json={"status": "ACTIVE"})

    assert response.status_code == 200
    assert response.json()["data"]["status"] == "ACTIVE"


def test_update_rejects_unknown_status(client, restaurant):
    response = client.put(f"/api/restaurants/{restaurant['id']}", json={"status": "SUSPENDED"})
    assert response.status_code == 400


def test_update_password_is_rehashed(client, restaurant, db_session):
    response = client.put(f"/api/restaurants/{restaurant['id']}", json={"password": "n3w-pass"})

    assert response.status_code == 200
    stored = db_session.query(Restaurant).one()
    assert pwd_context.verify("n3w-pass", stored.password)


def test_update_to_taken_email_conflicts(client, restaurant):
    client.post("/api/restaurants", json=restaurant_payload(email="taken@spiceroute.test"))

    response = client.put(f"/api/restaurants/{restaurant['id']}", json={"email": "taken@spiceroute.test"})

    assert response.status_code == 409


def test_update_missing_restaurant(client):
    response = client.put("/api/restaurants/999", json={"name": "Ghost"})
    assert response.status_code == 404


def test_non_numeric_id_is_a_bad_request(client):
    assert client.get("/api/restaurants/abc").status_code == 400
    assert client.put("/api/restaurants/abc", json={"name": "X"}).status_code == 400
    assert client.delete("/api/restaurants/abc").status_code == 400


def test_delete_cascades_to_owned_rows(client, restaurant, category, table):
    response = client.delete(f"/api/restaurants/{restaurant['id']}")

    assert response.status_code == 200
    assert response.json()["data"]["id"] == restaurant["id"]
    assert client.get(f"/api/restaurants/{restaurant['id']}").status_code == 404
    assert client.get(f"/api/categories/{category['id']}").status_code == 404
    assert client.get(f"/api/tables/{table['id']}").status_code == 404
