import os

# Configure before the application modules read their settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["API_PREFIX"] = "/api"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from utils.database import Base, get_db, enable_sqlite_foreign_keys


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine, "connect", enable_sqlite_foreign_keys)
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield TestingSessionLocal
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def restaurant_payload(**overrides):
    payload = {
        "name": "Spice Route",
        "email": "owner@spiceroute.test",
        "password": "s3cret-pass",
        "phone": "555-0100",
        "address": "12 Market Street",
        "description": "Regional curries",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def restaurant(client):
    response = client.post("/api/restaurants", json=restaurant_payload())
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
def user(client):
    response = client.post("/api/users", json={"name": "Dana Diner", "email": "dana@example.com"})
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
def category(client, restaurant):
    response = client.post("/api/categories", json={"restaurantId": restaurant["id"], "name": "Mains"})
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
def dish(client, category):
    response = client.post(
        "/api/menus",
        json={"categoryId": category["id"], "name": "Lamb Rogan Josh", "price": 10, "description": "Slow cooked"},
    )
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
def table(client, restaurant):
    response = client.post(
        "/api/tables",
        json={"restaurantId": restaurant["id"], "tableNumber": "T1", "capacity": 4},
    )
    assert response.status_code == 201
    return response.json()["data"]
