import pytest


@pytest.fixture
def slot(client, restaurant):
    response = client.post("/api/parking_slots", json={"restaurantId": restaurant["id"], "slotNumber": "P1"})
    assert response.status_code == 201
    return response.json()["data"]


def test_empty_slot_list(client, restaurant):
    response = client.get("/api/parking_slots", params={"restaurantId": restaurant["id"]})

    assert response.status_code == 200
    assert response.json()["data"] == []


def test_create_slot(client, restaurant, slot):
    assert slot["restaurantId"] == restaurant["id"]
    assert slot["slotNumber"] == "P1"
    assert slot["status"] == "AVAILABLE"


def test_create_slot_with_bad_status(client, restaurant):
    response = client.post(
        "/api/parking_slots", json={"restaurantId": restaurant["id"], "slotNumber": "P2", "status": "FULL"}
    )
    assert response.status_code == 400


def test_duplicate_slot_number(client, restaurant, slot):
    response = client.post("/api/parking_slots", json={"restaurantId": restaurant["id"], "slotNumber": "P1"})
    assert response.status_code == 409


def test_same_slot_number_in_another_restaurant(client, slot):
    other = client.post(
        "/api/restaurants",
        json={
            "name": "Other",
            "email": "other@example.com",
            "password": "pw",
            "phone": "1",
            "address": "2 Road",
        },
    ).json()["data"]

    response = client.post("/api/parking_slots", json={"restaurantId": other["id"], "slotNumber": "P1"})

    assert response.status_code == 201


def test_update_and_delete_slot(client, slot):
    response = client.put(f"/api/parking_slots/{slot['id']}", json={"status": "RESERVED"})
    assert response.status_code == 200
    assert response.json()["data"]["status"] == "RESERVED"

    assert client.put(f"/api/parking_slots/{slot['id']}", json={"status": "GONE"}).status_code == 400

    assert client.delete(f"/api/parking_slots/{slot['id']}").status_code == 200
    assert client.get(f"/api/parking_slots/{slot['id']}").status_code == 404
    assert client.delete(f"/api/parking_slots/{slot['id']}").status_code == 404
