import pytest
from fastapi import HTTPException

from utils.errors import format_validation_errors
from utils.validators import require_id


def test_root_and_health(client):
    assert client.get("/").status_code == 200
    assert client.get("/health").json() == {"status": "ok"}


def test_error_envelope_shape(client):
    response = client.get("/api/tables/31337")

    assert response.status_code == 404
    assert response.json() == {
        "message": "Not Found",
        "status": False,
        "error": "Table with id 31337 not found",
    }


def test_validation_errors_are_bad_requests(client):
    response = client.post("/api/tables", json={"tableNumber": "T9"})

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Bad Request"
    assert body["status"] is False
    assert "restaurantId" in body["error"]
    assert "capacity" in body["error"]


def test_malformed_json_is_a_bad_request(client):
    response = client.post(
        "/api/categories", content="{not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400


def test_format_validation_errors_uses_wire_names():
    errors = [
        {"loc": ("body", "orderItems", 0, "dishId"), "msg": "Field required"},
        {"loc": ("query", "restaurantId"), "msg": "Input should be a valid integer"},
    ]

    assert format_validation_errors(errors) == (
        "orderItems.0.dishId: Field required; restaurantId: Input should be a valid integer"
    )


def test_require_id():
    assert require_id(3, "restaurantId") == 3
    with pytest.raises(HTTPException) as excinfo:
        require_id(None, "restaurantId")
    assert excinfo.value.status_code == 400


def test_out_of_range_path_id_is_a_bad_request(client):
    response = client.get("/api/tables/99999999999999999999")

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Bad Request"
    assert body["status"] is False
    assert "table_id" in body["error"]


@pytest.mark.parametrize("url", [
    "/api/restaurants/0",
    "/api/users/-3",
    "/api/categories/restaurant/9223372036854775808",
    "/api/menus?restaurantId=9223372036854775808",
    "/api/bookings?restaurantId=99999999999999999999",
])
def test_ids_outside_key_range_are_bad_requests(client, url):
    response = client.get(url)

    assert response.status_code == 400
    assert response.json()["status"] is False


def test_largest_key_is_still_a_lookup(client):
    response = client.get("/api/tables/9223372036854775807")

    assert response.status_code == 404
    assert response.json()["error"] == "Table with id 9223372036854775807 not found"
