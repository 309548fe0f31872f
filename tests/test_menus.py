def test_create_dish_echoes_input_with_category(client, category):
    response = client.post(
        "/api/menus",
        json={
            "categoryId": category["id"],
            "name": "Paneer Tikka",
            "description": None,
            "price": 8.5,
            "available": False,
            "imgurl": "",
        },
    )

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["categoryId"] == category["id"]
    assert data["name"] == "Paneer Tikka"
    assert data["price"] == 8.5
    assert data["available"] is False
    assert data["category"] == {"id": category["id"], "name": "Mains"}


def test_dish_defaults_to_available(client, dish):
    assert dish["available"] is True


def test_price_must_be_positive(client, category):
    for price in (0, -3, "free"):
        response = client.post("/api/menus", json={"categoryId": category["id"], "name": "Water", "price": price})
        assert response.status_code == 400


def test_create_for_unknown_category(client):
    response = client.post("/api/menus", json={"categoryId": 9, "name": "Ghost", "price": 1})
    assert response.status_code == 404


def test_list_by_restaurant_and_category(client, restaurant, category, dish):
    other = client.post("/api/categories", json={"restaurantId": restaurant["id"], "name": "Desserts"}).json()["data"]
    client.post("/api/menus", json={"categoryId": other["id"], "name": "Kulfi", "price": 4})

    by_restaurant = client.get("/api/menus", params={"restaurantId": restaurant["id"]}).json()["data"]
    by_category = client.get("/api/menus", params={"categoryId": category["id"]}).json()["data"]

    assert sorted(d["name"] for d in by_restaurant) == ["Kulfi", "Lamb Rogan Josh"]
    assert [d["id"] for d in by_category] == [dish["id"]]


def test_list_requires_a_scope(client):
    assert client.get("/api/menus").status_code == 400
    assert client.get("/api/menus", params={"restaurantId": "x"}).status_code == 400


def test_update_dish_moves_category(client, restaurant, dish):
    other = client.post("/api/categories", json={"restaurantId": restaurant["id"], "name": "Specials"}).json()["data"]

    response = client.put(f"/api/menus/{dish['id']}", json={"categoryId": other["id"], "price": 12.25})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["category"]["name"] == "Specials"
    assert data["price"] == 12.25
    assert data["name"] == dish["name"]


def test_update_dish_to_unknown_category(client, dish):
    assert client.put(f"/api/menus/{dish['id']}", json={"categoryId": 999}).status_code == 404


def test_delete_dish(client, dish):
    assert client.delete(f"/api/menus/{dish['id']}").status_code == 200
    assert client.get(f"/api/menus/{dish['id']}").status_code == 404


def test_dish_on_an_order_cannot_be_deleted(client, restaurant, user, dish):
    client.post(
        "/api/order_management",
        json={
            "userId": user["id"],
            "restaurantId": restaurant["id"],
            "orderItems": [{"dishId": dish["id"], "unit_rate": 10, "quantity": 1, "price": 10}],
            "totalAmount": 10,
            "order_type": "TAKEAWAY",
        },
    )

    response = client.delete(f"/api/menus/{dish['id']}")

    assert response.status_code == 409
    assert client.get(f"/api/menus/{dish['id']}").status_code == 200
