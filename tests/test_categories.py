def test_empty_restaurant_lists_no_categories(client, restaurant):
    response = client.get("/api/categories", params={"restaurantId": restaurant["id"]})

    assert response.status_code == 200
    assert response.json() == {"message": "Categories fetched successfully", "status": True, "data": []}


def test_create_category_echoes_input(client, restaurant):
    response = client.post(
        "/api/categories",
        json={"restaurantId": restaurant["id"], "name": "Starters", "imgurl": "https://img.test/s.png"},
    )

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["restaurantId"] == restaurant["id"]
    assert data["name"] == "Starters"
    assert data["imgurl"] == "https://img.test/s.png"
    assert "createdAt" in data and "updatedAt" in data


def test_list_by_query_and_by_path(client, restaurant, category):
    by_query = client.get("/api/categories", params={"restaurantId": restaurant["id"]}).json()["data"]
    by_path = client.get(f"/api/categories/restaurant/{restaurant['id']}").json()["data"]

    assert by_query == by_path
    assert [c["id"] for c in by_query] == [category["id"]]


def test_list_requires_numeric_restaurant_id(client):
    missing = client.get("/api/categories")
    assert missing.status_code == 400
    assert missing.json()["error"] == "restaurantId is required and must be a valid number"

    assert client.get("/api/categories", params={"restaurantId": "abc"}).status_code == 400
    assert client.get("/api/categories", params={"restaurantId": 0}).status_code == 400
    assert client.get("/api/categories/restaurant/abc").status_code == 400


def test_list_for_unknown_restaurant(client):
    response = client.get("/api/categories", params={"restaurantId": 404})
    assert response.status_code == 404


def test_create_for_unknown_restaurant(client):
    response = client.post("/api/categories", json={"restaurantId": 77, "name": "Ghost"})
    assert response.status_code == 404


def test_create_requires_name(client, restaurant):
    response = client.post("/api/categories", json={"restaurantId": restaurant["id"]})
    assert response.status_code == 400
    assert "name" in response.json()["error"]


def test_update_category(client, category):
    response = client.put(f"/api/categories/{category['id']}", json={"name": "Curries"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == "Curries"
    assert data["restaurantId"] == category["restaurantId"]


def test_update_rejects_null_name(client, category):
    response = client.put(f"/api/categories/{category['id']}", json={"name": None})
    assert response.status_code == 400


def test_update_unknown_category(client):
    assert client.put("/api/categories/123", json={"name": "X"}).status_code == 404


def test_delete_then_fetch(client, restaurant, category, dish):
    response = client.delete(f"/api/categories/{category['id']}")

    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Mains"
    assert client.get(f"/api/categories/{category['id']}").status_code == 404
    assert client.get("/api/categories", params={"restaurantId": restaurant["id"]}).json()["data"] == []
    # dishes go with their category
    assert client.get(f"/api/menus/{dish['id']}").status_code == 404


def test_delete_unknown_category(client):
    assert client.delete("/api/categories/5").status_code == 404
