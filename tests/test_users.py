def test_create_and_fetch_user(client):
    response = client.post("/api/users", json={"name": "Sam", "email": "sam@example.com", "phone": "555-0199"})

    assert response.status_code == 201
    created = response.json()["data"]
    fetched = client.get(f"/api/users/{created['id']}").json()["data"]
    assert fetched["email"] == "sam@example.com"
    assert fetched["phone"] == "555-0199"


def test_duplicate_user_email(client, user):
    response = client.post("/api/users", json={"name": "Other", "email": user["email"]})
    assert response.status_code == 409


def test_invalid_user_email(client):
    response = client.post("/api/users", json={"name": "Bad", "email": "nope"})
    assert response.status_code == 400


def test_update_and_delete_user(client, user):
    response = client.put(f"/api/users/{user['id']}", json={"name": "Dana D."})
    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Dana D."

    assert client.delete(f"/api/users/{user['id']}").status_code == 200
    assert client.get(f"/api/users/{user['id']}").status_code == 404
    assert client.get("/api/users").json()["data"] == []
