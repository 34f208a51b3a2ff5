"""Tests for favorite endpoints"""


def add_favorite(client, user_email, query_id, product_name="P1"):
    response = client.post(
        "/favorites",
        json={
            "userEmail": user_email,
            "queryId": query_id,
            "productName": product_name,
            "queryTitle": "Alternatives?",
        }
    )
    assert response.status_code == 200
    return response.json()["insertedId"]


def test_create_favorite(client):
    """Test bookmarking a query"""

    response = client.post("/favorites", json={"userEmail": "alice@example.com", "productName": "P1"})

    assert response.status_code == 200
    assert response.json()["acknowledged"] is True
    assert isinstance(response.json()["insertedId"], int)


def test_favorite_is_a_snapshot(client, login):
    """Test favorites do not require or follow the live query"""

    add_favorite(client, "alice@example.com", 999, product_name="Old name")

    data = client.get("/favorites").json()

    assert data[0]["queryId"] == 999
    assert data[0]["productName"] == "Old name"


def test_list_favorites_newest_first(client):
    """Test listing all favorites"""

    first = add_favorite(client, "alice@example.com", 1)
    second = add_favorite(client, "bob@example.com", 1)

    response = client.get("/favorites")

    assert response.status_code == 200
    assert [f["_id"] for f in response.json()] == [second, first]


def test_list_user_favorites_is_public(client):
    """Test listing one user's favorites needs no session"""

    first = add_favorite(client, "alice@example.com", 1)
    add_favorite(client, "bob@example.com", 1)
    third = add_favorite(client, "alice@example.com", 2)

    response = client.get("/favorites/alice@example.com")

    assert response.status_code == 200
    assert [f["_id"] for f in response.json()] == [third, first]


def test_delete_favorite(client, login):
    """Test deleting a favorite requires a session"""

    favorite_id = add_favorite(client, "alice@example.com", 1)

    assert client.delete(f"/favorite/{favorite_id}").status_code == 401

    login("alice@example.com")
    response = client.delete(f"/favorite/{favorite_id}")

    assert response.status_code == 200
    assert response.json() == {"acknowledged": True, "deletedCount": 1}
    assert client.get("/favorites").json() == []

    assert client.delete(f"/favorite/{favorite_id}").json()["deletedCount"] == 0
