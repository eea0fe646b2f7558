"""Request helpers shared by the API integration tests."""


def register_and_login(client, username="mluukkai", name="Matti Luukkainen", password="salainen"):
    """Register a user and return the Authorization header for it."""
    response = client.post("/api/v1/users", json={"username": username, "name": name, "password": password})
    assert response.status_code == 201
    response = client.post("/api/v1/login", json={"username": username, "password": password})
    assert response.status_code == 200
    return {"Authorization": f"bearer {response.json()['access_token']}"}
