"""
Tests for the header-authenticated /api/users routes.
"""
from conftest import API_KEY, BEARER_TOKEN


def test_list_users_without_header(client):
    response = client.get("/api/users")
    assert response.status_code == 401
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "No authorization header provided"
    assert BEARER_TOKEN in body["tip"]


def test_list_users_with_wrong_token(client):
    response = client.get("/api/users", headers={"Authorization": "Bearer nope"})
    assert response.status_code == 403
    assert response.json()["error"] == "Invalid token"


def test_list_users_with_other_scheme_is_forbidden(client):
    response = client.get("/api/users", headers={"Authorization": f"Basic {BEARER_TOKEN}"})
    assert response.status_code == 403


def test_list_users_with_token(client):
    response = client.get("/api/users", headers={"Authorization": f"Bearer {BEARER_TOKEN}"})
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Authentication successful!"
    assert [user["username"] for user in body["data"]] == ["learner", "teacher"]


def test_token_comes_from_settings(settings, app, client):
    settings.bearer_token = "rotated"
    assert client.get("/api/users", headers={"Authorization": f"Bearer {BEARER_TOKEN}"}).status_code == 403
    assert client.get("/api/users", headers={"Authorization": "Bearer rotated"}).status_code == 200


def test_create_user_without_key(client):
    response = client.post("/api/users", json={"username": "a", "email": "a@example.com"})
    assert response.status_code == 401
    assert response.json()["error"] == "Invalid or missing X-API-Key header"


def test_create_user_with_wrong_key(client):
    response = client.post(
        "/api/users", json={"username": "a", "email": "a@example.com"}, headers={"X-API-Key": "wrong"}
    )
    assert response.status_code == 401


def test_create_user_missing_fields(client):
    response = client.post("/api/users", json={"username": "a"}, headers={"X-API-Key": API_KEY})
    assert response.status_code == 400
    assert response.json()["error"] == "Missing required fields: username, email"


def test_create_user(client):
    response = client.post(
        "/api/users",
        json={"username": "newuser", "email": "newuser@example.com"},
        headers={"X-API-Key": API_KEY},
    )
    assert response.status_code == 201
    assert response.json()["data"] == {
        "id": 3,
        "username": "newuser",
        "email": "newuser@example.com",
        "role": "student",
    }
    users = client.get("/api/users", headers={"Authorization": f"Bearer {BEARER_TOKEN}"}).json()["data"]
    assert len(users) == 3
