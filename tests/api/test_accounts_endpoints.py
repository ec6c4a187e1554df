"""API tests for account creation and authentication."""

import pytest

ACCOUNT = {"login": "aprovame", "password": "aprovame123"}


@pytest.mark.api
class TestCreateAccount:
    def test_create_returns_201_without_password(self, client, store):
        response = client.post("/integrations/accounts", json=ACCOUNT)

        assert response.status_code == 201
        data = response.json()
        assert data["login"] == "aprovame"
        assert "password" not in data
        stored = next(iter(store.users.items.values()))
        assert stored.password_hash != "aprovame123"

    def test_duplicate_login_is_409(self, client):
        client.post("/integrations/accounts", json=ACCOUNT)

        response = client.post(
            "/integrations/accounts", json={**ACCOUNT, "login": "APROVAME"}
        )

        assert response.status_code == 409
        assert response.json()["code"] == "user_already_exists"

    def test_short_password_is_400(self, client):
        response = client.post(
            "/integrations/accounts", json={"login": "aprovame", "password": "x"}
        )

        assert response.status_code == 400

    def test_password_longer_than_72_bytes_is_400(self, client, store):
        response = client.post(
            "/integrations/accounts", json={"login": "aprovame", "password": "p" * 100}
        )

        assert response.status_code == 400
        problem = response.json()
        assert any(error["field"] == "password" for error in problem["errors"])
        assert store.users.items == {}


@pytest.mark.api
class TestAuthenticate:
    def test_valid_credentials_return_token(self, client):
        client.post("/integrations/accounts", json=ACCOUNT)

        response = client.post("/integrations/auth", json=ACCOUNT)

        assert response.status_code == 200
        data = response.json()
        assert data["tokenType"] == "bearer"
        assert data["expiresIn"] > 0
        assert data["accessToken"].count(".") == 2

    def test_token_opens_protected_routes(self, client):
        client.post("/integrations/accounts", json=ACCOUNT)
        token = client.post("/integrations/auth", json=ACCOUNT).json()["accessToken"]

        response = client.post(
            "/integrations/assignor",
            json={"document": "1", "email": "a@b.com", "phone": "1", "name": "A"},
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 201

    def test_wrong_password_is_401(self, client):
        client.post("/integrations/accounts", json=ACCOUNT)

        response = client.post(
            "/integrations/auth", json={**ACCOUNT, "password": "wrong-password"}
        )

        assert response.status_code == 401
        assert response.json()["code"] == "invalid_credentials"

    def test_unknown_login_is_401(self, client):
        response = client.post("/integrations/auth", json=ACCOUNT)

        assert response.status_code == 401
