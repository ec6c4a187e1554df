"""API tests for /integrations/assignor (Bearer token required).

Tests cover:
- 401 without or with a bad token
- Create (201), duplicate document (409)
- Get (200 / 404)
- Edit (200 / 404 / 409)
- Remove (204 / 404 / 409 while payables exist)
"""

import pytest
from uuid_extensions import uuid7


def _create(client, auth_headers, body) -> dict:
    response = client.post("/integrations/assignor", json=body, headers=auth_headers)
    assert response.status_code == 201
    return response.json()


@pytest.mark.api
class TestAssignorAuth:
    def test_missing_token_is_401(self, client, assignor_body):
        response = client.post("/integrations/assignor", json=assignor_body)

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json()["status"] == 401

    def test_invalid_token_is_401(self, client):
        response = client.get(
            f"/integrations/assignor/{uuid7()}",
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 401


@pytest.mark.api
class TestCreateAssignor:
    def test_create_returns_201(self, client, auth_headers, assignor_body):
        data = _create(client, auth_headers, assignor_body)

        assert data["document"] == "12345678900"
        assert data["id"]

    def test_duplicate_document_is_409(self, client, auth_headers, assignor_body):
        _create(client, auth_headers, assignor_body)

        response = client.post(
            "/integrations/assignor", json=assignor_body, headers=auth_headers
        )

        assert response.status_code == 409
        assert response.json()["code"] == "assignor_already_exists"

    def test_too_long_phone_is_400(self, client, auth_headers, assignor_body):
        response = client.post(
            "/integrations/assignor",
            json={**assignor_body, "phone": "9" * 21},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "phone"


@pytest.mark.api
class TestGetAssignor:
    def test_get_existing(self, client, auth_headers, assignor_body):
        created = _create(client, auth_headers, assignor_body)

        response = client.get(
            f"/integrations/assignor/{created['id']}", headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json() == created

    def test_get_unknown_is_404(self, client, auth_headers):
        response = client.get(f"/integrations/assignor/{uuid7()}", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["code"] == "assignor_not_found"

    def test_malformed_id_is_400(self, client, auth_headers):
        response = client.get("/integrations/assignor/not-a-uuid", headers=auth_headers)

        assert response.status_code == 400


@pytest.mark.api
class TestEditAssignor:
    def test_edit_replaces_fields(self, client, auth_headers, assignor_body):
        created = _create(client, auth_headers, assignor_body)

        response = client.put(
            f"/integrations/assignor/{created['id']}",
            json={**assignor_body, "name": "Alice Doe"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Alice Doe"

    def test_edit_unknown_is_404(self, client, auth_headers, assignor_body):
        response = client.put(
            f"/integrations/assignor/{uuid7()}", json=assignor_body, headers=auth_headers
        )

        assert response.status_code == 404

    def test_edit_to_taken_document_is_409(self, client, auth_headers, assignor_body):
        _create(client, auth_headers, assignor_body)
        other = _create(client, auth_headers, {**assignor_body, "document": "999"})

        response = client.put(
            f"/integrations/assignor/{other['id']}",
            json=assignor_body,
            headers=auth_headers,
        )

        assert response.status_code == 409


@pytest.mark.api
class TestRemoveAssignor:
    def test_remove_returns_204(self, client, auth_headers, assignor_body, store):
        created = _create(client, auth_headers, assignor_body)

        response = client.delete(
            f"/integrations/assignor/{created['id']}", headers=auth_headers
        )

        assert response.status_code == 204
        assert response.content == b""
        assert store.assignors.items == {}

    def test_remove_unknown_is_404(self, client, auth_headers):
        response = client.delete(
            f"/integrations/assignor/{uuid7()}", headers=auth_headers
        )

        assert response.status_code == 404

    def test_remove_with_payables_is_409(self, client, auth_headers, store):
        intake = client.post(
            "/integrations/payable",
            json={
                "payable": {"value": 10, "emissionDate": "2024-01-01"},
                "assignor": {
                    "document": "1",
                    "email": "a@b.com",
                    "phone": "1",
                    "name": "A",
                },
            },
        ).json()

        response = client.delete(
            f"/integrations/assignor/{intake['assignor']['id']}", headers=auth_headers
        )

        assert response.status_code == 409
        assert response.json()["code"] == "assignor_has_payables"
        assert len(store.assignors.items) == 1
