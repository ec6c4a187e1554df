"""API tests for POST /integrations/payable (public intake).

Tests cover:
- Creating an assignor and its first payable in one call
- Schema violations answered with 400 Problem Details
- Rejected assignor: 400 and no payable written
"""

import pytest

BODY = {
    "payable": {"value": 100, "emissionDate": "2024-01-01"},
    "assignor": {
        "document": "12345678900",
        "email": "a@b.com",
        "phone": "11999999999",
        "name": "Alice",
    },
}


@pytest.mark.api
class TestCreatePayableAndAssignor:
    def test_creates_both_resources(self, client, store):
        response = client.post("/integrations/payable", json=BODY)

        assert response.status_code == 200
        data = response.json()
        assert data["assignor"]["document"] == "12345678900"
        assert data["payable"]["value"] == 100
        assert data["payable"]["emissionDate"] == "2024-01-01"
        assert data["payable"]["assignorId"] == data["assignor"]["id"]
        assert len(store.assignors.items) == 1
        assert len(store.payables.items) == 1

    def test_no_token_required(self, client):
        response = client.post("/integrations/payable", json=BODY)

        assert response.status_code == 200

    def test_duplicate_document_is_400_without_payable(self, client, store):
        client.post("/integrations/payable", json=BODY)

        response = client.post("/integrations/payable", json=BODY)

        assert response.status_code == 400
        assert response.json()["code"] == "assignor_already_exists"
        assert len(store.assignors.items) == 1
        assert len(store.payables.items) == 1

    @pytest.mark.parametrize(
        ("section", "field", "value"),
        [
            ("assignor", "document", "1" * 31),
            ("assignor", "phone", "9" * 21),
            ("assignor", "name", ""),
            ("payable", "value", "NaN"),
            ("payable", "value", "100"),
            ("payable", "emissionDate", "not-a-date"),
        ],
    )
    def test_schema_violation_is_400(self, client, store, section, field, value):
        body = {key: dict(part) for key, part in BODY.items()}
        body[section][field] = value

        response = client.post("/integrations/payable", json=body)

        assert response.status_code == 400
        problem = response.json()
        assert problem["title"] == "Validation Failed"
        assert any(
            error["field"] == f"{section}.{field}" for error in problem["errors"]
        )
        assert store.assignors.items == {}

    def test_missing_section_is_400(self, client):
        response = client.post("/integrations/payable", json={"payable": BODY["payable"]})

        assert response.status_code == 400
