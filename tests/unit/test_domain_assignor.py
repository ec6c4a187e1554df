"""Unit tests for the Assignor entity.

Tests cover:
- Field limits enforced at construction
- Partial edit (None keeps the current value)
- Rejected edit leaves the entity untouched
"""

import pytest
from uuid_extensions import uuid7

from src.core.result import Failure, Success
from src.domain.entities.assignor import Assignor
from src.domain.errors import AssignorError


@pytest.mark.unit
class TestAssignorCreation:
    """Test construction-time validation."""

    def test_valid_assignor_keeps_fields(self, assignor_factory):
        assignor = assignor_factory(document="98765432100", name="Bob")

        assert assignor.document == "98765432100"
        assert assignor.name == "Bob"
        assert assignor.created_at is not None

    @pytest.mark.parametrize(
        ("field", "value", "message"),
        [
            ("document", "1" * 31, AssignorError.INVALID_DOCUMENT),
            ("email", "a" * 141, AssignorError.INVALID_EMAIL),
            ("phone", "9" * 21, AssignorError.INVALID_PHONE),
            ("name", "n" * 141, AssignorError.INVALID_NAME),
            ("name", "   ", AssignorError.INVALID_NAME),
        ],
    )
    def test_field_out_of_limits_raises(self, field, value, message):
        fields = {
            "id": uuid7(),
            "document": "12345678900",
            "email": "alice@example.com",
            "phone": "11999999999",
            "name": "Alice",
            field: value,
        }

        with pytest.raises(ValueError, match=message):
            Assignor(**fields)

    def test_values_at_the_limit_are_accepted(self, assignor_factory):
        assignor = assignor_factory(
            document="1" * 30, email="e" * 140, phone="9" * 20, name="n" * 140
        )

        assert len(assignor.phone) == 20


@pytest.mark.unit
class TestAssignorEdit:
    """Test Assignor.edit()."""

    def test_edit_replaces_given_fields_only(self, assignor_factory):
        assignor = assignor_factory()
        before = assignor.updated_at

        result = assignor.edit(name="Alice Doe", phone="11888888888")

        assert result == Success(value=None)
        assert assignor.name == "Alice Doe"
        assert assignor.phone == "11888888888"
        assert assignor.document == "12345678900"
        assert assignor.updated_at >= before

    def test_edit_rejects_too_long_value_without_changes(self, assignor_factory):
        assignor = assignor_factory()

        result = assignor.edit(name="Carol", phone="9" * 21)

        assert result == Failure(error=AssignorError.INVALID_PHONE)
        assert assignor.name == "Alice"
        assert assignor.phone == "11999999999"
