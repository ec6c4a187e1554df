"""Unit tests for handler error mapping and RFC 7807 response building."""

import json
from unittest.mock import Mock

import pytest

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError, ValidationError
from src.domain.errors import AssignorError, AuthenticationError, PayableError
from src.presentation.api.v1.errors import ErrorResponseBuilder, map_handler_error


def _request(path: str = "/integrations/assignor") -> Mock:
    request = Mock()
    request.url.path = path
    return request


@pytest.mark.unit
class TestMapHandlerError:
    @pytest.mark.parametrize(
        ("message", "expected"),
        [
            (AssignorError.ASSIGNOR_NOT_FOUND, ApplicationErrorCode.NOT_FOUND),
            (AssignorError.DOCUMENT_ALREADY_REGISTERED, ApplicationErrorCode.CONFLICT),
            (AssignorError.ASSIGNOR_HAS_PAYABLES, ApplicationErrorCode.CONFLICT),
            (PayableError.PAYABLE_NOT_FOUND, ApplicationErrorCode.NOT_FOUND),
            (PayableError.ASSIGNOR_NOT_FOUND, ApplicationErrorCode.NOT_FOUND),
            (
                PayableError.ASSIGNOR_REFERENCE_MISSING,
                ApplicationErrorCode.QUERY_FAILED,
            ),
            (
                AuthenticationError.INVALID_CREDENTIALS,
                ApplicationErrorCode.UNAUTHORIZED,
            ),
            (
                AuthenticationError.LOGIN_ALREADY_REGISTERED,
                ApplicationErrorCode.CONFLICT,
            ),
        ],
    )
    def test_known_messages_map_to_application_codes(self, message, expected):
        assert map_handler_error(message).code == expected

    def test_field_errors_carry_validation_error(self):
        error = map_handler_error(AssignorError.INVALID_PHONE)

        assert isinstance(error.domain_error, ValidationError)
        assert error.domain_error.field == "phone"
        assert error.domain_error.code == ErrorCode.INVALID_PHONE_NUMBER

    def test_not_found_with_resource_id_carries_not_found_error(self):
        error = map_handler_error(PayableError.PAYABLE_NOT_FOUND, resource_id="abc")

        assert isinstance(error.domain_error, NotFoundError)
        assert error.domain_error.resource_type == "Payable"
        assert error.details == {"resource_id": "abc"}

    def test_override_code_wins(self):
        error = map_handler_error(
            AssignorError.DOCUMENT_ALREADY_REGISTERED,
            override_code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
        )

        assert error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert error.domain_error.code == ErrorCode.ASSIGNOR_ALREADY_EXISTS

    def test_unknown_message_is_a_validation_failure(self):
        error = map_handler_error("something odd")

        assert error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert error.domain_error is None
        assert error.message == "something odd"


@pytest.mark.unit
class TestErrorResponseBuilder:
    @pytest.mark.parametrize(
        ("code", "status"),
        [
            (ApplicationErrorCode.COMMAND_VALIDATION_FAILED, 400),
            (ApplicationErrorCode.UNAUTHORIZED, 401),
            (ApplicationErrorCode.NOT_FOUND, 404),
            (ApplicationErrorCode.CONFLICT, 409),
            (ApplicationErrorCode.QUERY_FAILED, 500),
        ],
    )
    def test_status_codes(self, code, status):
        assert ErrorResponseBuilder.get_status_code(code) == status

    def test_builds_problem_details_body(self):
        response = ErrorResponseBuilder.from_application_error(
            error=map_handler_error(AssignorError.ASSIGNOR_HAS_PAYABLES),
            request=_request("/integrations/assignor/123"),
            trace_id="trace-1",
        )

        body = json.loads(response.body)
        assert response.status_code == 409
        assert body["status"] == 409
        assert body["title"] == "Resource Conflict"
        assert body["detail"] == AssignorError.ASSIGNOR_HAS_PAYABLES
        assert body["instance"] == "/integrations/assignor/123"
        assert body["code"] == "assignor_has_payables"
        assert body["trace_id"] == "trace-1"
        assert body["type"].endswith("/errors/conflict")
        assert "errors" not in body

    def test_validation_error_lists_field(self):
        response = ErrorResponseBuilder.from_application_error(
            error=map_handler_error(PayableError.INVALID_VALUE),
            request=_request(),
            trace_id="",
        )

        body = json.loads(response.body)
        assert response.status_code == 400
        assert body["errors"] == [
            {
                "field": "value",
                "code": "invalid_amount",
                "message": PayableError.INVALID_VALUE,
            }
        ]
        assert "trace_id" not in body

    def test_error_without_domain_error_has_no_code(self):
        response = ErrorResponseBuilder.from_application_error(
            error=ApplicationError(
                code=ApplicationErrorCode.NOT_FOUND, message="gone"
            ),
            request=_request(),
            trace_id="t",
        )

        body = json.loads(response.body)
        assert response.status_code == 404
        assert "code" not in body
