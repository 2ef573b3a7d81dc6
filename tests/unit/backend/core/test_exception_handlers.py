"""
Unit Tests for Exception Handlers.

Tests the exception handler functions in isolation.
"""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import Request
from fastapi.exceptions import RequestValidationError

from mindnote.backend.core.exception_handlers import (
    EXCEPTION_STATUS_MAP,
    _get_request_id,
    application_error_handler,
    unhandled_exception_handler,
    validation_error_handler,
)
from mindnote.backend.core.exceptions import (
    ApplicationError,
    ConflictError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)


@pytest.fixture
def mock_request():
    request = MagicMock(spec=Request)
    request.state = MagicMock()
    request.state.request_id = "req-123"
    request.url.path = "/api/v1/notes/9"
    request.method = "GET"
    request.headers = {}
    return request


def _body(response) -> dict:
    return json.loads(response.body)


class TestExceptionStatusMapping:
    @pytest.mark.parametrize(
        ("exc_type", "status"),
        [
            (NotFoundError, 404),
            (ValidationError, 400),
            (ConflictError, 409),
            (DatabaseError, 503),
        ],
    )
    def test_status_codes(self, exc_type, status):
        assert EXCEPTION_STATUS_MAP[exc_type] == status


class TestGetRequestId:
    def test_prefers_request_state(self, mock_request):
        assert _get_request_id(mock_request) == "req-123"

    def test_falls_back_to_header(self):
        request = MagicMock(spec=Request)
        request.state = object()
        request.headers = {"x-request-id": "hdr-1"}
        assert _get_request_id(request) == "hdr-1"


class TestApplicationErrorHandler:
    async def test_not_found_carries_entity_details(self, mock_request):
        response = await application_error_handler(
            mock_request,
            NotFoundError.for_entity("Note", 9),
        )

        body = _body(response)
        assert response.status_code == 404
        assert body["success"] is False
        assert body["error"]["code"] == "RES_NOT_FOUND"
        assert body["error"]["message"] == "Note not found with id: 9"
        assert body["error"]["details"] == {"entity": "Note", "id": 9}
        assert body["metadata"]["request_id"] == "req-123"

    async def test_validation_error_is_400(self, mock_request):
        response = await application_error_handler(
            mock_request,
            ValidationError("Cannot sort by 'color'", details={"sort": "color"}),
        )

        body = _body(response)
        assert response.status_code == 400
        assert body["error"]["code"] == "VAL_VALIDATION_ERROR"
        assert body["error"]["details"] == {"sort": "color"}

    async def test_database_error_is_503_without_details(self, mock_request):
        response = await application_error_handler(mock_request, DatabaseError())

        body = _body(response)
        assert response.status_code == 503
        assert body["error"]["code"] == "SYS_DATABASE_ERROR"
        assert body["error"]["details"] is None

    async def test_unmapped_application_error_is_500(self, mock_request):
        response = await application_error_handler(
            mock_request,
            ApplicationError("odd"),
        )
        assert response.status_code == 500


class TestValidationErrorHandler:
    async def test_lists_invalid_fields(self, mock_request):
        exc = RequestValidationError(
            [{"loc": ("body", "title"), "msg": "Field required", "type": "missing"}]
        )

        response = await validation_error_handler(mock_request, exc)

        body = _body(response)
        assert response.status_code == 422
        assert body["error"]["code"] == "VAL_REQUEST_INVALID"
        assert body["error"]["details"]["validation_errors"] == [
            {"field": "body.title", "message": "Field required", "type": "missing"}
        ]


class TestUnhandledExceptionHandler:
    async def test_hides_internal_message(self, mock_request):
        response = await unhandled_exception_handler(
            mock_request,
            RuntimeError("password=hunter2"),
        )

        body = _body(response)
        assert response.status_code == 500
        assert body["error"]["code"] == "SYS_INTERNAL_ERROR"
        assert "hunter2" not in response.body.decode()
