"""Unit tests for API error mapping"""

import json
import pytest
from unittest.mock import MagicMock

from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import OperationalError

from libs.result import Error
from src.api.error import (
    ClientError,
    handle_client_error,
    handle_database_error,
    handle_validation_error,
    status_for,
)


@pytest.fixture
def request_stub():
    request = MagicMock()
    request.url.path = "/cards/1/spend"
    request.method = "POST"
    return request


@pytest.mark.parametrize(
    "code,expected",
    [
        ("INVALID_AMOUNT", 400),
        ("INVALID_FUEL_PRICE", 400),
        ("INVALID_CARD", 400),
        ("INVALID_DATE_RANGE", 400),
        ("INSUFFICIENT_BALANCE", 400),
        ("CARD_NOT_FOUND", 404),
        ("FUEL_PRICE_NOT_FOUND", 404),
        ("SPEND_FAILED", 500),
        ("SOMETHING_NEW", 500),
    ],
)
def test_status_for(code, expected):
    assert status_for(Error(code=code, message="x")) == expected


@pytest.mark.asyncio
class TestHandlers:
    async def test_client_error_returns_message(self, request_stub):
        exc = ClientError(Error(code="INSUFFICIENT_BALANCE", message="Insufficient balance"), status_code=400)

        response = await handle_client_error(request_stub, exc)

        assert response.status_code == 400
        assert json.loads(response.body) == {"error": "Insufficient balance"}

    async def test_storage_failure_hides_reason(self, request_stub):
        exc = ClientError(
            Error(code="SPEND_FAILED", message="Database error", reason="password authentication failed"),
            status_code=500,
        )

        response = await handle_client_error(request_stub, exc)

        assert response.status_code == 500
        assert json.loads(response.body) == {"error": "Database error"}

    async def test_invalid_path_card_id(self, request_stub):
        exc = RequestValidationError(
            [{"type": "int_parsing", "loc": ("path", "card_id"), "msg": "Input should be a valid integer"}]
        )

        response = await handle_validation_error(request_stub, exc)

        assert response.status_code == 400
        assert json.loads(response.body) == {"error": "Invalid card ID"}

    async def test_invalid_body_field(self, request_stub):
        exc = RequestValidationError(
            [{"type": "decimal_parsing", "loc": ("body", "amount"), "msg": "Input should be a valid decimal"}]
        )

        response = await handle_validation_error(request_stub, exc)

        assert response.status_code == 400
        assert json.loads(response.body) == {"error": "body.amount: Input should be a valid decimal"}

    async def test_database_error(self, request_stub):
        exc = OperationalError("SELECT 1", {}, Exception("database is locked"))

        response = await handle_database_error(request_stub, exc)

        assert response.status_code == 500
        assert json.loads(response.body) == {"error": "Database error"}
