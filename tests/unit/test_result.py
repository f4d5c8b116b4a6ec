"""Unit tests for the Result value type"""

import pytest

from libs.result import Error, Return


def test_ok_result():
    result = Return.ok(42)

    assert result.is_ok()
    assert not result.is_err()
    assert result.value == 42
    with pytest.raises(ValueError):
        _ = result.error


def test_err_result():
    error = Error(code="CARD_NOT_FOUND", message="Card not found", reason="card_id=7")
    result = Return.err(error)

    assert result.is_err()
    assert result.error is error
    with pytest.raises(ValueError, match="CARD_NOT_FOUND"):
        _ = result.value


def test_error_is_immutable():
    error = Error(code="INVALID_AMOUNT", message="Valid amount is required")

    assert error.reason is None
    with pytest.raises(AttributeError):
        error.code = "OTHER"
