"""Tests for shared/exceptions.py."""

import pytest

from shared.exceptions import (
    SurveyWalletError,
    NotFoundError,
    ValidationError,
    InvalidIdentifierError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
)


class TestSurveyWalletError:
    def test_message(self):
        """SurveyWalletError should store message."""
        error = SurveyWalletError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_default_code(self):
        """Code should default to the class name."""
        assert SurveyWalletError("Test error").code == "SurveyWalletError"

    def test_custom_code_and_details(self):
        error = SurveyWalletError("Test error", code="CUSTOM", details={"key": "value"})
        assert error.code == "CUSTOM"
        assert error.details == {"key": "value"}

    def test_default_details(self):
        assert SurveyWalletError("Test error").details == {}

    def test_to_dict(self):
        """to_dict should produce the API error body."""
        error = SurveyWalletError("Test error", code="TEST_ERROR", details={"key": "value"})
        assert error.to_dict() == {
            "error": "TEST_ERROR",
            "message": "Test error",
            "details": {"key": "value"},
        }


class TestSubclasses:
    @pytest.mark.parametrize(
        "error_class",
        [
            NotFoundError,
            ValidationError,
            ConflictError,
            AuthenticationError,
            AuthorizationError,
        ],
    )
    def test_inherits_base(self, error_class):
        error = error_class("Oops")
        assert isinstance(error, SurveyWalletError)
        assert error.code == error_class.__name__

    def test_invalid_identifier_is_validation_error(self):
        error = InvalidIdentifierError("not-an-id")
        assert isinstance(error, ValidationError)
        assert error.code == "INVALID_IDENTIFIER"
        assert error.details == {"identifier": "not-an-id"}

    def test_external_service_error_records_service(self):
        error = ExternalServiceError("Provider down", service="stripe")
        assert error.service == "stripe"
        assert error.details["service"] == "stripe"
