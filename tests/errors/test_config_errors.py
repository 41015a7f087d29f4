"""Tests for the error classification hierarchy."""

import pytest

from bscdev_app.errors import (
    ConfigurationError,
    ConfigValidationError,
    SecretsFileError,
    SignerProviderError,
    TaskError,
    UnknownNetworkError,
    UnknownTaskError,
)


class TestErrorHierarchy:
    """Test suite for error classification."""

    @pytest.mark.parametrize("error_class", [
        SecretsFileError, ConfigValidationError, UnknownNetworkError,
    ])
    def test_configuration_errors(self, error_class) -> None:
        error = error_class("boom")
        assert isinstance(error, ConfigurationError)
        assert not isinstance(error, TaskError)
        assert error.context == {}

    @pytest.mark.parametrize("error_class", [UnknownTaskError, SignerProviderError])
    def test_task_errors(self, error_class) -> None:
        error = error_class("boom", context={"attempt": 1})
        assert isinstance(error, TaskError)
        assert error.context == {"attempt": 1}

    def test_validation_error_carries_errors(self) -> None:
        error = ConfigValidationError("bad", errors=["a", "b"])
        assert error.errors == ["a", "b"]
        assert str(error) == "bad"

    def test_defaults(self) -> None:
        assert UnknownNetworkError("x").available == []
        assert SignerProviderError("x").network is None
        assert SecretsFileError("x", path="secrets.json").path == "secrets.json"
