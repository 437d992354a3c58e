"""Tests for error types and codes."""

import pytest

from typeregistry.core.errors import (
    ConfigError,
    ErrorCode,
    InternalError,
    LifecycleError,
    TypeRegistryError,
)


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2000),
            (ErrorCode.CONFIG_INVALID_VALUE, 2000),
            (ErrorCode.REGISTRY_INDEX_UNINITIALIZED, 3000),
            (ErrorCode.REGISTRY_NOT_HARVESTED, 3000),
            (ErrorCode.INTERNAL_ERROR, 9000),
        ],
    )
    def test_given_error_code_when_checked_then_in_correct_range(
        self, code: ErrorCode, expected_range: int
    ) -> None:
        """Error codes fall within their designated numeric range."""
        # Given
        error_code = code

        # When
        value = error_code.value

        # Then
        assert expected_range <= value < expected_range + 1000


class TestTypeRegistryError:
    """Base error behavior tests."""

    def test_given_error_when_to_dict_then_serializes_all_fields(self) -> None:
        """Error serializes to dict with all required fields."""
        # Given
        error = TypeRegistryError(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message="Test message",
            retryable=True,
            details={"key": "value"},
        )

        # When
        result = error.to_dict()

        # Then
        assert result == {
            "code": 2001,
            "error": "CONFIG_PARSE_ERROR",
            "message": "Test message",
            "retryable": True,
            "details": {"key": "value"},
        }

    def test_given_error_when_str_then_human_readable(self) -> None:
        """Error string representation is human readable."""
        # Given
        error = TypeRegistryError(code=ErrorCode.INTERNAL_ERROR, message="Something broke")

        # When
        result = str(error)

        # Then
        assert result == "[9001] INTERNAL_ERROR: Something broke"

    def test_given_error_when_raised_then_catchable_as_exception(self) -> None:
        """Errors raise and catch like ordinary exceptions."""
        with pytest.raises(TypeRegistryError):
            raise LifecycleError.index_uninitialized()


class TestConfigError:
    """ConfigError factory method tests."""

    @pytest.mark.parametrize(
        ("factory", "kwargs", "expected_code"),
        [
            ("parse_error", {"path": "/foo", "reason": "bad yaml"}, ErrorCode.CONFIG_PARSE_ERROR),
            (
                "invalid_value",
                {"field": "registry.pseudo_package_prefix", "value": "pkg", "reason": "no slash"},
                ErrorCode.CONFIG_INVALID_VALUE,
            ),
            ("file_not_found", {"path": "/missing"}, ErrorCode.CONFIG_FILE_NOT_FOUND),
        ],
    )
    def test_given_factory_when_called_then_correct_code(
        self, factory: str, kwargs: dict[str, object], expected_code: ErrorCode
    ) -> None:
        """Factory methods produce errors with correct error codes."""
        # Given
        factory_method = getattr(ConfigError, factory)

        # When
        error = factory_method(**kwargs)

        # Then
        assert error.code == expected_code
        assert not error.retryable


class TestLifecycleError:
    """LifecycleError factory tests."""

    def test_given_uninitialized_index_when_created_then_fatal(self) -> None:
        """Missing index error carries its code and is not retryable."""
        # When
        error = LifecycleError.index_uninitialized()

        # Then
        assert error.code == ErrorCode.REGISTRY_INDEX_UNINITIALIZED
        assert error.retryable is False
        assert "index" in error.message

    def test_given_reference_when_not_harvested_then_reference_in_details(self) -> None:
        """Premature query error names the reference."""
        # When
        error = LifecycleError.not_harvested("models.User")

        # Then
        assert error.details == {"reference": "models.User"}
        assert "models.User" in str(error)


class TestInternalError:
    """InternalError tests."""

    def test_given_unexpected_error_when_created_then_includes_extras(self) -> None:
        """Unexpected error captures arbitrary extra details."""
        # Given
        extras = {"file_path": "a.go", "package_path": "app/a"}

        # When
        error = InternalError.unexpected("boom", **extras)

        # Then
        assert error.details == extras
        assert error.code == ErrorCode.INTERNAL_ERROR
        assert error.message == "Internal error: boom"
