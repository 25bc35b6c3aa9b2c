"""Tests for scaffold error handling."""

from pathlib import Path

from create_component.errors import (
    ComponentExistsError,
    ComponentsDirError,
    InvalidComponentNameError,
    MissingComponentNameError,
    ScaffoldError,
    ScaffoldWriteError,
)


class TestScaffoldError:
    """Test ScaffoldError base class."""

    def test_basic_error_creation(self) -> None:
        """Test creating a basic ScaffoldError."""
        error = ScaffoldError(code="scaffold:test/error", message="Test error message")

        assert error.code == "scaffold:test/error"
        assert error.message == "Test error message"
        assert error.details == {}
        assert str(error) == "Test error message"

    def test_error_details_not_shared(self) -> None:
        """Details dict is not shared between instances."""
        error1 = ScaffoldError("code", "msg", {"key": "value1"})
        error2 = ScaffoldError("code", "msg", {"key": "value2"})

        assert error1.details["key"] == "value1"
        assert error2.details["key"] == "value2"

    def test_to_dict(self) -> None:
        """to_dict returns code, message and details."""
        error = ScaffoldError("scaffold:test/error", "boom", {"a": 1})

        assert error.to_dict() == {
            "code": "scaffold:test/error",
            "message": "boom",
            "details": {"a": 1},
        }


class TestNameErrors:
    """Tests for usage and validation errors."""

    def test_missing_and_invalid_messages_differ(self) -> None:
        """Missing and badly cased names report different messages and codes."""
        missing = MissingComponentNameError()
        invalid = InvalidComponentNameError("myButton")

        assert missing.message != invalid.message
        assert missing.code == "scaffold:usage/missing_name"
        assert invalid.code == "scaffold:validation/invalid_name"
        assert "PascalCase" in invalid.message
        assert invalid.details["name"] == "myButton"
        assert isinstance(missing, ScaffoldError)


class TestFilesystemErrors:
    """Tests for collision, directory and write errors."""

    def test_component_exists(self) -> None:
        """ComponentExistsError names the component."""
        error = ComponentExistsError("MyCard", Path("components/MyCard"))

        assert str(error) == 'Component "MyCard" already exists'
        assert error.details["path"] == "components/MyCard"
        assert error.code == "scaffold:collision/component_exists"

    def test_components_dir_error(self) -> None:
        """ComponentsDirError carries the path and reason."""
        error = ComponentsDirError(Path("src/components"), "Permission denied")

        assert "Permission denied" in error.message
        assert error.path == Path("src/components")
        assert error.details["reason"] == "Permission denied"

    def test_write_error_without_rollback_failure(self) -> None:
        """A clean rollback is recorded as not failed."""
        error = ScaffoldWriteError("MyCard", Path("components/MyCard"), "disk full")

        assert error.message == "Error creating component: disk full"
        assert error.rollback_error is None
        assert error.details["rollback_failed"] is False

    def test_write_error_with_rollback_failure(self) -> None:
        """A failed rollback is kept on the error."""
        rollback_error = OSError("busy")
        error = ScaffoldWriteError(
            "MyCard", Path("components/MyCard"), "disk full", rollback_error=rollback_error
        )

        assert error.rollback_error is rollback_error
        assert error.details["rollback_failed"] is True
