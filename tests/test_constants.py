"""Tests for constants module."""
from pkgmeta.constants import (
    DEFAULT_FILE_SOURCE,
    DEFAULT_FILE_TARGET,
    EXIT_ERROR,
    EXIT_ISSUES,
    EXIT_SUCCESS,
    NUSPEC_TEST_COMMENT,
    PLACEHOLDER_URL,
)


class TestExitCodes:
    """Tests for the exit code constants."""

    def test_exit_codes_are_distinct(self) -> None:
        """Test the exit codes are 0, 1 and 2."""
        assert (EXIT_SUCCESS, EXIT_ISSUES, EXIT_ERROR) == (0, 1, 2)


class TestDefaults:
    """Tests for default values."""

    def test_placeholder_url(self) -> None:
        """Test the placeholder url is clearly marked."""
        assert PLACEHOLDER_URL == "https://example.com/MUST_BE_CHANGED"

    def test_default_file_mapping(self) -> None:
        """Test the default file mapping points to the tools directory."""
        assert DEFAULT_FILE_SOURCE == "tools/**"
        assert DEFAULT_FILE_TARGET == "tools"

    def test_test_comment_contains_omega(self) -> None:
        """Test the UTF-8 test comment contains the greek omega."""
        assert "“Ω”" in NUSPEC_TEST_COMMENT
