"""Tests for cli/exit_codes.py module."""

from caseless.cli.exit_codes import ExitCode


class TestExitCode:
    """Tests for ExitCode enum."""

    def test_success_is_zero(self) -> None:
        """SUCCESS should be 0."""
        assert ExitCode.SUCCESS == 0

    def test_no_match_is_one(self) -> None:
        """A false predicate exits like grep without a match."""
        assert ExitCode.NO_MATCH == 1

    def test_usage_error_matches_click(self) -> None:
        """USAGE_ERROR should be click's usage exit code."""
        assert ExitCode.USAGE_ERROR == 2

    def test_exit_codes_are_unique(self) -> None:
        """All exit codes should have unique values."""
        values = [int(code) for code in ExitCode]
        assert len(values) == len(set(values))

    def test_exit_code_ranges(self) -> None:
        """Exit codes should be within expected ranges."""
        # Configuration and data errors (10-19)
        assert 10 <= ExitCode.CONFIG_ERROR <= 19
        assert 10 <= ExitCode.FOLD_TABLE_ERROR <= 19
