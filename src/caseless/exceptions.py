"""Custom exceptions for caseless matching.

The transforms and comparators are total over well-formed input, so the
only errors in this package come from loading data and configuration.
"""


class CaselessError(Exception):
    """Base exception for caseless errors."""

    def __init__(self, message: str) -> None:
        """Initialize caseless error.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)


class FoldTableError(CaselessError):
    """Raised when case folding data violates the table invariants.

    This indicates a corrupt or mis-generated CaseFolding.txt (unsorted
    entries, duplicate sources, identity mappings, or replacements that
    are empty or longer than three code points). It is raised while the
    table is being built, never during a fold.
    """

    def __init__(self, message: str, source: int | None = None) -> None:
        """Initialize fold table error.

        Args:
            message: Human-readable error description.
            source: Offending source code point, if known.
        """
        self.source = source
        if source is not None:
            message = f"U+{source:04X}: {message}"
        super().__init__(message)


class ConfigError(CaselessError):
    """Raised when configuration values are invalid."""
