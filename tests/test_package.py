"""Tests for caseless package."""


def test_package_imports():
    """Test that the package can be imported successfully."""
    import caseless

    assert caseless is not None


def test_package_version():
    """Test that the package has a version string."""
    from caseless import __version__

    assert __version__ == "0.1.0"


def test_string_helpers_exported():
    """The string conveniences are part of the top-level API."""
    from caseless import canonical_caseless_match_str, default_case_fold_str

    assert default_case_fold_str("ABC") == "abc"
    assert canonical_caseless_match_str("Å", "å")


def test_unicode_version_constant():
    """The diagnostics constant is a (major, minor, patch) tuple."""
    from caseless import UNICODE_VERSION

    assert len(UNICODE_VERSION) == 3
    assert all(isinstance(part, int) for part in UNICODE_VERSION)
