"""Shared test fixtures for caseless."""

import logging
from pathlib import Path

import pytest

from caseless.decomposition import DecompositionKind
from caseless.fold_table import FoldEntry, FoldTable, get_fold_table

CASELESS_ENV_VARS = (
    "CASELESS_CONFIG_PATH",
    "CASELESS_CASE_FOLDING_FILE",
    "CASELESS_LOG_LEVEL",
    "CASELESS_LOG_FORMAT",
    "CASELESS_LOG_FILE",
)

SAMPLE_CASE_FOLDING = """\
# CaseFolding-15.1.0.txt
# Date: 2023-05-12, 21:53:10 GMT
#
# Unicode Character Database
0041; C; 0061; # LATIN CAPITAL LETTER A
0042; C; 0062; # LATIN CAPITAL LETTER B
0049; C; 0069; # LATIN CAPITAL LETTER I
0049; T; 0131; # LATIN CAPITAL LETTER I
00DF; F; 0073 0073; # LATIN SMALL LETTER SHARP S
1E9E; F; 0073 0073; # LATIN CAPITAL LETTER SHARP S
1E9E; S; 00DF; # LATIN CAPITAL LETTER SHARP S
FB03; F; 0066 0066 0069; # LATIN SMALL LIGATURE FFI
"""


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the user's environment and config file out of every test."""
    for var in CASELESS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("CASELESS_CONFIG_PATH", str(tmp_path / "no-config.toml"))


@pytest.fixture
def reset_root_logger():
    """Save and restore root logger state around a test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    for handler in root.handlers:
        if handler not in original_handlers:
            handler.close()
    root.handlers[:] = original_handlers
    root.setLevel(original_level)


@pytest.fixture(scope="session")
def fold_table() -> FoldTable:
    """Return the interpreter-derived process-wide fold table."""
    return get_fold_table()


@pytest.fixture
def small_table() -> FoldTable:
    """Return a tiny hand-written fold table."""
    return FoldTable(
        [
            FoldEntry("A", ("a",)),
            FoldEntry("B", ("b",)),
            FoldEntry("ß", ("s", "s")),
            FoldEntry("ﬃ", ("f", "f", "i")),
        ],
        (15, 1, 0),
    )


@pytest.fixture
def sample_case_folding() -> str:
    """Return the text of a small CaseFolding.txt."""
    return SAMPLE_CASE_FOLDING


@pytest.fixture
def case_folding_file(tmp_path: Path, sample_case_folding: str) -> Path:
    """Write a small CaseFolding.txt and return its path."""
    path = tmp_path / "CaseFolding.txt"
    path.write_text(sample_case_folding, encoding="utf-8")
    return path


class SyntheticProvider:
    """Decomposition provider with explicit classes and mappings.

    Characters not listed have class 0 and do not decompose.
    """

    def __init__(
        self,
        classes: dict[str, int],
        decompositions: dict[str, str] | None = None,
    ) -> None:
        self.classes = classes
        self.decompositions = decompositions or {}

    def decompose(self, ch: str, kind: DecompositionKind) -> tuple[str, ...]:
        return tuple(self.decompositions.get(ch, ch))

    def combining_class(self, ch: str) -> int:
        return self.classes.get(ch, 0)


@pytest.fixture
def synthetic_provider() -> SyntheticProvider:
    """Provider where a..d are marks of class 10, 20, 20 and 30.

    "b" and "c" share a class so their relative order must be preserved.
    "Q" decomposes to a starter followed by two marks out of order.
    """
    return SyntheticProvider(
        classes={"a": 10, "b": 20, "c": 20, "d": 30},
        decompositions={"Q": "Xda"},
    )
