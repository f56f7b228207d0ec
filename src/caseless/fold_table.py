"""Case folding table.

This module provides the sorted table of full (C + F status) case folding
mappings used by the case-fold transform. A table can be parsed from the
Unicode CaseFolding.txt data file, or derived from the running
interpreter's Unicode database so no data file needs to ship with the
package.

Only changing mappings are stored: a code point that is absent from the
table folds to itself.
"""

from __future__ import annotations

import logging
import re
import sys
import unicodedata
from bisect import bisect_left
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from caseless.exceptions import FoldTableError

logger = logging.getLogger(__name__)

# Case folding a single code point can give up to this many code points.
MAX_FOLDED_CODE_POINTS = 3

# Status C (common) and F (full) together make up the default full folding.
# S (simple) and T (Turkic) rows are not used.
_FULL_FOLDING_STATUSES = frozenset({"C", "F"})

_VERSION_PATTERN = re.compile(r"^#\s*CaseFolding-(\d+)\.(\d+)\.(\d+)\.txt\s*$")

UnicodeVersion = tuple[int, int, int]


@dataclass(frozen=True)
class FoldEntry:
    """One changing case folding mapping."""

    source: str
    replacement: tuple[str, ...]


class FoldTable:
    """Immutable case folding table, sorted by source code point.

    Entries are validated on construction; any violation raises
    FoldTableError so a corrupt table never reaches a transform.

    Lookups are binary searches over the source code points and return the
    table's own replacement tuples, so a fold never allocates.
    """

    __slots__ = ("_sources", "_replacements", "_unicode_version")

    def __init__(
        self, entries: Iterable[FoldEntry], unicode_version: UnicodeVersion
    ) -> None:
        """Build and validate a table.

        Args:
            entries: Fold entries, already sorted by source code point.
            unicode_version: (major, minor, patch) of the source data.

        Raises:
            FoldTableError: If the entries break a table invariant.
        """
        sources: list[int] = []
        replacements: list[tuple[str, ...]] = []
        previous = -1

        for entry in entries:
            source = ord(entry.source)
            replacement = tuple(entry.replacement)
            if source <= previous:
                if source == previous:
                    raise FoldTableError("duplicate source code point", source)
                raise FoldTableError("entries are not sorted", source)
            if not 1 <= len(replacement) <= MAX_FOLDED_CODE_POINTS:
                raise FoldTableError(
                    f"replacement must have 1 to {MAX_FOLDED_CODE_POINTS} "
                    f"code points, got {len(replacement)}",
                    source,
                )
            if any(len(ch) != 1 or ch == "\0" for ch in replacement):
                raise FoldTableError("replacement is not a code point sequence", source)
            if replacement == (entry.source,):
                raise FoldTableError("identity mapping", source)
            sources.append(source)
            replacements.append(replacement)
            previous = source

        self._sources = tuple(sources)
        self._replacements = tuple(replacements)
        self._unicode_version = unicode_version

    @property
    def unicode_version(self) -> UnicodeVersion:
        """Unicode version of the data this table was built from."""
        return self._unicode_version

    def lookup(self, ch: str) -> tuple[str, ...] | None:
        """Return the folded form of a code point.

        Args:
            ch: A single code point.

        Returns:
            The replacement sequence, or None if the code point folds to
            itself.
        """
        cp = ord(ch)
        index = bisect_left(self._sources, cp)
        if index < len(self._sources) and self._sources[index] == cp:
            return self._replacements[index]
        return None

    def __contains__(self, ch: object) -> bool:
        return isinstance(ch, str) and len(ch) == 1 and self.lookup(ch) is not None

    def __len__(self) -> int:
        return len(self._sources)

    def __iter__(self) -> Iterator[FoldEntry]:
        for source, replacement in zip(self._sources, self._replacements):
            yield FoldEntry(chr(source), replacement)

    def __repr__(self) -> str:
        version = ".".join(str(part) for part in self._unicode_version)
        return f"FoldTable(entries={len(self)}, unicode_version={version})"


def parse_case_folding(lines: Iterable[str]) -> FoldTable:
    """Parse the Unicode CaseFolding.txt format.

    Rows have the form ``<code>; <status>; <mapping>; # <name>``. Only
    C and F rows are kept. The Unicode version is read from the
    ``# CaseFolding-X.Y.Z.txt`` header line.

    Args:
        lines: Lines of a CaseFolding.txt file.

    Returns:
        Validated FoldTable.

    Raises:
        FoldTableError: If the header is missing or a row is malformed.
    """
    version: UnicodeVersion | None = None
    entries: list[FoldEntry] = []

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()
        if version is None:
            match = _VERSION_PATTERN.match(line)
            if match:
                version = (int(match[1]), int(match[2]), int(match[3]))
                continue

        data, _, _ = line.partition("#")
        data = data.strip()
        if not data:
            continue

        fields = [part.strip() for part in data.split(";")]
        if len(fields) < 3:
            raise FoldTableError(f"line {line_number}: expected 3 fields: {line!r}")
        code, status, mapping = fields[0], fields[1], fields[2]
        if status not in _FULL_FOLDING_STATUSES:
            continue

        try:
            source = int(code, 16)
            targets = [int(part, 16) for part in mapping.split()]
        except ValueError as e:
            raise FoldTableError(f"line {line_number}: {e}") from e
        if len(targets) > MAX_FOLDED_CODE_POINTS:
            raise FoldTableError(
                f"line {line_number}: {len(targets)} code points in mapping",
                source,
            )
        entries.append(FoldEntry(chr(source), tuple(chr(t) for t in targets)))

    if version is None:
        raise FoldTableError("missing '# CaseFolding-X.Y.Z.txt' header line")

    return FoldTable(entries, version)


def load_fold_table(path: Path) -> FoldTable:
    """Load a fold table from a CaseFolding.txt file.

    Args:
        path: Path to the data file.

    Returns:
        Validated FoldTable.

    Raises:
        FoldTableError: If the file cannot be read or is malformed.
    """
    try:
        with path.open(encoding="utf-8") as f:
            table = parse_case_folding(f)
    except OSError as e:
        raise FoldTableError(f"cannot read {path}: {e}") from e
    logger.info("Loaded case folding table from %s: %r", path, table)
    return table


def interpreter_unicode_version() -> UnicodeVersion:
    """Return the Unicode version of the interpreter's unicodedata module."""
    major, minor, patch = (int(part) for part in unicodedata.unidata_version.split("."))
    return (major, minor, patch)


# Unicode version of the interpreter data behind the default table.
UNICODE_VERSION: UnicodeVersion = interpreter_unicode_version()


def build_interpreter_table() -> FoldTable:
    """Derive the full case folding table from the interpreter.

    str.casefold() applies exactly the C + F mappings of CaseFolding.txt
    for the interpreter's Unicode version. Every code point is visited, so
    this takes on the order of a second; get_fold_table() does it once per
    process. Point CASELESS_CASE_FOLDING_FILE at a CaseFolding.txt to load
    the much smaller data file instead.

    Returns:
        Validated FoldTable.
    """
    entries = []
    for cp in range(sys.maxunicode + 1):
        ch = chr(cp)
        folded = ch.casefold()
        if folded != ch:
            entries.append(FoldEntry(ch, tuple(folded)))
    table = FoldTable(entries, interpreter_unicode_version())
    logger.debug("Built case folding table from interpreter data: %r", table)
    return table


@lru_cache(maxsize=1)
def get_fold_table() -> FoldTable:
    """Return the process-wide fold table.

    Built on first use. If the environment or config file names a case
    folding file the table is loaded from it, otherwise it is derived from
    the interpreter. Logging settings are not consulted here.

    Returns:
        Shared FoldTable.
    """
    from caseless.config import get_case_folding_file

    path = get_case_folding_file()
    if path is not None:
        return load_fold_table(path)
    return build_interpreter_table()


def clear_fold_table_cache() -> None:
    """Drop the cached process-wide table so the next use rebuilds it."""
    get_fold_table.cache_clear()


def unicode_version() -> UnicodeVersion:
    """Return the Unicode version of the process-wide fold table."""
    return get_fold_table().unicode_version
