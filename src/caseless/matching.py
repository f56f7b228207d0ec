"""Caseless matching algorithms.

Implements the default, canonical and compatibility caseless matching
algorithms of the Unicode Standard, section 3.13. Each algorithm is a
fixed chain of the streaming transforms, applied to both operands before
a code point by code point comparison:

    default         fold
    canonical       NFD -> fold -> NFD
    compatibility   NFD -> fold -> NFKD -> fold -> NFKD

Folding can denormalize text (U+0345 COMBINING GREEK YPOGEGRAMMENI and
the characters that decompose to it), so canonical matching normalizes
before and after the fold. Compatibility decomposition can produce new
letters that need folding ("㎒" -> "MHz"), hence the second fold.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum, IntEnum

from caseless.decomposition import DecompositionProvider
from caseless.fold_table import FoldTable
from caseless.transforms import default_case_fold, nfd, nfkd


class Algorithm(Enum):
    """Caseless matching algorithm."""

    DEFAULT = "default"
    CANONICAL = "canonical"
    COMPATIBILITY = "compatibility"


class Ordering(IntEnum):
    """Result of a three-way comparison."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def caseless_stream(
    chars: Iterable[str],
    algorithm: Algorithm = Algorithm.DEFAULT,
    *,
    table: FoldTable | None = None,
    provider: DecompositionProvider | None = None,
) -> Iterator[str]:
    """Chain the transforms for an algorithm over a code point stream.

    Args:
        chars: Code points to transform.
        algorithm: Matching algorithm whose pipeline to build.
        table: Fold table override.
        provider: Decomposition data override.

    Returns:
        Lazy iterator over the comparable form of chars.
    """
    if algorithm is Algorithm.DEFAULT:
        return default_case_fold(chars, table)
    if algorithm is Algorithm.CANONICAL:
        return nfd(default_case_fold(nfd(chars, provider), table), provider)
    if algorithm is Algorithm.COMPATIBILITY:
        stream = default_case_fold(nfd(chars, provider), table)
        stream = default_case_fold(nfkd(stream, provider), table)
        return nfkd(stream, provider)
    raise ValueError(f"Unknown algorithm: {algorithm!r}")


_END = object()


def iter_cmp(left: Iterable[str], right: Iterable[str]) -> Ordering:
    """Compare two code point streams lexicographically.

    The first differing pair decides by code point value. If one stream
    ends first it is the lesser one.
    """
    left_iter = iter(left)
    right_iter = iter(right)
    while True:
        a = next(left_iter, _END)
        b = next(right_iter, _END)
        if a is _END:
            return Ordering.EQUAL if b is _END else Ordering.LESS
        if b is _END:
            return Ordering.GREATER
        if a != b:
            return Ordering.LESS if ord(a) < ord(b) else Ordering.GREATER


def iter_eq(left: Iterable[str], right: Iterable[str]) -> bool:
    """Return True if both streams yield the same code points."""
    return iter_cmp(left, right) is Ordering.EQUAL


def iter_starts_with(text: Iterable[str], prefix: Iterable[str]) -> bool:
    """Return True if prefix is a prefix of text (or equal to it)."""
    text_iter = iter(text)
    for expected in prefix:
        actual = next(text_iter, _END)
        if actual is _END or actual != expected:
            return False
    return True


def caseless_compare(
    left: Iterable[str],
    right: Iterable[str],
    algorithm: Algorithm = Algorithm.DEFAULT,
    *,
    table: FoldTable | None = None,
    provider: DecompositionProvider | None = None,
) -> Ordering:
    """Three-way caseless comparison of two code point streams."""
    return iter_cmp(
        caseless_stream(left, algorithm, table=table, provider=provider),
        caseless_stream(right, algorithm, table=table, provider=provider),
    )


def caseless_match(
    left: Iterable[str],
    right: Iterable[str],
    algorithm: Algorithm = Algorithm.DEFAULT,
    *,
    table: FoldTable | None = None,
    provider: DecompositionProvider | None = None,
) -> bool:
    """Return True if two code point streams match ignoring case."""
    return iter_eq(
        caseless_stream(left, algorithm, table=table, provider=provider),
        caseless_stream(right, algorithm, table=table, provider=provider),
    )


def caseless_starts_with(
    text: Iterable[str],
    prefix: Iterable[str],
    algorithm: Algorithm = Algorithm.DEFAULT,
    *,
    table: FoldTable | None = None,
    provider: DecompositionProvider | None = None,
) -> bool:
    """Return True if text starts with prefix ignoring case."""
    return iter_starts_with(
        caseless_stream(text, algorithm, table=table, provider=provider),
        caseless_stream(prefix, algorithm, table=table, provider=provider),
    )


def caseless_key(
    text: str,
    algorithm: Algorithm = Algorithm.DEFAULT,
    *,
    table: FoldTable | None = None,
    provider: DecompositionProvider | None = None,
) -> str:
    """Return the comparable form of text, e.g. for use as a dict key.

    Two strings match under an algorithm exactly when their keys for that
    algorithm are equal.
    """
    return "".join(caseless_stream(text, algorithm, table=table, provider=provider))


# Per-algorithm stream functions


def default_caseless_match(left: Iterable[str], right: Iterable[str]) -> bool:
    return caseless_match(left, right, Algorithm.DEFAULT)


def canonical_caseless_match(left: Iterable[str], right: Iterable[str]) -> bool:
    return caseless_match(left, right, Algorithm.CANONICAL)


def compatibility_caseless_match(left: Iterable[str], right: Iterable[str]) -> bool:
    return caseless_match(left, right, Algorithm.COMPATIBILITY)


def default_caseless_compare(left: Iterable[str], right: Iterable[str]) -> Ordering:
    return caseless_compare(left, right, Algorithm.DEFAULT)


def canonical_caseless_compare(left: Iterable[str], right: Iterable[str]) -> Ordering:
    return caseless_compare(left, right, Algorithm.CANONICAL)


def compatibility_caseless_compare(
    left: Iterable[str], right: Iterable[str]
) -> Ordering:
    return caseless_compare(left, right, Algorithm.COMPATIBILITY)


def default_caseless_starts_with(text: Iterable[str], prefix: Iterable[str]) -> bool:
    return caseless_starts_with(text, prefix, Algorithm.DEFAULT)


def canonical_caseless_starts_with(
    text: Iterable[str], prefix: Iterable[str]
) -> bool:
    return caseless_starts_with(text, prefix, Algorithm.CANONICAL)


def compatibility_caseless_starts_with(
    text: Iterable[str], prefix: Iterable[str]
) -> bool:
    return caseless_starts_with(text, prefix, Algorithm.COMPATIBILITY)


# String conveniences


def default_case_fold_str(text: str) -> str:
    """Return the default case folding of text."""
    return caseless_key(text, Algorithm.DEFAULT)


def canonical_caseless_key(text: str) -> str:
    return caseless_key(text, Algorithm.CANONICAL)


def compatibility_caseless_key(text: str) -> str:
    return caseless_key(text, Algorithm.COMPATIBILITY)


def default_caseless_match_str(a: str, b: str) -> bool:
    return default_caseless_match(a, b)


def canonical_caseless_match_str(a: str, b: str) -> bool:
    return canonical_caseless_match(a, b)


def compatibility_caseless_match_str(a: str, b: str) -> bool:
    return compatibility_caseless_match(a, b)


def default_caseless_compare_str(a: str, b: str) -> Ordering:
    return default_caseless_compare(a, b)


def canonical_caseless_compare_str(a: str, b: str) -> Ordering:
    return canonical_caseless_compare(a, b)


def compatibility_caseless_compare_str(a: str, b: str) -> Ordering:
    return compatibility_caseless_compare(a, b)


def default_caseless_starts_with_str(text: str, prefix: str) -> bool:
    return default_caseless_starts_with(text, prefix)


def canonical_caseless_starts_with_str(text: str, prefix: str) -> bool:
    return canonical_caseless_starts_with(text, prefix)


def compatibility_caseless_starts_with_str(text: str, prefix: str) -> bool:
    return compatibility_caseless_starts_with(text, prefix)
