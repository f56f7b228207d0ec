"""Decomposition mapping provider.

Supplies full canonical and compatibility decompositions and canonical
combining classes for the decomposition transform. The default provider
reads the interpreter's unicodedata module.

unicodedata.decomposition() returns a single level of the mapping, so the
provider re-decomposes each component until nothing further decomposes.
Hangul syllables have no table entry and are decomposed algorithmically.
"""

from __future__ import annotations

import unicodedata
from enum import Enum
from functools import lru_cache
from typing import Protocol

# Hangul syllables for modern Korean
_SBASE = 0xAC00
_SCOUNT = 11172

# Hangul leading consonants, vowels and trailing consonants
_LBASE = 0x1100
_VBASE = 0x1161
_TBASE = 0x11A7

# Number of vowels and trailing consonants (including "no trailing consonant")
_VCOUNT = 21
_TCOUNT = 28
_NCOUNT = _VCOUNT * _TCOUNT


class DecompositionKind(Enum):
    """Which decomposition mappings to apply."""

    CANONICAL = "canonical"
    COMPATIBLE = "compatible"


class DecompositionProvider(Protocol):
    """Source of decomposition mappings and combining classes."""

    def decompose(self, ch: str, kind: DecompositionKind) -> tuple[str, ...]:
        """Return the full decomposition of ch (ch itself if none)."""
        ...

    def combining_class(self, ch: str) -> int:
        """Return the canonical combining class of ch (0..254)."""
        ...


def _decompose_hangul(cp: int) -> tuple[str, ...]:
    index = cp - _SBASE
    lead = chr(_LBASE + index // _NCOUNT)
    vowel = chr(_VBASE + (index % _NCOUNT) // _TCOUNT)
    trail = index % _TCOUNT
    if trail:
        return (lead, vowel, chr(_TBASE + trail))
    return (lead, vowel)


class UnicodeDataProvider:
    """Decomposition provider backed by the stdlib unicodedata module.

    Full decompositions are memoized per (code point, kind). The provider
    holds no other state and is safe to share between threads.
    """

    @property
    def unicode_version(self) -> str:
        """Unicode version of the underlying database."""
        return unicodedata.unidata_version

    def decompose(self, ch: str, kind: DecompositionKind) -> tuple[str, ...]:
        """Return the full decomposition of a code point.

        Args:
            ch: A single code point.
            kind: Canonical or compatibility decomposition.

        Returns:
            The fully expanded decomposition, or (ch,) if ch does not
            decompose under this kind.
        """
        return _full_decomposition(ch, kind is DecompositionKind.COMPATIBLE)

    def combining_class(self, ch: str) -> int:
        """Return the canonical combining class of a code point."""
        return unicodedata.combining(ch)


@lru_cache(maxsize=8192)
def _full_decomposition(ch: str, compatible: bool) -> tuple[str, ...]:
    cp = ord(ch)
    if _SBASE <= cp < _SBASE + _SCOUNT:
        return _decompose_hangul(cp)

    mapping = unicodedata.decomposition(ch)
    if not mapping:
        return (ch,)

    parts = mapping.split()
    if parts[0].startswith("<"):
        # Tagged mappings such as <compat> or <font> are compatibility only.
        if not compatible:
            return (ch,)
        parts = parts[1:]

    result: list[str] = []
    for part in parts:
        result.extend(_full_decomposition(chr(int(part, 16)), compatible))
    return tuple(result)


_default_provider = UnicodeDataProvider()


def default_provider() -> UnicodeDataProvider:
    """Return the shared unicodedata-backed provider."""
    return _default_provider
