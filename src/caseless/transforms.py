"""Streaming case folding and decomposition transforms.

Both transforms are iterators over code points (one-character strings).
They pull from their upstream one code point at a time and keep only a
small private buffer, so they can be chained without materializing the
intermediate text.
"""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Iterable, MutableSequence

from caseless.decomposition import (
    DecompositionKind,
    DecompositionProvider,
    default_provider,
)
from caseless.fold_table import MAX_FOLDED_CODE_POINTS, FoldTable, get_fold_table


class CaseFold:
    """Default (full) case folding of a code point stream.

    A code point that folds to several code points is emitted over several
    calls. The rest of its replacement is kept as a view into the fold
    table entry plus a cursor, so at most two code points are pending.

    Example:
        >>> "".join(CaseFold("Straße"))
        'strasse'
    """

    __slots__ = ("_chars", "_table", "_pending", "_pending_pos")

    def __init__(self, chars: Iterable[str], table: FoldTable | None = None) -> None:
        """Create a folding iterator.

        Args:
            chars: Upstream code points.
            table: Fold table to use. Defaults to the process-wide table.
        """
        self._chars = iter(chars)
        self._table = table if table is not None else get_fold_table()
        self._pending: tuple[str, ...] = ()
        self._pending_pos = 0

    def __iter__(self) -> CaseFold:
        return self

    def __next__(self) -> str:
        if self._pending_pos < len(self._pending):
            ch = self._pending[self._pending_pos]
            self._pending_pos += 1
            return ch

        ch = next(self._chars)
        folded = self._table.lookup(ch)
        if folded is None:
            return ch
        self._pending = folded
        self._pending_pos = 1
        return folded[0]

    def size_hint(self) -> tuple[int, int | None]:
        """Estimate the number of code points left.

        Returns:
            (lower, upper) bounds. The upper bound is None when the
            upstream length is unknown.
        """
        pending = len(self._pending) - self._pending_pos
        upstream = operator.length_hint(self._chars, -1)
        if upstream < 0:
            return (pending, None)
        return (upstream + pending, upstream * MAX_FOLDED_CODE_POINTS + pending)

    def __length_hint__(self) -> int:
        return self.size_hint()[0]


def reorder_marks(buffer: MutableSequence[tuple[str, int]]) -> None:
    """Stably sort runs of combining marks by combining class, in place.

    Items are (code point, combining class) pairs. Only two adjacent marks
    with non-zero classes are ever swapped, so class 0 items stay where
    they are and separate the runs. Marks of equal class keep their order.

    Args:
        buffer: Pairs to reorder.
    """
    swapped = True
    while swapped:
        swapped = False
        for i in range(1, len(buffer)):
            left = buffer[i - 1][1]
            right = buffer[i][1]
            if left > right and right != 0:
                buffer[i - 1], buffer[i] = buffer[i], buffer[i - 1]
                swapped = True


class Decompose:
    """Canonical (NFD) or compatibility (NFKD) decomposition of a stream.

    Decomposed code points are collected in a reorder buffer until a
    starter (combining class 0) shows where the current run of combining
    marks ends. The run is then put in canonical order and emitted. A run
    with no following starter is flushed when the upstream is exhausted.
    """

    __slots__ = ("_chars", "_kind", "_provider", "_buffer", "_sorted", "_exhausted")

    def __init__(
        self,
        chars: Iterable[str],
        kind: DecompositionKind = DecompositionKind.CANONICAL,
        provider: DecompositionProvider | None = None,
    ) -> None:
        """Create a decomposing iterator.

        Args:
            chars: Upstream code points.
            kind: Canonical or compatibility decomposition.
            provider: Decomposition data. Defaults to unicodedata.
        """
        self._chars = iter(chars)
        self._kind = kind
        self._provider = provider if provider is not None else default_provider()
        self._buffer: deque[tuple[str, int]] = deque()
        self._sorted = False
        self._exhausted = False

    @property
    def kind(self) -> DecompositionKind:
        return self._kind

    def __iter__(self) -> Decompose:
        return self

    def __next__(self) -> str:
        buffer = self._buffer
        while True:
            if buffer:
                ch, ccc = buffer[0]
                if ccc == 0:
                    # A starter ends the run; what follows must be sorted again.
                    buffer.popleft()
                    self._sorted = False
                    return ch
                if self._sorted:
                    buffer.popleft()
                    return ch
            elif self._exhausted:
                raise StopIteration

            if self._exhausted:
                reorder_marks(buffer)
                self._sorted = True
            else:
                self._fill()

    def _fill(self) -> None:
        """Pull code points until a starter completes the pending run."""
        provider = self._provider
        buffer = self._buffer
        self._sorted = False

        for ch in self._chars:
            for decomposed in provider.decompose(ch, self._kind):
                ccc = provider.combining_class(decomposed)
                if ccc == 0 and not self._sorted:
                    reorder_marks(buffer)
                    self._sorted = True
                buffer.append((decomposed, ccc))
            if self._sorted:
                return

        self._exhausted = True


def default_case_fold(chars: Iterable[str], table: FoldTable | None = None) -> CaseFold:
    """Return a lazy default case folding of chars."""
    return CaseFold(chars, table)


def nfd(
    chars: Iterable[str], provider: DecompositionProvider | None = None
) -> Decompose:
    """Return a lazy canonical decomposition (NFD) of chars."""
    return Decompose(chars, DecompositionKind.CANONICAL, provider)


def nfkd(
    chars: Iterable[str], provider: DecompositionProvider | None = None
) -> Decompose:
    """Return a lazy compatibility decomposition (NFKD) of chars."""
    return Decompose(chars, DecompositionKind.COMPATIBLE, provider)

