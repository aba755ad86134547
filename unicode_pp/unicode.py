from __future__ import annotations

from collections import deque
from typing import Iterator, Union

from .character import Character
from .graphemes import (
    boundaries,
    boundaries_reversed,
    count,
    len_at,
    len_before,
    reverse,
)
from .lib import Buffer, decode, encode
from .logging import log
from .normalize import CanonicalEq
from .types import EMPTY, Bounds, FromEnd, Index, resolve

Text = Union[str, Buffer, CanonicalEq]


def _coerce(text: Text) -> bytes:
    if isinstance(text, str):
        return encode(text)
    elif isinstance(text, (bytes, bytearray, memoryview)):
        return bytes(text)
    elif isinstance(text, CanonicalEq):
        return bytes(text._raw())
    else:
        raise TypeError(text)


class Unicode(CanonicalEq):
    """
    An owned UTF-8 buffer, indexed by grapheme cluster.

    Lookups scan the buffer, there is no cluster index to keep in sync.
    Equality is canonical equivalence, so `Unicode("Caf\\u00e9")` equals
    `Unicode("Cafe\\u0301")`.

    Input is assumed to be well formed UTF-8 and is not validated.
    """

    __slots__ = ("_buffer", "_generation")

    def __init__(self, text: Text = b"") -> None:
        self._buffer = bytearray(_coerce(text))
        self._generation = 0

    def _raw(self) -> bytearray:
        return self._buffer

    def _invalidate(self) -> None:
        log.debug("invalidating characters of generation %d", self._generation)
        self._generation += 1

    def _cut(self, bounds: Bounds) -> Character:
        return Character(self, bounds, self._generation)

    def character(self, start: int, stop: int) -> Character:
        """
        Borrow `[start, stop)` as a `Character`.
        No check is made that the range lies on cluster boundaries.
        """

        if not 0 <= start <= stop <= len(self._buffer):
            raise ValueError((start, stop))
        else:
            return self._cut(Bounds(start, stop))

    def view(self) -> memoryview:
        return memoryview(self._buffer)

    @property
    def nbytes(self) -> int:
        return len(self._buffer)

    def count(self) -> int:
        return count(self._buffer)

    def __len__(self) -> int:
        return self.count()

    def __bool__(self) -> bool:
        return bool(self._buffer)

    def at(self, index: Index) -> Character:
        """
        Character at a grapheme position, raises `IndexError` when out of range.
        """

        idx = resolve(index)
        if isinstance(idx, FromEnd):
            if idx.index > 0:
                # only the trailing `index` clusters are kept
                window = deque(boundaries(self._buffer), maxlen=idx.index)
                if len(window) == idx.index:
                    return self._cut(window[0])
        elif idx.index >= 0:
            for i, bounds in enumerate(boundaries(self._buffer)):
                if i == idx.index:
                    return self._cut(bounds)
        raise IndexError(index)

    def __getitem__(self, index: int) -> Character:
        if not isinstance(index, int):
            raise TypeError(index)
        elif index < 0:
            return self.at(FromEnd(-index))
        else:
            return self.at(index)

    def at_byte(self, index: Index) -> Character:
        """
        Character starting at a byte offset, or for `FromEnd(i)`,
        the one whose last byte is `nbytes - i`.

        Never raises on an out of range offset or one that is not on a cluster
        boundary, the result is an empty `Character` instead.
        """

        idx = resolve(index)
        if isinstance(idx, FromEnd):
            stop = len(self._buffer) - idx.index + 1
            width = len_before(self._buffer, stop)
            bounds = Bounds(stop - width, stop) if width else EMPTY
        else:
            width = len_at(self._buffer, idx.index)
            bounds = Bounds(idx.index, idx.index + width) if width else EMPTY
        return self._cut(bounds)

    def last_character(self) -> Character:
        return self.at_byte(FromEnd(1))

    def __iter__(self) -> Iterator[Character]:
        generation = self._generation
        for bounds in boundaries(self._buffer):
            yield Character(self, bounds, generation)

    def __reversed__(self) -> Iterator[Character]:
        generation = self._generation
        for bounds in boundaries_reversed(self._buffer):
            yield Character(self, bounds, generation)

    def reverse(self) -> None:
        self._buffer[:] = reverse(self._buffer)
        self._invalidate()

    def reversed(self) -> Unicode:
        return Unicode(reverse(self._buffer))

    def truncate(self, nbytes: int) -> None:
        """
        Drop everything past the first `nbytes` bytes.

        Combined with `last_character` this trims the final grapheme:
        `s.truncate(s.nbytes - len(s.last_character()))`
        """

        del self._buffer[max(0, nbytes) :]
        self._invalidate()

    def append(self, text: Text) -> None:
        self._buffer += _coerce(text)
        self._invalidate()

    def __bytes__(self) -> bytes:
        return bytes(self._buffer)

    def __str__(self) -> str:
        return decode(self._buffer)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"
