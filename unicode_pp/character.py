from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from .lib import decode
from .normalize import CanonicalEq
from .types import Bounds, StaleCharacterError

if TYPE_CHECKING:
    from .unicode import Unicode


class Character(CanonicalEq):
    """
    A grapheme cluster borrowed from a `Unicode` without copying.

    Only valid until its owner is next mutated,
    after which any access to its bytes raises `StaleCharacterError`.
    """

    __slots__ = ("_owner", "_bounds", "_generation")

    def __init__(self, owner: Unicode, bounds: Bounds, generation: int) -> None:
        self._owner, self._bounds, self._generation = owner, bounds, generation

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    @property
    def stale(self) -> bool:
        return self._generation != self._owner._generation

    def _check(self) -> None:
        if self.stale:
            raise StaleCharacterError(self._bounds, self._generation)

    def _raw(self) -> memoryview:
        return self.view()

    def view(self) -> memoryview:
        """
        Hold on to this only briefly, the owner cannot be resized while it lives.
        """

        self._check()
        start, stop = self._bounds
        return self._owner.view()[start:stop]

    def __len__(self) -> int:
        return self._bounds.width

    def __bool__(self) -> bool:
        return self._bounds.width > 0

    def byte_at(self, i: int) -> int:
        self._check()
        if not 0 <= i < len(self):
            raise IndexError(i)
        else:
            return self._owner._buffer[self._bounds.start + i]

    def __getitem__(self, i: int) -> int:
        return self.byte_at(i)

    def __iter__(self) -> Iterator[int]:
        self._check()
        buf, (start, stop) = self._owner._buffer, self._bounds
        for i in range(start, stop):
            self._check()
            yield buf[i]

    def codepoints(self) -> Iterator[int]:
        for char in str(self):
            yield ord(char)

    def to_owned(self) -> bytes:
        self._check()
        start, stop = self._bounds
        return bytes(self._owner._buffer[start:stop])

    def __bytes__(self) -> bytes:
        return self.to_owned()

    def __str__(self) -> str:
        return decode(self.to_owned())

    def __repr__(self) -> str:
        name = type(self).__name__
        if self.stale:
            return f"<stale {name} {tuple(self._bounds)}>"
        else:
            return f"{name}({str(self)!r})"
