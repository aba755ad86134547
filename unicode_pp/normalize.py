from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional
from unicodedata import normalize

from .lib import Buffer, decode, encode


def nfd(buf: Buffer) -> str:
    return normalize("NFD", decode(buf))


def equivalent(lhs: Buffer, rhs: Buffer) -> bool:
    """
    Canonical equivalence, bytes are only decomposed when they differ.
    """

    return bytes(lhs) == bytes(rhs) or nfd(lhs) == nfd(rhs)


def _operand(other: Any) -> Optional[Buffer]:
    if isinstance(other, CanonicalEq):
        return other._raw()
    elif isinstance(other, str):
        return encode(other)
    elif isinstance(other, (bytes, bytearray, memoryview)):
        return other
    else:
        return None


class CanonicalEq(ABC):
    """
    Equality by canonical equivalence against other `CanonicalEq`,
    `str` and raw UTF-8 buffers, from either side of `==`.
    """

    __slots__ = ()

    @abstractmethod
    def _raw(self) -> Buffer:
        ...

    def __eq__(self, other: Any) -> bool:
        if (rhs := _operand(other)) is None:
            return NotImplemented
        else:
            return equivalent(self._raw(), rhs)

    __hash__ = None  # type: ignore
