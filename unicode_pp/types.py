from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Union


class StaleCharacterError(RuntimeError):
    ...


class Bounds(NamedTuple):
    """
    Half-open byte range `[start, stop)` of one grapheme cluster.
    `start == stop` is the empty sentinel.
    """

    start: int
    stop: int

    @property
    def width(self) -> int:
        return self.stop - self.start


EMPTY = Bounds(0, 0)


@dataclass(frozen=True)
class FromStart:
    index: int


@dataclass(frozen=True)
class FromEnd:
    """
    `FromEnd(1)` is the last element.
    """

    index: int


Index = Union[int, FromStart, FromEnd]


def resolve(index: Index) -> Union[FromStart, FromEnd]:
    if isinstance(index, (FromStart, FromEnd)):
        return index
    elif isinstance(index, int):
        return FromStart(index)
    else:
        raise TypeError(index)
