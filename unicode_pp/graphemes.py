"""
Extended grapheme cluster boundaries over UTF-8 byte buffers.

Segmentation itself is delegated to `regex` (`\\X`).
Every function re-scans the buffer it is given, nothing is cached.
"""

from __future__ import annotations

from typing import Iterator

from regex import compile as re_compile

from .lib import Buffer, decode, encode
from .types import Bounds

_CLUSTER = re_compile(r"\X")


def _clusters(buf: Buffer) -> Iterator[str]:
    for match in _CLUSTER.finditer(decode(buf)):
        yield match.group()


def boundaries(buf: Buffer) -> Iterator[Bounds]:
    offset = 0
    for cluster in _clusters(buf):
        # surrogateescape keeps this equal to the original byte count
        width = len(encode(cluster))
        yield Bounds(offset, offset + width)
        offset += width


def boundaries_reversed(buf: Buffer) -> Iterator[Bounds]:
    # cluster breaks are only well defined scanning forwards
    return reversed(tuple(boundaries(buf)))


def count(buf: Buffer) -> int:
    return sum(1 for _ in _clusters(buf))


def len_at(buf: Buffer, offset: int) -> int:
    """
    Byte length of the cluster starting at `offset`, 0 if none does.
    """

    if not 0 <= offset < len(buf):
        return 0

    for bounds in boundaries(buf):
        if bounds.start == offset:
            return bounds.width
        elif bounds.start > offset:
            break
    return 0


def len_before(buf: Buffer, stop: int) -> int:
    """
    Byte length of the cluster ending right before `stop`, 0 if none does.
    """

    if not 0 < stop <= len(buf):
        return 0

    for bounds in boundaries(buf):
        if bounds.stop == stop:
            return bounds.width
        elif bounds.stop > stop:
            break
    return 0


def reverse(buf: Buffer) -> bytes:
    data = bytes(buf)
    return b"".join(data[start:stop] for start, stop in boundaries_reversed(data))
