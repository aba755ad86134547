from typing import Literal, Union

Buffer = Union[bytes, bytearray, memoryview]

_Encoding = Literal["UTF-8", "UTF-16-LE", "UTF-32-LE"]


def encode(text: str, encoding: _Encoding = "UTF-8") -> bytes:
    return text.encode(encoding, errors="surrogateescape")


def decode(btext: Buffer, encoding: _Encoding = "UTF-8") -> str:
    return str(btext, encoding, errors="surrogateescape")
