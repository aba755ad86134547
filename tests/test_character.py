from __future__ import annotations

import pytest

from unicode_pp import Bounds, Character, StaleCharacterError, Unicode


def test_len() -> None:
    s = Unicode("abcdef")
    assert len(s.character(0, 1)) == 1
    assert len(s.character(0, 2)) == 2
    assert len(s.character(0, 3)) == 3
    assert len(s.character(2, 2)) == 0


def test_byte_at() -> None:
    s = Unicode("abcdef")
    c = s.character(1, 3)
    assert c.byte_at(0) == ord("b")
    assert c[1] == ord("c")
    with pytest.raises(IndexError):
        c.byte_at(2)
    with pytest.raises(IndexError):
        c.byte_at(-1)


def test_bytes() -> None:
    s = Unicode("abcdef")
    c = s.character(1, 3)
    assert list(c) == [ord("b"), ord("c")]
    assert list(c) == list(c)
    assert bytes(c) == b"bc"
    assert c.to_owned() == b"bc"


def test_codepoints() -> None:
    s = Unicode("\u0065\u0301")
    c = s.character(0, 3)
    assert list(c.codepoints()) == [0x65, 0x301]
    assert str(c) == "\u0065\u0301"


def test_empty_sentinel() -> None:
    s = Unicode("abc")
    c = s.character(0, 0)
    assert len(c) == 0
    assert not c
    assert c == ""
    assert c == b""
    assert c == s.character(1, 1)
    assert list(c) == []


def test_character_bounds_checked() -> None:
    s = Unicode("abc")
    with pytest.raises(ValueError):
        s.character(0, 4)
    with pytest.raises(ValueError):
        s.character(2, 1)
    with pytest.raises(ValueError):
        s.character(-1, 1)


def test_canonical_equality() -> None:
    a = Unicode("\u00e9abc")
    b = Unicode("\u0065\u0301abc")
    assert a.at(0) == b.at(0)
    assert a.at(1) == b.at(1)
    assert a.at(0) != a.at(1)
    assert b.at(0) == "\u00e9"
    assert b.at(0) == "\u0065\u0301"
    assert "\u0065\u0301" == b.at(0)
    assert b.at(0) == "\u00e9".encode()
    assert "\u00e9".encode() == b.at(0)
    assert b.at(0) == Unicode("\u00e9")
    assert Unicode("\u00e9") == b.at(0)
    assert b.at(0) != "bad"
    assert b.at(0) != ""
    assert b.at(0) != 1


def test_unhashable() -> None:
    c = Unicode("a").at(0)
    with pytest.raises(TypeError):
        hash(c)


def test_view_is_zero_copy() -> None:
    s = Unicode("Caf\u0065\u0301")
    c = s.at(3)
    with s.view() as whole, c.view() as part:
        assert part.obj is whole.obj
        assert part.tobytes() == "\u0065\u0301".encode()


def test_stale_after_mutation() -> None:
    s = Unicode("Caf\u0065\u0301")
    c = s.at(0)
    assert not c.stale
    s.reverse()
    assert c.stale
    assert len(c) == 1
    assert c.bounds == Bounds(0, 1)
    with pytest.raises(StaleCharacterError):
        bytes(c)
    with pytest.raises(StaleCharacterError):
        c.byte_at(0)
    with pytest.raises(StaleCharacterError):
        list(c)
    with pytest.raises(StaleCharacterError):
        c == "C"
    assert repr(c).startswith("<stale Character")


def test_stale_mid_iteration() -> None:
    s = Unicode("abc")
    c = s.character(0, 3)
    it = iter(c)
    assert next(it) == ord("a")
    s.append("d")
    with pytest.raises(StaleCharacterError):
        next(it)


def test_repr() -> None:
    c = Unicode("abc").at(1)
    assert isinstance(c, Character)
    assert repr(c) == "Character('b')"
