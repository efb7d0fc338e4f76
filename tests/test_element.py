from __future__ import annotations

import secrets
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from modpgroups.common.errors import ElementParseError, GroupMismatchError
from modpgroups.crypto.element import Element
from modpgroups.crypto.group import MODP_1536, MODP_2048, MODPGroup

SMALL = MODPGroup(p=23, q=11, g=2, name="toy23")


def test_from_exponent_matches_independent_modpow():
    for _ in range(10):
        x = secrets.randbits(512)
        e = Element.from_exponent(MODP_1536, x)
        assert e.value == pow(2, x, MODP_1536.p)
        assert int(e) == e.value
        assert e.group is MODP_1536


@pytest.mark.parametrize("text,exponent", [
    ("2", 2),
    ("  42 ", 42),
    ("0x2A", 42),
    ("0X2a", 42),
    ("1_000", 1000),
    ("0", 0),
    ("0xff_ff", 65535),
    ("\t7\n", 7),
])
def test_from_str(text, exponent):
    e = Element.from_str(MODP_1536, text)
    assert e == Element.from_exponent(MODP_1536, exponent)


@pytest.mark.parametrize("text", [
    "", "   ", "-5", "+5", "12a", "0x", "0xZZ", "abc", "1.5", "２",
    "1 2", "0x 2A", "0x_2A", "1__0", "_1", "1_", "0x2A_",
])
def test_from_str_rejects_malformed(text):
    with pytest.raises(ElementParseError):
        Element.from_str(MODP_1536, text)


def test_parse_error_is_a_value_error():
    with pytest.raises(ValueError):
        Element.from_str(SMALL, "twelve")


def test_from_int_reduces_into_range():
    assert Element.from_int(SMALL, 25).value == 2
    assert Element.from_int(SMALL, 23).value == 0
    assert Element.from_int(SMALL, 5).value == 5


def test_constructor_rejects_out_of_range():
    with pytest.raises(ValueError):
        Element(SMALL, 23)
    with pytest.raises(ValueError):
        Element(SMALL, -1)
    with pytest.raises(TypeError):
        Element(SMALL, "5")


def test_pow_returns_new_element():
    e = Element.from_int(SMALL, 5)
    f = e.pow(2)
    assert f.value == 2
    assert e.value == 5
    assert (e ** 2) == f
    assert f.group is SMALL


def test_operators_delegate_to_ring():
    u = Element.from_int(SMALL, 20)
    v = Element.from_int(SMALL, 5)
    assert (u + v).value == 2
    assert (v - u).value == 8
    assert (u * v).value == 8
    assert ((u + v) - v) == u


def test_elements_are_immutable():
    e = Element.from_int(SMALL, 3)
    with pytest.raises(AttributeError):
        e.value = 4
    with pytest.raises(AttributeError):
        e._value = 4


def test_mixing_groups_fails_fast():
    a = Element.from_exponent(MODP_1536, 3)
    b = Element.from_exponent(MODP_2048, 3)
    with pytest.raises(GroupMismatchError):
        a + b
    with pytest.raises(GroupMismatchError):
        a - b
    with pytest.raises(GroupMismatchError):
        a * b
    with pytest.raises(GroupMismatchError):
        a == b


def test_same_triple_is_the_same_group():
    other = MODPGroup(p=23, q=11, g=2, name="copy")
    a = Element.from_int(SMALL, 7)
    b = Element.from_int(other, 7)
    assert a == b
    assert hash(a) == hash(b)
    assert (a * b).value == 3


def test_equality_with_non_elements():
    e = Element.from_int(SMALL, 7)
    assert e != 7
    assert not (e == "7")


def test_string_forms():
    e = Element.from_int(SMALL, 22)
    assert str(e) == "22"
    assert e.hex() == "0x16"
    assert "toy23" in repr(e)


def main() -> int:
    return pytest.main([__file__, "-q"])


if __name__ == "__main__":
    raise SystemExit(main())
