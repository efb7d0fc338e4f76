from __future__ import annotations

import secrets
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from modpgroups.crypto.element import Element
from modpgroups.crypto.factory import PrimeGroup, SubGroup
from modpgroups.crypto.group import MODP_1536, MODP_2048, STANDARD_GROUPS


@pytest.mark.parametrize("group_id", sorted(STANDARD_GROUPS))
def test_key_exchange_small_exponents(group_id):
    grp = STANDARD_GROUPS[group_id]
    a, b = 2, 3
    A = Element.from_exponent(grp, a)
    B = Element.from_exponent(grp, b)
    assert B.pow(a) == A.pow(b)
    assert B.pow(a) == Element.from_exponent(grp, a * b)


@pytest.mark.parametrize("group_id", sorted(STANDARD_GROUPS))
def test_key_exchange_random_exponents(group_id):
    grp = STANDARD_GROUPS[group_id]
    a = secrets.randbits(256)
    b = secrets.randbits(256)
    A = Element.from_exponent(grp, a)
    B = Element.from_exponent(grp, b)
    assert B.pow(a) == A.pow(b)
    assert A.pow(b) == Element.from_exponent(grp, (a * b) % grp.q)


def test_concrete_1536_scenario():
    p = MODP_1536.p
    A = Element.from_str(MODP_1536, "2")
    B = Element.from_str(MODP_1536, "3")
    assert A.value == pow(2, 2, p) == 4
    assert B.value == pow(2, 3, p) == 8
    s1 = B.pow(2)
    s2 = A.pow(3)
    assert s1 == s2
    assert s1.value == pow(2, 6, p) == 64


def test_key_exchange_over_derived_subgroup():
    sub = SubGroup.from_group(MODP_1536, 128)
    a = secrets.randbelow(sub.q)
    b = secrets.randbelow(sub.q)
    A = Element.from_exponent(sub, a)
    B = Element.from_exponent(sub, b)
    assert B.pow(a) == A.pow(b)


def test_key_exchange_over_custom_safe_prime():
    grp = PrimeGroup.from_safe_prime(1623299, 15)
    for _ in range(10):
        a = secrets.randbelow(grp.q)
        b = secrets.randbelow(grp.q)
        assert Element.from_exponent(grp, a).pow(b) == Element.from_exponent(grp, b).pow(a)


def test_matches_cryptography_dh_exchange():
    params = MODP_2048.parameter_numbers().parameters()
    alice = params.generate_private_key()
    bob = params.generate_private_key()

    xa = alice.private_numbers().x
    yb = bob.public_key().public_numbers().y
    assert Element.from_exponent(MODP_2048, xa).value == alice.public_key().public_numbers().y

    theirs = int.from_bytes(alice.exchange(bob.public_key()), "big")
    ours = Element.from_int(MODP_2048, yb).pow(xa)
    assert ours.value == theirs


def main() -> int:
    return pytest.main([__file__, "-q"])


if __name__ == "__main__":
    raise SystemExit(main())
