from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from modpgroups.common.errors import (
    InvalidGroupError,
    InvalidPrimeError,
    InvalidSearchParameters,
    SearchExhaustedError,
)
from modpgroups.crypto.factory import DerivedGroup, PrimeGroup, SubGroup, is_safe_prime, verify_group
from modpgroups.crypto.group import MODP_1536, MODP_2048, MODPGroup

SAFE_PRIME = 1623299  # q = 811649


def test_is_safe_prime():
    assert is_safe_prime(23)
    assert is_safe_prime(SAFE_PRIME)
    assert is_safe_prime(MODP_1536.p)
    assert not is_safe_prime(13)   # (13 - 1) / 2 = 6
    assert not is_safe_prime(97)   # 48
    assert not is_safe_prime(15)
    assert not is_safe_prime(2)
    assert not is_safe_prime(0)


@pytest.mark.parametrize("cls", [SubGroup, PrimeGroup])
def test_from_standard_group(cls):
    grp = cls.from_group(MODP_1536, 128)
    assert isinstance(grp, cls)
    assert isinstance(grp, MODPGroup)
    assert (grp.p, grp.q) == (MODP_1536.p, MODP_1536.q)
    assert grp.g != MODP_1536.g
    assert grp.g.bit_length() <= 128
    assert pow(grp.g, grp.q, grp.p) == 1
    assert grp != MODP_1536
    verify_group(grp)


def test_from_group_is_shared():
    assert SubGroup.from_group.__func__ is PrimeGroup.from_group.__func__
    grp = PrimeGroup.from_group(MODPGroup(p=23, q=11, g=2), 4, randbits=lambda k: 3)
    assert isinstance(grp, PrimeGroup) and isinstance(grp, DerivedGroup)
    assert not isinstance(grp, SubGroup)
    assert grp.g == 3


def test_from_standard_group_with_scripted_source():
    # 2 is the parent's generator, 5 is a non-residue mod 23
    draws = iter([2, 5, 13])
    grp = SubGroup.from_group(MODPGroup(p=23, q=11, g=2), 4, randbits=lambda k: next(draws))
    assert grp.g == 13


def test_from_standard_group_bounds():
    with pytest.raises(InvalidSearchParameters):
        SubGroup.from_group(MODP_2048, 1)
    with pytest.raises(InvalidSearchParameters):
        PrimeGroup.from_group(MODP_2048, MODP_2048.q.bit_length() + 1)


def test_from_safe_prime():
    grp = PrimeGroup.from_safe_prime(SAFE_PRIME, 15)
    assert grp.p == SAFE_PRIME
    assert grp.q == 811649
    assert 1 < grp.g < 2**15
    assert pow(grp.g, grp.q, grp.p) == 1
    verify_group(grp)


def test_from_safe_prime_may_return_two():
    grp = PrimeGroup.from_safe_prime(23, 4, randbits=lambda k: 2)
    assert grp.g == 2


@pytest.mark.parametrize("p", [13, 97, 15, 4, 1, 0, -23])
def test_from_safe_prime_rejects_non_safe_primes(p):
    with pytest.raises(InvalidPrimeError):
        PrimeGroup.from_safe_prime(p, 2)


def test_invalid_prime_is_distinct_from_parse_errors():
    with pytest.raises(InvalidPrimeError):
        PrimeGroup.from_safe_prime("23", 2)


def test_from_safe_prime_bounds():
    with pytest.raises(InvalidSearchParameters):
        PrimeGroup.from_safe_prime(SAFE_PRIME, 21)
    with pytest.raises(InvalidSearchParameters):
        PrimeGroup.from_safe_prime(SAFE_PRIME, 1)


def test_smallest_safe_prime_has_no_two_bit_generator():
    # q = 2: below 4 only 1 has order dividing q
    with pytest.raises(InvalidSearchParameters):
        PrimeGroup.from_safe_prime(5, 2)


def test_from_safe_prime_exhaustion():
    with pytest.raises(SearchExhaustedError):
        PrimeGroup.from_safe_prime(23, 4, max_trials=4, randbits=lambda k: 5)


def test_verify_group_standard():
    verify_group(MODP_1536)
    verify_group(MODP_2048, check_primality=False)


@pytest.mark.parametrize("p,q,g,check", [
    (23, 10, 2, False),       # q != (p - 1) / 2
    (23, 11, 5, False),       # 5^11 = -1 mod 23
    (25, 12, 2, False),       # 2^12 mod 25 = 21
    (9, 4, 8, True),          # 8^4 = 1 mod 9, 4 and 9 not prime
])
def test_verify_group_rejects(p, q, g, check):
    with pytest.raises(InvalidGroupError):
        verify_group(MODPGroup(p=p, q=q, g=g), check_primality=check)


def main() -> int:
    return pytest.main([__file__, "-q"])


if __name__ == "__main__":
    raise SystemExit(main())
