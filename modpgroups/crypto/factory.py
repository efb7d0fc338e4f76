"""Build prime-order groups at runtime.

- SubGroup.from_group / PrimeGroup.from_group keep the (p, q) of an existing
  group and pick a fresh generator that differs from the group's own.
- PrimeGroup.from_safe_prime starts from a caller-supplied safe prime p,
  derives q = (p - 1) / 2 and searches for a generator.

Primality checks use sympy.isprime.
"""

from __future__ import annotations

import logging
from typing import Optional

import sympy

from modpgroups.common.errors import InvalidGroupError, InvalidPrimeError
from modpgroups.crypto.group import MODPGroup
from modpgroups.crypto.search import RandBits, find_generator

log = logging.getLogger("modpgroups.factory")


def is_safe_prime(n: int) -> bool:
	"""True when n and (n - 1) / 2 are both prime."""
	if n < 5 or n % 2 == 0:
		return False
	return bool(sympy.isprime((n - 1) // 2)) and bool(sympy.isprime(n))


class DerivedGroup(MODPGroup):
	"""A group built at runtime by generator search."""

	@classmethod
	def from_group(
		cls,
		group: MODPGroup,
		num_bits: int,
		*,
		max_trials: Optional[int] = None,
		randbits: Optional[RandBits] = None,
	):
		g = find_generator(group.p, group.q, num_bits, exclude=group.g, max_trials=max_trials, randbits=randbits)
		derived = cls(p=group.p, q=group.q, g=g, name=f"{group.name}/g{num_bits}")
		log.info(f"derived {derived!r} from {group.name}")
		return derived


class SubGroup(DerivedGroup):
	"""Same modulus and order as a parent group, different generator."""


class PrimeGroup(DerivedGroup):
	"""Group of prime order q modulo a safe prime p = 2q + 1."""

	@classmethod
	def from_safe_prime(
		cls,
		p: int,
		num_bits: int,
		*,
		max_trials: Optional[int] = None,
		randbits: Optional[RandBits] = None,
	):
		if not isinstance(p, int) or isinstance(p, bool):
			raise InvalidPrimeError(f"modulus must be an int, got {type(p).__name__}")
		if not is_safe_prime(p):
			raise InvalidPrimeError(f"{p} is not a safe prime")
		q = (p - 1) // 2
		g = find_generator(p, q, num_bits, max_trials=max_trials, randbits=randbits)
		pg = cls(p=p, q=q, g=g, name=f"p{p.bit_length()}/g{num_bits}")
		log.info(f"built {pg!r} from caller-supplied safe prime")
		return pg


def verify_group(group: MODPGroup, *, check_primality: bool = True) -> None:
	"""Raise InvalidGroupError naming the first broken invariant."""
	p, q, g = group.p, group.q, group.g
	if not (1 < g < p):
		raise InvalidGroupError("generator must satisfy 1 < g < p")
	if q != (p - 1) // 2 or p % 2 == 0:
		raise InvalidGroupError("order must satisfy q = (p - 1) / 2")
	if pow(g, q, p) != 1:
		raise InvalidGroupError("generator does not satisfy g^q mod p = 1")
	if check_primality:
		if not sympy.isprime(q):
			raise InvalidGroupError("order q is not prime")
		if not sympy.isprime(p):
			raise InvalidGroupError("modulus p is not prime")


__all__ = [
	"DerivedGroup",
	"SubGroup",
	"PrimeGroup",
	"is_safe_prime",
	"verify_group",
]
