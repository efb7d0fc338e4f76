"""MODP group descriptors: (p, q, g) plus modular arithmetic over them.

The six RFC 3526 groups are built once at import time from the constant tables
and shared; they are immutable, so no locking is needed. Ring operations
(add/sub/mul) work over all of [0, p); pow/element are the group operations
used for key agreement.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from cryptography.hazmat.primitives.asymmetric import dh

from modpgroups.common.errors import InvalidGroupError, UnknownGroupError
from modpgroups.common.utils import int_fingerprint
from modpgroups.crypto.rfc3526 import RFC3526_GENERATOR, RFC3526_TABLES


@dataclass(frozen=True, eq=False)
class MODPGroup:
	"""Prime modulus ``p``, subgroup order ``q`` and generator ``g``."""

	p: int
	q: int
	g: int
	name: str = field(default="custom")

	def __post_init__(self) -> None:
		for attr in ("p", "q", "g"):
			v = getattr(self, attr)
			if not isinstance(v, int) or isinstance(v, bool):
				raise InvalidGroupError(f"{attr} must be an int, got {type(v).__name__}")
		if self.p < 5:
			raise InvalidGroupError("modulus p must be at least 5")
		if not (0 < self.q < self.p):
			raise InvalidGroupError("order q must satisfy 0 < q < p")
		if not (1 < self.g < self.p):
			raise InvalidGroupError("generator g must satisfy 1 < g < p")

	# identity is the triple; the name is only a label
	def _key(self) -> tuple[int, int, int]:
		return (self.p, self.q, self.g)

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, MODPGroup):
			return NotImplemented
		return self is other or self._key() == other._key()

	def __hash__(self) -> int:
		return hash(self._key())

	def __repr__(self) -> str:
		return f"{type(self).__name__}(name={self.name!r}, bits={self.bits}, g={self.g:#x}, fp={self.fingerprint})"

	@property
	def bits(self) -> int:
		return self.p.bit_length()

	@property
	def order_bits(self) -> int:
		return self.q.bit_length()

	@property
	def fingerprint(self) -> str:
		return int_fingerprint(self.p, self.q, self.g)

	def add(self, a: int, b: int) -> int:
		"""Compute a + b mod p."""
		return (a + b) % self.p

	def sub(self, a: int, b: int) -> int:
		"""Compute a - b mod p; never negative for operands in [0, p)."""
		return (a + self.p - b) % self.p

	def mul(self, a: int, b: int) -> int:
		"""Compute a * b mod p."""
		return (a * b) % self.p

	def pow(self, a: int, e: int) -> int:
		"""Compute a^e mod p for e >= 0."""
		if e < 0:
			raise ValueError("exponent must be non-negative")
		return pow(a, e, self.p)

	def element(self, exponent: int) -> int:
		"""Compute g^exponent mod p."""
		return self.pow(self.g, exponent)

	def parameter_numbers(self) -> dh.DHParameterNumbers:
		"""Export as cryptography DH parameter numbers (p, g, q)."""
		return dh.DHParameterNumbers(self.p, self.g, self.q)


def _build_standard(group_id: int) -> MODPGroup:
	bits, p_hex, q_hex = RFC3526_TABLES[group_id]
	return MODPGroup(
		p=int(p_hex, 16),
		q=int(q_hex, 16),
		g=RFC3526_GENERATOR,
		name=f"modp{bits}",
	)


MODP_1536 = _build_standard(5)
MODP_2048 = _build_standard(14)
MODP_3072 = _build_standard(15)
MODP_4096 = _build_standard(16)
MODP_6144 = _build_standard(17)
MODP_8192 = _build_standard(18)

# RFC 3526 group id -> group
STANDARD_GROUPS: dict[int, MODPGroup] = {
	5: MODP_1536,
	14: MODP_2048,
	15: MODP_3072,
	16: MODP_4096,
	17: MODP_6144,
	18: MODP_8192,
}

_BY_BITS: dict[int, MODPGroup] = {grp.bits: grp for grp in STANDARD_GROUPS.values()}


def get_group(key: Union[int, str]) -> MODPGroup:
	"""Look up a standard group by RFC 3526 id (5, 14..18), size in bits or name."""
	if isinstance(key, str):
		k = key.strip().lower()
		for grp in STANDARD_GROUPS.values():
			if grp.name == k:
				return grp
		if not k.isdigit():
			raise UnknownGroupError(f"unknown MODP group: {key!r}")
		key = int(k)
	if key in STANDARD_GROUPS:
		return STANDARD_GROUPS[key]
	if key in _BY_BITS:
		return _BY_BITS[key]
	raise UnknownGroupError(f"unknown MODP group: {key!r}")


__all__ = [
	"MODPGroup",
	"MODP_1536",
	"MODP_2048",
	"MODP_3072",
	"MODP_4096",
	"MODP_6144",
	"MODP_8192",
	"STANDARD_GROUPS",
	"get_group",
]
