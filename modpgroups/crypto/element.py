"""Group elements: a residue in [0, p) tagged with the MODPGroup it belongs to.

Elements are immutable; every operation returns a new Element. Binary
operations and comparisons check that both operands carry the same group and
raise GroupMismatchError otherwise.

Equality is a plain integer comparison and is not constant-time.
"""

from __future__ import annotations

from modpgroups.common.errors import GroupMismatchError
from modpgroups.common.utils import int_to_hex, parse_numeral
from modpgroups.crypto.group import MODPGroup


class Element:
	__slots__ = ("_group", "_value")

	def __init__(self, group: MODPGroup, value: int):
		if not isinstance(group, MODPGroup):
			raise TypeError(f"group must be a MODPGroup, got {type(group).__name__}")
		if not isinstance(value, int) or isinstance(value, bool):
			raise TypeError(f"value must be an int, got {type(value).__name__}")
		if not (0 <= value < group.p):
			raise ValueError("value must lie in [0, p)")
		object.__setattr__(self, "_group", group)
		object.__setattr__(self, "_value", value)

	def __setattr__(self, name, value):
		raise AttributeError("Element is immutable")

	# ---------- Constructors ----------

	@classmethod
	def from_exponent(cls, group: MODPGroup, exponent: int) -> "Element":
		"""g^exponent mod p."""
		return cls(group, group.element(exponent))

	@classmethod
	def from_str(cls, group: MODPGroup, text: str) -> "Element":
		"""Parse a decimal or 0x-hex exponent and map it through g^e mod p.

		Raises ElementParseError on malformed text.
		"""
		return cls.from_exponent(group, parse_numeral(text))

	@classmethod
	def from_int(cls, group: MODPGroup, value: int) -> "Element":
		"""Wrap a raw residue (e.g. a peer's public value), reduced mod p."""
		return cls(group, value % group.p)

	# ---------- Accessors ----------

	@property
	def group(self) -> MODPGroup:
		return self._group

	@property
	def value(self) -> int:
		return self._value

	def __int__(self) -> int:
		return self._value

	def __index__(self) -> int:
		return self._value

	def __str__(self) -> str:
		return str(self._value)

	def __repr__(self) -> str:
		return f"Element({self._group.name}, {self.hex()})"

	def hex(self) -> str:
		return "0x" + int_to_hex(self._value)

	# ---------- Arithmetic ----------

	def _check(self, other: object) -> "Element":
		if not isinstance(other, Element):
			raise TypeError(f"expected Element, got {type(other).__name__}")
		if other._group is not self._group and other._group != self._group:
			raise GroupMismatchError(
				f"elements belong to different groups ({self._group.fingerprint} vs {other._group.fingerprint})"
			)
		return other

	def pow(self, exponent: int) -> "Element":
		"""self^exponent mod p under the same group."""
		return Element(self._group, self._group.pow(self._value, exponent))

	def __pow__(self, exponent: int) -> "Element":
		if not isinstance(exponent, int):
			return NotImplemented
		return self.pow(exponent)

	def __add__(self, other: "Element") -> "Element":
		other = self._check(other)
		return Element(self._group, self._group.add(self._value, other._value))

	def __sub__(self, other: "Element") -> "Element":
		other = self._check(other)
		return Element(self._group, self._group.sub(self._value, other._value))

	def __mul__(self, other: "Element") -> "Element":
		other = self._check(other)
		return Element(self._group, self._group.mul(self._value, other._value))

	# ---------- Comparison ----------

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Element):
			return NotImplemented
		other = self._check(other)
		return self._value == other._value

	def __hash__(self) -> int:
		return hash((self._group, self._value))


__all__ = ["Element"]
