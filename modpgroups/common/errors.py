"""Exception types raised by the group, element and search layers."""

from __future__ import annotations


class ModpError(Exception):
	"""Base class for every error raised by modpgroups."""


class ElementParseError(ModpError, ValueError):
	"""Text could not be parsed as a decimal or hex numeral."""


class InvalidSearchParameters(ModpError, ValueError):
	"""Requested generator bit length is outside [2, bitlength(q)]."""


class InvalidPrimeError(ModpError, ValueError):
	"""A caller-supplied modulus is not a safe prime."""


class SearchExhaustedError(ModpError, RuntimeError):
	"""Generator search hit its iteration cap without a qualifying candidate."""

	def __init__(self, trials: int, num_bits: int):
		super().__init__(f"no generator of <= {num_bits} bits found after {trials} trials")
		self.trials = trials
		self.num_bits = num_bits


class RandomSourceError(ModpError, ValueError):
	"""The random source returned a value outside [0, 2**num_bits)."""


class GroupMismatchError(ModpError, TypeError):
	"""Elements of different groups were combined or compared."""


class UnknownGroupError(ModpError, KeyError):
	"""No standard group matches the requested id or size."""

	def __str__(self) -> str:
		return str(self.args[0]) if self.args else "unknown group"


class InvalidGroupError(ModpError, ValueError):
	"""A (p, q, g) triple violates one of the group invariants."""


__all__ = [
	"ModpError",
	"ElementParseError",
	"InvalidSearchParameters",
	"InvalidPrimeError",
	"SearchExhaustedError",
	"RandomSourceError",
	"GroupMismatchError",
	"UnknownGroupError",
	"InvalidGroupError",
]
