"""Small utilities: now_ms, numeral parsing, hex formatting, sha256 fingerprints."""

from __future__ import annotations

import hashlib
import re
import time

from modpgroups.common.errors import ElementParseError

_DEC_RE = re.compile(r"[0-9]+(?:_[0-9]+)*")
_HEX_RE = re.compile(r"0[xX][0-9a-fA-F]+(?:_[0-9a-fA-F]+)*")


def now_ms() -> int:
	return int(time.time() * 1000)


def parse_numeral(text: str) -> int:
	"""Parse a non-negative decimal numeral or a 0x-prefixed hex numeral.

	Whitespace around the numeral is ignored; single "_" separators are
	allowed between digits, as in Python literals.
	Raises ElementParseError for anything else, including signs.
	"""
	if not isinstance(text, str):
		raise ElementParseError(f"expected str, got {type(text).__name__}")
	s = text.strip()
	if _DEC_RE.fullmatch(s):
		return int(s, 10)
	if _HEX_RE.fullmatch(s):
		return int(s[2:], 16)
	raise ElementParseError(f"invalid numeral: {text!r}")


def int_to_hex(n: int) -> str:
	return format(n, "X")


def sha256_hex(data: bytes) -> str:
	return hashlib.sha256(data).hexdigest()


def int_fingerprint(*values: int) -> str:
	"""Short, stable tag for a tuple of integers (used in logs and repr)."""
	joined = "|".join(int_to_hex(v) for v in values)
	return sha256_hex(joined.encode("ascii"))[:16]


__all__ = [
	"now_ms",
	"parse_numeral",
	"int_to_hex",
	"sha256_hex",
	"int_fingerprint",
]
