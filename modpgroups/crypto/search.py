"""Rejection-sampling search for a generator of the order-q subgroup mod p.

For a safe prime p = 2q + 1 the order-q subgroup is the set of quadratic
residues, which has index 2 in Z_p^*. A uniform candidate therefore qualifies
with probability about 1/2 and the expected number of trials is about 2. The
loop still stops after ``max_trials`` and raises SearchExhaustedError, which
only happens with a broken or non-uniform random source.
"""

from __future__ import annotations

import logging
import secrets
from typing import Callable, Optional

from modpgroups.common.config import get_search_config
from modpgroups.common.errors import InvalidSearchParameters, RandomSourceError, SearchExhaustedError
from modpgroups.common.utils import now_ms

log = logging.getLogger("modpgroups.search")

RandBits = Callable[[int], int]

# below this size every candidate is checked once before sampling
_EXHAUSTIVE_BITS = 8


def check_search_bounds(q: int, num_bits: int) -> None:
	if not isinstance(num_bits, int) or isinstance(num_bits, bool):
		raise InvalidSearchParameters(f"num_bits must be an int, got {type(num_bits).__name__}")
	if num_bits < 2:
		raise InvalidSearchParameters(f"num_bits must be at least 2, got {num_bits}")
	if num_bits > q.bit_length():
		raise InvalidSearchParameters(
			f"num_bits must not exceed the order's bit length ({q.bit_length()}), got {num_bits}"
		)


def check_candidates_exist(p: int, q: int, num_bits: int, exclude: Optional[int] = None) -> None:
	"""Fail fast when no value in [2, 2**num_bits) can ever qualify.

	Only tiny ranges can be empty: with q = (p - 1) / 2 and num_bits >= 4,
	4 and 9 are distinct squares below p, so both qualify.
	"""
	if num_bits > _EXHAUSTIVE_BITS:
		return
	for a in range(2, 1 << num_bits):
		if a != exclude and pow(a, q, p) == 1:
			return
	raise InvalidSearchParameters(
		f"no candidate below 2**{num_bits} has order dividing q (excluding {exclude})"
	)


def find_generator(
	p: int,
	q: int,
	num_bits: int,
	*,
	exclude: Optional[int] = None,
	max_trials: Optional[int] = None,
	randbits: Optional[RandBits] = None,
) -> int:
	"""Return g < 2**num_bits with g^q mod p == 1.

	Candidates equal to ``exclude`` (typically the group's default generator)
	and the trivial residues 0 and 1 are rejected. ``randbits`` defaults to
	secrets.randbits and may be replaced by any callable returning a
	non-negative int below 2**k.
	"""
	check_search_bounds(q, num_bits)
	check_candidates_exist(p, q, num_bits, exclude)
	if max_trials is None:
		max_trials = get_search_config().max_trials
	if max_trials < 1:
		raise InvalidSearchParameters(f"max_trials must be positive, got {max_trials}")
	draw = randbits or secrets.randbits

	started = now_ms()
	for trial in range(1, max_trials + 1):
		a = draw(num_bits)
		if a < 0 or a.bit_length() > num_bits:
			raise RandomSourceError(f"random source returned {a}, outside [0, 2**{num_bits})")
		if a <= 1 or a == exclude:
			continue
		if pow(a, q, p) == 1:
			log.debug(f"found {num_bits}-bit generator after {trial} trial(s) in {now_ms() - started} ms")
			return a

	log.warning(f"generator search exhausted after {max_trials} trials (num_bits={num_bits})")
	raise SearchExhaustedError(max_trials, num_bits)


__all__ = [
	"RandBits",
	"check_search_bounds",
	"check_candidates_exist",
	"find_generator",
]
