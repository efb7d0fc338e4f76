"""
Derive a prime-order group with a fresh generator.

Either start from a standard RFC 3526 group (--group 14, --group 2048 or
--group modp2048) or from your own safe prime (--prime, decimal or 0x hex).

Outputs p, q, g (hex) and the group fingerprint. With --demo, also runs a
Diffie-Hellman exchange over the new group and checks both sides agree.

Examples:
  python scripts/gen_group.py --group 5 --bits 128
  python scripts/gen_group.py --prime 1623299 --bits 15 --demo
"""

from __future__ import annotations

import argparse
import logging
import secrets
import sys
from pathlib import Path

# Ensure imports work when running as a script
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from modpgroups.common.config import get_log_level
from modpgroups.common.errors import ModpError
from modpgroups.common.utils import int_to_hex, parse_numeral
from modpgroups.crypto.element import Element
from modpgroups.crypto.factory import PrimeGroup, SubGroup
from modpgroups.crypto.group import MODPGroup, get_group


def build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(description="Generate a prime-order MODP group with a new generator")
	src = p.add_mutually_exclusive_group(required=True)
	src.add_argument("--group", help="Standard group: RFC 3526 id, modulus bits or name")
	src.add_argument("--prime", help="Safe prime modulus (decimal or 0x hex)")
	p.add_argument("--bits", type=int, required=True, help="Bit length bound for the new generator")
	p.add_argument("--max-trials", type=int, default=None, help="Override MODP_SEARCH_MAX_TRIALS")
	p.add_argument("--demo", action="store_true", help="Run a DH exchange over the new group")
	return p


def run_demo(group: MODPGroup) -> bool:
	a = secrets.randbelow(group.q - 1) + 1
	b = secrets.randbelow(group.q - 1) + 1
	A = Element.from_exponent(group, a)
	B = Element.from_exponent(group, b)
	s_alice = B.pow(a)
	s_bob = A.pow(b)
	print(f"[*] A = g^a mod p = {A.hex()}")
	print(f"[*] B = g^b mod p = {B.hex()}")
	print(f"[*] shared        = {s_alice.hex()}")
	return s_alice == s_bob


def main(argv: list[str] | None = None) -> int:
	args = build_parser().parse_args(argv)
	logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")

	try:
		if args.group is not None:
			base = get_group(args.group)
			print(f"[*] Searching {args.bits}-bit generator for {base.name} ...")
			group = SubGroup.from_group(base, args.bits, max_trials=args.max_trials)
		else:
			p = parse_numeral(args.prime)
			print(f"[*] Checking {p.bit_length()}-bit safe prime and searching {args.bits}-bit generator ...")
			group = PrimeGroup.from_safe_prime(p, args.bits, max_trials=args.max_trials)
	except ModpError as e:
		print(f"[ERROR] {e}")
		return 1

	print("\n--- Group ---")
	print(f"Name : {group.name}")
	print(f"p    : 0x{int_to_hex(group.p)}")
	print(f"q    : 0x{int_to_hex(group.q)}")
	print(f"g    : 0x{int_to_hex(group.g)}")
	print(f"FP   : {group.fingerprint}")
	print("-------------")

	if args.demo:
		if not run_demo(group):
			print("[ERROR] shared secrets differ")
			return 1
		print("[OK] Both sides derived the same shared secret")
	return 0


if __name__ == "__main__":
	sys.exit(main())
