"""Offline verifier for MODP group parameters.

Usage:
  python tools/verify_group.py --group 14
  python tools/verify_group.py --p 0x... --q 0x... --g 5

Checks 1 < g < p, q = (p - 1) / 2, g^q mod p = 1 and (unless --no-primality)
that p and q are prime. Exits 0 on success, 1 on failure.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path


def project_root() -> Path:
    # tools/ -> project root
    return Path(__file__).resolve().parent.parent


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Verify MODP group invariants")
    parser.add_argument("--group", help="Standard group: RFC 3526 id, modulus bits or name")
    parser.add_argument("--p", help="Prime modulus (decimal or 0x hex)")
    parser.add_argument("--q", help="Subgroup order; defaults to (p - 1) / 2")
    parser.add_argument("--g", help="Generator (decimal or 0x hex)")
    parser.add_argument("--no-primality", action="store_true", help="Skip the primality checks")
    args = parser.parse_args(argv)

    sys.path.insert(0, str(project_root()))

    from modpgroups.common.config import get_log_level
    from modpgroups.common.errors import ModpError
    from modpgroups.common.utils import parse_numeral
    from modpgroups.crypto.factory import verify_group
    from modpgroups.crypto.group import MODPGroup, get_group

    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.group is not None:
            group = get_group(args.group)
        elif args.p is not None and args.g is not None:
            p = parse_numeral(args.p)
            q = parse_numeral(args.q) if args.q is not None else (p - 1) // 2
            group = MODPGroup(p=p, q=q, g=parse_numeral(args.g))
        else:
            print("[ERROR] Pass --group, or --p and --g")
            return 1
    except ModpError as e:
        print(f"[ERROR] Could not build group: {e}")
        return 1

    try:
        verify_group(group, check_primality=not args.no_primality)
    except ModpError as e:
        print(f"[ERROR] {e}")
        return 1

    print("[OK] Group parameters verified successfully")
    print(f"  bits : {group.bits}")
    print(f"  g    : {group.g}")
    print(f"  fp   : {group.fingerprint}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
