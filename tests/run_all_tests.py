from __future__ import annotations

import sys
import subprocess
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
LOGS = ROOT / "tests" / "logs"


def run(cmd: list[str], log_path: Path) -> int:
    with open(log_path, "w", encoding="utf-8") as log:
        proc = subprocess.Popen(cmd, stdout=log, stderr=subprocess.STDOUT, cwd=ROOT)
        return proc.wait()


def main() -> int:
    tests = [
        "test_groups.py",
        "test_element.py",
        "test_search.py",
        "test_factory.py",
        "test_key_exchange.py",
        "test_cli.py",
    ]
    LOGS.mkdir(parents=True, exist_ok=True)
    rc_total = 0
    for t in tests:
        print(f"\n[RUNNING] {t}")
        rc = run([sys.executable, str(ROOT / "tests" / t)], LOGS / (Path(t).stem + ".log"))
        print(f"[RESULT] {t}: rc={rc}")
        rc_total = rc_total or rc
    print("\n[INFO] All tests completed.")
    return rc_total


if __name__ == "__main__":
    raise SystemExit(main())
