"""
Runtime configuration for generator search and the command-line tools.

Environment variables (a local .env is loaded via python-dotenv):
- MODP_SEARCH_MAX_TRIALS  iteration cap for the rejection-sampling search
- MODP_LOG_LEVEL          logging level used by scripts/ and tools/

The cap only guards against a broken random source: with a uniform source each
trial succeeds with probability about 1/2, so the default is never reached in
practice.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()  # ok if .env is missing


DEFAULT_MAX_TRIALS = 1024
DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class SearchConfig:
	max_trials: int = DEFAULT_MAX_TRIALS


def get_search_config() -> SearchConfig:
	raw = os.getenv("MODP_SEARCH_MAX_TRIALS")
	if raw is None or raw.strip() == "":
		return SearchConfig()
	raw = raw.strip()
	if not (raw.isascii() and raw.isdigit()) or int(raw) == 0:
		raise RuntimeError(f"MODP_SEARCH_MAX_TRIALS must be a positive integer, got {raw!r}")
	return SearchConfig(max_trials=int(raw))


def get_log_level() -> str:
	level = os.getenv("MODP_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
	if level not in _LOG_LEVELS:
		raise RuntimeError(f"MODP_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {level!r}")
	return level


__all__ = [
	"DEFAULT_MAX_TRIALS",
	"SearchConfig",
	"get_search_config",
	"get_log_level",
]
