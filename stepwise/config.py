from __future__ import annotations
import os


# Defaults
_DEFAULT_MAX_EXPANSIONS = 100
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_RECURSION_LIMIT = 20_000


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def get_max_expansions() -> int:
    # upper bound on expand_to_end iterations
    return int_from_env('STEPWISE_MAX_EXPANSIONS', _DEFAULT_MAX_EXPANSIONS)


def get_log_level() -> str:
    raw = os.environ.get('STEPWISE_LOG_LEVEL')
    return raw.strip().upper() if raw and raw.strip() else _DEFAULT_LOG_LEVEL


def get_recursion_limit() -> int:
    # Python frames available to evaluation; cond recursion uses a few per call
    return int_from_env('STEPWISE_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)
