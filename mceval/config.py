from __future__ import annotations
import os
from typing import Optional


RECURSION_LIMIT_VAR = 'MCEVAL_RECURSION_LIMIT'


def int_from_env(var: str, default: Optional[int] = None) -> Optional[int]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def get_recursion_limit() -> Optional[int]:
    # None keeps the interpreter's own limit
    return int_from_env(RECURSION_LIMIT_VAR)
