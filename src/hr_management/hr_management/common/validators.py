from __future__ import annotations

import re
from typing import Any

from ..core.exceptions import ValidationError

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def leading_int(value: Any) -> int:
    """Integer prefix of ``value`` (``"12"`` -> 12, ``"7b"`` -> 7), or 0 when there is none."""
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    m = _LEADING_INT.match(str(value))
    return int(m.group(1)) if m else 0


def as_number(value: Any) -> float:
    """Numeric value of a loosely typed field; missing or unparsable values count as 0."""
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, (int, float)):
        return value
    try:
        return float(str(value).strip())
    except ValueError:
        return 0


def id_key(value: Any) -> str:
    """String form used to compare ids (``1``, ``1.0`` and ``"1"`` share the key ``"1"``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def same_id(left: Any, right: Any) -> bool:
    """Ids are compared through their string forms."""
    if left is None or right is None:
        return False
    return id_key(left) == id_key(right)
