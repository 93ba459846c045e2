"""Canonicalization of attribute values before comparison.

Schema exports written by different tool versions disagree on casing and on
whitespace around qualified names and calls (``"Orders . Total"`` vs
``"orders.total"``, ``"SUM ( x )"`` vs ``"sum(x)"``). Values are reduced to a
canonical text form so that such formatting noise never registers as a change.
"""

import json
import math
import re
from collections.abc import Mapping
from typing import Any

_AROUND_DOT = re.compile(r"\s*\.\s*")
_AROUND_OPEN_PAREN = re.compile(r"\s*\(\s*")
_AROUND_CLOSE_PAREN = re.compile(r"\s*\)\s*")
_WHITESPACE_RUN = re.compile(r"\s+")


def _normalize_text(value: str) -> str:
    text = value.strip().lower()
    text = _AROUND_DOT.sub(".", text)
    text = _AROUND_OPEN_PAREN.sub("(", text)
    text = _AROUND_CLOSE_PAREN.sub(")", text)
    return _WHITESPACE_RUN.sub(" ", text)


def _normalize_number(value: int | float) -> str:
    # Integral floats render like integers so 1.0 and 1 compare equal.
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value).lower()


def _canonical(value: Any) -> Any:
    # JSON object keys must all be strings for sort_keys to order them.
    if isinstance(value, Mapping):
        return {str(key): _canonical(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_canonical(item) for item in value]
    return value


def normalize(value: Any) -> str:
    """Reduce a value to its comparable text form.

    Args:
        value: Attribute value (string, number, boolean, None, or nested object)

    Returns:
        Canonical string. ``None`` maps to the empty string, so an absent
        attribute and an explicit null are indistinguishable.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return _normalize_text(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return _normalize_number(value)
    if isinstance(value, (Mapping, list, tuple)):
        # Sorted keys keep nested objects independent of insertion order.
        return json.dumps(_canonical(value), sort_keys=True, separators=(",", ":"), default=str)
    return str(value).lower()
