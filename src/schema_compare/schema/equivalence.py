"""Structural equality over records and nested attribute values."""

from collections.abc import Mapping
from typing import Any

from schema_compare.schema.normalizer import normalize


def _is_object(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def _members(value: Mapping | list | tuple) -> dict[Any, Any]:
    if isinstance(value, Mapping):
        return dict(value)
    return dict(enumerate(value))


def equal(a: Any, b: Any) -> bool:
    """Check two values for structural equality.

    Scalars are compared through :func:`normalize`. Objects (mappings and
    lists) are compared member by member over the union of their keys; a key
    missing on one side is looked up as ``None`` and therefore matches an
    explicit null or empty value on the other.

    Inputs are assumed acyclic.

    Args:
        a: First value
        b: Second value

    Returns:
        True if the values are equal after normalization
    """
    if a is b or (type(a) is type(b) and not _is_object(a) and a == b):
        return True

    if not (_is_object(a) and _is_object(b)):
        return normalize(a) == normalize(b)

    left = _members(a)
    right = _members(b)
    all_keys = list(left) + [key for key in right if key not in left]

    return all(equal(left.get(key), right.get(key)) for key in all_keys)
