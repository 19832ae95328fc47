"""
Body key normalization from the client's camelCase to the billing API's snake_case.
"""

import re
from typing import Any, Iterable, Optional

_UPPER_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def camel_to_snake(key: str) -> str:
    """``successUrl`` -> ``success_url``; already snake_case keys are unchanged."""
    return _UPPER_BOUNDARY.sub("_", key).lower()


def to_snake_case(
    obj: Any,
    exclude_keys: Optional[Iterable[str]] = None,
    exclude_children_of: Optional[Iterable[str]] = None,
) -> Any:
    """
    Recursively rename mapping keys to snake_case.

    Args:
        obj: Value to normalize (mappings, sequences, scalars or None)
        exclude_keys: Keys that are renamed but whose value is copied as-is
        exclude_children_of: Keys that are renamed but whose descendants
            keep their original keys at every depth

    Returns:
        A new value; the input is never mutated
    """
    exclude_keys = frozenset(exclude_keys or ())
    exclude_children_of = frozenset(exclude_children_of or ())
    return _normalize(obj, exclude_keys, exclude_children_of)


def _normalize(obj: Any, exclude_keys: frozenset, exclude_children_of: frozenset) -> Any:
    if isinstance(obj, dict):
        normalized = {}
        for key, value in obj.items():
            if not isinstance(key, str):
                normalized[key] = _normalize(value, exclude_keys, exclude_children_of)
                continue

            new_key = camel_to_snake(key)
            if key in exclude_keys or key in exclude_children_of:
                normalized[new_key] = value
            else:
                normalized[new_key] = _normalize(
                    value, exclude_keys, exclude_children_of
                )
        return normalized

    if isinstance(obj, (list, tuple)):
        return [_normalize(item, exclude_keys, exclude_children_of) for item in obj]

    return obj
