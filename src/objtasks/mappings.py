"""Helpers over plain key -> value mappings.

None of these functions mutate their inputs.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from objtasks.model.frozen import FrozenMapping

__all__ = [
    "shallow_copy",
    "merge_objects",
    "remove_properties",
    "compare_objects",
    "compare_objects_by_key",
    "is_empty_object",
    "make_immutable",
]


def shallow_copy(obj: Mapping[str, Any]) -> dict[str, Any]:
    """Return a new dict with the same top-level pairs; nested values are shared."""
    return dict(obj)


def merge_objects(objects: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
    """Sum the values of each key across *objects*, in first-seen key order.

    Values are combined with ``+``; mixing types that do not support it
    raises whatever ``+`` raises.
    """
    merged: dict[str, Any] = {}
    for obj in objects:
        for key, value in obj.items():
            if key in merged:
                merged[key] = merged[key] + value
            else:
                merged[key] = value
    return merged


def remove_properties(obj: Mapping[str, Any], keys: Iterable[str]) -> dict[str, Any]:
    """Return a copy of *obj* without *keys*; keys not present are ignored."""
    result = shallow_copy(obj)
    for key in keys:
        result.pop(key, None)
    return result


def compare_objects(obj1: Mapping[str, Any], obj2: Mapping[str, Any]) -> bool:
    """Compare two mappings value-by-value in their own key order.

    The i-th value of *obj1* is compared with the i-th value of *obj2*, so
    ``{"a": 1, "b": 2}`` and ``{"x": 1, "y": 2}`` compare equal. Use
    :func:`compare_objects_by_key` for a key-wise comparison.
    """
    if len(obj1) != len(obj2):
        return False
    return all(v1 == v2 for v1, v2 in zip(obj1.values(), obj2.values()))


def compare_objects_by_key(obj1: Mapping[str, Any], obj2: Mapping[str, Any]) -> bool:
    """Return True when both mappings hold the same keys bound to equal values."""
    if obj1.keys() != obj2.keys():
        return False
    return all(obj1[key] == obj2[key] for key in obj1)


def is_empty_object(obj: Mapping[str, Any]) -> bool:
    return len(obj) == 0


def make_immutable(obj: Mapping[str, Any]) -> FrozenMapping:
    """Return a read-only view of *obj*'s current contents."""
    if isinstance(obj, FrozenMapping):
        return obj
    return FrozenMapping(obj)
