"""JSON bridge: compact serialization and typed deserialization."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from typing import Any, TypeVar

from objtasks.config import DEFAULT_CONFIG, ObjtasksConfig

__all__ = ["to_json", "from_json"]

T = TypeVar("T")

_PLAIN_TYPES: tuple[type, ...] = (dict, list, str, int, float, bool, type(None))


def _default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, (tuple, set, frozenset)):
        return list(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any, config: ObjtasksConfig | None = None) -> str:
    """Serialize *value* to compact JSON, keeping key insertion order."""
    cfg = config or DEFAULT_CONFIG
    return json.dumps(
        value,
        separators=(",", ":"),
        ensure_ascii=cfg.json_ensure_ascii,
        default=_default,
    )


def from_json(target: type[T] | None, text: str) -> T:
    """Parse *text* and build a value of type *target*.

    - classes with a ``from_dict`` classmethod receive the parsed value
    - other dataclasses are built from a JSON object through their init
      fields; unknown keys are ignored, missing required keys raise ``TypeError``
    - plain JSON types are checked with ``isinstance``
    - ``None`` returns the parsed value unchanged

    Malformed JSON raises ``json.JSONDecodeError``.
    """
    data = json.loads(text)
    if target is None:
        return data
    from_dict = getattr(target, "from_dict", None)
    if callable(from_dict):
        return from_dict(data)
    if dataclasses.is_dataclass(target):
        if not isinstance(data, dict):
            raise TypeError(
                f"Expected a JSON object for {target.__name__}, got {type(data).__name__}"
            )
        names = {f.name for f in dataclasses.fields(target) if f.init}
        return target(**{k: v for k, v in data.items() if k in names})
    if target in _PLAIN_TYPES:
        # bool is an int subclass; keep them apart.
        if isinstance(data, target) and not (target is int and isinstance(data, bool)):
            return data
        if target is float and isinstance(data, int) and not isinstance(data, bool):
            return float(data)  # type: ignore[return-value]
        raise TypeError(f"Expected {target.__name__}, got {type(data).__name__}")
    return target(data)  # type: ignore[call-arg]
