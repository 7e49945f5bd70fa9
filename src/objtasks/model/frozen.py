"""Read-only mapping wrapper returned by ``make_immutable``."""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterator, Mapping
from typing import Any

log = logging.getLogger("objtasks.mappings")


class FrozenMapping(Mapping[str, Any]):
    """A mapping whose in-place writes are ignored.

    ``m[k] = v``, ``del m[k]`` and the dict mutators (``update``, ``pop``,
    ``popitem``, ``setdefault``, ``clear``, ``|=``) leave the contents
    unchanged. Use :meth:`set`, :meth:`remove` or ``|`` to derive a modified
    copy.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        object.__setattr__(self, "_data", dict(data or {}))

    # --- read access ----------------------------------------------------------

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FrozenMapping({self._data!r})"

    def __or__(self, other: Mapping[str, Any]) -> FrozenMapping:
        return FrozenMapping({**self._data, **other})

    # --- copying --------------------------------------------------------------

    def __copy__(self) -> FrozenMapping:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> FrozenMapping:
        return FrozenMapping(copy.deepcopy(self._data, memo))

    def __reduce__(self) -> tuple[type[FrozenMapping], tuple[dict[str, Any]]]:
        return (FrozenMapping, (self._data,))

    # --- ignored writes -------------------------------------------------------

    def __setitem__(self, key: str, value: Any) -> None:
        log.debug("Ignored write to frozen mapping: %r", key)

    def __delitem__(self, key: str) -> None:
        log.debug("Ignored delete on frozen mapping: %r", key)

    def __setattr__(self, name: str, value: Any) -> None:
        log.debug("Ignored attribute write on frozen mapping: %r", name)

    def update(self, *args: Any, **kwargs: Any) -> None:
        log.debug("Ignored update on frozen mapping")

    def __ior__(self, other: Mapping[str, Any]) -> FrozenMapping:
        log.debug("Ignored |= on frozen mapping")
        return self

    def pop(self, key: str, default: Any = None) -> Any:
        log.debug("Ignored pop on frozen mapping: %r", key)
        return self._data.get(key, default)

    def popitem(self) -> None:
        log.debug("Ignored popitem on frozen mapping")

    def setdefault(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def clear(self) -> None:
        log.debug("Ignored clear on frozen mapping")

    # --- derived copies -------------------------------------------------------

    def set(self, key: str, value: Any) -> FrozenMapping:
        """Return a new mapping with *key* bound to *value*."""
        return FrozenMapping({**self._data, key: value})

    def remove(self, key: str) -> FrozenMapping:
        """Return a new mapping without *key* (absent keys are ignored)."""
        return FrozenMapping({k: v for k, v in self._data.items() if k != key})

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)
