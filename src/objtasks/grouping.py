"""Grouping and sorting over sequences of records."""

from __future__ import annotations

import locale
import unicodedata
from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

from objtasks.config import DEFAULT_CONFIG, ObjtasksConfig
from objtasks.model.city import CityRecord

__all__ = ["group", "sort_cities", "collation_key"]

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


def group(
    items: Iterable[T],
    key_selector: Callable[[T], K],
    value_selector: Callable[[T], V],
) -> dict[K, list[V]]:
    """Group *items* into a multimap keyed by ``key_selector``.

    Keys keep first-seen order and each key's values keep input order.
    """
    groups: dict[K, list[V]] = {}
    for item in items:
        groups.setdefault(key_selector(item), []).append(value_selector(item))
    return groups


def collation_key(text: str, config: ObjtasksConfig | None = None) -> Any:
    """Return a sort key that orders *text* the way a reader expects.

    ``"unicode"`` collation folds case and strips accents, falling back to
    the raw string (lowercase first) to break ties; ``"locale"`` defers to
    the process locale.
    """
    cfg = config or DEFAULT_CONFIG
    if cfg.collation == "locale":
        return locale.strxfrm(text)
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    # swapcase puts lowercase ahead of uppercase on otherwise equal text.
    return (base.casefold(), text.casefold(), text.swapcase())


def _field(record: CityRecord | Mapping[str, str], name: str) -> str:
    if isinstance(record, Mapping):
        return record[name]
    return getattr(record, name)


def sort_cities(
    records: Iterable[CityRecord | Mapping[str, str]],
    config: ObjtasksConfig | None = None,
) -> list[Any]:
    """Sort records by country, then by city; equal pairs keep input order."""
    return sorted(
        records,
        key=lambda r: (
            collation_key(_field(r, "country"), config),
            collation_key(_field(r, "city"), config),
        ),
    )
