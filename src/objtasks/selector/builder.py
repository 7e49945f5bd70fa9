"""Chainable CSS selector builder with ordering and cardinality checks.

Usage::

    css_selector_builder.element("a").attr('href$=".png"').pseudo_class("focus")
    css_selector_builder.combine(
        css_selector_builder.element("div").id("main"),
        Combinator.CHILD,
        css_selector_builder.element("p"),
    )
"""

from __future__ import annotations

import logging
from typing import Protocol

from objtasks.selector.errors import CardinalityError, OrderError
from objtasks.selector.model import FragmentKind

__all__ = ["SelectorBuilder", "Stringifiable", "combine", "css_selector_builder"]

log = logging.getLogger("objtasks.selector")


class Stringifiable(Protocol):
    def stringify(self) -> str: ...


class SelectorBuilder:
    """Accumulates selector fragments in element → pseudo-element order."""

    def __init__(self, text: str = "") -> None:
        self._parts: list[str] = [text] if text else []
        self._counts: dict[FragmentKind, int] = {}
        self._highest_rank = -1

    # --- fragments ------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.PSEUDO_ELEMENT, value)

    def add(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        """Append a fragment of an arbitrary *kind*."""
        return self._append(kind, value)

    # --- output ---------------------------------------------------------------

    def stringify(self) -> str:
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"

    # --- internals ------------------------------------------------------------

    def _append(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        # Cardinality is checked before ordering.
        if kind.singleton and self._counts.get(kind, 0) >= 1:
            raise CardinalityError(kind)
        if kind.rank < self._highest_rank:
            raise OrderError(kind)
        self._parts.append(kind.render(value))
        self._counts[kind] = self._counts.get(kind, 0) + 1
        self._highest_rank = max(self._highest_rank, kind.rank)
        log.debug("Appended %s fragment %r", kind.label, value)
        return self


def combine(left: Stringifiable, combinator: str, right: Stringifiable) -> SelectorBuilder:
    """Join two selectors as ``"{left} {combinator} {right}"``.

    Operands are read through ``stringify()`` only; their fragment order is
    not re-checked and *combinator* is used verbatim.
    """
    text = f"{left.stringify()} {combinator} {right.stringify()}"
    log.debug("Combined selector %r", text)
    return SelectorBuilder(text)


class _SelectorBuilderFactory:
    """Entry point whose fragment methods each start a fresh builder."""

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    def combine(
        self, left: Stringifiable, combinator: str, right: Stringifiable
    ) -> SelectorBuilder:
        return combine(left, combinator, right)


css_selector_builder = _SelectorBuilderFactory()
