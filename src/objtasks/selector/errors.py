"""Selector builder error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objtasks.selector.model import FragmentKind


class SelectorBuilderError(ValueError):
    """Raised when a fragment cannot be appended to a selector builder."""

    def __init__(self, message: str, kind: FragmentKind | None = None):
        self.kind = kind
        super().__init__(message)


class CardinalityError(SelectorBuilderError):
    """Raised when element, id or pseudo-element is appended a second time."""

    def __init__(self, kind: FragmentKind | None = None):
        super().__init__(
            "Element, id and pseudo-element should not occur more then one time "
            "inside the selector",
            kind,
        )


class OrderError(SelectorBuilderError):
    """Raised when a fragment is appended after a later-ranked fragment."""

    def __init__(self, kind: FragmentKind | None = None):
        super().__init__(
            "Selector parts should be arranged in the following order: element, "
            "id, class, attribute, pseudo-class, pseudo-element",
            kind,
        )
