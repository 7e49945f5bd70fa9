"""Selector model: fragment kinds and combinator symbols."""

from __future__ import annotations

from enum import Enum


class FragmentKind(Enum):
    """One atomic piece of a CSS selector.

    Members are declared in the order they must appear inside a compound
    selector; ``rank`` is that position.
    """

    ELEMENT = ("element", "{}", True)
    ID = ("id", "#{}", True)
    CLASS = ("class", ".{}", False)
    ATTRIBUTE = ("attr", "[{}]", False)
    PSEUDO_CLASS = ("pseudo-class", ":{}", False)
    PSEUDO_ELEMENT = ("pseudo-element", "::{}", True)

    def __init__(self, label: str, template: str, singleton: bool) -> None:
        self.label = label
        self.template = template
        self.singleton = singleton

    @property
    def rank(self) -> int:
        return list(FragmentKind).index(self)

    def render(self, value: str) -> str:
        """Render *value* with this kind's prefix/brackets."""
        return self.template.format(value)

    @classmethod
    def from_label(cls, label: str) -> FragmentKind:
        """Look up a kind by its short label (``element``, ``attr``, ...)."""
        for kind in cls:
            if kind.label == label:
                return kind
        raise ValueError(f"Unknown fragment kind: {label!r}")


class Combinator:
    """Conventional combinator symbols accepted by ``combine``."""

    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"
