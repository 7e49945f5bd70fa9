"""Reassemble a word from letter -> positions mappings."""

from __future__ import annotations

from collections.abc import Iterable, Mapping


def make_word(letters: Mapping[str, Iterable[int]]) -> str:
    """Place each letter at every one of its zero-based positions.

    >>> make_word({"a": [0, 1], "b": [2, 3], "c": [4, 5]})
    'aabbcc'

    Positions are expected to cover ``0..n-1`` without gaps; a missing
    position or a negative one raises ``ValueError``.
    """
    placed: dict[int, str] = {}
    for letter, positions in letters.items():
        for index in positions:
            if index < 0:
                raise ValueError(f"Negative position for {letter!r}: {index}")
            placed[index] = letter
    if not placed:
        return ""
    size = max(placed) + 1
    missing = [i for i in range(size) if i not in placed]
    if missing:
        raise ValueError(f"No letter supplied for positions: {missing}")
    return "".join(placed[i] for i in range(size))
