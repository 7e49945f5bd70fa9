"""objtasks model layer -- public type re-exports."""

from objtasks.model.city import CityRecord
from objtasks.model.frozen import FrozenMapping
from objtasks.model.rectangle import Rectangle, make_rectangle

__all__ = [
    # rectangle
    "Rectangle",
    "make_rectangle",
    # city
    "CityRecord",
    # frozen
    "FrozenMapping",
]
