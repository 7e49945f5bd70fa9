"""objtasks -- object utilities and a validating CSS selector builder."""

from objtasks.grouping import group, sort_cities
from objtasks.mappings import (
    compare_objects,
    compare_objects_by_key,
    is_empty_object,
    make_immutable,
    merge_objects,
    remove_properties,
    shallow_copy,
)
from objtasks.model import CityRecord, FrozenMapping, Rectangle, make_rectangle
from objtasks.selector import (
    CardinalityError,
    Combinator,
    OrderError,
    SelectorBuilder,
    SelectorBuilderError,
    combine,
    css_selector_builder,
)
from objtasks.serialization import from_json, to_json
from objtasks.tickets import sell_tickets
from objtasks.words import make_word

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # mappings
    "shallow_copy",
    "merge_objects",
    "remove_properties",
    "compare_objects",
    "compare_objects_by_key",
    "is_empty_object",
    "make_immutable",
    # words / tickets
    "make_word",
    "sell_tickets",
    # model
    "Rectangle",
    "make_rectangle",
    "CityRecord",
    "FrozenMapping",
    # serialization
    "to_json",
    "from_json",
    # grouping
    "group",
    "sort_cities",
    # selector
    "SelectorBuilder",
    "combine",
    "css_selector_builder",
    "Combinator",
    "SelectorBuilderError",
    "CardinalityError",
    "OrderError",
]
