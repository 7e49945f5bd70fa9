from objtasks.selector.builder import SelectorBuilder, combine, css_selector_builder
from objtasks.selector.errors import CardinalityError, OrderError, SelectorBuilderError
from objtasks.selector.model import Combinator, FragmentKind

__all__ = [
    "SelectorBuilder",
    "combine",
    "css_selector_builder",
    "SelectorBuilderError",
    "CardinalityError",
    "OrderError",
    "Combinator",
    "FragmentKind",
]
