"""selectorkit: fluent builder for CSS selector strings."""

__version__ = "0.1.0"

from selectorkit.config import BuilderConfig
from selectorkit.errors import (
    CyclicSelectorError,
    DecodeError,
    DuplicateSingletonError,
    FrozenSelectorError,
    InvalidCombinatorError,
    OrderViolationError,
    SelectorError,
)
from selectorkit.objects import Rectangle, from_json, to_json
from selectorkit.selector import (
    Combinator,
    Part,
    SelectorBuilder,
    SelectorFacade,
    build_tree,
    css_selector_builder,
    load_tree,
)

__all__ = [
    "__version__",
    # config
    "BuilderConfig",
    # errors
    "SelectorError",
    "OrderViolationError",
    "DuplicateSingletonError",
    "InvalidCombinatorError",
    "FrozenSelectorError",
    "CyclicSelectorError",
    "DecodeError",
    # selector
    "Part",
    "Combinator",
    "SelectorBuilder",
    "SelectorFacade",
    "css_selector_builder",
    "build_tree",
    "load_tree",
    # objects
    "Rectangle",
    "to_json",
    "from_json",
]
