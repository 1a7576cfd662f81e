from selectorkit.selector.builder import SelectorBuilder
from selectorkit.selector.facade import SelectorFacade, css_selector_builder
from selectorkit.selector.model import Combinator, CombinatorLink, CompoundSelector, Part
from selectorkit.selector.tree import build_tree, load_tree

__all__ = [
    "SelectorBuilder",
    "SelectorFacade",
    "css_selector_builder",
    "Combinator",
    "CombinatorLink",
    "CompoundSelector",
    "Part",
    "build_tree",
    "load_tree",
]
