"""Fluent builder for compound selectors and combinator chains."""

from __future__ import annotations

import logging

from selectorkit.config import BuilderConfig
from selectorkit.errors import (
    CyclicSelectorError,
    DuplicateSingletonError,
    FrozenSelectorError,
    InvalidCombinatorError,
    OrderViolationError,
    SelectorError,
)
from selectorkit.selector.model import Combinator, CombinatorLink, CompoundSelector, Part

__all__ = ["SelectorBuilder"]

logger = logging.getLogger("selectorkit.selector")


class SelectorBuilder:
    """A selector node: one compound selector plus its outgoing combinator links.

    Part methods return ``self`` so calls can be chained::

        SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")

    Every part call is checked against the ordering grammar in ``Part`` before
    anything is recorded, so a rejected call leaves the node untouched.
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()
        self.compound = CompoundSelector()
        self.links: list[CombinatorLink] = []
        self._frozen = False

    # --- part kinds -----------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self._add(Part.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._add(Part.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._add(Part.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._add(Part.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._add(Part.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._add(Part.PSEUDO_ELEMENT, value)

    def _add(self, part: Part, value: str) -> SelectorBuilder:
        self._check(part, value)
        self.compound.record(part, value)
        return self

    def _check(self, part: Part, value: str) -> None:
        """Raise if adding *part* would break the ordering or repetition rules."""
        name = part.name.lower()
        error = None
        if self._frozen:
            error = FrozenSelectorError(name)
        elif self.compound.current_step > part:
            error = OrderViolationError(name)
        elif not part.repeatable and self.compound.has(part):
            error = DuplicateSingletonError(name)
        if error is not None:
            logger.debug("rejected %s(%r): %s", name, value, error)
            raise error

    # --- combinators ----------------------------------------------------------

    def combine(self, combinator: str, right: SelectorBuilder) -> SelectorBuilder:
        """Append ``combinator right`` after this node and return this node."""
        error: SelectorError | None = None
        if self._frozen:
            error = FrozenSelectorError()
        elif self.config.strict_combinators and not Combinator.is_valid(combinator):
            error = InvalidCombinatorError(combinator)
        elif self in right.subtree():
            error = CyclicSelectorError()
        if error is not None:
            logger.debug("rejected combinator %r: %s", combinator, error)
            raise error
        self.links.append(CombinatorLink(combinator=combinator, right=right))
        logger.debug("combined %r with %r", combinator, right)
        return self

    def subtree(self) -> list[SelectorBuilder]:
        """Return this node and every node reachable through its links."""
        visited: list[SelectorBuilder] = []
        stack = [self]
        while stack:
            node = stack.pop()
            if node in visited:
                continue
            visited.append(node)
            for link in node.links:
                stack.append(link.right)
        return visited

    # --- rendering ------------------------------------------------------------

    @property
    def frozen(self) -> bool:
        return self._frozen

    def stringify(self) -> str:
        """Render this node and its linked subtrees, left to right.

        Each combinator is surrounded by exactly one space on either side, so
        the descendant combinator renders as three spaces.
        """
        if self.config.freeze_on_render:
            self._frozen = True
        text = self.compound.render()
        for link in self.links:
            text += f" {link.combinator} " + link.right.stringify()
        return text

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.compound.render()!r}, links={len(self.links)})"
