"""Selector model: part ranks, combinators, and compound selector state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.selector.builder import SelectorBuilder


class Part(IntEnum):
    """Kinds of compound selector parts, valued by their required order.

    A compound selector must list its parts in non-decreasing rank:
        element#id.class[attr]:pseudo-class::pseudo-element
    """

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def repeatable(self) -> bool:
        """True for parts that may occur more than once in a selector."""
        return self in _REPEATABLE


_REPEATABLE = frozenset({Part.CLASS, Part.ATTRIBUTE, Part.PSEUDO_CLASS})


class Combinator(StrEnum):
    """The four canonical CSS combinators."""

    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"

    @classmethod
    def is_valid(cls, symbol: str) -> bool:
        return symbol in {c.value for c in cls}


@dataclass
class CompoundSelector:
    """Accumulated parts of a single, non-combined selector unit."""

    element: str | None = None
    id: str | None = None
    classes: list[str] = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)
    pseudo_classes: list[str] = field(default_factory=list)
    pseudo_element: str | None = None
    current_step: Part = Part.ELEMENT

    def has(self, part: Part) -> bool:
        """Return True if a singleton *part* has already been recorded."""
        if part is Part.ELEMENT:
            return self.element is not None
        if part is Part.ID:
            return self.id is not None
        if part is Part.PSEUDO_ELEMENT:
            return self.pseudo_element is not None
        return False

    def record(self, part: Part, value: str) -> None:
        """Store *value* for *part*: assign singletons, append repeatables."""
        if part is Part.ELEMENT:
            self.element = value
        elif part is Part.ID:
            self.id = value
        elif part is Part.CLASS:
            self.classes.append(value)
        elif part is Part.ATTRIBUTE:
            self.attributes.append(value)
        elif part is Part.PSEUDO_CLASS:
            self.pseudo_classes.append(value)
        else:
            self.pseudo_element = value
        self.current_step = max(self.current_step, part)

    def render(self) -> str:
        """Render the compound parts in canonical order without separators."""
        out = [self.element or ""]
        if self.id is not None:
            out.append("#" + self.id)
        if self.classes:
            out.append("." + ".".join(self.classes))
        out.extend(f"[{attr}]" for attr in self.attributes)
        if self.pseudo_classes:
            out.append(":" + ":".join(self.pseudo_classes))
        if self.pseudo_element is not None:
            out.append("::" + self.pseudo_element)
        return "".join(out)


@dataclass(frozen=True)
class CombinatorLink:
    """A combinator joining a selector to the right-hand subtree."""

    combinator: str
    right: SelectorBuilder
