"""Builder facade: one fresh selector per top-level part call."""

from __future__ import annotations

from selectorkit.config import BuilderConfig
from selectorkit.selector.builder import SelectorBuilder

__all__ = ["SelectorFacade", "css_selector_builder"]


class SelectorFacade:
    """Entry point that starts a new ``SelectorBuilder`` for each part call.

    Builders created here share the facade's ``BuilderConfig``.
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()

    def new(self) -> SelectorBuilder:
        """Return an empty builder carrying this facade's config."""
        return SelectorBuilder(self.config)

    def element(self, value: str) -> SelectorBuilder:
        return self.new().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return self.new().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return self.new().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return self.new().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self.new().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self.new().pseudo_element(value)

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        """Link *right* after *left* with *combinator*; returns *left*."""
        return left.combine(combinator, right)


css_selector_builder = SelectorFacade()
