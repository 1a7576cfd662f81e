"""Tests for the builder facade and combinator chains."""

import pytest

from selectorkit import css_selector_builder as builder
from selectorkit.config import BuilderConfig
from selectorkit.errors import (
    DuplicateSingletonError,
    InvalidCombinatorError,
    OrderViolationError,
)
from selectorkit.selector import SelectorBuilder, SelectorFacade


# ---------------------------------------------------------------------------
# Fresh builders per call
# ---------------------------------------------------------------------------


class TestFreshInstances:
    @pytest.mark.parametrize(
        "method, value, expected",
        [
            ("element", "div", "div"),
            ("id", "main", "#main"),
            ("class_", "box", ".box"),
            ("attr", "disabled", "[disabled]"),
            ("pseudo_class", "hover", ":hover"),
            ("pseudo_element", "after", "::after"),
        ],
    )
    def test_each_entry_point(self, method, value, expected):
        node = getattr(builder, method)(value)
        assert isinstance(node, SelectorBuilder)
        assert node.stringify() == expected

    def test_calls_do_not_share_state(self):
        first = builder.element("div")
        second = builder.element("span")
        assert first is not second
        assert first.stringify() == "div"
        assert second.stringify() == "span"

    def test_builders_inherit_facade_config(self):
        facade = SelectorFacade(BuilderConfig(strict_combinators=True))
        assert facade.id("x").config.strict_combinators is True

    def test_default_config(self):
        assert builder.config == BuilderConfig()


# ---------------------------------------------------------------------------
# Chained examples
# ---------------------------------------------------------------------------


class TestChaining:
    def test_id_classes(self):
        node = builder.id("main").class_("container").class_("editable")
        assert node.stringify() == "#main.container.editable"

    def test_element_attr_pseudo_class(self):
        node = builder.element("a").attr('href$=".png"').pseudo_class("focus")
        assert node.stringify() == 'a[href$=".png"]:focus'

    def test_pseudo_element_after_pseudo_classes(self):
        node = builder.element("p").pseudo_class("first-of-type").pseudo_element("first-letter")
        assert node.stringify() == "p:first-of-type::first-letter"

    def test_id_twice_fails(self):
        with pytest.raises(DuplicateSingletonError):
            builder.id("a").id("b")

    def test_element_after_class_fails(self):
        with pytest.raises(OrderViolationError):
            builder.class_("x").element("div")

    def test_pseudo_element_twice_fails(self):
        with pytest.raises(DuplicateSingletonError):
            builder.pseudo_element("before").pseudo_element("after")


# ---------------------------------------------------------------------------
# combine
# ---------------------------------------------------------------------------


class TestCombine:
    def test_returns_left(self):
        left = builder.element("div")
        assert builder.combine(left, "+", builder.element("p")) is left

    def test_two_nodes(self):
        a = builder.element("div").id("main").class_("container").class_("draggable")
        b = builder.element("table").id("data")
        expected = a.stringify() + " + " + b.stringify()
        assert builder.combine(a, "+", b).stringify() == expected
        assert expected == "div#main.container.draggable + table#data"

    def test_three_deep(self):
        selector = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert selector.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_nested_matches_concatenation(self):
        a, b = builder.element("a"), builder.id("b")
        c, d = builder.class_("c"), builder.attr("d")
        parts = [n.stringify() for n in (a, b, c, d)]
        tree = builder.combine(a, "+", builder.combine(b, "~", builder.combine(c, " ", d)))
        assert tree.stringify() == (
            parts[0] + " + " + parts[1] + " ~ " + parts[2] + "   " + parts[3]
        )

    def test_child_combinator(self):
        node = builder.combine(builder.element("ul"), ">", builder.element("li").class_("active"))
        assert node.stringify() == "ul > li.active"

    def test_left_chain_with_multiple_links(self):
        left = builder.element("h1")
        builder.combine(left, "+", builder.element("p"))
        builder.combine(left, ">", builder.element("span"))
        assert left.stringify() == "h1 + p > span"

    def test_strict_facade_rejects_unknown_combinator(self):
        facade = SelectorFacade(BuilderConfig(strict_combinators=True))
        left = facade.element("a")
        with pytest.raises(InvalidCombinatorError):
            facade.combine(left, "/", facade.element("b"))
        assert left.stringify() == "a"
