"""Build selector trees from plain dict / JSON descriptions.

A description replays builder calls, so the ordering and repetition rules
apply exactly as they do for fluent calls::

    {
        "parts": [["element", "div"], ["id", "main"], ["class", "container"]],
        "links": [
            {"combinator": "+", "right": {"parts": [["element", "table"]]}}
        ]
    }

Part names are ``element``, ``id``, ``class``, ``attr``, ``pseudo_class`` and
``pseudo_element``.  Both keys are optional.
"""

from __future__ import annotations

import json
from typing import Any

from selectorkit.errors import DecodeError
from selectorkit.selector.builder import SelectorBuilder
from selectorkit.selector.facade import SelectorFacade, css_selector_builder

__all__ = ["build_tree", "load_tree", "PART_METHODS"]

# Description part name -> SelectorBuilder method name.
PART_METHODS = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo_class": "pseudo_class",
    "pseudo_element": "pseudo_element",
}


def _parse_part(raw: Any) -> tuple[str, str]:
    """Validate a single ``[kind, value]`` pair."""
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise DecodeError(f"Invalid part (expected [kind, value]): {raw!r}")
    kind, value = raw
    if not isinstance(kind, str) or kind not in PART_METHODS:
        raise DecodeError(f"Unknown part kind: {kind!r}")
    if not isinstance(value, str):
        raise DecodeError(f"Part value must be a string: {value!r}")
    return kind, value


def build_tree(data: dict[str, Any], facade: SelectorFacade | None = None) -> SelectorBuilder:
    """Build a selector node (and its linked subtrees) from *data*.

    Raises DecodeError for a malformed description and the usual
    SelectorError subclasses when the parts break the selector grammar.
    """
    if not isinstance(data, dict):
        raise DecodeError(f"Selector description must be an object, got {type(data).__name__}")
    facade = facade or css_selector_builder

    parts = data.get("parts", [])
    links = data.get("links", [])
    if not isinstance(parts, list):
        raise DecodeError(f'"parts" must be a list, got {type(parts).__name__}')
    if not isinstance(links, list):
        raise DecodeError(f'"links" must be a list, got {type(links).__name__}')

    node = facade.new()
    for raw in parts:
        kind, value = _parse_part(raw)
        getattr(node, PART_METHODS[kind])(value)

    for link in links:
        if not isinstance(link, dict) or "combinator" not in link or "right" not in link:
            raise DecodeError(f"Invalid link (expected combinator and right): {link!r}")
        combinator = link["combinator"]
        if not isinstance(combinator, str):
            raise DecodeError(f"Combinator must be a string: {combinator!r}")
        right = build_tree(link["right"], facade)
        facade.combine(node, combinator, right)

    return node


def load_tree(text: str, facade: SelectorFacade | None = None) -> SelectorBuilder:
    """Decode a JSON description and build the selector tree."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"Invalid JSON: {exc}", cause=exc) from exc
    return build_tree(data, facade)
