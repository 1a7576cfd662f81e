"""CLI command: selectorkit build -- render a single compound selector."""

from __future__ import annotations

import click

from selectorkit.selector import css_selector_builder


@click.command()
@click.option("--element", default=None, help="Element (type) selector")
@click.option("--id", "id_", default=None, help="Id selector")
@click.option("--class", "classes", multiple=True, help="Class selector (repeatable)")
@click.option("--attr", "attributes", multiple=True, help="Attribute expression (repeatable)")
@click.option("--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class (repeatable)")
@click.option("--pseudo-element", default=None, help="Pseudo-element")
def build(
    element: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attributes: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Build a compound selector from its parts and print it.

    Options may be given in any order; parts are always applied in canonical
    order, for example:

        selectorkit build --element a --attr 'href$=".png"' --pseudo-class focus
    """
    node = css_selector_builder.new()
    if element is not None:
        node.element(element)
    if id_ is not None:
        node.id(id_)
    for value in classes:
        node.class_(value)
    for value in attributes:
        node.attr(value)
    for value in pseudo_classes:
        node.pseudo_class(value)
    if pseudo_element is not None:
        node.pseudo_element(pseudo_element)

    click.echo(node.stringify())
