"""selector-builder CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging
import sys

import click

from selector_builder import __version__
from selector_builder.builder import SelectorBuilder, css_selector_builder
from selector_builder.config import BuilderConfig
from selector_builder.errors import SelectorError


@click.group()
@click.version_option(version=__version__, prog_name="selector-builder")
@click.option("--verbose", "-v", is_flag=True, help="Log each builder step to stderr.")
def cli(verbose: bool) -> None:
    """selector-builder - compose validated CSS selector strings."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@click.command()
@click.option("--element", "element", default=None, help="Element (tag) name.")
@click.option("--id", "id_", default=None, help="Id, without the leading '#'.")
@click.option("--class", "classes", multiple=True, help="Class name; repeatable.")
@click.option("--attr", "attrs", multiple=True, help="Attribute expression without brackets; repeatable.")
@click.option("--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class; repeatable.")
@click.option("--pseudo-element", "pseudo_element", default=None, help="Pseudo-element.")
def build(
    element: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Build a compound selector from parts and print it.

    Parts are applied in canonical order: element, id, class, attribute,
    pseudo-class, pseudo-element.
    """
    selector = css_selector_builder
    try:
        if element is not None:
            selector = selector.element(element)
        if id_ is not None:
            selector = selector.id(id_)
        for name in classes:
            selector = selector.class_(name)
        for expr in attrs:
            selector = selector.attr(expr)
        for name in pseudo_classes:
            selector = selector.pseudo_class(name)
        if pseudo_element is not None:
            selector = selector.pseudo_element(pseudo_element)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.stringify())


@click.command()
@click.argument("selector_a")
@click.argument("combinator")
@click.argument("selector_b")
@click.option("--strict", is_flag=True, help="Only accept ' ', '+', '~' and '>'.")
def combine(selector_a: str, combinator: str, selector_b: str, strict: bool) -> None:
    """Join two rendered selectors with COMBINATOR and print the result."""
    root = SelectorBuilder(config=BuilderConfig(strict_combinators=strict))
    try:
        result = root.combine(
            SelectorBuilder(value=selector_a),
            combinator,
            SelectorBuilder(value=selector_b),
        )
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(result.stringify())


cli.add_command(build)
cli.add_command(combine)
