"""objtasks CLI entry point: Click group with subcommands."""
from __future__ import annotations

import logging
import sys

import click

from objtasks import __version__
from objtasks.config import BuilderConfig
from objtasks.errors import SelectorError
from objtasks.selector import PartKind, Selector, SelectorBuilder
from objtasks.shapes import Rectangle

# The space combinator has no usable bare token on the command line.
DESCENDANT_TOKEN = "descendant"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _to_combinator(token: str) -> str:
    return " " if token == DESCENDANT_TOKEN else token


def _is_combinator_token(token: str) -> bool:
    """True for ``descendant`` and for symbol-only tokens such as ``>`` or ``||``."""
    if token == DESCENDANT_TOKEN:
        return True
    return ":" not in token and not any(ch.isalnum() for ch in token)


def _parse_part(token: str) -> tuple[PartKind, str]:
    """Split a ``kind:value`` token into its part kind and value."""
    name, sep, value = token.partition(":")
    if not sep or not value:
        raise click.BadParameter(f"expected KIND:VALUE, got {token!r}", param_hint="TOKENS")
    try:
        kind = PartKind(name)
    except ValueError:
        choices = ", ".join(k.value for k in PartKind)
        raise click.BadParameter(
            f"unknown part kind {name!r} (choose from attr, {choices})",
            param_hint="TOKENS",
        ) from None
    return kind, value


def build_from_tokens(builder: SelectorBuilder, tokens: tuple[str, ...]) -> Selector:
    """Build a selector from ``kind:value`` parts separated by combinator tokens.

    Combinators are checked by *builder*, so a strict builder rejects any
    token missing from its configured combinators.
    """
    result: Selector | None = None
    pending: str | None = None
    current = Selector()

    for token in tokens:
        if not _is_combinator_token(token):
            kind, value = _parse_part(token)
            current = current.append(kind, value)
            continue
        if current.is_empty:
            raise click.BadParameter(
                f"combinator {token!r} must follow a selector", param_hint="TOKENS"
            )
        result = current if result is None else builder.combine(result, pending, current)
        pending = _to_combinator(token)
        current = Selector()

    if current.is_empty:
        raise click.BadParameter("selector must not end with a combinator", param_hint="TOKENS")
    if result is None:
        return current
    return builder.combine(result, pending, current)


@click.group()
@click.version_option(version=__version__, prog_name="objtasks")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=BuilderConfig.log_level,
    show_default=True,
    help="Log level for objtasks loggers",
)
@click.option(
    "--strict/--no-strict",
    default=False,
    help="Reject combinators not listed by --combinator",
)
@click.option(
    "--combinator",
    "-c",
    "combinators",
    multiple=True,
    help="Allowed combinator (repeatable; use 'descendant' for a space)",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    log_level: str,
    strict: bool,
    combinators: tuple[str, ...],
) -> None:
    """objtasks - build CSS selectors and work with simple objects."""
    overrides: dict[str, object] = {}
    if combinators:
        overrides["combinators"] = tuple(_to_combinator(c) for c in combinators)
    config = BuilderConfig(
        strict_combinators=strict,
        log_level="DEBUG" if verbose else log_level.upper(),
        **overrides,
    )
    logging.basicConfig(level=config.log_level)
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger("objtasks").setLevel(config.log_level)
    ctx.obj = config


@cli.command()
@click.argument("tokens", nargs=-1, required=True)
@click.pass_obj
def build(config: BuilderConfig, tokens: tuple[str, ...]) -> None:
    """Build a CSS selector from KIND:VALUE parts.

    Parts are applied in the order given. Use +, ~, > or "descendant"
    between parts to combine compound selectors.
    """
    builder = SelectorBuilder(config)
    try:
        selector = build_from_tokens(builder, tokens)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector.render())


@cli.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    rect = Rectangle(width, height)
    click.echo(f"{rect.area:g}")
