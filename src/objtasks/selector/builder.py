"""Facade for building CSS selectors.

Usage example:
    builder = SelectorBuilder()
    builder.element("a").attr('href$=".png"').pseudo_class("focus").render()
        => 'a[href$=".png"]:focus'
    builder.combine(builder.element("div"), ">", builder.id("x")).render()
        => 'div > #x'
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace

from objtasks.config import BuilderConfig
from objtasks.errors import CombinatorError
from objtasks.selector.model import PartKind, Selector

__all__ = ["SelectorBuilder", "css_selector_builder"]

logger = logging.getLogger("objtasks.selector")


class SelectorBuilder:
    """Stateless entry point: every call starts a new, independent Selector."""

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()

    def element(self, value: str) -> Selector:
        return Selector().element(value)

    def id(self, value: str) -> Selector:
        return Selector().id(value)

    def class_(self, value: str) -> Selector:
        return Selector().class_(value)

    def attribute(self, value: str) -> Selector:
        return Selector().attribute(value)

    attr = attribute

    def pseudo_class(self, value: str) -> Selector:
        return Selector().pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return Selector().pseudo_element(value)

    def build(self, parts: Iterable[tuple[PartKind | str, str]]) -> Selector:
        """Fold ``(kind, value)`` pairs into one selector, in the order given."""
        selector = Selector()
        for kind, value in parts:
            selector = selector.append(kind, value)
        return selector

    def combine(self, first: Selector, combinator: str, second: Selector) -> Selector:
        """Join two selectors with *combinator*, padded by one space each side.

        The result keeps the right operand's rank and part flags, so further
        appends extend the rightmost compound selector.
        """
        if (
            self.config.strict_combinators
            and combinator not in self.config.combinators
        ):
            raise CombinatorError(combinator, self.config.combinators)
        text = f"{first.render()} {combinator} {second.render()}"
        logger.debug("Combined selector: %r", text)
        return replace(second, text=text)


css_selector_builder = SelectorBuilder()
