"""objtasks: a fluent CSS selector builder and small object helpers."""
from __future__ import annotations

from objtasks.config import BuilderConfig
from objtasks.errors import (
    CombinatorError,
    DuplicatePartError,
    OrderError,
    SelectorError,
    SerializationError,
)
from objtasks.selector import PartKind, Selector, SelectorBuilder, css_selector_builder
from objtasks.serialization import from_json, to_json
from objtasks.shapes import Rectangle

__version__ = "0.1.0"

# Facade entry points bound to the default builder.
element = css_selector_builder.element
id = css_selector_builder.id
class_ = css_selector_builder.class_
attribute = css_selector_builder.attribute
attr = css_selector_builder.attr
pseudo_class = css_selector_builder.pseudo_class
pseudo_element = css_selector_builder.pseudo_element
combine = css_selector_builder.combine

__all__ = [
    # selector
    "PartKind",
    "Selector",
    "SelectorBuilder",
    "css_selector_builder",
    "element",
    "id",
    "class_",
    "attribute",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    # config
    "BuilderConfig",
    # errors
    "SelectorError",
    "DuplicatePartError",
    "OrderError",
    "CombinatorError",
    "SerializationError",
    # helpers
    "Rectangle",
    "to_json",
    "from_json",
]
