from objtasks.selector.builder import SelectorBuilder, css_selector_builder
from objtasks.selector.model import PartKind, Selector

__all__ = ["SelectorBuilder", "css_selector_builder", "PartKind", "Selector"]
