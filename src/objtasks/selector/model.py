"""Selector model: the PartKind enumeration and the immutable Selector value."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum

from objtasks.errors import DuplicatePartError, OrderError

logger = logging.getLogger("objtasks.selector")


class PartKind(Enum):
    """Kinds of simple selectors, declared in canonical order."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @classmethod
    def _missing_(cls, value: object) -> PartKind | None:
        # "attr" is accepted as a short spelling of "attribute".
        if value == "attr":
            return cls.ATTRIBUTE
        return None

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def unique(self) -> bool:
        """True for kinds that may occur at most once per compound selector."""
        return self in _SEEN_FLAGS

    def format(self, value: str) -> str:
        return _TEMPLATES[self].format(value)


_RANKS: dict[PartKind, int] = {kind: index for index, kind in enumerate(PartKind)}

_TEMPLATES: dict[PartKind, str] = {
    PartKind.ELEMENT: "{}",
    PartKind.ID: "#{}",
    PartKind.CLASS: ".{}",
    PartKind.ATTRIBUTE: "[{}]",
    PartKind.PSEUDO_CLASS: ":{}",
    PartKind.PSEUDO_ELEMENT: "::{}",
}

# Dataclass field that records each single-occurrence kind.
_SEEN_FLAGS: dict[PartKind, str] = {
    PartKind.ELEMENT: "seen_element",
    PartKind.ID: "seen_id",
    PartKind.PSEUDO_ELEMENT: "seen_pseudo_element",
}


@dataclass(frozen=True)
class Selector:
    """An in-progress or finished CSS selector.

    Every append returns a new Selector, so a chain can be branched from any
    intermediate value and a rejected append leaves the receiver usable.

    Attributes:
        text: Selector text accumulated so far.
        last_rank: Rank of the most recently appended part, or None when empty.
        seen_element: An element part has been appended.
        seen_id: An id part has been appended.
        seen_pseudo_element: A pseudo-element part has been appended.
    """

    text: str = ""
    last_rank: int | None = None
    seen_element: bool = False
    seen_id: bool = False
    seen_pseudo_element: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.text

    def append(self, kind: PartKind | str, value: str) -> Selector:
        """Return a copy of this selector extended with one part.

        Raises:
            DuplicatePartError: *kind* is element, id or pseudo-element and
                already occurs in this compound selector.
            OrderError: *kind* ranks below the most recently appended part.
        """
        kind = PartKind(kind)
        flag = _SEEN_FLAGS.get(kind)
        if flag is not None and getattr(self, flag):
            logger.debug("Rejected duplicate %s part %r on %r", kind.value, value, self.text)
            raise DuplicatePartError(kind)
        if self.last_rank is not None and self.last_rank > kind.rank:
            logger.debug(
                "Rejected %s part %r after rank %d on %r",
                kind.value,
                value,
                self.last_rank,
                self.text,
            )
            raise OrderError(kind, self.last_rank)

        updates: dict[str, object] = {
            "text": self.text + kind.format(value),
            "last_rank": kind.rank,
        }
        if flag is not None:
            updates[flag] = True
        return replace(self, **updates)

    # --- chaining -------------------------------------------------------------

    def element(self, value: str) -> Selector:
        return self.append(PartKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self.append(PartKind.ID, value)

    def class_(self, value: str) -> Selector:
        return self.append(PartKind.CLASS, value)

    def attribute(self, value: str) -> Selector:
        return self.append(PartKind.ATTRIBUTE, value)

    attr = attribute

    def pseudo_class(self, value: str) -> Selector:
        return self.append(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self.append(PartKind.PSEUDO_ELEMENT, value)

    # --- rendering ------------------------------------------------------------

    def render(self) -> str:
        """Return the selector text."""
        return self.text

    def __str__(self) -> str:
        return self.render()
