"""Error types raised while building selectors and reconstructing objects."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objtasks.selector.model import PartKind


DUPLICATE_PART_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector."
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element."
)


class SelectorError(Exception):
    """Base error for invalid selector construction."""

    def __init__(self, message: str, *, kind: PartKind | None = None) -> None:
        super().__init__(message)
        self.kind = kind


class DuplicatePartError(SelectorError):
    """An element, id or pseudo-element part was appended twice."""

    def __init__(self, kind: PartKind) -> None:
        super().__init__(DUPLICATE_PART_MESSAGE, kind=kind)


class OrderError(SelectorError):
    """A part was appended after a part that must follow it."""

    def __init__(self, kind: PartKind, last_rank: int) -> None:
        super().__init__(ORDER_MESSAGE, kind=kind)
        self.last_rank = last_rank


class CombinatorError(SelectorError):
    """Raised by strict builders for an unknown combinator token."""

    def __init__(self, combinator: str, allowed: tuple[str, ...]) -> None:
        self.combinator = combinator
        self.allowed = allowed
        choices = ", ".join(repr(c) for c in allowed)
        super().__init__(f"Unknown combinator {combinator!r}; expected one of {choices}")


class SerializationError(Exception):
    """Raised when JSON text cannot be turned back into an object."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause
