"""Tests for the selector and serialization error types."""

from objtasks.errors import (
    CombinatorError,
    DuplicatePartError,
    OrderError,
    SelectorError,
    SerializationError,
)
from objtasks.selector import PartKind


class TestSelectorErrors:
    def test_duplicate_message(self):
        err = DuplicatePartError(PartKind.ID)
        assert str(err) == (
            "Element, id and pseudo-element should not occur more than one time "
            "inside the selector."
        )
        assert err.kind is PartKind.ID
        assert isinstance(err, SelectorError)

    def test_order_message(self):
        err = OrderError(PartKind.ELEMENT, last_rank=3)
        assert str(err) == (
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element."
        )
        assert err.last_rank == 3
        assert isinstance(err, SelectorError)

    def test_combinator_message(self):
        err = CombinatorError("|", (">", "+"))
        assert "'|'" in str(err)
        assert err.allowed == (">", "+")
        assert err.kind is None


class TestSerializationError:
    def test_cause(self):
        cause = ValueError("bad")
        err = SerializationError("failed", cause=cause)
        assert str(err) == "failed"
        assert err.cause is cause
