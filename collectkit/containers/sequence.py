"""Collection view of built-in sequences."""

from collections.abc import Sequence
from typing import TypeVar

from collectkit.abc.collection import IndexedCollection

Element = TypeVar("Element")


class SequenceView(IndexedCollection[Element]):
    """Wraps a sequence like a :code:`list` or :code:`tuple` without copying it."""

    def __init__(self, sequence: Sequence[Element]) -> None:
        self.sequence = sequence

    @property
    def start_index(self) -> int:
        return 0

    @property
    def end_index(self) -> int:
        return len(self.sequence)

    def element_at(self, index: int) -> Element:
        self.check_bounds(index)
        return self.sequence[index]

    def __repr__(self) -> str:
        return f"SequenceView({self.sequence!r})"
