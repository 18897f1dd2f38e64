"""Zero-copy text views."""

from typing import Callable, Optional, Union

from collectkit.abc.collection import IndexedCollection
from collectkit.abc.exceptions import InvalidRangeError


class Substring(IndexedCollection[str]):
    """Read-only view of the characters :code:`[lower, upper)` of a string.

    Creating a substring does not copy any characters. Positions of a substring are positions
    in the base string, so they can be used interchangeably with positions of the substring
    it was sliced from. :code:`str(substring)` materializes the characters.

    Parameters
    ----------
    base : str
        The viewed string. It is never modified.
    lower : int
        Position of the first character of the view.
    upper : int, optional
        Past-the-end position of the view. Defaults to the length of :code:`base`.
    """

    __slots__ = ("_base", "_lower", "_upper")

    def __init__(self, base: str, lower: int = 0, upper: Optional[int] = None) -> None:
        if not isinstance(base, str):
            raise TypeError(f"Substring base must be a str, got {type(base).__name__}")
        if upper is None:
            upper = len(base)
        if not 0 <= lower <= upper <= len(base):
            raise InvalidRangeError(
                f"range [{lower}, {upper}) is not within string of length {len(base)}"
            )
        self._base = base
        self._lower = lower
        self._upper = upper

    @classmethod
    def from_text(cls, text: Union[str, "Substring"]) -> "Substring":
        """Return a view of the whole text. Substrings are returned unchanged."""
        if isinstance(text, Substring):
            return text
        return cls(text)

    @property
    def base(self) -> str:
        return self._base

    @property
    def start_index(self) -> int:
        return self._lower

    @property
    def end_index(self) -> int:
        return self._upper

    def element_at(self, index: int) -> str:
        self.check_bounds(index)
        return self._base[index]

    def sub_view(self, start: int, end: int) -> "Substring":
        if not self._lower <= start <= end <= self._upper:
            raise InvalidRangeError(
                f"range [{start}, {end}) is not within [{self._lower}, {self._upper})"
            )
        return Substring(self._base, start, end)

    def first_index(self, predicate: Callable[[str], bool], start: Optional[int] = None) -> int:
        """Position of the first character from :code:`start` on matching the predicate.

        Returns :code:`end_index` if no character matches.
        """
        index = self._lower if start is None else start
        while index < self._upper and not predicate(self._base[index]):
            index += 1
        return index

    def find(self, text: str, start: Optional[int] = None) -> int:
        """Position of the first occurrence of :code:`text`, or :code:`end_index`."""
        position = self._base.find(text, self._lower if start is None else start, self._upper)
        return self._upper if position == -1 else position

    def __str__(self) -> str:
        return self._base[self._lower : self._upper]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Substring):
            return str(self) == str(other)
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))

    def __repr__(self) -> str:
        return f"Substring({str(self)!r})"
