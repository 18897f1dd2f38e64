"""
Words
=====

Lazy sequence of the words of a text. Words are maximal runs of characters other than the
space character. Only the space character (:code:`" "`) separates words, tabs and line
breaks are part of a word.

..  code-block:: python
    :caption: Example

    words = Words("the quick  brown fox")
    [str(word) for word in words]  # ['the', 'quick', 'brown', 'fox']

The sequence holds no iteration state. A traversal is described entirely by the
:code:`WordsIndex` values it passes through, so any number of traversals can run over the same
text. Words are returned as :code:`Substring` views of the text and are never copied.
"""

from functools import total_ordering
from typing import Union

from attrs import define, field, validators

from collectkit.abc.collection import Collection
from collectkit.abc.exceptions import IndexOutOfBoundsError, InvalidRangeError
from collectkit.containers.substring import Substring

DELIMITER = " "


@total_ordering
@define(frozen=True)
class WordsIndex:
    """Position of a word. Positions are ordered by the start of the word they denote."""

    _lower: int = field(validator=validators.instance_of(int))
    _upper: int = field(validator=validators.instance_of(int))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, WordsIndex):
            return NotImplemented
        return self._lower < other._lower


class Words(Collection[WordsIndex, Substring]):
    """Collection of the space separated words of a text.

    Parameters
    ----------
    text : str or Substring
        The text to split. It is viewed, not copied.
    """

    def __init__(self, text: Union[str, Substring]) -> None:
        self._text = Substring.from_text(text)
        self._start = self._next_word(self._text.start_index)

    @property
    def text(self) -> Substring:
        return self._text

    @property
    def start_index(self) -> WordsIndex:
        return self._start

    @property
    def end_index(self) -> WordsIndex:
        end = self._text.end_index
        return WordsIndex(end, end)

    def _next_word(self, position: int) -> WordsIndex:
        lower = self._text.first_index(lambda character: character != DELIMITER, position)
        upper = self._text.find(DELIMITER, lower)
        return WordsIndex(lower, upper)

    def index_after(self, index: WordsIndex) -> WordsIndex:
        # pylint: disable=protected-access
        if index._upper >= self._text.end_index:
            return self.end_index
        return self._next_word(index._upper)

    def element_at(self, index: WordsIndex) -> Substring:
        # pylint: disable=protected-access
        if not self._start <= index < self.end_index or index._upper > self._text.end_index:
            raise IndexOutOfBoundsError(index, self._start, self.end_index)
        return self._text.sub_view(index._lower, index._upper)

    def sub_view(self, start: WordsIndex, end: WordsIndex) -> "Words":
        """Words at the positions :code:`start` up to but excluding :code:`end`."""
        # pylint: disable=protected-access
        if end < start:
            raise InvalidRangeError(f"range start {start!r} is after end {end!r}")
        return Words(self._text.sub_view(start._lower, end._lower))

    def between(self, first: WordsIndex, last: WordsIndex) -> "Words":
        """Words from the word at :code:`first` through the word at :code:`last`.

        The returned sequence re-scans the text from the start of :code:`first` to the end of
        :code:`last`. Passing :code:`end_index` as :code:`last` includes all remaining words.
        """
        # pylint: disable=protected-access
        if last < first:
            raise InvalidRangeError(f"range start {first!r} is after end {last!r}")
        return Words(self._text.sub_view(first._lower, last._upper))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Words):
            return list(self) == list(other)
        return NotImplemented

    def __str__(self) -> str:
        return str(self._text)

    def __repr__(self) -> str:
        return f"Words({[str(word) for word in self]!r})"
