"""abstract module for forward traversable, sliceable collections"""

from abc import ABC, abstractmethod
from typing import Generic, Iterator, Optional, TypeVar

from collectkit.abc.exceptions import IndexOutOfBoundsError, InvalidRangeError, PreconditionError

Index = TypeVar("Index")
Element = TypeVar("Element")


class Collection(ABC, Generic[Index, Element]):
    """Abstract Collection Class to define the Interface.

    A collection is traversed from :code:`start_index` to :code:`end_index` by repeatedly
    calling :code:`index_after`. Positions are opaque to callers and only have to be
    comparable. Sub-views created by slicing share their positions with the collection
    they were created from.

    .. code-block:: python

        for index in collection.indices():
            element = collection[index]
        first_three = collection[: collection.index_offset(collection.start_index, 3)]

    """

    @property
    @abstractmethod
    def start_index(self) -> Index:
        """Position of the first element. Equals :code:`end_index` for empty collections."""

    @property
    @abstractmethod
    def end_index(self) -> Index:
        """Past-the-end position."""

    @abstractmethod
    def index_after(self, index: Index) -> Index:
        """Return the position following :code:`index`.

        Parameters
        ----------
        index : Index
            A valid position, :code:`start_index <= index < end_index`.
        """

    @abstractmethod
    def element_at(self, index: Index) -> Element:
        """Return the element at a valid position."""

    def sub_view(self, start: Index, end: Index) -> "Collection[Index, Element]":
        """Return a read-only view of the elements in :code:`[start, end)`."""
        self.check_range(start, end)
        return Slice(self, start, end)

    def check_range(self, start: Index, end: Index) -> None:
        """Raise :code:`InvalidRangeError` unless the range lies within the collection."""
        if end < start:
            raise InvalidRangeError(f"range start {start!r} is after end {end!r}")
        if start < self.start_index or self.end_index < end:
            raise InvalidRangeError(
                f"range [{start!r}, {end!r}) is not within "
                f"[{self.start_index!r}, {self.end_index!r})"
            )

    def index_offset(self, index: Index, distance: int, limit: Optional[Index] = None) -> Index:
        """Advance :code:`index` by up to :code:`distance` positions.

        Parameters
        ----------
        index : Index
            Position to start from.
        distance : int
            Number of positions to advance. Must not be negative.
        limit : Index, optional
            Position at which advancing stops early. Defaults to :code:`end_index`.

        Returns
        -------
        Index
            The advanced position or :code:`limit` if it was reached first.
        """
        if distance < 0:
            raise PreconditionError(f"can not advance by a negative distance: {distance}")
        if limit is None:
            limit = self.end_index
        while distance > 0 and index < limit:
            index = self.index_after(index)
            distance -= 1
        return index

    @property
    def is_empty(self) -> bool:
        return not self.start_index < self.end_index

    def indices(self) -> Iterator[Index]:
        """Lazily iterate all valid positions in order."""
        index = self.start_index
        end = self.end_index
        while index < end:
            yield index
            index = self.index_after(index)

    def count(self) -> int:
        """Number of elements. Walks the whole collection unless overridden."""
        return sum(1 for _ in self.indices())

    def __iter__(self) -> Iterator[Element]:
        for index in self.indices():
            yield self.element_at(index)

    def __len__(self) -> int:
        return self.count()

    def __bool__(self) -> bool:
        return not self.is_empty

    def __getitem__(self, key):
        if isinstance(key, slice):
            if key.step is not None:
                raise InvalidRangeError("stepped slices are not supported")
            start = self.start_index if key.start is None else key.start
            end = self.end_index if key.stop is None else key.stop
            self.check_range(start, end)
            return self.sub_view(start, end)
        return self.element_at(key)


class IndexedCollection(Collection[int, Element]):
    """Collection with integer positions which supports constant time offsetting."""

    def check_bounds(self, index: int) -> None:
        """Raise :code:`IndexOutOfBoundsError` if index is not a valid element position."""
        if not self.start_index <= index < self.end_index:
            raise IndexOutOfBoundsError(index, self.start_index, self.end_index)

    def index_after(self, index: int) -> int:
        self.check_bounds(index)
        return index + 1

    def index_offset(self, index: int, distance: int, limit: Optional[int] = None) -> int:
        if distance < 0:
            raise PreconditionError(f"can not advance by a negative distance: {distance}")
        if limit is None:
            limit = self.end_index
        if index >= limit:
            return index
        return min(index + distance, limit)

    def count(self) -> int:
        return self.end_index - self.start_index


class Slice(Collection[Index, Element]):
    """Borrowing sub-view of a collection.

    The slice keeps a reference to its base collection and a pair of bounds. It reuses the
    traversal of the base, so positions of a slice are positions of the base. Structural
    changes of the base invalidate the slice.
    """

    def __init__(self, base: Collection[Index, Element], start: Index, end: Index) -> None:
        if end < start:
            raise InvalidRangeError(f"range start {start!r} is after end {end!r}")
        self.base = base
        self._start = start
        self._end = end

    @property
    def start_index(self) -> Index:
        return self._start

    @property
    def end_index(self) -> Index:
        return self._end

    def index_after(self, index: Index) -> Index:
        return self.base.index_after(index)

    def element_at(self, index: Index) -> Element:
        if not self._start <= index < self._end:
            raise IndexOutOfBoundsError(index, self._start, self._end)
        return self.base.element_at(index)

    def sub_view(self, start: Index, end: Index) -> "Slice[Index, Element]":
        if start < self._start or self._end < end:
            raise InvalidRangeError(
                f"range [{start!r}, {end!r}) exceeds slice bounds [{self._start!r}, {self._end!r})"
            )
        return Slice(self.base, start, end)

    def index_offset(self, index: Index, distance: int, limit: Optional[Index] = None) -> Index:
        if limit is None:
            limit = self._end
        return self.base.index_offset(index, distance, limit)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Collection):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Slice({list(self)!r})"
