# pylint: disable=missing-docstring
# pylint: disable=protected-access
import pytest

from collectkit.abc.collection import Collection, Slice
from collectkit.abc.exceptions import IndexOutOfBoundsError, InvalidRangeError, PreconditionError
from collectkit.containers.sequence import SequenceView


class LinkedCollection(Collection[int, str]):
    """Collection without random access which counts traversal steps."""

    def __init__(self, elements):
        self.elements = list(elements)
        self.steps = 0

    @property
    def start_index(self):
        return 0

    @property
    def end_index(self):
        return len(self.elements)

    def index_after(self, index):
        self.steps += 1
        return index + 1

    def element_at(self, index):
        if not 0 <= index < len(self.elements):
            raise IndexOutOfBoundsError(index, 0, len(self.elements))
        return self.elements[index]


class TestCollection:
    def test_can_not_instantiate_abstract_collection(self):
        with pytest.raises(TypeError):
            Collection()  # pylint: disable=abstract-class-instantiated

    def test_iteration_follows_index_after(self):
        collection = LinkedCollection("abc")
        assert [element for element in collection] == ["a", "b", "c"]
        assert collection.steps == 3

    def test_index_offset_walks_and_stops_at_limit(self):
        collection = LinkedCollection("abcdef")
        assert collection.index_offset(0, 4) == 4
        assert collection.index_offset(4, 4) == 6
        assert collection.index_offset(1, 4, 3) == 3
        assert collection.index_offset(6, 2) == 6

    def test_index_offset_rejects_negative_distance(self):
        with pytest.raises(PreconditionError):
            LinkedCollection("ab").index_offset(0, -1)

    def test_default_sub_view_is_slice(self):
        collection = LinkedCollection("abcdef")
        view = collection[1:4]
        assert isinstance(view, Slice)
        assert list(view) == ["b", "c", "d"]
        assert view.base is collection

    def test_reversed_range_raises(self):
        with pytest.raises(InvalidRangeError):
            _ = LinkedCollection("abc")[2:1]

    @pytest.mark.parametrize("start, end", [(0, 10), (-1, 2), (4, 4), (-1, None)])
    def test_range_outside_collection_raises(self, start, end):
        with pytest.raises(InvalidRangeError):
            _ = LinkedCollection("abc")[start:end]

    def test_sub_view_outside_collection_raises(self):
        with pytest.raises(InvalidRangeError):
            LinkedCollection("abc").sub_view(1, 5)

    def test_empty_range_at_end_is_valid(self):
        collection = LinkedCollection("abc")
        assert list(collection[3:3]) == []
        assert list(collection[3:]) == []

    def test_empty_collection(self):
        collection = LinkedCollection("")
        assert collection.is_empty
        assert not collection
        assert collection.count() == 0


class TestSlice:
    def test_slice_shares_positions_with_base(self):
        view = Slice(LinkedCollection("abcdef"), 2, 5)
        assert view.start_index == 2
        assert view[3] == "d"
        assert list(view.indices()) == [2, 3, 4]

    def test_element_outside_slice_raises(self):
        view = Slice(LinkedCollection("abcdef"), 2, 5)
        with pytest.raises(IndexOutOfBoundsError):
            _ = view[5]

    def test_slice_of_slice_uses_same_base(self):
        base = LinkedCollection("abcdef")
        view = Slice(base, 1, 5)[2:4]
        assert view.base is base
        assert list(view) == ["c", "d"]

    def test_slice_of_slice_outside_bounds_raises(self):
        view = Slice(LinkedCollection("abcdef"), 1, 5)
        with pytest.raises(InvalidRangeError):
            view.sub_view(0, 3)

    def test_index_offset_is_limited_to_slice(self):
        view = Slice(LinkedCollection("abcdef"), 1, 4)
        assert view.index_offset(1, 10) == 4

    def test_equality_and_repr(self):
        view = Slice(LinkedCollection("abc"), 0, 2)
        assert view == SequenceView(["a", "b"])
        assert repr(view) == "Slice(['a', 'b'])"


class TestSequenceView:
    def test_wraps_sequence_without_copy(self):
        elements = [1, 2, 3]
        view = SequenceView(elements)
        assert view.sequence is elements
        assert list(view) == elements
        assert len(view) == 3

    def test_out_of_bounds(self):
        with pytest.raises(IndexOutOfBoundsError):
            _ = SequenceView((1, 2))[2]

    def test_slicing(self):
        view = SequenceView((1, 2, 3, 4))[1:3]
        assert list(view) == [2, 3]
