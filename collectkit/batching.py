"""
Batching
========

Partition a collection into consecutive sub-views of a fixed size.

Any :code:`collectkit.abc.collection.Collection` can be batched. Built-in strings are batched
as :code:`Substring` views and other built-in sequences as :code:`Slice` views over a
:code:`SequenceView`. Batches borrow from the batched collection and do not copy elements.

..  code-block:: python
    :caption: Example

    [str(batch) for batch in split_batches("abcdefg", 3)]  # ['abc', 'def', 'g']
"""

import logging
from collections.abc import Sequence
from typing import Any, Iterator, List

from collectkit.abc.collection import Collection
from collectkit.abc.exceptions import InvalidBatchSizeError
from collectkit.containers.sequence import SequenceView
from collectkit.containers.substring import Substring

logger = logging.getLogger("Batching")


def as_collection(source: Any) -> Collection:
    """Return :code:`source` as a collection without copying it.

    Raises
    ------
    TypeError
        If source is neither a collection, a string nor a sequence.
    """
    if isinstance(source, Collection):
        return source
    if isinstance(source, str):
        return Substring(source)
    if isinstance(source, Sequence):
        return SequenceView(source)
    raise TypeError(f"can not batch object of type {type(source).__name__}")


def iter_batches(source: Any, batch_size: int) -> Iterator[Collection]:
    """Lazily yield consecutive sub-views of :code:`batch_size` elements.

    The last batch holds the remaining elements and may be smaller. An empty source yields
    no batches. The batches cover the source in order without gaps or overlaps.

    Parameters
    ----------
    source : Collection, str or Sequence
        The collection to partition.
    batch_size : int
        Number of elements per batch. Must be a positive integer.

    Raises
    ------
    InvalidBatchSizeError
        If batch_size is not a positive integer. Raised on the call, not on first iteration.
    """
    if isinstance(batch_size, bool) or not isinstance(batch_size, int) or batch_size <= 0:
        raise InvalidBatchSizeError(batch_size)
    return _iter_batches(as_collection(source), batch_size)


def _iter_batches(collection: Collection, batch_size: int) -> Iterator[Collection]:
    end = collection.end_index
    batch_start = collection.start_index
    while batch_start < end:
        batch_end = collection.index_offset(batch_start, batch_size, end)
        logger.debug("Emitting batch [%r, %r)", batch_start, batch_end)
        yield collection[batch_start:batch_end]
        batch_start = batch_end


def split_batches(source: Any, batch_size: int) -> List[Collection]:
    """Return all batches of :code:`source` as a list. See :code:`iter_batches`."""
    return list(iter_batches(source, batch_size))
