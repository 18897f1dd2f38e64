"""
collectkit: collection idioms

- :code:`FIFOQueue`: first-in first-out queue backed by two buffers
- :code:`Words`: lazy sequence of the space separated words of a text
- :code:`split_batches` / :code:`iter_batches`: fixed size batches of any sliceable collection
- :code:`SafeHTML`: html builder that escapes interpolated values
"""

from collectkit.abc.collection import Collection, IndexedCollection, Slice
from collectkit.abc.exceptions import (
    CollectkitException,
    IndexOutOfBoundsError,
    InvalidBatchSizeError,
    InvalidRangeError,
    PreconditionError,
)
from collectkit.batching import iter_batches, split_batches
from collectkit.containers.fifo_queue import FIFOQueue
from collectkit.containers.sequence import SequenceView
from collectkit.containers.substring import Substring
from collectkit.containers.words import Words, WordsIndex
from collectkit.safe_html import Raw, SafeHTML, escape_html

__all__ = [
    "Collection",
    "IndexedCollection",
    "Slice",
    "CollectkitException",
    "IndexOutOfBoundsError",
    "InvalidBatchSizeError",
    "InvalidRangeError",
    "PreconditionError",
    "iter_batches",
    "split_batches",
    "FIFOQueue",
    "SequenceView",
    "Substring",
    "Words",
    "WordsIndex",
    "Raw",
    "SafeHTML",
    "escape_html",
]
