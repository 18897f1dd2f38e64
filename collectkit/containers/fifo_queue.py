"""This module implements a first-in first-out queue backed by two buffers."""

import logging
from typing import Any, Iterable, Iterator, Optional, TypeVar

from collectkit.abc.collection import IndexedCollection

logger = logging.getLogger("FIFOQueue")

Element = TypeVar("Element")


class FIFOQueue(IndexedCollection[Element]):
    """
    Queue with amortized constant time :code:`enqueue` and :code:`dequeue`.

    New elements are appended to the incoming buffer. The outgoing buffer holds the front of
    the queue in reversed order, so that the front element can be popped from its end. When the
    outgoing buffer runs empty it is rebuilt from the reversed incoming buffer. Every element is
    moved at most once, which amortizes the rebuild over all enqueues since the last rebuild.

    Position :code:`0` is the front of the queue. Reading by position does not dequeue.

    Parameters
    ----------
    elements : Iterable, optional
        Elements to enqueue in order.
    """

    def __init__(self, elements: Optional[Iterable[Element]] = None) -> None:
        self._outgoing: list[Element] = []
        self._incoming: list[Element] = list(elements) if elements is not None else []

    @property
    def start_index(self) -> int:
        return 0

    @property
    def end_index(self) -> int:
        return len(self._outgoing) + len(self._incoming)

    def enqueue(self, element: Element) -> None:
        """Append an element to the back of the queue."""
        self._incoming.append(element)

    def dequeue(self, default: Any = None) -> Any:
        """Remove and return the front element.

        Parameters
        ----------
        default : Any, optional
            Returned if the queue is empty. A queue holding :code:`None` elements can pass a
            unique object here to tell an empty queue apart from a dequeued :code:`None`.

        Returns
        -------
        Element or None
            The front element or :code:`default` if the queue is empty.
        """
        if not self._outgoing:
            if self._incoming:
                logger.debug("Rebuilding outgoing buffer from %d elements", len(self._incoming))
            self._outgoing = self._incoming[::-1]
            self._incoming.clear()
        if not self._outgoing:
            return default
        return self._outgoing.pop()

    def element_at(self, index: int) -> Element:
        self.check_bounds(index)
        outgoing_count = len(self._outgoing)
        if index < outgoing_count:
            return self._outgoing[outgoing_count - index - 1]
        return self._incoming[index - outgoing_count]

    def __iter__(self) -> Iterator[Element]:
        yield from reversed(self._outgoing)
        yield from self._incoming

    def __len__(self) -> int:
        return self.end_index

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FIFOQueue):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"FIFOQueue({list(self)!r})"
