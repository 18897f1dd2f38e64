# pylint: disable=missing-docstring
from .collection import Collection, IndexedCollection, Slice
