# pylint: disable=missing-docstring
from .fifo_queue import FIFOQueue
from .sequence import SequenceView
from .substring import Substring
from .words import Words, WordsIndex
