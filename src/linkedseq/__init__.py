"""linkedseq - Doubly-linked sequential list with index access and a capacity-declaring wrapper."""

from linkedseq.container import BoundedView
from linkedseq.errors import LinkedSeqError, OutOfRangeError
from linkedseq.linkedlist import SequentialList
from linkedseq.types import NOT_FOUND

__version__ = "0.0.1"

__all__ = [
    "SequentialList",
    "BoundedView",
    "LinkedSeqError",
    "OutOfRangeError",
    "NOT_FOUND",
]
