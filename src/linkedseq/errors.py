"""Exception classes for linkedseq."""


class LinkedSeqError(Exception):
    """Base exception for all linkedseq errors."""


class OutOfRangeError(LinkedSeqError, IndexError):
    """Raised when an index falls outside the valid range of a bounds-checked operation."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Index: {index}, Size: {size}")
        self.index = index
        self.size = size
