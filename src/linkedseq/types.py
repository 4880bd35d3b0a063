"""Type definitions for linkedseq."""

from typing import Final, TypeVar

# Generic type variable for element values
T = TypeVar("T")

# Returned by index_of() when no element matches
NOT_FOUND: Final = -1
