"""BoundedView: a SequentialList paired with a declared capacity."""

from typing import Any, Generic, overload

from linkedseq.linkedlist import SequentialList
from linkedseq.types import T

_MISSING: Any = object()


class BoundedView(Generic[T]):
    """
    Wrapper that owns a SequentialList and records a declared capacity.

    The capacity is informational only. Nothing checks it, so add() keeps
    succeeding past it; every call is forwarded to the underlying list,
    including its OutOfRangeError conditions.
    """

    __slots__ = ("_capacity", "_values")

    def __init__(self, capacity: int) -> None:
        """
        Initialize the view with an empty list.

        Args:
            capacity: Declared capacity, stored as given (not validated)
        """
        self._capacity = capacity
        self._values = SequentialList[T]()

    @property
    def capacity(self) -> int:
        """The declared capacity given at construction."""
        return self._capacity

    def get_capacity(self) -> int:
        """Return the declared capacity given at construction."""
        return self._capacity

    @overload
    def add(self, value: T, /) -> None: ...

    @overload
    def add(self, index: int, value: T, /) -> None: ...

    def add(self, index_or_value: Any, value: Any = _MISSING, /) -> None:
        """
        Add a value, either at the end or at a given position.

        add(value) appends; add(index, value) inserts at index.

        Raises:
            OutOfRangeError: If an index is given and is outside 0..len inclusive
        """
        if value is _MISSING:
            self._values.append(index_or_value)
        else:
            self._values.insert_at(index_or_value, value)

    def get(self, index: int) -> T:
        return self._values.get(index)

    def remove_value(self, value: T) -> bool:
        return self._values.remove_value(value)

    def remove_at(self, index: int) -> T:
        return self._values.remove_at(index)

    def get_values(self) -> SequentialList[T]:
        """Return an independent copy of the stored values."""
        return self._values.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundedView):
            return NotImplemented
        return self._capacity == other._capacity and self._values == other._values

    def __hash__(self) -> int:
        return hash((self._capacity, self._values))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(capacity={self._capacity!r}, values={self._values})"
