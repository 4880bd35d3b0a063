"""Doubly-linked sequential list with index-addressable access."""

from collections.abc import Iterable, Iterator
from copy import deepcopy
from itertools import islice
from logging import getLogger
from typing import Any, Generic

from linkedseq.errors import OutOfRangeError
from linkedseq.types import NOT_FOUND, T

LOGGER = getLogger("linkedseq.linkedlist")


class Node(Generic[T]):
    """A node in the doubly-linked list."""

    __slots__ = ("value", "prev", "next")

    def __init__(self, value: T) -> None:
        self.value = value
        self.prev: Node[T] | None = None
        self.next: Node[T] | None = None


class SequentialList(Generic[T]):
    """
    Ordered, mutable sequence backed by a doubly-linked list.

    Appends at either end are O(1). Index-based operations walk from whichever
    end of the list is nearer to the requested position, so they cost
    O(min(index, len - index)). Nodes never leave the list: every public
    operation accepts and returns plain values.
    """

    def __init__(self, values: Iterable[T] | None = None) -> None:
        """
        Initialize the list.

        Args:
            values: Optional iterable (typically another SequentialList) whose
                elements are appended in order. Passing a SequentialList is
                equivalent to calling its copy() method.
        """
        self._head: Node[T] | None = None
        self._tail: Node[T] | None = None
        self._size = 0
        if values is not None:
            self.extend(values)

    def append(self, value: T) -> None:
        """Append value to the end of the list. O(1)."""
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            node.prev = self._tail
            self._tail.next = node
        self._tail = node
        self._size += 1

    def appendleft(self, value: T) -> None:
        """Prepend value to the beginning of the list. O(1)."""
        if self._head is None:
            self.append(value)
        else:
            self._link_before(self._head, value)

    def extend(self, values: Iterable[T]) -> None:
        """Append every element of values in iteration order."""
        if values is self:
            values = self.to_array()
        for value in values:
            self.append(value)

    def insert_at(self, index: int, value: T) -> None:
        """
        Insert value so that it ends up at position index.

        Args:
            index: Target position, from 0 to len(self) inclusive. Inserting at
                len(self) is the same as append().
            value: Value to insert

        Raises:
            OutOfRangeError: If index < 0 or index > len(self)
        """
        if index < 0 or index > self._size:
            raise OutOfRangeError(index, self._size)
        if index == self._size:
            self.append(value)
        else:
            self._link_before(self._node_at(index), value)

    def get(self, index: int) -> T:
        """
        Return the value at position index.

        Raises:
            OutOfRangeError: If index < 0 or index >= len(self)
        """
        self._check_index(index)
        return self._node_at(index).value

    def remove_at(self, index: int) -> T:
        """
        Remove and return the value at position index.

        Args:
            index: Position of the value to remove, from 0 to len(self) - 1

        Returns:
            The removed value

        Raises:
            OutOfRangeError: If index < 0 or index >= len(self)
        """
        self._check_index(index)
        return self._unlink(self._node_at(index))

    def remove_value(self, value: T) -> bool:
        """
        Remove the first element equal to value.

        Returns:
            True if an element was removed, False if no element matched
        """
        for node in self._iter_nodes():
            if node.value == value:
                self._unlink(node)
                return True
        return False

    def size(self) -> int:
        """Return the number of elements in the list. O(1)."""
        return self._size

    def is_empty(self) -> bool:
        """Return True if the list holds no elements. O(1)."""
        return self._size == 0

    def clear(self) -> None:
        """Drop all elements at once."""
        LOGGER.debug("Clearing %d elements", self._size)
        self._head = None
        self._tail = None
        self._size = 0

    def contains(self, value: T) -> bool:
        """Return True if some element equals value."""
        return self.index_of(value) != NOT_FOUND

    def index_of(self, value: T) -> int:
        """Return the position of the first element equal to value, or NOT_FOUND (-1)."""
        for index, item in enumerate(self):
            if item == value:
                return index
        return NOT_FOUND

    def to_array(self) -> list[T]:
        """Return the elements as a new Python list, in traversal order."""
        return list(self)

    def copy(self) -> "SequentialList[T]":
        """Return a shallow copy: fresh nodes holding the same element objects."""
        return self.__class__(self)

    def deep_copy(self, *, strict: bool = False) -> "SequentialList[T]":
        """
        Return a copy whose elements are themselves cloned with copy.deepcopy().

        Args:
            strict: If False (default), an element that cannot be cloned is
                carried over unchanged. If True, the cloning error propagates.

        Returns:
            A new list with freshly allocated nodes
        """
        return self._deep_copy({}, strict=strict)

    def __copy__(self) -> "SequentialList[T]":
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> "SequentialList[T]":
        return self._deep_copy(memo, strict=False)

    def _deep_copy(self, memo: dict[int, Any], *, strict: bool) -> "SequentialList[T]":
        result = self.__class__()
        # Registered first so elements referring back to this list resolve to the copy
        memo[id(self)] = result
        for index, value in enumerate(self):
            # A failed deepcopy leaves partial clones in its memo, so each element
            # works on a scratch memo that is merged back only on success
            trial = dict(memo)
            try:
                cloned = deepcopy(value, trial)
            except Exception:
                if strict:
                    raise
                LOGGER.debug(
                    "Element %d of type %s could not be cloned, keeping the original",
                    index,
                    type(value).__name__,
                    exc_info=True,
                )
                cloned = value
            else:
                keep_alive = trial.pop(id(trial), [])
                memo.update(trial)
                memo.setdefault(id(memo), []).extend(keep_alive)
            result.append(cloned)
        return result

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= self._size:
            raise OutOfRangeError(index, self._size)

    def _node_at(self, index: int) -> Node[T]:
        """Return the node at a valid index, walking from the nearer end."""
        if index < self._size // 2:
            nodes = self._iter_nodes()
            steps = index
        else:
            nodes = self._iter_nodes_reversed()
            steps = self._size - 1 - index
        return next(islice(nodes, steps, None))

    def _link_before(self, successor: Node[T], value: T) -> None:
        """Insert a new node holding value immediately before successor. O(1)."""
        node = Node(value)
        predecessor = successor.prev
        node.prev = predecessor
        node.next = successor
        successor.prev = node
        if predecessor is None:
            self._head = node
        else:
            predecessor.next = node
        self._size += 1

    def _unlink(self, node: Node[T]) -> T:
        """Remove node from the list and return its value. O(1)."""
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = None
        node.next = None
        self._size -= 1
        return node.value

    def _iter_nodes(self) -> Iterator[Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _iter_nodes_reversed(self) -> Iterator[Node[T]]:
        node = self._tail
        while node is not None:
            yield node
            node = node.prev

    def __getitem__(self, index: int) -> T:
        """Return the value at position index (negative indices are out of range)."""
        return self.get(index)

    def __iter__(self) -> Iterator[T]:
        """Iterate over values from head to tail."""
        for node in self._iter_nodes():
            yield node.value

    def __reversed__(self) -> Iterator[T]:
        """Iterate over values from tail to head."""
        for node in self._iter_nodes_reversed():
            yield node.value

    def __contains__(self, value: object) -> bool:
        return self.index_of(value) != NOT_FOUND  # type: ignore[arg-type]

    def __len__(self) -> int:
        """Return the number of elements in the list."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SequentialList):
            return NotImplemented
        if self._size != other._size:
            return False
        return all(mine == theirs for mine, theirs in zip(self, other))

    def __hash__(self) -> int:
        # Raises TypeError when an element is unhashable, like tuple does
        return hash(tuple(self))

    def __str__(self) -> str:
        return str(self.to_array())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_array()!r})"
