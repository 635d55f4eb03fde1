"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class _Node:
    content: Any
    next: Optional["_Node"] = None


class LinkedList:
    """Singly linked list that keeps a pointer to its first node only."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        for item in items:
            self.add_back(item)

    def _last_node(self) -> Optional[_Node]:
        node = self._head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def add_front(self, content: Any) -> None:
        """Insert ``content`` before the first element."""
        self._head = _Node(content, self._head)

    def add_back(self, content: Any) -> None:
        """Append ``content`` after the last element."""
        node = _Node(content)
        last = self._last_node()
        if last is None:
            self._head = node
        else:
            last.next = node

    def last(self) -> Any:
        """Content of the last element, or ``None`` for an empty list."""
        node = self._last_node()
        return None if node is None else node.content

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Pass every element to ``delete`` (when given) and empty the list."""
        if delete is not None:
            for content in self:
                delete(content)
        self._head = None

    def iterate(self, func: Optional[Callable[[Any], Any]]) -> None:
        """Call ``func`` on every element in order; nothing happens without one."""
        if func is None:
            return
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], Any],
    ) -> "LinkedList":
        """Build a new list of ``func(element)``.

        If ``func`` fails part way, the elements built so far are handed to
        ``delete`` and the error propagates.
        """
        if func is None or delete is None:
            raise ValueError("both func and delete are required")
        result = LinkedList()
        try:
            for content in self:
                result.add_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result