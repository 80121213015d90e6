"""A doubly linked list whose nodes carry arbitrary content."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Optional, Union


@dataclass(eq=False)
class Node:
    """One element of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = field(default=None, repr=False)
    prev: Optional["Node"] = field(default=None, repr=False)


def _walk(start: Optional[Node]) -> Iterator[Node]:
    """Yield the nodes from ``start`` to the end of its chain."""
    node = start
    while node is not None:
        following = node.next
        yield node
        node = following


class LinkedList:
    """A doubly linked list reached through its head node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for item in items:
            self.add_back(Node(item))

    def __iter__(self) -> Iterator[Any]:
        """Yield the content of each node from head to tail."""
        for node in _walk(self.head):
            yield node.content

    def __len__(self) -> int:
        return sum(1 for _ in _walk(self.head))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def nodes(self) -> Iterator[Node]:
        """Yield the nodes themselves from head to tail."""
        return _walk(self.head)

    def add_front(self, node: Optional[Node]) -> None:
        """Make ``node`` the new head; ``None`` is ignored."""
        if node is None:
            return
        node.next = self.head
        node.prev = None
        if self.head is not None:
            self.head.prev = node
        self.head = node

    def add_back(self, node: Optional[Node]) -> None:
        """Append ``node`` after the current last node; ``None`` is ignored."""
        if node is None:
            return
        tail = self.last()
        if tail is None:
            self.head = node
            return
        tail.next = node
        node.prev = tail

    def last(self) -> Optional[Node]:
        """Return the last node, or ``None`` for an empty list."""
        tail = None
        for tail in _walk(self.head):
            pass
        return tail

    def delete(self, node: Optional[Node], delete: Optional[Callable[[Any], Any]]) -> None:
        """Unlink ``node``, passing its content to ``delete``.

        Nothing happens when the list is empty, or when ``node`` or
        ``delete`` is ``None``.
        """
        if self.head is None or node is None or delete is None:
            return
        if self.head is node:
            self.head = node.next
        if node.prev is not None:
            node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        node.next = None
        node.prev = None
        delete(node.content)

    def clear(self, delete: Optional[Callable[[Any], Any]]) -> None:
        """Remove every node, passing each content to ``delete`` in order.

        Nothing happens when the list is empty or ``delete`` is ``None``.
        """
        if self.head is None or delete is None:
            return
        for node in _walk(self.head):
            self.head = node.next
            node.next = None
            node.prev = None
            delete(node.content)
        self.head = None

    def iterate(self, f: Optional[Callable[[Any], Any]]) -> None:
        """Call ``f`` on the content of each node; ``None`` does nothing."""
        if f is None:
            return
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Optional[Callable[[Any], Any]] = None,
    ) -> "LinkedList":
        """Return a new list holding ``f(content)`` for each node.

        If ``f`` raises, the contents built so far are passed to ``delete``
        and the exception propagates.
        """
        if not callable(f):
            raise TypeError("expected a callable")
        result = LinkedList()
        try:
            for content in self:
                result.add_back(Node(f(content)))
        except Exception:
            result.clear(delete)
            raise
        return result

    def render(self) -> str:
        """Return the list as ``List: [a] [b] `` text."""
        return _render(self.head)


def _render(start: Optional[Node]) -> str:
    return "List: " + "".join(f"[{node.content}] " for node in _walk(start))


def print_list(lst: Union[LinkedList, Node, None]) -> None:
    """Print the contents of a list, or of the chain starting at a node."""
    if isinstance(lst, LinkedList):
        print(lst.render())
    elif lst is None or isinstance(lst, Node):
        print(_render(lst))
    else:
        raise TypeError(f"expected a LinkedList or Node, got {type(lst).__name__}")