"""Binary search tree of priority levels, each holding its own FIFO line."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from .models import Ticket


@dataclass(eq=False)
class PriorityNode:
    """One priority level and the tickets waiting at it."""

    key: int
    tickets: deque = field(default_factory=deque)
    left: PriorityNode | None = None
    right: PriorityNode | None = None
    parent: PriorityNode | None = None


def _leftmost(node: PriorityNode) -> PriorityNode:
    while node.left is not None:
        node = node.left
    return node


def _successor(node: PriorityNode) -> PriorityNode | None:
    if node.right is not None:
        return _leftmost(node.right)
    ancestor = node.parent
    while ancestor is not None and node is ancestor.right:
        node, ancestor = ancestor, ancestor.parent
    return ancestor


class PriorityTree:
    """Priority levels ordered by key; the lowest key is served first."""

    def __init__(self) -> None:
        self.root: PriorityNode | None = None

    def find(self, key: int) -> PriorityNode | None:
        node = self.root
        while node is not None and node.key != key:
            node = node.left if key < node.key else node.right
        return node

    def insert(self, ticket: Ticket) -> PriorityNode:
        """Append the ticket to its level, creating the level if needed."""
        key = int(ticket.priority)
        node = self.find(key)
        if node is not None:
            node.tickets.append(ticket)
            return node
        node = PriorityNode(key, deque([ticket]))
        self._attach(node)
        return node

    def _attach(self, node: PriorityNode) -> None:
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            side = "left" if node.key < current.key else "right"
            child = getattr(current, side)
            if child is None:
                setattr(current, side, node)
                node.parent = current
                return
            current = child

    def minimum(self) -> PriorityNode | None:
        return _leftmost(self.root) if self.root is not None else None

    def _replace(self, node: PriorityNode, child: PriorityNode | None) -> None:
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        node.parent = node.left = node.right = None

    def remove_node(self, node: PriorityNode) -> None:
        """Unlink a level from the tree."""
        if node.left is not None and node.right is not None:
            successor = _leftmost(node.right)
            node.key, node.tickets = successor.key, successor.tickets
            node = successor
        self._replace(node, node.left if node.left is not None else node.right)

    def pop_next(self) -> Ticket:
        """Remove and return the most urgent ticket; IndexError when empty."""
        node = self.minimum()
        if node is None:
            raise IndexError("priority tree is empty")
        ticket = node.tickets.popleft()
        if not node.tickets:
            self.remove_node(node)
        return ticket

    def peek_after_next(self) -> Ticket | None:
        """The ticket that would be served after the most urgent one."""
        node = self.minimum()
        if node is None:
            return None
        if len(node.tickets) > 1:
            return node.tickets[1]
        following = _successor(node)
        return following.tickets[0] if following is not None else None

    def keys(self) -> list[int]:
        """Priority levels present, in ascending order."""
        result: list[int] = []
        stack: list[PriorityNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.key)
            node = node.right
        return result

    def clear(self) -> None:
        self.root = None

    def __bool__(self) -> bool:
        return self.root is not None