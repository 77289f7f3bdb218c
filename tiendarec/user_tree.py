"""Binary search tree of users keyed by user id."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

from tiendarec.models import User


class DuplicateUserError(ValueError):
    """Raised when a user id is already present in the tree."""


@dataclass
class TreeNode:
    """A tree node holding one user."""

    user: User
    left: TreeNode | None = None
    right: TreeNode | None = None


class UserTree:
    """Users ordered by ``user_id``."""

    def __init__(self) -> None:
        self.root: TreeNode | None = None

    def insert(self, user: User) -> None:
        """Insert a user; raise DuplicateUserError if the id is taken."""
        if self.root is None:
            self.root = TreeNode(user)
            return
        node = self.root
        while True:
            if user.user_id < node.user.user_id:
                if node.left is None:
                    node.left = TreeNode(user)
                    return
                node = node.left
            elif user.user_id > node.user.user_id:
                if node.right is None:
                    node.right = TreeNode(user)
                    return
                node = node.right
            else:
                raise DuplicateUserError(
                    f"duplicate user id {user.user_id}, cannot insert"
                )

    def find(self, user_id: int) -> User | None:
        """Return the user with this id, or None."""
        node = self.root
        while node is not None:
            if user_id == node.user.user_id:
                return node.user
            node = node.left if user_id < node.user.user_id else node.right
        return None

    def remove(self, user_id: int) -> None:
        """Remove the user with this id; do nothing if absent."""
        self.root = self._remove(self.root, user_id)

    @classmethod
    def _remove(cls, node: TreeNode | None, user_id: int) -> TreeNode | None:
        if node is None:
            return None
        if user_id < node.user.user_id:
            node.left = cls._remove(node.left, user_id)
            return node
        if user_id > node.user.user_id:
            node.right = cls._remove(node.right, user_id)
            return node
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.user = successor.user
        node.right = cls._remove(node.right, successor.user.user_id)
        return node

    def in_order(self) -> Iterator[User]:
        """Yield users in ascending id order."""
        stack: list[TreeNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.user
            node = node.right

    def show(self, out: TextIO | None = None) -> None:
        """Write one line per user, in id order."""
        out = sys.stdout if out is None else out
        for user in self.in_order():
            out.write(f"Usuario: {user.username}ID: {user.user_id}\n")

    def clear(self) -> None:
        """Drop every user."""
        self.root = None

    def __iter__(self) -> Iterator[User]:
        return self.in_order()

    def __len__(self) -> int:
        return sum(1 for _ in self.in_order())

    def __contains__(self, user_id: object) -> bool:
        return isinstance(user_id, int) and self.find(user_id) is not None