"""Registration and login on top of the user tree."""

from __future__ import annotations

from tiendarec.models import User
from tiendarec.user_tree import UserTree


def register_user(
    tree: UserTree,
    first_name: str,
    last_name: str,
    username: str,
    password: str,
    user_id: int,
) -> User:
    """Create a user, insert it into the tree and return it.

    Raises DuplicateUserError if the id is already taken.
    """
    user = User(
        first_name=first_name,
        last_name=last_name,
        username=username,
        password=password,
        user_id=user_id,
    )
    tree.insert(user)
    return user


def login(tree: UserTree, username: str, password: str) -> User | None:
    """Return the authenticated user, or None.

    The search descends the tree comparing usernames, so it only finds
    users whose names follow the same order as their ids.
    """
    node = tree.root
    while node is not None:
        if username == node.user.username:
            return node.user if password == node.user.password else None
        node = node.left if username < node.user.username else node.right
    return None