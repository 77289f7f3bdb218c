import io

import pytest

from tiendarec.models import User
from tiendarec.user_tree import DuplicateUserError, UserTree


def _user(user_id, username=None):
    password = "password"
    return User(
        first_name="Ana",
        last_name="Perez",
        username=username or f"user{user_id}",
        password=password,
        user_id=user_id,
    )


def _tree(ids):
    tree = UserTree()
    for user_id in ids:
        tree.insert(_user(user_id))
    return tree


IDS = [50, 30, 70, 20, 40, 60, 80, 65]


def _ids(tree):
    return [u.user_id for u in tree.in_order()]


def test_in_order_is_sorted():
    tree = _tree(IDS)
    assert _ids(tree) == sorted(IDS)
    assert len(tree) == len(IDS)


def test_find_present_and_absent():
    tree = _tree(IDS)
    for user_id in IDS:
        assert tree.find(user_id).user_id == user_id
    assert tree.find(999) is None
    assert 40 in tree
    assert 41 not in tree


def test_find_in_empty_tree():
    assert UserTree().find(1) is None


def test_duplicate_raises():
    tree = _tree([5, 3])
    with pytest.raises(DuplicateUserError):
        tree.insert(_user(3, "other"))
    assert _ids(tree) == [3, 5]
    assert tree.find(3).username == "user3"


@pytest.mark.parametrize("victim", IDS)
def test_remove_each(victim):
    tree = _tree(IDS)
    tree.remove(victim)
    assert tree.find(victim) is None
    assert _ids(tree) == sorted(i for i in IDS if i != victim)


def test_remove_two_children_keeps_successor_user():
    tree = _tree(IDS)
    successor = tree.find(60)
    tree.remove(50)
    assert tree.root.user is successor
    assert _ids(tree) == sorted(i for i in IDS if i != 50)


def test_remove_absent_is_noop():
    tree = _tree(IDS)
    tree.remove(999)
    assert _ids(tree) == sorted(IDS)
    empty = UserTree()
    empty.remove(1)
    assert empty.root is None


def test_remove_all():
    tree = _tree(IDS)
    for user_id in IDS:
        tree.remove(user_id)
    assert tree.root is None
    assert list(tree) == []


def test_show_format():
    tree = UserTree()
    tree.insert(_user(2, "bea"))
    tree.insert(_user(1, "ana"))
    out = io.StringIO()
    tree.show(out)
    assert out.getvalue() == "Usuario: anaID: 1\nUsuario: beaID: 2\n"


def test_clear():
    tree = _tree(IDS)
    tree.clear()
    assert tree.root is None
    assert tree.find(50) is None
    tree.insert(_user(1))
    assert _ids(tree) == [1]