# tiendarec

These are the building blocks of a small shop recommender. The package does
three things:

- It keeps user accounts in a binary search tree ordered by user id.
- It gives each user a list of brand or category preferences.
- It keeps a first-in, first-out history of the products each user has viewed.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

### Product history

`tiendarec.history` provides two classes:

- `Product` is a dataclass with the fields `product_id`, `quality` (1 to 5),
  `price`, `brand` and `category`.
- `History` is a queue of products, oldest first.

```python
from tiendarec.history import History, Product

history = History()
history.enqueue(Product(101, 4, 2999, "Sony", "Electrónica"))
history.enqueue(Product(102, 5, 1500, "Nike", "Deportes"))

len(history)          # 2
history.front()       # the Sony product, the oldest entry, left in place
history.dequeue()     # removes and returns the Sony product
history.is_empty()    # False
list(history)         # [the Nike product]
```

On an empty history, `dequeue` and `front` return `None`.

### Users and preferences

`tiendarec.models` provides two classes:

- `Preference` holds a `kind` (for example `"marca"` or `"categoria"`) and a
  `value`.
- `User` is a dataclass with the fields `first_name`, `last_name`, `username`,
  `password` and `user_id`. It also has a `preferences` list and a `history`,
  which is a `History` that starts out empty.

```python
from tiendarec.models import User

password = "password"
user = User(
    first_name="Ana",
    last_name="Pérez",
    username="ana",
    password=password,
    user_id=1,
)
user.add_preference("marca", "Samsung")      # returns the new Preference
user.add_preference("categoria", "Ropa")
user.preferences                             # both preferences, in order
```

The password is left out of the user's `repr`.

### The user tree

`tiendarec.user_tree.UserTree` stores `User` objects keyed by `user_id`.

```python
from tiendarec.user_tree import UserTree, DuplicateUserError

tree = UserTree()
tree.insert(ana)       # any User objects, say with ids 5 and 2
tree.insert(luis)

tree.find(2)                            # the user with id 2, or None
2 in tree                               # True
len(tree)                               # 2
[u.user_id for u in tree.in_order()]    # [2, 5]
tree.remove(5)                          # does nothing if the id is absent
tree.clear()
```

Inserting a user whose id is already in the tree raises `DuplicateUserError`,
which is a subclass of `ValueError`. `tree.show(out)` writes one line per user
to a text stream, in ascending id order. The stream defaults to standard
output, and each line has the form `Usuario: <username>ID: <id>`. The tree's
nodes are `TreeNode` objects with `user`, `left` and `right`, and
`tree.root` points to the top node.

### Registration and login

`tiendarec.manager` has two functions:

- `register_user(tree, first_name, last_name, username, password, user_id)`
  builds a `User`, inserts it into the tree and returns it.
- `login(tree, username, password)` returns the matching `User`. It returns
  `None` when no user is found or when the password does not match.

```python
from tiendarec.manager import register_user, login
from tiendarec.user_tree import UserTree

tree = UserTree()
password = "password"
register_user(tree, "Ana", "Pérez", "ana", password, 1)
login(tree, "ana", password)    # the User
```

`login` walks the tree by comparing usernames, but the tree is ordered by id.
It therefore only finds users whose usernames happen to follow the id order
along the search path.

## Command line

```
tiendarec
```

The command runs a short demonstration and takes no options. It does the
following:

1. Creates a user.
2. Adds two products to the user's history.
3. Prints the history's size and its oldest product.
4. Removes that product.
5. Prints the new oldest product.

## What it does not do

- Nothing is saved. Users, preferences and histories exist only in memory.
- Nothing is recommended. Preferences and histories are recorded but not used
  to suggest products.
- Passwords are kept and compared as plain text.
- There is no product catalogue to manage. Products are built directly as
  `Product` values.