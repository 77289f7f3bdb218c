"""Command that walks through a user's product history."""

from __future__ import annotations

import argparse

from tiendarec.history import Product
from tiendarec.models import User


def main(argv: list[str] | None = None) -> int:
    """Run the history demonstration and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="tiendarec", description="Show how a user's history queue behaves."
    )
    parser.parse_args(argv)

    user = User(first_name="Ana", last_name="", username="", password="", user_id=1)
    first = Product(101, 4, 2999, "Sony", "Electrónica")
    second = Product(102, 5, 1500, "Nike", "Deportes")

    print("=== Añadiendo productos al historial ===")
    user.history.enqueue(first)
    user.history.enqueue(second)
    print(f"Productos en historial: {len(user.history)}")

    oldest = user.history.front()
    if oldest is not None:
        print(f"Producto más antiguo: {oldest.brand} - {oldest.category}")

    print("\n=== Eliminando producto más antiguo ===")
    user.history.dequeue()
    print(f"Productos restantes: {len(user.history)}")

    oldest = user.history.front()
    if oldest is not None:
        print(f"Ahora el más antiguo es: {oldest.brand} - {oldest.category}")

    while not user.history.is_empty():
        user.history.dequeue()
    print("\n=== Memoria liberada correctamente ===")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())