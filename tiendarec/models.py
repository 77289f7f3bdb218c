"""Users and their stated preferences."""

from __future__ import annotations

from dataclasses import dataclass, field

from tiendarec.history import History


@dataclass
class Preference:
    """A liking for a brand or a category, e.g. ("marca", "Samsung")."""

    kind: str
    value: str


@dataclass
class User:
    """A registered shop user."""

    first_name: str
    last_name: str
    username: str
    password: str = field(repr=False)
    user_id: int
    preferences: list[Preference] = field(default_factory=list)
    history: History = field(default_factory=History)

    def add_preference(self, kind: str, value: str) -> Preference:
        """Record a preference and return it."""
        preference = Preference(kind, value)
        self.preferences.append(preference)
        return preference