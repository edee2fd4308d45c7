"""User Directory — the read-only, ordered collection of seeded user records.

Invariants:
    - User ids are positive and unique; checked once, at construction
    - Insertion order is preserved and is the listing order
    - Nothing mutates a directory after construction (tuple storage, frozen records)

Design Decisions:
    - Frozen dataclasses over dicts: equality and hashing for free, no accidental writes
    - Lookup takes the raw path segment: parsing and "not found" live in one place
"""

import re
from dataclasses import dataclass, asdict
from typing import Iterable, Iterator

from cicd_sample.core.errors import UserNotFoundError

_DECIMAL_ID = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class User:
    """A seeded user record."""
    id: int
    name: str
    email: str

    def to_dict(self) -> dict:
        return asdict(self)


DEFAULT_USERS: tuple[User, ...] = (
    User(1, "John Doe", "john@example.com"),
    User(2, "Jane Smith", "jane@example.com"),
    User(3, "Bob Johnson", "bob@example.com"),
)


def parse_user_id(raw_id: str) -> int | None:
    """Parse a path segment as a base-10 integer, or None if it is not one."""
    if not _DECIMAL_ID.fullmatch(raw_id):
        return None
    try:
        return int(raw_id)
    except ValueError:
        # longer than the interpreter's int conversion limit
        return None


class UserDirectory:
    """Immutable ordered collection of users with lookup by id."""

    def __init__(self, users: Iterable[User] = DEFAULT_USERS):
        records = tuple(users)
        by_id: dict[int, User] = {}
        for user in records:
            if user.id <= 0:
                raise ValueError(f"user id must be positive, got {user.id}")
            if user.id in by_id:
                raise ValueError(f"duplicate user id {user.id}")
            by_id[user.id] = user
        self._users = records
        self._by_id = by_id

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[User]:
        return iter(self._users)

    @property
    def users(self) -> tuple[User, ...]:
        return self._users

    def find(self, user_id: int) -> User | None:
        return self._by_id.get(user_id)

    def get(self, raw_id: str) -> User:
        """Resolve a raw path segment to a user.

        Raises:
            UserNotFoundError: the segment is not an integer or no user has that id.
        """
        user_id = parse_user_id(raw_id)
        user = self.find(user_id) if user_id is not None else None
        if user is None:
            raise UserNotFoundError(raw_id)
        return user
