"""User Directory — verifies the seeded, immutable collection and id lookup.

Tests:
    - Default seed has 3 users in insertion order
    - Lookup by raw path segment: hits, misses, non-numeric ids
    - Construction rejects duplicate and non-positive ids
    - Records cannot be mutated
"""

import dataclasses

import pytest

from cicd_sample.core.errors import UserNotFoundError
from cicd_sample.core.user_directory import (
    DEFAULT_USERS, User, UserDirectory, parse_user_id,
)


def test_default_directory_has_three_users_in_order():
    directory = UserDirectory()
    assert len(directory) == 3
    assert [u.id for u in directory] == [1, 2, 3]


@pytest.mark.parametrize("user", DEFAULT_USERS, ids=lambda u: str(u.id))
def test_get_returns_seeded_user(user):
    assert UserDirectory().get(str(user.id)) == user


@pytest.mark.parametrize("raw_id", ["999", "0", "-1", "abc", "1.5", "", "1abc", "0x1"])
def test_get_raises_not_found_for_misses(raw_id):
    with pytest.raises(UserNotFoundError) as exc_info:
        UserDirectory().get(raw_id)
    assert exc_info.value.http_status == 404
    assert exc_info.value.to_response() == {"error": "User not found"}


def test_parse_user_id_accepts_only_decimal_integers():
    assert parse_user_id("42") == 42
    assert parse_user_id("007") == 7
    assert parse_user_id("+3") == 3
    assert parse_user_id("4e2") is None
    assert parse_user_id(" 1") is None


def test_parse_user_id_rejects_over_long_numbers():
    assert parse_user_id("9" * 5000) is None


def test_duplicate_ids_rejected():
    with pytest.raises(ValueError, match="duplicate"):
        UserDirectory([User(1, "A", "a@x.io"), User(1, "B", "b@x.io")])


def test_non_positive_ids_rejected():
    with pytest.raises(ValueError, match="positive"):
        UserDirectory([User(0, "A", "a@x.io")])


def test_records_are_frozen():
    user = UserDirectory().find(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        user.name = "Mallory"


def test_users_property_is_a_tuple():
    assert isinstance(UserDirectory().users, tuple)


def test_to_dict_has_public_fields_only():
    assert User(7, "Ada", "ada@example.com").to_dict() == {
        "id": 7, "name": "Ada", "email": "ada@example.com",
    }
