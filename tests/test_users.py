import sqlite3

import pytest

from taskboard.models import NewUser
from taskboard.schema import create_schema
from taskboard.users import (
    delete_users_by_name,
    find_user_by_name,
    insert_user,
    load_users,
    set_active_by_name,
)


@pytest.fixture
def conn():
    connection = sqlite3.connect(":memory:")
    create_schema(connection)
    yield connection
    connection.close()


def test_crud_cycle_for_david(conn):
    insert_user(conn, NewUser(name="David", email="david@example.com", active=True))

    users = load_users(conn, 10)
    assert [(u.name, u.email, u.active) for u in users] == [
        ("David", "david@example.com", True)
    ]

    assert set_active_by_name(conn, "David", False) == 1

    updated = find_user_by_name(conn, "David")
    assert updated.active is False

    assert delete_users_by_name(conn, "David") == 1
    assert [u.name for u in load_users(conn, 10)] == []


def test_insert_returns_sequential_ids(conn):
    first = insert_user(conn, NewUser("David", "david@example.com", True))
    second = insert_user(conn, NewUser("Erin", "erin@example.com", False))
    assert (first, second) == (1, 2)


def test_load_users_respects_limit(conn):
    for index in range(12):
        insert_user(conn, NewUser(f"user{index}", f"user{index}@example.com", True))
    assert len(load_users(conn, 10)) == 10
    assert len(load_users(conn)) == 12
    assert [u.id for u in load_users(conn, 3)] == [1, 2, 3]


def test_find_missing_user_raises(conn):
    with pytest.raises(LookupError):
        find_user_by_name(conn, "David")


def test_updates_only_matching_name(conn):
    insert_user(conn, NewUser("David", "david@example.com", True))
    insert_user(conn, NewUser("Erin", "erin@example.com", True))
    set_active_by_name(conn, "David", False)
    assert find_user_by_name(conn, "Erin").active is True
    assert delete_users_by_name(conn, "Nobody") == 0
    assert len(load_users(conn)) == 2