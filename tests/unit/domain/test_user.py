"""Unit tests for the `User` record."""

import dataclasses

import pytest

from userdir.domain.errors import (
    InvalidUserIdError,
    MalformedUserRecordError,
    MissingUserIdError,
)
from userdir.domain.model import DEMO_USERS, USER_ID_MAX_LENGTH, User, check_user_id

# pylint: disable=magic-value-comparison


def test_new_user_has_no_id():
    """A record built without an id is not yet saved."""
    user = User(first_name="John", last_name="Doe")
    assert user.id is None
    assert not user.has_id


def test_empty_id_does_not_count_as_an_id():
    """An empty string is treated like a missing id."""
    assert not User(first_name="John", last_name="Doe", id="").has_id


def test_with_id_returns_a_copy():
    """with_id() leaves the original record untouched."""
    user = User(first_name="John", last_name="Doe")
    saved = user.with_id("u-1")
    assert saved == User(first_name="John", last_name="Doe", id="u-1")
    assert user.id is None


def test_user_is_immutable():
    """Records are frozen; changes go through with_id()/replace()."""
    user = User(first_name="John", last_name="Doe")
    with pytest.raises(dataclasses.FrozenInstanceError):
        user.first_name = "Jane"  # type: ignore[misc]


def test_names_are_kept_as_given():
    """No trimming or case folding happens on construction."""
    user = User(first_name="  jOhN ", last_name="")
    assert user.first_name == "  jOhN "
    assert user.last_name == ""


@pytest.mark.parametrize(
    ("term", "expected"),
    [
        ("", True),
        ("Jo", True),
        ("ohn", True),
        ("Do", True),
        ("John Doe", False),
        ("doe", False),
        ("x", False),
    ],
)
def test_matches_is_case_sensitive_substring(term, expected):
    """matches() tests each name separately, case-sensitively."""
    assert User(first_name="John", last_name="Doe").matches(term) is expected


def test_to_dict_uses_document_field_names():
    """The stored document keeps the id/firstName/lastName field names."""
    user = User(first_name="Jane", last_name="Doe", id="u-2")
    assert user.to_dict() == {"id": "u-2", "firstName": "Jane", "lastName": "Doe"}


def test_from_dict_reads_document():
    """from_dict() is the inverse of to_dict()."""
    user = User.from_dict({"id": "u-2", "firstName": "Jane", "lastName": "Doe"})
    assert user == User(first_name="Jane", last_name="Doe", id="u-2")


def test_from_dict_without_id():
    """A document without an id yields an unsaved record."""
    user = User.from_dict({"firstName": "Jane", "lastName": "Doe"})
    assert user.id is None


def test_from_dict_ignores_unknown_fields():
    """Extra fields written by other clients are ignored."""
    user = User.from_dict(
        {"id": "u-2", "firstName": "Jane", "lastName": "Doe", "email": "j@d.org"}
    )
    assert user == User(first_name="Jane", last_name="Doe", id="u-2")


@pytest.mark.parametrize(
    ("data", "reason"),
    [
        (["Jane", "Doe"], "document is not an object"),
        ({"lastName": "Doe"}, "'firstName' must be a string"),
        ({"firstName": "Jane"}, "'lastName' must be a string"),
        ({"firstName": 1, "lastName": "Doe"}, "'firstName' must be a string"),
        ({"firstName": "Jane", "lastName": "Doe", "id": 7}, "'id' must be a string"),
    ],
)
def test_from_dict_rejects_malformed_documents(data, reason):
    """Malformed documents raise MalformedUserRecordError naming the key."""
    with pytest.raises(MalformedUserRecordError) as exc_info:
        User.from_dict(data, key="k-1")
    assert exc_info.value.key == "k-1"
    assert exc_info.value.reason == reason


def test_demo_users_have_distinct_ids():
    """The demo records are ready to store."""
    ids = [user.id for user in DEMO_USERS]
    assert all(ids)
    assert len(set(ids)) == len(DEMO_USERS)
    assert {(u.first_name, u.last_name) for u in DEMO_USERS} == {
        ("John", "Doe"),
        ("Jane", "Doe"),
        ("John", "Smith"),
    }


@pytest.mark.parametrize("user_id", ["u-1", "0001", "ü" * USER_ID_MAX_LENGTH])
def test_check_user_id_accepts_storable_ids(user_id):
    """Non-empty UTF-8 text up to the length limit is returned unchanged."""
    assert check_user_id(user_id) == user_id


@pytest.mark.parametrize("user_id", [None, ""])
def test_check_user_id_requires_an_id(user_id):
    """None and the empty string mean the record has no id yet."""
    with pytest.raises(MissingUserIdError):
        check_user_id(user_id)


@pytest.mark.parametrize(
    "user_id, reason",
    [
        ("u" * (USER_ID_MAX_LENGTH + 1), "256 characters long"),
        ("u-\udcff", "not valid UTF-8"),
    ],
)
def test_check_user_id_rejects_unstorable_ids(user_id, reason):
    """Over-long ids and ids holding lone surrogates cannot be keys."""
    with pytest.raises(InvalidUserIdError, match=reason):
        check_user_id(user_id)
