"""Read-side queries over a `UserRepository`."""

from userdir.domain.model import User
from userdir.interfaces.user_repository import UserRepository


def list_users(users: UserRepository) -> list[User]:
    """Return every user, in the repository's enumeration order."""
    return users.list_all()


def search_users(users: UserRepository, term: str = "") -> list[User]:
    """Return users whose first or last name contains `term`.

    Matching is a plain, case-sensitive substring test; the empty term
    matches everyone. Results keep the repository's enumeration order.
    """
    return [user for user in users.list_all() if user.matches(term)]


def get_user(users: UserRepository, user_id: str) -> User | None:
    """Return the user stored under `user_id`, or None."""
    return users.get(user_id)
