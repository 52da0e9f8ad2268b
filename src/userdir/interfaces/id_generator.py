"""Port for minting user ids."""

import abc

# pylint: disable=too-few-public-methods


class IdGenerator(abc.ABC):
    """Source of identifiers for newly created users.

    Every call must return a non-empty string that has not been returned
    before, because ids double as storage keys.
    """

    @abc.abstractmethod
    def new_id(self) -> str:
        """Return a fresh, never-before-seen id."""
