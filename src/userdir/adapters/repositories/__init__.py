"""User repository adapters.

Both variants honour the same `UserRepository` contract and can be swapped
freely by the composition root.
"""

from .key_value import KeyValueUserRepository
from .memory import InMemoryUserRepository

__all__ = ["InMemoryUserRepository", "KeyValueUserRepository"]
