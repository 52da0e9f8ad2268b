"""USERDIR

A small user directory: list, search, create, edit and delete user records
kept in a pluggable key-value store.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
