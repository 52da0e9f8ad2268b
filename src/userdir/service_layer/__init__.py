"""Service layer for USERDIR.

Implements application use-cases: command handlers that assign ids, write
through the repository and announce changes, plus the read-side queries.

Dependency rule: may import `userdir.domain` and `userdir.interfaces`, but not
`userdir.adapters` or `userdir.entrypoints`.
"""
