"""Adapters (infrastructure) for USERDIR.

Provide concrete implementations of the interfaces (key-value stores, user
repositories, ID generators, change notifiers), plus persistence mapping and
related wiring (engines, metadata, migrations).

Dependency rule: may import `userdir.domain` and `userdir.interfaces`; the
domain must not import this package.
"""
