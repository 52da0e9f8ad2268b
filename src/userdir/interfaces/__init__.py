"""Interfaces (application boundary) for USERDIR.

Defines framework-free application contracts: ABCs and their error types
shared by the service layer and adapters (key-value stores, user repositories,
ID generators, change notifiers). Business rules stay out of this package.

Dependency rule: this package may import `userdir.domain` only. It may be
imported by `userdir.service_layer`, `userdir.adapters`, and
`userdir.bootstrap`.
"""
