"""Entrypoints (inbound adapters) for USERDIR.

Expose the application to the outside world (currently the CLI). Parse and
validate inputs, call the `UserDirectory` facade, and present results.

Dependency rule: may import `userdir.bootstrap` and `userdir.domain`; avoid
importing `userdir.adapters` directly.
"""
