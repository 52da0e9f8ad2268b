"""Bootstrap (composition root) for USERDIR.

Assembles the application at runtime: picks a store from configuration, wires
concrete adapters into the service-layer handlers, and exposes the
`UserDirectory` facade used by entrypoints.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `userdir.adapters`, `userdir.service_layer`,
  `userdir.interfaces`, `userdir.domain`, and `userdir.config`.
- Inner layers must not import `userdir.bootstrap`.

Public surface:
- Re-export composition factories from this module; keep wiring helpers internal.
- No business rules live here; this is assembly and lifecycle only.
"""

from .bootstrap import UserDirectory, bootstrap

__all__ = ["UserDirectory", "bootstrap"]
