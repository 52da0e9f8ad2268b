"""USERDIR test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Shared behavior enforced across every implementation of an interface.
- integration/  : Real SQLite databases, Alembic migrations and bootstrap wiring.
- e2e/          : The ``userdir`` CLI driven through Click's CliRunner.
- fixtures/     : Shared pytest fixtures (SQLite engines, test data).
- helpers/      : Shared utilities (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O); prefer fakes over mocks at boundaries.
- Contract parametrizes implementations to ensure consistent behavior.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers unit/contract/integration/e2e are applied per directory by each conftest.
"""
