"""SQLAlchemy plumbing shared by the database-backed adapters.

Engine factory, shared `MetaData`, and the packaged Alembic migrations.
"""
