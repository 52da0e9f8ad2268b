"""The `MetaData` every USERDIR table is declared on.

Its naming convention gives unnamed (and short-named) constraints stable,
table-prefixed names. Migration scripts spell those names out, so a table
model and its migration stay comparable by Alembic autogenerate.

| Kind        | Name                                 |
|-------------|--------------------------------------|
| primary key | ``pk_<table>``                       |
| check       | ``ck_<table>_<name given in model>`` |
| unique      | ``uq_<table>_<columns>``             |
| index       | ``ix_<columns>``                     |
"""

from sqlalchemy import MetaData

NAMING_CONVENTION = {
    "pk": "pk_%(table_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "uq": "uq_%(table_name)s_%(column_0_N_name)s",
    "ix": "ix_%(column_0_N_label)s",
}

metadata = MetaData(naming_convention=NAMING_CONVENTION)
