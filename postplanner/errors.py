"""
Store-level write errors.

The database raises a driver-specific ``IntegrityError``; callers get a
``ConstraintViolation`` naming the constraint kind and the offending column.
"""
import re
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

UNIQUE = "unique"
NOT_NULL = "not_null"
FOREIGN_KEY = "foreign_key"

# SQLite: "UNIQUE constraint failed: users.email"
_SQLITE_COLUMN = re.compile(r"(UNIQUE|NOT NULL) constraint failed: (\w+)\.(\w+)")
# PostgreSQL: 'null value in column "content" of relation "posts" ...'
_PG_NOT_NULL = re.compile(r'null value in column "(\w+)"(?: of relation "(\w+)")?')
# PostgreSQL: "Key (email)=(...) already exists"
_PG_KEY = re.compile(r"Key \((\w+)\)=")


class ConstraintViolation(Exception):
    """A write rejected by a NOT NULL, UNIQUE or FOREIGN KEY constraint."""

    def __init__(self, kind: str, table: Optional[str] = None, column: Optional[str] = None):
        self.kind = kind
        self.table = table
        self.column = column
        target = f"{table}.{column}" if table and column else (column or table or "unknown column")
        super().__init__(f"{kind.replace('_', ' ')} constraint violated on {target}")

    def to_dict(self) -> dict:
        return {"kind": self.kind, "table": self.table, "column": self.column}


def _kind_of(message: str) -> str:
    lowered = message.lower()
    if "foreign key" in lowered:
        return FOREIGN_KEY
    if "not null" in lowered or "not-null" in lowered:
        return NOT_NULL
    return UNIQUE


def _missing_reference(db, instance) -> Optional[str]:
    """Return the first foreign-key column of ``instance`` whose parent row is absent."""
    for fk in sorted(instance.__table__.foreign_keys, key=lambda fk: fk.parent.name):
        value = getattr(instance, fk.parent.name)
        if value is None:
            continue
        if db.execute(select(fk.column).where(fk.column == value)).first() is None:
            return fk.parent.name
    return None


def translate_integrity_error(exc: IntegrityError, db=None, instance=None) -> ConstraintViolation:
    """
    Build a ``ConstraintViolation`` from an ``IntegrityError``.

    SQLite reports foreign-key failures without a column, so when ``db`` and
    the rejected ``instance`` are given the missing parent is looked up.
    The session must already be rolled back.
    """
    message = str(exc.orig)
    kind = _kind_of(message)
    table = getattr(instance, "__tablename__", None)
    column = None

    sqlite_match = _SQLITE_COLUMN.search(message)
    pg_not_null = _PG_NOT_NULL.search(message)
    pg_key = _PG_KEY.search(message)
    if sqlite_match:
        table, column = sqlite_match.group(2), sqlite_match.group(3)
    elif pg_not_null:
        column = pg_not_null.group(1)
        table = pg_not_null.group(2) or table
    elif pg_key:
        column = pg_key.group(1)

    if kind == FOREIGN_KEY and column is None and db is not None and instance is not None:
        column = _missing_reference(db, instance)

    return ConstraintViolation(kind, table, column)
