"""Errors, paging limits and row mapping shared by the repositories."""

from __future__ import annotations

import dataclasses
from contextlib import closing
from datetime import datetime, timezone
from typing import Any, Mapping, Sequence, TypeVar
from uuid import UUID

MIN_LIMIT = 1
MAX_LIMIT = 1000

NOT_FOUND = "not found"

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
NIL_UUID = UUID(int=0)

T = TypeVar("T")


class RepositoryError(Exception):
    """A database operation of a repository failed."""


class NotFoundError(RepositoryError):
    """The requested record does not exist, or no row was affected."""


def check_limit(limit: int) -> int:
    """Clamp a page size into the range MIN_LIMIT..MAX_LIMIT."""
    return max(MIN_LIMIT, min(limit, MAX_LIMIT))


def check_rows_affected(result: Any, op: str) -> int:
    """Return the row count of an executed statement, raising if it is zero or unknown."""
    try:
        rows = result.rowcount
    except Exception as exc:
        raise RepositoryError(f"{op}: failed to get rows affected: {exc}") from exc
    if rows is None or rows < 0:
        raise RepositoryError(f"{op}: failed to get rows affected: row count unavailable")
    if rows == 0:
        raise NotFoundError(f"{op}: no rows affected: {NOT_FOUND}")
    return rows


def _to_db(value: Any) -> Any:
    """Convert a Python value into one every DB-API driver can bind."""
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def _from_db(default: Any, value: Any, name: str) -> Any:
    """Convert a column value to the type of the field whose default is given."""
    if value is None:
        raise ValueError(f"cannot store NULL in field {name}")
    if isinstance(default, UUID):
        if isinstance(value, UUID):
            return value
        if isinstance(value, (bytes, bytearray)) and len(value) == 16:
            return UUID(bytes=bytes(value))
        return UUID(str(value))
    if isinstance(default, datetime):
        if isinstance(value, datetime):
            return value
        if isinstance(value, str):
            return datetime.fromisoformat(value)
        raise ValueError(f"cannot convert {value!r} to a timestamp for field {name}")
    if isinstance(default, float):
        return float(value)
    if isinstance(default, int):
        return int(value)
    if isinstance(default, str):
        if isinstance(value, (bytes, bytearray)):
            return bytes(value).decode()
        return str(value)
    return value


def _params(record: Any) -> dict[str, Any]:
    """Named query parameters built from a record's fields."""
    return {
        field.name: _to_db(getattr(record, field.name))
        for field in dataclasses.fields(record)
    }


def _scan(cls: type[T], columns: Sequence[str], row: Sequence[Any]) -> T:
    """Build a record of ``cls`` from one result row."""
    fields = {field.name: field for field in dataclasses.fields(cls)}
    values: dict[str, Any] = {}
    for column, value in zip(columns, row):
        field = fields.get(column)
        if field is None:
            raise ValueError(f"missing destination name {column} in {cls.__name__}")
        values[column] = _from_db(field.default, value, column)
    return cls(**values)


def _fetch(
    db: Any, query: str, params: Mapping[str, Any], *, one: bool = False
) -> tuple[list[str], list[Sequence[Any]]]:
    """Run a query; return its column names and its rows (at most one if ``one``)."""
    with closing(db.cursor()) as cursor:
        cursor.execute(query, params)
        if one:
            row = cursor.fetchone()
            rows = [] if row is None else [row]
        else:
            rows = list(cursor.fetchall())
        columns = [desc[0] for desc in cursor.description or ()]
    return columns, rows


def _execute(db: Any, query: str, params: Mapping[str, Any]) -> Any:
    """Run a statement, commit it and return the cursor for its row count."""
    cursor = db.cursor()
    cursor.execute(query, params)
    db.commit()
    return cursor