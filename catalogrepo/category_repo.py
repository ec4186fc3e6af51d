"""Storage of product categories."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from catalogrepo.common import (
    NIL_UUID,
    NOT_FOUND,
    ZERO_TIME,
    NotFoundError,
    RepositoryError,
    _execute,
    _fetch,
    _params,
    _scan,
    _to_db,
    check_limit,
    check_rows_affected,
)

_GET = "SELECT id, name, description FROM categories WHERE id = :id"

_LIST = """
    SELECT id, name, description, created_at
    FROM categories
    WHERE created_at > :created_at
    ORDER BY created_at ASC
    LIMIT :limit
"""

_INSERT = (
    "INSERT INTO categories(id, name, description, created_at) "
    "VALUES(:id, :name, :description, :created_at)"
)

_UPDATE = "UPDATE categories SET name=:name, description=:description WHERE id=:id"

_DELETE = "DELETE FROM categories WHERE id = :id"


@dataclass
class Category:
    """A product category."""

    id: UUID = NIL_UUID
    name: str = ""
    description: str = ""
    created_at: datetime = ZERO_TIME


class CategoryRepo:
    """Category records held in the ``categories`` table of a DB-API connection."""

    def __init__(self, db: Any) -> None:
        self._db = db

    def get_category_by_id(self, category_id: UUID) -> Category:
        """Fetch one category; raise NotFoundError if there is none."""
        try:
            columns, rows = _fetch(self._db, _GET, {"id": _to_db(category_id)}, one=True)
            category = _scan(Category, columns, rows[0]) if rows else None
        except Exception as exc:
            raise RepositoryError(f"getCategoryByID: select query failed: {exc}") from exc
        if category is None:
            raise NotFoundError(f"getCategoryByID: {NOT_FOUND}: id `{category_id}`")
        return category

    def list_categories(self, created_after: datetime, limit: int) -> list[Category]:
        """Return up to ``limit`` categories created after the cursor, oldest first."""
        params = {"created_at": _to_db(created_after), "limit": check_limit(limit)}
        try:
            columns, rows = _fetch(self._db, _LIST, params)
        except Exception as exc:
            raise RepositoryError(f"listCategories: select query failed: {exc}") from exc
        try:
            return [_scan(Category, columns, row) for row in rows]
        except ValueError as exc:
            raise RepositoryError(f"listCategories: scan failed: {exc}") from exc

    def create_category(self, category: Category) -> None:
        """Insert a new category."""
        try:
            result = _execute(self._db, _INSERT, _params(category))
        except Exception as exc:
            raise RepositoryError(f"createCategory: insert query failed: {exc}") from exc
        check_rows_affected(result, "createCategory")

    def update_category(self, category: Category) -> None:
        """Change the name and description of an existing category."""
        try:
            result = _execute(self._db, _UPDATE, _params(category))
        except Exception as exc:
            raise RepositoryError(f"updateCategory: update query failed: {exc}") from exc
        check_rows_affected(result, "updateCategory")

    def delete_category(self, category_id: UUID) -> None:
        """Remove a category by its id."""
        try:
            result = _execute(self._db, _DELETE, {"id": _to_db(category_id)})
        except Exception as exc:
            raise RepositoryError(f"deleteCategory: delete query failed: {exc}") from exc
        check_rows_affected(result, "deleteCategory")