"""Storage of products."""

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

_GET = """
    SELECT id, name, description, image_url, category_id, price, quantity, created_at
    FROM products
    WHERE id = :id
"""

_LIST = """
    SELECT id, name, description, image_url, category_id, price, quantity, created_at
    FROM products
    WHERE created_at > :created_at
    ORDER BY created_at ASC
    LIMIT :limit
"""

_INSERT = """
    INSERT INTO products(id, name, description, image_url, category_id, price, quantity, created_at)
    VALUES(:id, :name, :description, :image_url, :category_id, :price, :quantity, :created_at)
"""

_UPDATE = """
    UPDATE products
    SET name=:name, description=:description, image_url=:image_url, category_id=:category_id,
    price=:price, quantity=:quantity, created_at=:created_at
    WHERE id=:id
"""

_DELETE = "DELETE FROM products WHERE id = :id"


@dataclass
class Product:
    """A product offered in the catalogue."""

    id: UUID = NIL_UUID
    name: str = ""
    description: str = ""
    image_url: str = ""
    category_id: UUID = NIL_UUID
    price: float = 0.0
    quantity: int = 0
    created_at: datetime = ZERO_TIME


class ProductRepo:
    """Product records held in the ``products`` table of a DB-API connection."""

    def __init__(self, db: Any) -> None:
        self._db = db

    def get_product_by_id(self, product_id: UUID) -> Product:
        """Fetch one product; raise NotFoundError if there is none."""
        try:
            columns, rows = _fetch(self._db, _GET, {"id": _to_db(product_id)}, one=True)
            product = _scan(Product, columns, rows[0]) if rows else None
        except Exception as exc:
            raise RepositoryError(f"getProductByID: select query failed: {exc}") from exc
        if product is None:
            raise NotFoundError(f"getProductByID: {NOT_FOUND}: id `{product_id}`")
        return product

    def list_products(self, created_after: datetime, limit: int) -> list[Product]:
        """Return up to ``limit`` products created after the cursor, oldest first."""
        params = {"created_at": _to_db(created_after), "limit": check_limit(limit)}
        try:
            columns, rows = _fetch(self._db, _LIST, params)
        except Exception as exc:
            raise RepositoryError(f"listProducts: select query failed: {exc}") from exc
        try:
            return [_scan(Product, columns, row) for row in rows]
        except ValueError as exc:
            raise RepositoryError(f"listProducts: scan failed: {exc}") from exc

    def create_product(self, product: Product) -> None:
        """Insert a new product."""
        try:
            result = _execute(self._db, _INSERT, _params(product))
        except Exception as exc:
            raise RepositoryError(f"createProduct: insert query failed: {exc}") from exc
        check_rows_affected(result, "createProduct")

    def update_product(self, product: Product) -> None:
        """Overwrite every field of an existing product."""
        try:
            result = _execute(self._db, _UPDATE, _params(product))
        except Exception as exc:
            raise RepositoryError(f"updateProduct: update query failed: {exc}") from exc
        check_rows_affected(result, "updateProduct")

    def delete_product(self, product_id: UUID) -> None:
        """Remove a product by its id."""
        try:
            result = _execute(self._db, _DELETE, {"id": _to_db(product_id)})
        except Exception as exc:
            raise RepositoryError(f"deleteProduct: delete query failed: {exc}") from exc
        check_rows_affected(result, "deleteProduct")