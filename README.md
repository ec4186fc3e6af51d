# catalogrepo

A small data-access layer for a product catalogue. It has two
repositories, `CategoryRepo` and `ProductRepo`, that work on a DB-API 2.0
connection you pass in.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `catalogrepo.common`: the exceptions `RepositoryError` and
  `NotFoundError`, and the helpers `check_limit` and `check_rows_affected`.
- `catalogrepo.category_repo`: the `Category` dataclass and `CategoryRepo`.
- `catalogrepo.product_repo`: the `Product` dataclass and `ProductRepo`.

## Records

- `Category`: `id`, `name`, `description`, `created_at`
- `Product`: `id`, `name`, `description`, `image_url`, `category_id`,
  `price`, `quantity`, `created_at`

`id` and `category_id` are `uuid.UUID` values. `created_at` is a
`datetime`. A field left unset keeps its default: the nil UUID, an empty
string, `0` / `0.0`, or 0001-01-01 00:00 UTC (`common.ZERO_TIME`).

## The connection

The repositories need an object that has `cursor()` and `commit()`, with
cursors that support `execute(query, params)`, `fetchone()`, `fetchall()`,
`description` and `rowcount`. Queries use named parameters (`:id`,
`:name`, ...), the style that `sqlite3` accepts.

UUIDs are sent as their string form and datetimes as ISO 8601 strings.
When rows are read back, each column is converted to the type of the
matching field. A UUID column may be a string, 16 raw bytes or a `UUID`.
A timestamp column may be an ISO string or a `datetime`. A column that
has no matching field, or a NULL value, is a scan error.

The repositories expect the tables `categories` and `products` to exist
already. They do not create them.

## Usage

```python
import sqlite3
import uuid
from datetime import datetime, timezone

from catalogrepo.category_repo import Category, CategoryRepo
from catalogrepo.common import ZERO_TIME, NotFoundError

conn = sqlite3.connect(":memory:")
conn.execute(
    "CREATE TABLE categories ("
    "id TEXT PRIMARY KEY, name TEXT, description TEXT, created_at TEXT)"
)

repo = CategoryRepo(conn)
books = Category(
    id=uuid.uuid4(),
    name="Books",
    description="Printed books",
    created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
)
repo.create_category(books)

found = repo.get_category_by_id(books.id)
page = repo.list_categories(ZERO_TIME, 50)

try:
    repo.delete_category(uuid.uuid4())
except NotFoundError as exc:
    print(exc)  # deleteCategory: no rows affected: not found
```

`ProductRepo` works the same way on a `products` table, through
`get_product_by_id`, `list_products`, `create_product`, `update_product`
and `delete_product`.

## Behaviour

- `get_category_by_id` and `get_product_by_id` raise `NotFoundError` when
  no row matches. `get_category_by_id` selects only `id`, `name` and
  `description`, so the `created_at` of the returned category keeps its
  default.
- `list_categories` and `list_products` return the records whose
  `created_at` is strictly later than `created_after`, oldest first. The
  comparison is done by the database on the stored values. `limit` is
  clamped to the range 1 to 1000 by `check_limit`. When nothing matches,
  the result is an empty list.
- `create_*`, `update_*` and `delete_*` commit on the connection, then
  raise `NotFoundError` if no row was affected. `update_category` changes
  only `name` and `description`. `update_product` overwrites every field
  except `id`.
- `check_rows_affected(result, op)` returns `result.rowcount`. It raises
  `NotFoundError` when the count is zero, and `RepositoryError` when the
  count cannot be read or is negative.

Every other failure raises `RepositoryError`. The message names the
operation and what failed, for example
`getCategoryByID: select query failed: ...` or
`listProducts: scan failed: missing destination name createdAt in Product`.
`NotFoundError` is a subclass of `RepositoryError`, and the original
exception is kept as `__cause__`.

## What it does not do

This is only a library. It has no command-line program, no HTTP server
and no schema migrations. You supply the connection and the tables.