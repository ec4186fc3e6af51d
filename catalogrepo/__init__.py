"""Category and product repositories over a DB-API 2.0 connection."""

__version__ = "0.1.0"
__all__ = ["common", "category_repo", "product_repo"]