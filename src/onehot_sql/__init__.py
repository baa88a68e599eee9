"""One-hot encoding for model fitting with an equivalent in-database SQL query."""

from .config import EncodingOptions, load_config
from .data import EncodingCatalog, build_catalog, reconcile_schema
from .exceptions import ColumnNameCollisionError, SchemaDriftWarning, SqlSinkError
from .pipeline import EncodingResult, run_encoding

__all__ = [
    "EncodingOptions",
    "load_config",
    "EncodingCatalog",
    "build_catalog",
    "reconcile_schema",
    "ColumnNameCollisionError",
    "SchemaDriftWarning",
    "SqlSinkError",
    "EncodingResult",
    "run_encoding",
]
