"""
Error and warning types raised while encoding
"""
from typing import Dict, List, Optional


class SchemaDriftWarning(UserWarning):
    """Columns expected by the catalog were absent and filled with NAs."""


class ColumnNameCollisionError(ValueError):
    """Two output columns resolve to the same final name."""

    def __init__(self, collisions: Dict[str, List[str]]):
        self.collisions = collisions
        detail = "; ".join(
            f"{name} <- {', '.join(sources)}" for name, sources in collisions.items()
        )
        super().__init__(f"Output column names collide after normalization: {detail}")


class SqlSinkError(OSError):
    """Writing the SQL query failed; the computed result is kept on ``result``."""

    def __init__(self, message: str, result: Optional[object] = None):
        self.result = result
        super().__init__(message)
