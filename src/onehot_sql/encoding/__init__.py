"""Indicator encoding, matrix assembly and SQL generation."""

from .assemble import assemble_matrix, numeric_block
from .encoder import EncodedBlock, encode_categoricals
from .naming import IndicatorSpec, NamingPolicy, indicator_specs
from .sql import CaseClause, build_case_clauses, build_sql, render_sql, write_sql

__all__ = [
    "assemble_matrix",
    "numeric_block",
    "EncodedBlock",
    "encode_categoricals",
    "IndicatorSpec",
    "NamingPolicy",
    "indicator_specs",
    "CaseClause",
    "build_case_clauses",
    "build_sql",
    "render_sql",
    "write_sql",
]
