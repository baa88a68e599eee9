"""
Primary entry point: one-hot encode a dataset and emit the matching SQL.

The catalog is either captured from ``data`` (reference call) or supplied by
the caller, in which case it is read-only ground truth: the dataset is
reconciled to it, unseen levels are zeroed, and the matrix and query are both
derived from it.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

import numpy as np
import pandas as pd

from .config import DEFAULT_INPUT_TABLE, DEFAULT_UNIQUE_ID, EncodingOptions
from .data.catalog import EncodingCatalog, build_catalog, validate_frame
from .data.reconcile import reconcile_schema
from .encoding.assemble import assemble_matrix, numeric_block
from .encoding.encoder import encode_categoricals
from .encoding.naming import NamingPolicy, check_collisions, indicator_specs
from .encoding.sql import SqlSink, build_case_clauses, render_sql, write_sql
from .exceptions import SqlSinkError

logger = logging.getLogger(__name__)


@dataclass
class EncodingResult:
    catalog: EncodingCatalog
    matrix: pd.DataFrame
    sql: str
    unseen: Dict[str, List[str]] = field(default_factory=dict)
    missing_columns: List[str] = field(default_factory=list)
    dropped_columns: List[str] = field(default_factory=list)

    def to_numpy(self) -> np.ndarray:
        return self.matrix.to_numpy(dtype="float64")


def _resolve_identifiers(options: EncodingOptions, writes_sql: bool):
    unique_id = options.unique_id
    if unique_id is None:
        unique_id = DEFAULT_UNIQUE_ID
        if writes_sql:
            logger.warning("query is written with row unique id named as %s", DEFAULT_UNIQUE_ID)
    input_table_name = options.input_table_name
    if input_table_name is None:
        input_table_name = DEFAULT_INPUT_TABLE
        if writes_sql:
            logger.warning("query is written with input table named as %s", DEFAULT_INPUT_TABLE)
    return unique_id, input_table_name


def run_encoding(
    data: pd.DataFrame,
    catalog: Union[EncodingCatalog, Mapping[str, Any], None] = None,
    *,
    sep: str = "_",
    ws_replace: bool = True,
    ws_replace_with: str = "",
    unique_id: Optional[str] = None,
    output_file: Optional[SqlSink] = None,
    input_table_name: Optional[str] = None,
    options: Optional[EncodingOptions] = None,
) -> EncodingResult:
    """Encode ``data`` and generate the equivalent SQL query.

    Args:
        data: input frame; non-numeric columns (text, bool, dates, categories)
            are one-hot encoded, numeric columns pass through.
        catalog: a catalog from an earlier call (or its ``to_dict()`` form).
            When given, the output follows it exactly.
        sep: separator between column name and level in output names.
        ws_replace: strip whitespace and punctuation from levels in names.
        ws_replace_with: replacement for stripped characters.
        unique_id: row id selected first in the query, ``ROW_KEY`` if unset.
        output_file: path or text stream the query is written to.
        input_table_name: table the query selects from, ``INPUT_TABLE`` if unset.
        options: all of the policy arguments above in one object, e.g. from
            ``EncodingOptions.from_config``; takes precedence when given.

    Raises:
        ColumnNameCollisionError: two output columns would share a name.
        SqlSinkError: the query could not be written; ``.result`` holds the
            computed result.
    """
    if options is None:
        options = EncodingOptions(
            sep="" if sep is None else sep,
            ws_replace=ws_replace,
            ws_replace_with=ws_replace_with,
            unique_id=unique_id,
            input_table_name=input_table_name,
        )
    uid, table = _resolve_identifiers(options, writes_sql=output_file is not None)

    if catalog is None:
        validate_frame(data)
        catalog = build_catalog(data)
        df = data.copy()
        df.columns = [str(c) for c in df.columns]
        missing: List[str] = []
        dropped: List[str] = []
    else:
        if not isinstance(catalog, EncodingCatalog):
            catalog = EncodingCatalog.from_dict(catalog)
        report = reconcile_schema(data, catalog)
        df, missing, dropped = report.data, report.added_columns, report.dropped_columns

    naming = NamingPolicy.from_options(options)
    specs = indicator_specs(catalog, naming)
    check_collisions(catalog, specs)

    block = encode_categoricals(df, catalog, naming)
    matrix = assemble_matrix(numeric_block(df, catalog), block.frame)

    clauses = build_case_clauses(catalog, naming)
    sql = render_sql(catalog, clauses, unique_id=uid, input_table_name=table)

    result = EncodingResult(
        catalog=catalog,
        matrix=matrix,
        sql=sql,
        unseen=block.unseen,
        missing_columns=missing,
        dropped_columns=dropped,
    )

    if output_file is not None:
        try:
            write_sql(sql, output_file)
        except (OSError, ValueError) as exc:
            raise SqlSinkError(f"Failed to write SQL query to {output_file!r}: {exc}", result=result) from exc
    return result


__all__ = ["EncodingResult", "run_encoding"]
