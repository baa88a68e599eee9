from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, TextIO, Union

from ..config import DEFAULT_INPUT_TABLE, DEFAULT_UNIQUE_ID
from ..data.catalog import EncodingCatalog
from .naming import NamingPolicy, indicator_specs

SqlSink = Union[str, "os.PathLike[str]", TextIO]


def quote_literal(value: str) -> str:
    return "'" + str(value).replace("'", "''") + "'"


@dataclass(frozen=True)
class CaseClause:
    column: str
    level: str
    alias: str

    def render(self) -> str:
        col = f"[{self.column}]"
        return (
            f"(case when {col} IS NULL then NULL "
            f"when {col} = {quote_literal(self.level)} then 1 else 0 end) AS [{self.alias}]"
        )


def build_case_clauses(catalog: EncodingCatalog, naming: NamingPolicy) -> List[CaseClause]:
    return [CaseClause(column=s.column, level=s.level, alias=s.name) for s in indicator_specs(catalog, naming)]


def render_sql(
    catalog: EncodingCatalog,
    clauses: List[CaseClause],
    unique_id: str = DEFAULT_UNIQUE_ID,
    input_table_name: str = DEFAULT_INPUT_TABLE,
) -> str:
    """Render the SELECT: row id, numeric columns, then one CASE per clause.

    Clause order is the catalog's order, not the matrix's alphabetical order.
    """
    head = ", ".join([unique_id] + [f"[{c}]" for c in catalog.numeric_columns])
    items = ["SELECT " + head] + [clause.render() for clause in clauses]
    return ", \n".join(items) + " \nFROM " + input_table_name


def build_sql(
    catalog: EncodingCatalog,
    naming: NamingPolicy,
    unique_id: str = DEFAULT_UNIQUE_ID,
    input_table_name: str = DEFAULT_INPUT_TABLE,
) -> str:
    return render_sql(catalog, build_case_clauses(catalog, naming), unique_id, input_table_name)


def write_sql(sql: str, sink: SqlSink) -> None:
    if hasattr(sink, "write"):
        sink.write(sql)
        return
    with open(sink, "w") as f:
        f.write(sql)


__all__ = [
    "CaseClause",
    "quote_literal",
    "build_case_clauses",
    "render_sql",
    "build_sql",
    "write_sql",
]
