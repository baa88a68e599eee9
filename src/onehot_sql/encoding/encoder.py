from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

import numpy as np
import pandas as pd
from pandas.api import types as pd_types

from ..data.catalog import EncodingCatalog, as_level_strings
from .naming import IndicatorSpec, NamingPolicy, indicator_specs

logger = logging.getLogger(__name__)

_DATE_LEVEL = re.compile(r"\d{4}-\d{2}-\d{2}")


@dataclass
class EncodedBlock:
    frame: pd.DataFrame
    unseen: Dict[str, List[str]] = field(default_factory=dict)


def _render(series: pd.Series, levels: Sequence[str]) -> pd.Series:
    if pd_types.is_datetime64_any_dtype(series):
        date_only = all(_DATE_LEVEL.fullmatch(lv) for lv in levels)
        return as_level_strings(series, date_only=date_only)
    return as_level_strings(series)


def encode_column(
    series: pd.Series,
    basis: pd.DataFrame,
    names: Sequence[str],
) -> Tuple[pd.DataFrame, List[str]]:
    """Indicator columns for one categorical column.

    ``basis`` is the column's contrast matrix, indexed by level. Rows pick
    their level's row from it. Missing cells give a NaN row, values outside
    the levels give a zero row and are returned as unseen, in order of first
    appearance.
    """
    raw = _render(series, list(basis.index))
    missing = raw.isna().to_numpy()
    codes = basis.index.get_indexer(raw.to_numpy(dtype=object))
    hit = codes >= 0

    rows = basis.to_numpy(dtype="float64")
    values = np.zeros((len(raw), rows.shape[1]))
    values[hit] = rows[codes[hit]]
    values[missing] = np.nan

    unseen = list(dict.fromkeys(raw[(~hit) & (~missing)].tolist()))
    return pd.DataFrame(values, index=series.index, columns=list(names)), unseen


def encode_categoricals(
    data: pd.DataFrame,
    catalog: EncodingCatalog,
    naming: NamingPolicy,
) -> EncodedBlock:
    specs = indicator_specs(catalog, naming)
    by_column: Dict[str, List[IndicatorSpec]] = {}
    for spec in specs:
        by_column.setdefault(spec.column, []).append(spec)

    blocks: List[pd.DataFrame] = []
    unseen: Dict[str, List[str]] = {}
    for col in catalog.categorical_columns:
        col_specs = by_column[col]
        frame, new_values = encode_column(
            data[col],
            basis=catalog.contrasts(col),
            names=[s.name for s in col_specs],
        )
        blocks.append(frame)
        if new_values:
            unseen[col] = new_values
            logger.info(
                "Column '%s' has %d value(s) outside the catalog, encoded as all zeros: %s",
                col,
                len(new_values),
                ", ".join(new_values),
            )

    names = [s.name for s in specs]
    if blocks:
        values = np.hstack([b.to_numpy() for b in blocks])
    else:
        values = np.empty((len(data), 0))
    out = pd.DataFrame(values, index=data.index, columns=names)
    return EncodedBlock(frame=out, unseen=unseen)


__all__ = ["EncodedBlock", "encode_column", "encode_categoricals"]
