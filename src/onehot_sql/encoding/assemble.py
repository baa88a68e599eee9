from __future__ import annotations

from typing import List

import numpy as np
import pandas as pd

from ..data.catalog import EncodingCatalog
from ..exceptions import ColumnNameCollisionError
from .naming import find_collisions


def numeric_block(data: pd.DataFrame, catalog: EncodingCatalog) -> pd.DataFrame:
    cols = {
        c: pd.to_numeric(data[c], errors="coerce").to_numpy(dtype="float64", na_value=np.nan)
        for c in catalog.numeric_columns
    }
    return pd.DataFrame(cols, index=data.index, columns=list(catalog.numeric_columns))


def assemble_matrix(numeric: pd.DataFrame, indicators: pd.DataFrame) -> pd.DataFrame:
    """Numeric columns then indicators, as float64, sorted by column name.

    Missing values pass through as NaN. Raises ``ColumnNameCollisionError``
    rather than letting one column shadow another.
    """
    if len(numeric) != len(indicators):
        raise ValueError(
            f"Row count mismatch: {len(numeric)} numeric rows vs {len(indicators)} indicator rows."
        )
    names: List[str] = [str(c) for c in numeric.columns] + [str(c) for c in indicators.columns]
    collisions = find_collisions(
        [(str(c), "numeric") for c in numeric.columns]
        + [(str(c), "indicator") for c in indicators.columns]
    )
    if collisions:
        raise ColumnNameCollisionError(collisions)

    values = np.hstack(
        [
            numeric.to_numpy(dtype="float64", na_value=np.nan),
            indicators.to_numpy(dtype="float64", na_value=np.nan),
        ]
    )
    out = pd.DataFrame(values, index=numeric.index, columns=names)
    return out[sorted(names)]


__all__ = ["numeric_block", "assemble_matrix"]
