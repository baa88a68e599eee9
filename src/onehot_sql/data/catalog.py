from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
from pandas.api import types as pd_types

logger = logging.getLogger(__name__)


def validate_frame(data: pd.DataFrame) -> None:
    if not isinstance(data, pd.DataFrame):
        raise TypeError(f"Expected a pandas DataFrame, got {type(data).__name__}.")
    names = pd.Index([str(c) for c in data.columns])
    dup = names[names.duplicated()].tolist()
    if dup:
        raise ValueError(f"Dataset has duplicate column names: {sorted(set(dup))}")


def is_numeric_column(series: pd.Series) -> bool:
    """Numeric passthrough columns: any numeric dtype except booleans."""
    return pd_types.is_numeric_dtype(series) and not pd_types.is_bool_dtype(series)


def _render_value(value: Any) -> str:
    # integer codes stored as float (e.g. a column with a missing cell)
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return str(int(value))
    return str(value)


def as_level_strings(series: pd.Series, date_only: Optional[bool] = None) -> pd.Series:
    """Render values as the level strings matched in memory and in SQL.

    Missing cells stay ``None``. Whole-number floats render without ``.0``.
    Datetimes render as dates when no value in the column carries a time of
    day, unless ``date_only`` forces the format.
    """
    mask = series.isna()
    if pd_types.is_datetime64_any_dtype(series):
        if date_only is None:
            observed = series[~mask]
            date_only = bool((observed.dt.normalize() == observed).all())
        fmt = "%Y-%m-%d" if date_only else "%Y-%m-%d %H:%M:%S"
        out = series.dt.strftime(fmt).astype(object)
    else:
        out = series.astype(object).map(_render_value)
    return out.where(~mask, None)


def _sorted_distinct(series: pd.Series) -> List[Any]:
    values = pd.Series(series.dropna().unique())
    try:
        return values.sort_values(kind="mergesort").tolist()
    except TypeError:
        # mixed python types in an object column
        return sorted(values.tolist(), key=str)


def derive_levels(series: pd.Series) -> Tuple[str, ...]:
    if isinstance(series.dtype, pd.CategoricalDtype):
        raw = pd.Series(series.cat.categories)
    else:
        raw = pd.Series(_sorted_distinct(series), dtype=series.dtype)
    rendered = as_level_strings(raw)
    return tuple(dict.fromkeys(v for v in rendered if pd.notna(v)))


@dataclass(frozen=True, eq=False)
class EncodingCatalog:
    """Captured column classification and canonical level lists.

    Built once from reference data (``build_catalog``) or reloaded from a
    persisted copy, then treated as read-only ground truth for every later
    encoding and query.
    """

    numeric_columns: Tuple[str, ...]
    categorical_columns: Tuple[str, ...]
    levels: Mapping[str, Tuple[str, ...]]

    def __post_init__(self):
        numeric = tuple(str(c) for c in self.numeric_columns)
        categorical = tuple(str(c) for c in self.categorical_columns)
        overlap = set(numeric) & set(categorical)
        if overlap:
            raise ValueError(f"Columns classified as both numeric and categorical: {sorted(overlap)}")
        if len(set(numeric)) != len(numeric) or len(set(categorical)) != len(categorical):
            raise ValueError("Catalog lists a column more than once.")

        levels: Dict[str, Tuple[str, ...]] = {}
        for col in categorical:
            if col not in self.levels:
                raise ValueError(f"No levels recorded for categorical column '{col}'.")
            lv = tuple(str(v) for v in self.levels[col])
            if not lv:
                raise ValueError(f"Categorical column '{col}' has zero levels.")
            if len(set(lv)) != len(lv):
                raise ValueError(f"Categorical column '{col}' has repeated levels.")
            levels[col] = lv
        extra = set(self.levels) - set(categorical)
        if extra:
            raise ValueError(f"Levels recorded for non-categorical columns: {sorted(extra)}")

        object.__setattr__(self, "numeric_columns", numeric)
        object.__setattr__(self, "categorical_columns", categorical)
        object.__setattr__(self, "levels", MappingProxyType(levels))

    @property
    def expected_columns(self) -> Tuple[str, ...]:
        return self.numeric_columns + self.categorical_columns

    @property
    def n_indicators(self) -> int:
        return sum(len(lv) for lv in self.levels.values())

    def contrasts(self, column: str) -> pd.DataFrame:
        """Full-rank indicator basis for ``column``: one row and one column per level."""
        lv = list(self.levels[column])
        return pd.DataFrame(np.eye(len(lv)), index=lv, columns=lv)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "numeric_columns": list(self.numeric_columns),
            "categorical_columns": list(self.categorical_columns),
            "levels": {col: list(lv) for col, lv in self.levels.items()},
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "EncodingCatalog":
        if not isinstance(payload, Mapping):
            raise TypeError("Catalog payload must be a mapping.")
        unknown = set(payload) - {"numeric_columns", "categorical_columns", "levels"}
        if unknown:
            raise ValueError(f"Unknown catalog keys: {sorted(unknown)}")
        return cls(
            numeric_columns=tuple(payload.get("numeric_columns") or ()),
            categorical_columns=tuple(payload.get("categorical_columns") or ()),
            levels={str(k): tuple(v) for k, v in (payload.get("levels") or {}).items()},
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EncodingCatalog):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(
            (
                self.numeric_columns,
                self.categorical_columns,
                tuple(sorted(self.levels.items())),
            )
        )


def build_catalog(data: pd.DataFrame) -> EncodingCatalog:
    validate_frame(data)
    numeric: List[str] = []
    categorical: List[str] = []
    levels: Dict[str, Sequence[str]] = {}
    for col in data.columns:
        series = data[col]
        if is_numeric_column(series):
            numeric.append(str(col))
            continue
        lv = derive_levels(series)
        if not lv:
            raise ValueError(
                f"Categorical column '{col}' has no observed levels; "
                "drop it or supply a catalog."
            )
        categorical.append(str(col))
        levels[str(col)] = lv
    logger.debug(
        "Catalog built: %d numeric, %d categorical columns",
        len(numeric),
        len(categorical),
    )
    return EncodingCatalog(
        numeric_columns=tuple(numeric),
        categorical_columns=tuple(categorical),
        levels=levels,
    )


__all__ = [
    "EncodingCatalog",
    "build_catalog",
    "derive_levels",
    "as_level_strings",
    "is_numeric_column",
    "validate_frame",
]
