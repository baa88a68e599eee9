from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field
from typing import List

import pandas as pd

from ..exceptions import SchemaDriftWarning
from .catalog import EncodingCatalog, validate_frame

logger = logging.getLogger(__name__)


@dataclass
class ReconcileReport:
    data: pd.DataFrame
    added_columns: List[str] = field(default_factory=list)
    dropped_columns: List[str] = field(default_factory=list)


def reconcile_schema(data: pd.DataFrame, catalog: EncodingCatalog) -> ReconcileReport:
    """Align ``data`` to the columns ``catalog`` expects.

    Unexpected columns are dropped silently; expected columns that are absent
    are added as all-missing and reported with a ``SchemaDriftWarning``. The
    returned frame is ordered like ``catalog.expected_columns``.
    """
    validate_frame(data)
    df = data.copy()
    df.columns = [str(c) for c in df.columns]

    expected = list(catalog.expected_columns)
    dropped = [c for c in df.columns if c not in catalog.expected_columns]
    added = [c for c in expected if c not in df.columns]

    if dropped:
        logger.debug("Dropping columns not in catalog: %s", ", ".join(dropped))
    df = df.reindex(columns=expected)
    if added:
        warnings.warn(
            "Following columns are populated with NAs: " + ", ".join(added),
            SchemaDriftWarning,
            stacklevel=3,
        )
    return ReconcileReport(data=df, added_columns=added, dropped_columns=dropped)


__all__ = ["ReconcileReport", "reconcile_schema"]
