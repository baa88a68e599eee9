from __future__ import annotations

import re
import string
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from ..config import EncodingOptions
from ..data.catalog import EncodingCatalog
from ..exceptions import ColumnNameCollisionError

_WS_PUNCT = re.compile(r"[\s" + re.escape(string.punctuation) + r"]+")


@dataclass(frozen=True)
class NamingPolicy:
    """How indicator columns are named: ``<column><sep><normalized level>``.

    Normalization only affects names; the raw level is still what rows are
    matched against.
    """

    sep: str = "_"
    ws_replace: bool = True
    ws_replace_with: str = ""

    @classmethod
    def from_options(cls, options: EncodingOptions) -> "NamingPolicy":
        return cls(sep=options.sep, ws_replace=options.ws_replace, ws_replace_with=options.ws_replace_with)

    def normalize_level(self, level: str) -> str:
        if self.ws_replace:
            return _WS_PUNCT.sub(self.ws_replace_with, level)
        return level

    def indicator_name(self, column: str, level: str) -> str:
        return f"{column}{self.sep or ''}{self.normalize_level(level)}"


@dataclass(frozen=True)
class IndicatorSpec:
    column: str
    level: str
    name: str


def indicator_specs(catalog: EncodingCatalog, naming: NamingPolicy) -> List[IndicatorSpec]:
    """One record per (column, level) in catalog order."""
    return [
        IndicatorSpec(column=col, level=lvl, name=naming.indicator_name(col, lvl))
        for col in catalog.categorical_columns
        for lvl in catalog.levels[col]
    ]


def find_collisions(named_sources: Iterable[Tuple[str, str]]) -> Dict[str, List[str]]:
    seen: Dict[str, List[str]] = defaultdict(list)
    for name, source in named_sources:
        seen[name].append(source)
    return {name: sources for name, sources in seen.items() if len(sources) > 1}


def check_collisions(catalog: EncodingCatalog, specs: List[IndicatorSpec]) -> None:
    sources = [(c, f"numeric column '{c}'") for c in catalog.numeric_columns]
    sources += [(s.name, f"{s.column}={s.level!r}") for s in specs]
    collisions = find_collisions(sources)
    if collisions:
        raise ColumnNameCollisionError(collisions)


__all__ = [
    "NamingPolicy",
    "IndicatorSpec",
    "indicator_specs",
    "find_collisions",
    "check_collisions",
]
