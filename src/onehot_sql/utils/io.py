from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Union

import joblib
import pandas as pd

from ..data.catalog import EncodingCatalog

PathLike = Union[str, "os.PathLike[str]"]


def ensure_dirs(*dirs: Path) -> None:
    for d in dirs:
        d.mkdir(parents=True, exist_ok=True)


def load_dataset(path: PathLike) -> pd.DataFrame:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"No dataset found at {path}")
    suffix = path.suffix.lower()
    if suffix == ".parquet":
        return pd.read_parquet(path)
    if suffix in {".csv", ".txt"}:
        return pd.read_csv(path)
    raise ValueError(f"Unsupported dataset format '{suffix}' (expected .csv or .parquet)")


def save_matrix(matrix: pd.DataFrame, path: PathLike) -> str:
    path = Path(path)
    ensure_dirs(path.parent)
    try:
        matrix.to_parquet(path.with_suffix(".parquet"), index=False)
        print(f"Saved model matrix → {path.with_suffix('.parquet')}  shape={matrix.shape}")
        return str(path.with_suffix(".parquet"))
    except ImportError:
        out_csv = path.with_suffix(".csv")
        matrix.to_csv(out_csv, index=False)
        print(f"(Parquet unavailable) Saved CSV → {out_csv}  shape={matrix.shape}")
        return str(out_csv)


def save_catalog(catalog: EncodingCatalog, path: PathLike) -> str:
    """Persist ``catalog`` as JSON (``.json``) or a joblib pickle (anything else)."""
    path = Path(path)
    ensure_dirs(path.parent)
    if path.suffix.lower() == ".json":
        with open(path, "w") as f:
            json.dump(catalog.to_dict(), f, indent=2)
    else:
        joblib.dump(catalog.to_dict(), path)
    return str(path)


def load_catalog(path: PathLike) -> EncodingCatalog:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"No catalog found at {path}")
    if path.suffix.lower() == ".json":
        with open(path, "r") as f:
            payload = json.load(f)
    else:
        payload = joblib.load(path)
    return EncodingCatalog.from_dict(payload)


__all__ = ["ensure_dirs", "load_dataset", "save_matrix", "save_catalog", "load_catalog"]
