import sys
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from onehot_sql.data.catalog import build_catalog
from onehot_sql.encoding.naming import NamingPolicy


@pytest.fixture()
def diamonds() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "carat": [0.23, 0.21, 0.23, 0.29, 0.31, 0.24],
            "cut": pd.Categorical(
                ["Ideal", "Fair", "Good", "Ideal", "Good", "Fair"],
                categories=["Fair", "Good", "Ideal"],
            ),
            "color": ["E", "E", "E", "I", "J", "J"],
            "clarity": ["SI2", "SI1", "VS1", "VS2", "SI2", "VVS2"],
            "depth": [61.5, 59.8, 56.9, 62.4, 63.3, np.nan],
            "price": [326, 326, 327, 334, 335, 336],
        }
    )


@pytest.fixture()
def diamonds_catalog(diamonds):
    return build_catalog(diamonds)


@pytest.fixture()
def naming() -> NamingPolicy:
    return NamingPolicy()


@pytest.fixture()
def cfg_file(tmp_path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(
        "paths:\n"
        f"  raw: {tmp_path / 'raw'}\n"
        f"  processed: {tmp_path / 'processed'}\n"
        f"  outputs: {tmp_path / 'outputs'}\n"
        "data:\n"
        "  file: train.csv\n"
        "encoding:\n"
        "  sep: '.'\n"
        "  ws_replace: true\n"
        "  ws_replace_with: '_'\n"
        "  unique_id: ID\n"
        "  input_table_name: SALES\n"
    )
    return path
