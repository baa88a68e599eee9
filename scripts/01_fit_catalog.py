"""
01_fit_catalog.py
~~~~~~~~~~~~~~~~~
Encodes the reference (training) dataset named in ``config.yaml`` and persists
the three artefacts later stages rely on:

* ``processed/catalog.json`` – column classification and level lists;
* ``processed/matrix.parquet`` – the one-hot model matrix;
* ``outputs/onehot.sql`` – the query reproducing the encoding in-database.
"""

import argparse
import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from onehot_sql.config import DEFAULT_CONFIG_PATH, EncodingOptions, load_config
from onehot_sql.pipeline import run_encoding
from onehot_sql.utils.io import ensure_dirs, load_dataset, save_catalog, save_matrix


def main() -> None:
    ap = argparse.ArgumentParser(
        description="Stage 01 – capture the encoding catalog from reference data and emit its SQL."
    )
    ap.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    ap.add_argument("--data", default=None, help="Override the reference dataset path.")
    args = ap.parse_args()

    cfg = load_config(Path(args.config))
    paths = cfg["paths"]
    data_path = Path(args.data) if args.data else Path(paths["raw"]) / cfg["data"]["file"]
    processed_dir = Path(paths["processed"])
    outputs_dir = Path(paths["outputs"])
    ensure_dirs(processed_dir, outputs_dir)

    df = load_dataset(data_path)
    print(f"Loaded {data_path}  shape={df.shape}")

    sql_path = outputs_dir / "onehot.sql"
    result = run_encoding(df, options=EncodingOptions.from_config(cfg), output_file=sql_path)

    catalog_path = save_catalog(result.catalog, processed_dir / "catalog.json")
    matrix_path = save_matrix(result.matrix, processed_dir / "matrix.parquet")

    print("\n=== ENCODING CATALOG ===")
    print(f" Numeric columns     : {len(result.catalog.numeric_columns)}")
    print(f" Categorical columns : {len(result.catalog.categorical_columns)}")
    print(f" Indicator columns   : {result.catalog.n_indicators}")
    print(f" Catalog → {catalog_path}")
    print(f" Matrix  → {matrix_path}")
    print(f" SQL     → {sql_path}")


if __name__ == "__main__":
    main()
