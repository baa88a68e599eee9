"""
02_apply_catalog.py
~~~~~~~~~~~~~~~~~~~
Encodes a new dataset against the catalog captured by ``01_fit_catalog.py`` so
the matrix has exactly the reference columns. Schema drift and values unseen
at capture time are summarised on stdout.
"""

import argparse
import sys
import warnings
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from onehot_sql.config import DEFAULT_CONFIG_PATH, EncodingOptions, load_config
from onehot_sql.exceptions import SchemaDriftWarning
from onehot_sql.pipeline import run_encoding
from onehot_sql.utils.io import ensure_dirs, load_catalog, load_dataset, save_matrix


def main() -> None:
    ap = argparse.ArgumentParser(description="Stage 02 – encode new data with a frozen catalog.")
    ap.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    ap.add_argument("--data", default=None, help="Override the new dataset path.")
    ap.add_argument("--catalog", default=None, help="Catalog path (default: processed/catalog.json).")
    args = ap.parse_args()

    cfg = load_config(Path(args.config))
    paths = cfg["paths"]
    processed_dir = Path(paths["processed"])
    outputs_dir = Path(paths["outputs"])
    ensure_dirs(processed_dir, outputs_dir)

    data_path = Path(args.data) if args.data else Path(paths["raw"]) / cfg["data"]["new_file"]
    catalog = load_catalog(Path(args.catalog) if args.catalog else processed_dir / "catalog.json")
    df = load_dataset(data_path)
    print(f"Loaded {data_path}  shape={df.shape}")

    sql_path = outputs_dir / "onehot_new.sql"
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", SchemaDriftWarning)
        result = run_encoding(
            df,
            catalog,
            options=EncodingOptions.from_config(cfg),
            output_file=sql_path,
        )
    matrix_path = save_matrix(result.matrix, processed_dir / "matrix_new.parquet")

    print("\n=== SCHEMA DRIFT ===")
    print(f" Filled with NAs : {', '.join(result.missing_columns) or '-'}")
    print(f" Dropped         : {', '.join(result.dropped_columns) or '-'}")
    print("\n=== UNSEEN LEVELS ===")
    if not result.unseen:
        print(" none")
    for col, values in result.unseen.items():
        print(f" {col}: {', '.join(values)}")
    print(f"\n Matrix → {matrix_path}")
    print(f" SQL    → {sql_path}")


if __name__ == "__main__":
    main()
