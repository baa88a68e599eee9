"""Utility helpers for dataset, matrix and catalog IO."""

from .io import ensure_dirs, load_catalog, load_dataset, save_catalog, save_matrix

__all__ = ["ensure_dirs", "load_catalog", "load_dataset", "save_catalog", "save_matrix"]
