"""Catalog capture and schema reconciliation."""

from .catalog import EncodingCatalog, build_catalog
from .reconcile import ReconcileReport, reconcile_schema

__all__ = ["EncodingCatalog", "build_catalog", "ReconcileReport", "reconcile_schema"]
