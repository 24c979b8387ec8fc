"""Public SDK surface for shiplabel.

This module provides a stable import path for SDK users.
It re-exports the primary client and typed models.
"""

from __future__ import annotations

from core.config import ShipLabelConfig
from core.errors import ShipLabelError
from core.job_spec import JobSpec, load_job_spec
from core.types import (
    ConversionFailure,
    ConversionSuccess,
    CsvPreview,
    LabelRecord,
    MergedRecord,
    SourceTables,
    TableSources,
)
from ingest.pipeline import transform_tables
from store.label_sdk import ShipLabelClient
from store.templates import template_csv

__all__ = [
    "ConversionFailure",
    "ConversionSuccess",
    "CsvPreview",
    "JobSpec",
    "LabelRecord",
    "MergedRecord",
    "ShipLabelClient",
    "ShipLabelConfig",
    "ShipLabelError",
    "SourceTables",
    "TableSources",
    "load_job_spec",
    "template_csv",
    "transform_tables",
]
