"""shiplabel exception hierarchy.

This module defines traceable infrastructure errors with clear boundaries.
Conversion failures (validation, merge) are returned as result values;
these exceptions cover I/O, configuration and job-file problems.
"""

from __future__ import annotations


class ShipLabelError(Exception):
    """Base exception for all shiplabel failures."""


class ShipLabelConfigError(ShipLabelError):
    """Raised for invalid runtime configuration."""


class ShipLabelIngestError(ShipLabelError):
    """Raised when an input CSV cannot be read or parsed."""


class ShipLabelStoreError(ShipLabelError):
    """Raised when output files cannot be written."""


class ShipLabelTemplateError(ShipLabelError):
    """Raised for unknown input templates."""


class ShipLabelDependencyError(ShipLabelError):
    """Raised when an optional runtime dependency is missing."""


class ShipLabelJobSpecError(ShipLabelError):
    """Raised for invalid or unsupported job files."""
