"""Runtime configuration model for shiplabel.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_FILE_BYTES,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_PREVIEW_LIMIT,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import ShipLabelConfigError


@dataclass(frozen=True)
class ShipLabelConfig:
    """Validated runtime configuration.

    Attributes:
        output_dir: Directory receiving generated label and template files.
        preview_limit: Number of output rows returned with a conversion result.
        max_file_bytes: Upper bound on accepted input CSV size.
        log_level: Minimum structured log level.
    """

    output_dir: Path
    preview_limit: int = DEFAULT_PREVIEW_LIMIT
    max_file_bytes: int = DEFAULT_MAX_FILE_BYTES
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "ShipLabelConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            ShipLabelConfigError: If environment values are invalid.
        """
        output_dir_value = os.getenv("SHIPLABEL_OUTPUT_DIR", str(DEFAULT_OUTPUT_DIR))
        preview_limit = _parse_positive_int(
            "SHIPLABEL_PREVIEW_ROWS",
            os.getenv("SHIPLABEL_PREVIEW_ROWS", str(DEFAULT_PREVIEW_LIMIT)),
        )
        max_file_bytes = _parse_positive_int(
            "SHIPLABEL_MAX_FILE_BYTES",
            os.getenv("SHIPLABEL_MAX_FILE_BYTES", str(DEFAULT_MAX_FILE_BYTES)),
        )
        log_level = _parse_log_level(os.getenv("SHIPLABEL_LOG_LEVEL", DEFAULT_LOG_LEVEL))
        return cls(
            output_dir=Path(output_dir_value).expanduser().resolve(),
            preview_limit=preview_limit,
            max_file_bytes=max_file_bytes,
            log_level=log_level,
        )


def _parse_positive_int(variable_name: str, raw_value: str) -> int:
    """Parse a positive integer environment value.

    Args:
        variable_name: Environment variable name for error context.
        raw_value: Raw string from environment.

    Returns:
        Parsed integer.

    Raises:
        ShipLabelConfigError: If value is not a positive integer.
    """
    try:
        value = int(raw_value)
    except ValueError as error:
        raise ShipLabelConfigError(
            f"Invalid {variable_name} value: "
            f"expected integer, got '{raw_value}'. "
            f"Set {variable_name} to a numeric value."
        ) from error
    if value <= 0:
        raise ShipLabelConfigError(
            f"Invalid {variable_name} value: expected a positive integer, got {value}. "
            f"Set {variable_name} to a value greater than zero."
        )
    return value


def _parse_log_level(raw_value: str) -> str:
    level = raw_value.strip().lower()
    if level not in SUPPORTED_LOG_LEVELS:
        raise ShipLabelConfigError(
            f"Invalid SHIPLABEL_LOG_LEVEL value '{raw_value}'. "
            f"Use one of: {', '.join(SUPPORTED_LOG_LEVELS)}."
        )
    return level
