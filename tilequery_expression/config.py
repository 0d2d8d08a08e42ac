"""
Configuration schema for tilequery.

Logging level/component, the default tile used when features are checked
without an explicit tile id, and the CLI output format.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from tilequery_geometry.tile import CanonicalTileID

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}
OUTPUT_FORMATS = {"text", "json"}


@dataclass(frozen=True)
class QueryConfig:
    """
    Query configuration.

    Loaded from YAML and validated at startup. Immutable after construction
    (frozen dataclass).
    """

    log_level: str = "INFO"
    component: str = "within"
    default_tile: Optional[str] = None  # "z/x/y"
    output_format: str = "text"  # "text" or "json"

    def __post_init__(self):
        """Validate query configuration."""
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(LOG_LEVELS)}"
            )

        if not self.component:
            raise ValueError("component cannot be empty")

        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Invalid output_format: {self.output_format}. "
                f"Must be one of {sorted(OUTPUT_FORMATS)}"
            )

        # Fails with ValueError on malformed tile ids
        if self.default_tile is not None:
            CanonicalTileID.from_string(self.default_tile)

    @property
    def level(self) -> int:
        """Numeric logging level."""
        return getattr(logging, self.log_level)

    def get_default_tile(self) -> Optional[CanonicalTileID]:
        if self.default_tile is None:
            return None
        return CanonicalTileID.from_string(self.default_tile)

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "QueryConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            log_level: "WARNING"
            component: "within"
            default_tile: "3/4/2"
            output_format: "json"
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")

        default_tile = data.get("default_tile")

        return cls(
            log_level=str(data.get("log_level", "INFO")).upper(),
            component=data.get("component", "within"),
            default_tile=str(default_tile) if default_tile is not None else None,
            output_format=data.get("output_format", "text"),
        )
