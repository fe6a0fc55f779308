#!/usr/bin/env python3
"""
Configuration management for the container ship demo.
"""

import os
from dataclasses import dataclass

DEFAULT_MANIFEST_FILENAME = "ship_manifest.xlsx"


@dataclass
class AppConfig:
    """Application configuration settings."""

    # File settings
    manifest_filename: str = DEFAULT_MANIFEST_FILENAME
    write_manifest: bool = False

    # Logging settings
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Ship settings
    max_speed: float = 25.5
    max_containers: int = 100
    max_weight: float = 50000.0

    @classmethod
    def from_env(cls) -> 'AppConfig':
        """Create configuration from environment variables."""
        return cls(
            manifest_filename=os.getenv('SHIP_MANIFEST_FILE', cls.manifest_filename),
            write_manifest='SHIP_MANIFEST_FILE' in os.environ,
            log_level=os.getenv('SHIP_LOG_LEVEL', cls.log_level),
            max_speed=float(os.getenv('SHIP_MAX_SPEED', str(cls.max_speed))),
            max_containers=int(os.getenv('SHIP_MAX_CONTAINERS', str(cls.max_containers))),
            max_weight=float(os.getenv('SHIP_MAX_WEIGHT', str(cls.max_weight))),
        )

    def validate(self) -> None:
        """Validate configuration settings."""
        valid_log_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if self.log_level.upper() not in valid_log_levels:
            raise ValueError(f"Invalid log level: {self.log_level}. Must be one of {valid_log_levels}")

        if self.write_manifest and not self.manifest_filename.endswith(('.xlsx', '.xls')):
            raise ValueError(f"Manifest filename must end with .xlsx or .xls: {self.manifest_filename}")

        for name in ('max_speed', 'max_containers', 'max_weight'):
            if getattr(self, name) <= 0:
                raise ValueError(f"Invalid {name}: {getattr(self, name)}. Must be positive")
