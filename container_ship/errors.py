#!/usr/bin/env python3
"""
Exceptions raised by the container ship model.
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class ContainerShipError(Exception):
    """Base class for container ship model errors."""


class OverfillError(ContainerShipError):
    """Raised when loading cargo would exceed a container's maximum payload."""

    def __init__(
        self,
        container_number: str,
        requested: float,
        cargo_weight: float,
        max_payload: float,
        message: Optional[str] = None,
    ):
        self.container_number = container_number
        self.requested = requested
        self.cargo_weight = cargo_weight
        self.max_payload = max_payload
        self.message = message or (
            f"Cargo weight exceeds maximum payload of container {container_number}: "
            f"{cargo_weight} + {requested} > {max_payload} kg"
        )
        super().__init__(self.message)
        logger.error(self.message)
