#!/usr/bin/env python3
"""
Container ship holding an ordered collection of containers.
"""

import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd

from container_ship.config import DEFAULT_MANIFEST_FILENAME
from container_ship.models import Container

logger = logging.getLogger(__name__)

MANIFEST_COLUMNS = [
    "Container Number", "Type", "Cargo Weight (kg)", "Max Payload (kg)",
    "Own Weight (kg)", "Height", "Depth", "Hazardous", "Pressure",
    "Product Type", "Temperature",
]


class ContainerShip:
    """A ship carrying containers in load order.

    The speed, container count and weight limits are configuration only:
    loading past them is reported but never refused.
    """

    def __init__(self, max_speed: float, max_containers: int, max_weight: float):
        self._max_speed = max_speed
        self._max_containers = max_containers
        self._max_weight = max_weight
        self.containers: List[Container] = []

    @property
    def max_speed(self) -> float:
        return self._max_speed

    @property
    def max_containers(self) -> int:
        return self._max_containers

    @property
    def max_weight(self) -> float:
        return self._max_weight

    @property
    def total_cargo_weight(self) -> float:
        return sum(container.cargo_weight for container in self.containers)

    @property
    def total_weight(self) -> float:
        """Cargo plus the containers' own weight, in kg."""
        return sum(container.cargo_weight + container.own_weight for container in self.containers)

    def is_over_capacity(self) -> bool:
        return len(self.containers) > self.max_containers or self.total_weight / 1000 > self.max_weight

    def load_container(self, container: Container) -> None:
        self.containers.append(container)
        logger.info(f"Loaded container {container.container_number}")

        if self.is_over_capacity():
            logger.warning(
                f"Ship exceeds its limits: {len(self.containers)}/{self.max_containers} containers, "
                f"{self.total_weight / 1000}/{self.max_weight} tons"
            )

    def find_container(self, container_number: str) -> Optional[Container]:
        return next((c for c in self.containers if c.container_number == container_number), None)

    def remove_container(self, container_number: str) -> int:
        """Remove every container with the given number and return how many were removed.

        A number that is not on board is not an error; nothing changes and 0 is returned.
        """
        remaining = [c for c in self.containers if c.container_number != container_number]
        removed = len(self.containers) - len(remaining)
        self.containers[:] = remaining

        if removed:
            logger.info(f"Removed {removed} container(s) numbered {container_number}")
        else:
            logger.debug(f"No container numbered {container_number} to remove")
        return removed

    def replace_container(self, container_number: str, new_container: Container) -> bool:
        """Swap the first container with the given number for new_container, in place.

        Returns False and leaves the ship unchanged when the number is not on board.
        """
        for index, container in enumerate(self.containers):
            if container.container_number == container_number:
                self.containers[index] = new_container
                logger.info(f"Replaced container {container_number} "
                            f"with {new_container.container_number}")
                return True

        logger.debug(f"No container numbered {container_number} to replace")
        return False

    def manifest(self) -> pd.DataFrame:
        """Tabulate the loaded containers, one row each in load order."""
        return pd.DataFrame([c.to_dict() for c in self.containers], columns=MANIFEST_COLUMNS)

    def save_manifest(self, filename: str = DEFAULT_MANIFEST_FILENAME) -> bool:
        """Save the manifest to Excel with error handling"""
        try:
            if not self.containers:
                logger.warning("No containers to save")
                return False

            df = self.manifest()

            # Ensure output directory exists
            output_path = Path(filename)
            output_path.parent.mkdir(parents=True, exist_ok=True)

            df.to_excel(output_path, index=False, engine='openpyxl')
            logger.info(f"Manifest successfully saved to {output_path}")
            return True

        except Exception as e:
            logger.error(f"Failed to save manifest: {e}")
            return False

    def describe(self) -> str:
        return (f"Container ship: Max speed: {self.max_speed} knots, "
                f"Max containers: {self.max_containers}, Max weight: {self.max_weight} tons")

    def __str__(self) -> str:
        return self.describe()

    def __len__(self) -> int:
        return len(self.containers)
