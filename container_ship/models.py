#!/usr/bin/env python3
"""
Container types carried by a container ship.
"""

import logging
import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Optional

from container_ship.errors import OverfillError
from container_ship.numbering import ContainerNumberAllocator, default_allocator

logger = logging.getLogger(__name__)
hazard_logger = logging.getLogger("container_ship.hazards")

# Placeholder until payload is derived from the container's dimensions
DEFAULT_MAX_PAYLOAD = 1000.0


class ContainerKind(str, Enum):
    """Enum for the supported container types"""
    LIQUID = "Liquid"
    GAS = "Gas"
    REFRIGERATED = "Refrigerated"

    @property
    def initial(self) -> str:
        return self.value[0]


class HazardNotifier(ABC):
    """Capability of containers that carry dangerous cargo."""

    @abstractmethod
    def notify_danger(self, container_number: str) -> None:
        """Report a hazard condition for the given container number."""


def _emit_danger(container_number: str) -> None:
    hazard_logger.warning(f"Danger notification for container number: {container_number}")


class Container(ABC):
    """Base class for all containers."""

    def __init__(
        self,
        cargo_weight: float,
        height: float,
        own_weight: float,
        depth: float,
        allocator: Optional[ContainerNumberAllocator] = None,
    ):
        self._container_number = (allocator or default_allocator).next_number(self.kind.initial)
        # Initial cargo is taken as given; only load_cargo checks the payload
        self._cargo_weight = float(cargo_weight)
        self._height = height
        self._own_weight = own_weight
        self._depth = depth
        self._max_payload = self._calculate_max_payload()
        logger.debug(f"Created {self.kind.value} container {self._container_number}")

    @property
    @abstractmethod
    def kind(self) -> ContainerKind:
        """Type tag of the container."""

    @property
    def container_number(self) -> str:
        return self._container_number

    @property
    def cargo_weight(self) -> float:
        return self._cargo_weight

    @property
    def height(self) -> float:
        return self._height

    @property
    def own_weight(self) -> float:
        return self._own_weight

    @property
    def depth(self) -> float:
        return self._depth

    @property
    def max_payload(self) -> float:
        return self._max_payload

    @property
    def is_hazardous(self) -> bool:
        return isinstance(self, HazardNotifier)

    def _calculate_max_payload(self) -> float:
        return DEFAULT_MAX_PAYLOAD

    def load_cargo(self, amount: float) -> None:
        """Add cargo, raising OverfillError if the result would exceed max payload."""
        if not math.isfinite(amount) or amount < 0:
            raise ValueError(f"Cargo amount must be a finite non-negative number: {amount}")

        if self.cargo_weight + amount > self.max_payload:
            raise OverfillError(self.container_number, amount, self.cargo_weight, self.max_payload)

        self._cargo_weight += amount
        logger.debug(f"Loaded {amount} kg into {self.container_number} "
                     f"(now {self.cargo_weight} kg)")

    def empty_cargo(self) -> None:
        self._cargo_weight = 0.0

    def describe(self) -> str:
        return f"Container number: {self.container_number}, Cargo weight: {self.cargo_weight} kg"

    def to_dict(self) -> Dict[str, Any]:
        """Convert container to a manifest row."""
        return {
            "Container Number": self.container_number,
            "Type": self.kind.value,
            "Cargo Weight (kg)": self.cargo_weight,
            "Max Payload (kg)": self.max_payload,
            "Own Weight (kg)": self.own_weight,
            "Height": self.height,
            "Depth": self.depth,
            "Hazardous": self.is_hazardous,
            "Pressure": None,
            "Product Type": None,
            "Temperature": None,
        }

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(number='{self.container_number}', cargo={self.cargo_weight})"


class LiquidContainer(Container, HazardNotifier):
    """Container for liquids."""

    kind = ContainerKind.LIQUID

    def notify_danger(self, container_number: str) -> None:
        _emit_danger(container_number)


class GasContainer(Container, HazardNotifier):
    """Container for gas under pressure."""

    kind = ContainerKind.GAS

    def __init__(
        self,
        cargo_weight: float,
        height: float,
        own_weight: float,
        depth: float,
        pressure: float,
        allocator: Optional[ContainerNumberAllocator] = None,
    ):
        super().__init__(cargo_weight, height, own_weight, depth, allocator)
        self._pressure = pressure

    @property
    def pressure(self) -> float:
        return self._pressure

    def notify_danger(self, container_number: str) -> None:
        _emit_danger(container_number)

    def to_dict(self) -> Dict[str, Any]:
        row = super().to_dict()
        row["Pressure"] = self.pressure
        return row


class RefrigeratedContainer(Container):
    """Refrigerated container for perishable products."""

    kind = ContainerKind.REFRIGERATED

    def __init__(
        self,
        cargo_weight: float,
        height: float,
        own_weight: float,
        depth: float,
        product_type: str,
        temperature: float,
        allocator: Optional[ContainerNumberAllocator] = None,
    ):
        super().__init__(cargo_weight, height, own_weight, depth, allocator)
        self._product_type = product_type
        self._temperature = temperature

    @property
    def product_type(self) -> str:
        return self._product_type

    @property
    def temperature(self) -> float:
        return self._temperature

    def to_dict(self) -> Dict[str, Any]:
        row = super().to_dict()
        row["Product Type"] = self.product_type
        row["Temperature"] = self.temperature
        return row
