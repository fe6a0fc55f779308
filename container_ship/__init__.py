"""
Object model of a container ship and the containers it carries.
"""

from container_ship.errors import ContainerShipError, OverfillError
from container_ship.models import (
    Container, ContainerKind, GasContainer, HazardNotifier,
    LiquidContainer, RefrigeratedContainer
)
from container_ship.numbering import ContainerNumberAllocator, default_allocator
from container_ship.ship import ContainerShip

__version__ = "0.1.0"

__all__ = [
    "Container", "ContainerKind", "ContainerNumberAllocator", "ContainerShip",
    "ContainerShipError", "GasContainer", "HazardNotifier", "LiquidContainer",
    "OverfillError", "RefrigeratedContainer", "default_allocator",
]
