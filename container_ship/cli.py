#!/usr/bin/env python3
"""
Command-line demonstration of the container ship model.
"""

import sys
import logging
import argparse
from pathlib import Path

from container_ship.config import AppConfig
from container_ship.errors import ContainerShipError
from container_ship.models import (
    GasContainer, HazardNotifier, LiquidContainer, RefrigeratedContainer
)
from container_ship.ship import ContainerShip

logger = logging.getLogger(__name__)


# ============ BUSINESS LOGIC ============

class DemoScenario:
    """Loads, removes and replaces sample containers on a ship."""

    def __init__(self, config: AppConfig):
        self.config = config

    def create_ship(self) -> ContainerShip:
        return ContainerShip(self.config.max_speed, self.config.max_containers, self.config.max_weight)

    def run(self) -> ContainerShip:
        """Run the scenario and return the ship in its final state."""
        ship = self.create_ship()

        liquid = LiquidContainer(500, 200, 100, 150)
        gas = GasContainer(3000, 200, 800, 180, pressure=10)
        refrigerated = RefrigeratedContainer(7000, 300, 1200, 220, product_type="Milk", temperature=4)

        for container in (liquid, gas, refrigerated):
            ship.load_container(container)
            if isinstance(container, HazardNotifier):
                container.notify_danger(container.container_number)

        print(ship)
        self._print_containers(ship, "Containers on the ship:")

        ship.remove_container(liquid.container_number)
        print(f"Liquid container {liquid.container_number} removed from the ship.")

        new_liquid = LiquidContainer(4500, 260, 950, 190)
        ship.replace_container(gas.container_number, new_liquid)
        print(f"Gas container {gas.container_number} replaced with "
              f"new liquid container {new_liquid.container_number}.")

        self._print_containers(ship, "Containers on the ship after changes:")
        return ship

    @staticmethod
    def _print_containers(ship: ContainerShip, title: str) -> None:
        print(title)
        for container in ship.containers:
            print(container)


# ============ CLI APPLICATION ============

class ContainerShipCLI:
    """Command-line interface for the container ship demo."""

    def __init__(self, config: AppConfig, scenario: DemoScenario):
        self.config = config
        self.scenario = scenario

        # Configure logging
        self._configure_logging()

    def _configure_logging(self):
        """Configure logging based on config."""
        logging.basicConfig(
            level=getattr(logging, self.config.log_level.upper()),
            format=self.config.log_format
        )

    def run(self) -> None:
        """Run the CLI application."""
        try:
            self._print_header()
            ship = self.scenario.run()

            if self.config.write_manifest:
                self._save_manifest(ship)

        except ValueError as e:
            self._handle_error(f"Validation error: {e}", exit_code=1)
        except ContainerShipError as e:
            # Already logged when raised
            self._handle_error(f"Cargo error: {e}", exit_code=2, log=False)
        except RuntimeError as e:
            self._handle_error(f"Runtime error: {e}", exit_code=3)
        except Exception as e:
            logger.exception("Unexpected error occurred")
            self._handle_error(f"Unexpected error: {e}", exit_code=99)

    def _print_header(self) -> None:
        print("🚢 Container Ship Demo")
        print("=" * 50)

    def _save_manifest(self, ship: ContainerShip) -> None:
        """Write the ship's manifest to the requested file."""
        filename = self.config.manifest_filename
        print(f"💾 Saving manifest to '{filename}'...")
        if not ship.save_manifest(filename):
            raise RuntimeError("Failed to save manifest file")

        print(f"   File saved: {Path(filename).resolve()}")

    def _handle_error(self, message: str, exit_code: int = 1, log: bool = True) -> None:
        """Handle and log errors, then exit."""
        print(f"\n❌ {message}")
        if log:
            logger.error(message)
        sys.exit(exit_code)


# ============ ARGUMENT PARSING ============

def create_argument_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="Demonstrate loading, removing and replacing containers on a ship",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                               # Run the demo
  %(prog)s --manifest manifest.xlsx      # Also write the final manifest
  %(prog)s --max-containers 2            # Load past the ship's limits
  %(prog)s --log-level DEBUG             # Enable debug logging
        """
    )

    parser.add_argument(
        '-m', '--manifest',
        help='Write the final manifest to this Excel file (env: SHIP_MANIFEST_FILE)'
    )

    parser.add_argument(
        '--max-speed',
        type=float,
        default=None,
        help='Ship max speed in knots (default: %s)' % AppConfig.max_speed
    )

    parser.add_argument(
        '--max-containers',
        type=int,
        default=None,
        help='Ship container limit (default: %s)' % AppConfig.max_containers
    )

    parser.add_argument(
        '--max-weight',
        type=float,
        default=None,
        help='Ship weight limit in tons (default: %s)' % AppConfig.max_weight
    )

    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default=None,
        help='Logging level (default: %s)' % AppConfig.log_level
    )

    return parser


def build_config(args: argparse.Namespace) -> AppConfig:
    """Overlay command-line arguments on the environment configuration."""
    config = AppConfig.from_env()

    if args.manifest:
        config.manifest_filename = args.manifest
        config.write_manifest = True
    if args.max_speed is not None:
        config.max_speed = args.max_speed
    if args.max_containers is not None:
        config.max_containers = args.max_containers
    if args.max_weight is not None:
        config.max_weight = args.max_weight
    if args.log_level:
        config.log_level = args.log_level

    config.validate()
    return config


# ============ MAIN ENTRY POINT ============

def main(argv=None):
    """Main entry point for the CLI application."""
    try:
        args = create_argument_parser().parse_args(argv)
        config = build_config(args)

        cli = ContainerShipCLI(config, DemoScenario(config))
        cli.run()

    except KeyboardInterrupt:
        print("\n❌ Operation cancelled by user.")
        sys.exit(0)
    except ValueError as e:
        print(f"\n❌ Configuration error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
