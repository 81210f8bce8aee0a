"""Frontend drivers for the grid engine."""

from .cli import CLILifeGame

__all__ = ["CLILifeGame"]
