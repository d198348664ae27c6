"""Event-driven logic circuit simulator: expressions, models, simulator and command line."""

__version__ = "0.1.0"
__all__ = ["cli", "expression", "models", "simulator"]