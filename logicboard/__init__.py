"""An interactive board for placing, wiring and evaluating logic gates."""

__version__ = "0.1.0"

__all__ = ["app", "connector", "environment", "gates", "layout"]