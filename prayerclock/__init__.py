"""Analogue clock, prayer times and prayer rules on a small pygame canvas."""

__version__ = "0.1.0"
__all__ = ["graphics", "app", "demo"]