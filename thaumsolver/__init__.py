"""Shortest aspect chains and shared aspects in a Thaumcraft aspect network."""

__version__ = "0.1.0"
__all__ = ["__version__"]