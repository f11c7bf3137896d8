"""Two-dimensional gravitational particle simulation with merging on collision."""

__version__ = "0.1.0"
__all__ = ["particle", "physics", "simulation", "vector"]