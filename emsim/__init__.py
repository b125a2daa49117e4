"""Interactive 3D simulation of gravitational and electrostatic interaction between bodies."""

__version__ = "0.1.0"
__all__ = ["__version__"]