"""USGS DEM Reader Domain Layer.

This package contains the core decoding logic organized by bounded contexts:
- dem: Header and elevation-profile decoding of USGS DEM files
"""

from domain import dem

__all__ = ["dem"]
