"""Coordinate transformations.

This sub-module provides the conversions between celestial coordinate
representations used by positional astronomy code:

- **Spherical**: ``[lon, lat]`` angles ↔ rectangular unit vectors
- **Ecliptic**: equatorial ``[ra, dec]`` ↔ ecliptic ``[lambda, beta]``
"""

from .ecliptic import (
    ecliptic_to_equatorial,
    equatorial_to_ecliptic,
)
from .spherical import (
    rectangular_to_spherical,
    spherical_to_rectangular,
)

__all__ = [
    "spherical_to_rectangular",
    "rectangular_to_spherical",
    "equatorial_to_ecliptic",
    "ecliptic_to_equatorial",
]
