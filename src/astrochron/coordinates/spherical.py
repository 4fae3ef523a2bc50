"""Spherical <-> rectangular coordinate transformations.

Converts between spherical angles ``[lon, lat]`` on the unit sphere and
rectangular direction vectors ``[x, y, z]``.  The same functions serve
every celestial frame: ``lon`` is right ascension or ecliptic longitude
and ``lat`` is declination or ecliptic latitude.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from astrochron.config import get_dtype


def spherical_to_rectangular(
    lon: ArrayLike,
    lat: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Convert spherical angles to a unit direction vector.

    Args:
        lon: Longitude in *rad* (or *deg* if ``use_degrees=True``).
        lat: Latitude in *rad* (or *deg* if ``use_degrees=True``).
        use_degrees: If ``True``, interpret the angles as degrees.

    Returns:
        jax.Array: ``[cos(lon)*cos(lat), sin(lon)*cos(lat), sin(lat)]``.

    Example:
        >>> from astrochron.coordinates import spherical_to_rectangular
        >>> v = spherical_to_rectangular(90.0, 0.0, use_degrees=True)
        >>> round(float(v[1]), 6)
        1.0
    """
    lon = jnp.asarray(lon, dtype=get_dtype())
    lat = jnp.asarray(lat, dtype=get_dtype())

    if use_degrees:
        lon = jnp.deg2rad(lon)
        lat = jnp.deg2rad(lat)

    cos_lat = jnp.cos(lat)
    return jnp.array([jnp.cos(lon) * cos_lat, jnp.sin(lon) * cos_lat, jnp.sin(lat)])


def rectangular_to_spherical(
    v: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Convert a rectangular vector to spherical angles.

    The vector need not be normalized.  A zero vector has no direction and
    yields NaN latitude; callers must exclude it.

    Args:
        v: Vector ``[x, y, z]``.
        use_degrees: If ``True``, return the angles in degrees.

    Returns:
        jax.Array: ``[lon, lat]`` with ``lon`` in ``(-pi, pi]`` and ``lat``
            in ``[-pi/2, pi/2]`` (or degrees).
    """
    v = jnp.asarray(v, dtype=get_dtype())

    r = jnp.linalg.norm(v)
    lat = jnp.arcsin(v[2] / r)
    lon = jnp.arctan2(v[1], v[0])

    if use_degrees:
        lon = jnp.rad2deg(lon)
        lat = jnp.rad2deg(lat)

    return jnp.array([lon, lat])
