"""Equatorial <-> ecliptic coordinate rotations.

The two frames share the equinox direction and differ by a rotation about
it through the obliquity of the ecliptic.  By default the IAU 2006 mean
obliquity at J2000 (84381.406 arcseconds, about 23.439 degrees) is used;
pass another obliquity for a different epoch.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from astrochron.config import get_dtype
from astrochron.constants import AS2RAD, OBLIQUITY_J2000

# Mean obliquity of the ecliptic at J2000 in radians
_OBLIQUITY_RAD = OBLIQUITY_J2000 * AS2RAD


def _prepare(a, b, obliquity, use_degrees):
    a = jnp.asarray(a, dtype=get_dtype())
    b = jnp.asarray(b, dtype=get_dtype())
    if use_degrees:
        a = jnp.deg2rad(a)
        b = jnp.deg2rad(b)
    if obliquity is None:
        eps = jnp.asarray(_OBLIQUITY_RAD, dtype=get_dtype())
    else:
        eps = jnp.asarray(obliquity, dtype=get_dtype())
        if use_degrees:
            eps = jnp.deg2rad(eps)
    return a, b, eps


def equatorial_to_ecliptic(
    ra: ArrayLike,
    dec: ArrayLike,
    obliquity: ArrayLike | None = None,
    use_degrees: bool = False,
) -> Array:
    """Convert right ascension and declination to ecliptic coordinates.

    Args:
        ra: Right ascension.
        dec: Declination.
        obliquity: Obliquity of the ecliptic. Default: J2000 mean obliquity.
        use_degrees: If ``True``, all angles (including ``obliquity``) are
            in degrees.

    Returns:
        jax.Array: ``[lambda, beta]``, ecliptic longitude in ``(-pi, pi]``
            and latitude.

    References:
        1. J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, Eq. 13.1-13.2.
    """
    ra, dec, eps = _prepare(ra, dec, obliquity, use_degrees)

    lam = jnp.arctan2(
        jnp.sin(ra) * jnp.cos(eps) + jnp.tan(dec) * jnp.sin(eps), jnp.cos(ra)
    )
    beta = jnp.arcsin(
        jnp.sin(dec) * jnp.cos(eps) - jnp.cos(dec) * jnp.sin(eps) * jnp.sin(ra)
    )

    if use_degrees:
        lam = jnp.rad2deg(lam)
        beta = jnp.rad2deg(beta)

    return jnp.array([lam, beta])


def ecliptic_to_equatorial(
    lam: ArrayLike,
    beta: ArrayLike,
    obliquity: ArrayLike | None = None,
    use_degrees: bool = False,
) -> Array:
    """Convert ecliptic longitude and latitude to equatorial coordinates.

    Inverse of :func:`equatorial_to_ecliptic`.

    Args:
        lam: Ecliptic longitude.
        beta: Ecliptic latitude.
        obliquity: Obliquity of the ecliptic. Default: J2000 mean obliquity.
        use_degrees: If ``True``, all angles (including ``obliquity``) are
            in degrees.

    Returns:
        jax.Array: ``[ra, dec]`` with ``ra`` in ``(-pi, pi]``.

    References:
        1. J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, Eq. 13.3-13.4.
    """
    lam, beta, eps = _prepare(lam, beta, obliquity, use_degrees)

    ra = jnp.arctan2(
        jnp.sin(lam) * jnp.cos(eps) - jnp.tan(beta) * jnp.sin(eps), jnp.cos(lam)
    )
    dec = jnp.arcsin(
        jnp.sin(beta) * jnp.cos(eps) + jnp.cos(beta) * jnp.sin(eps) * jnp.sin(lam)
    )

    if use_degrees:
        ra = jnp.rad2deg(ra)
        dec = jnp.rad2deg(dec)

    return jnp.array([ra, dec])
