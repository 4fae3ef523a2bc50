# /// script
# requires-python = ">=3.11"
# dependencies = ["typer>=0.9.0", "astrochron"]
#
# [tool.uv.sources]
# astrochron = { path = ".." }
# ///
"""Convert equatorial positions to ecliptic coordinates.

Reads right ascension and declination pairs, converts them to ecliptic
longitude and latitude in one vectorized call, and prints both in
sexagesimal notation.

Requires astrochron to be installed (``uv pip install -e .`` from the repo root).

Usage:
    uv run examples/ecliptic_table.py RA DEC [RA DEC ...]

Examples:
    uv run examples/ecliptic_table.py 6h45m08.9s "-16d42'58\\"" 5h55m10.3s "7d24'25\\""
"""

import sys
from typing import Annotated

import jax
import jax.numpy as jnp
import typer

from astrochron import (
    equatorial_to_ecliptic,
    format_dms,
    format_hms,
    parse_angle,
    set_dtype,
)

set_dtype(jnp.float64)  # Must be before any JIT compilation

_to_ecliptic = jax.jit(jax.vmap(equatorial_to_ecliptic))


def main(
    angles: Annotated[list[str], typer.Argument(help="RA DEC pairs")],
) -> None:
    """Print ecliptic coordinates of equatorial positions."""
    if len(angles) % 2:
        print("ERROR: expected RA DEC pairs")
        sys.exit(1)

    ra = jnp.array([parse_angle(text) for text in angles[0::2]])
    dec = jnp.array([parse_angle(text) for text in angles[1::2]])
    ecliptic = _to_ecliptic(ra, dec)

    print(f"{'RA':>14}{'Dec':>15}{'Lambda':>16}{'Beta':>15}")
    for a, d, (lam, beta) in zip(ra, dec, ecliptic):
        print(
            f"{format_hms(float(a)):>14}{format_dms(float(d)):>15}"
            f"{format_dms(float(lam) % (2 * jnp.pi)):>16}{format_dms(float(beta)):>15}"
        )


if __name__ == "__main__":
    typer.run(main)
