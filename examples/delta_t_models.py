# /// script
# requires-python = ">=3.11"
# dependencies = ["typer>=0.9.0", "astrochron"]
#
# [tool.uv.sources]
# astrochron = { path = ".." }
# ///
"""Compare the DeltaT models at a given date.

Evaluates every registered DeltaT model at the date and prints the value
next to the years the model was published for.  Models outside their
documented range are marked.

Requires astrochron to be installed (``uv pip install -e .`` from the repo root).

Usage:
    uv run examples/delta_t_models.py [OPTIONS]

Examples:
    # DeltaT at J2000
    uv run examples/delta_t_models.py

    # Only models covering the eclipse of 585 BC
    uv run examples/delta_t_models.py --date="-0584-05-28T12:00:00" --covered-only
"""

import sys
from typing import Annotated

import typer

from astrochron import (
    DELTA_T_MODELS,
    delta_t_standard_error,
    iso8601_to_jd,
    jd_to_caldate,
)


def _year_range(first: int | None, last: int | None) -> str:
    lo = "..." if first is None else str(first)
    hi = "..." if last is None else str(last)
    return f"{lo} to {hi}"


def _year_ranges(spans) -> str:
    return ", ".join(_year_range(first, last) for first, last in spans)


def main(
    date: Annotated[
        str, typer.Option(help="UT date-time, YYYY-MM-DDTHH:MM:SS")
    ] = "2000-01-01T12:00:00",
    covered_only: Annotated[
        bool, typer.Option(help="Skip models outside their documented years")
    ] = False,
) -> None:
    """Print DeltaT from every registered model."""
    jd, ok = iso8601_to_jd(date)
    if not ok:
        print(f"ERROR: cannot parse date {date!r}")
        sys.exit(1)

    year, _, _ = jd_to_caldate(jd)
    print(f"JD {jd:.5f} (year {year})\n")
    print(f"{'Model':<26}{'DeltaT [s]':>14}  Years")

    for model in DELTA_T_MODELS.values():
        covered = model.covers(year)
        if covered_only and not covered:
            continue
        marker = "" if covered else "  (outside range)"
        print(
            f"{str(model.algorithm):<26}{model(jd):>14.2f}  "
            f"{_year_ranges(model.spans)}{marker}"
        )

    error = delta_t_standard_error(jd)
    if error >= 0:
        print(f"\nStandard error: {error:.1f} s")


if __name__ == "__main__":
    typer.run(main)
