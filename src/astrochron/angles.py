"""Sexagesimal angle conversion, formatting and parsing.

Angles are carried in radians.  :func:`rad_to_hms` and :func:`rad_to_dms`
split an angle into exact sexagesimal components; the ``format_*``
functions round those components for display, carrying a seconds field
that rounds up to 60 into the minutes, and minutes into hours or degrees.

The sign of a degree value is a single flag over the whole value, so
``-0°30'`` is minus thirty arcminutes.
"""

from __future__ import annotations

import logging
import math
import re
from typing import NamedTuple

logger = logging.getLogger(__name__)

_TWO_PI = 2.0 * math.pi

# Half of a hundredth of a second, added before splitting so that the
# truncated seconds behave as rounded to 0.01
_HMS_BIAS = 0.005 * math.pi / 12 / 3600
_DMS_BIAS = 0.005 * math.pi / 180 / 3600

_DMS_STRICT_PATTERN = re.compile(r"^([+\-])(\d+)d ?(\d+)'(\d+)\"$")

_SEXAGESIMAL_PATTERN = re.compile(
    r"^\s*([+\-])?\s*(\d+)\s*([hHDdº°])\s*(\d+)\s*['Mm]\s*"
    r"(\d+(?:\.\d+)?)\s*[\"Ss]\s*([NSEWnsew])?\s*$"
)
_DECIMAL_PATTERN = re.compile(r"^\s*([+\-])?\s*(\d+(?:\.\d+)?).??([NSEWnsew])?\s*$")


class Sexagesimal(NamedTuple):
    """An angle split into base-60 components.

    ``minutes`` and ``seconds`` are never negative; the sign of the whole
    value is carried by ``positive``.

    Attributes:
        positive: ``False`` if the angle is negative.
        whole: Hours or degrees.
        minutes: Minutes, 0-59.
        seconds: Seconds, ``[0, 60)`` before display rounding.
    """

    positive: bool
    whole: int
    minutes: int
    seconds: float

    def to_radians(self, units_per_turn: int = 360) -> float:
        """Convert back to radians.

        Args:
            units_per_turn (int): ``24`` for hours, ``360`` for degrees.

        Returns:
            float: Angle in radians.
        """
        value = self.whole + self.minutes / 60.0 + self.seconds / 3600.0
        if not self.positive:
            value = -value
        return value * _TWO_PI / units_per_turn


def hms_to_rad(h: int, m: int, s: float) -> float:
    """Convert hours, minutes and seconds of time to radians."""
    return h * math.pi / 12.0 + m * math.pi / 720.0 + s * math.pi / 43200.0


def dms_to_rad(d: int, m: int, s: float) -> float:
    """Convert degrees, arcminutes and arcseconds to radians.

    Minutes and seconds take the sign of ``d``.  A negative angle smaller
    than one degree cannot be expressed this way; use
    :meth:`Sexagesimal.to_radians` instead.
    """
    if d >= 0:
        return math.pi / 180.0 * d + math.pi / 10800.0 * m + s * math.pi / 648000.0
    return math.pi / 180.0 * d - math.pi / 10800.0 * m - s * math.pi / 648000.0


def rad_to_sexagesimal(
    angle: float, units_per_turn: int = 360, wrap: bool = False
) -> Sexagesimal:
    """Split an angle into sexagesimal components.

    The angle is first reduced modulo one full turn.  With ``wrap`` the
    result lies in ``[0, turn)`` and is always positive; otherwise the sign
    of the input is kept in the ``positive`` flag.

    Args:
        angle (float): Angle in radians.
        units_per_turn (int): Whole units in one turn, ``24`` for hours or
            ``360`` for degrees. Default: ``360``
        wrap (bool): Reduce into ``[0, turn)``. Default: ``False``

    Returns:
        Sexagesimal: Exact (unrounded) components.
    """
    angle = math.fmod(angle, _TWO_PI)
    positive = True
    if wrap:
        if angle < 0.0:
            angle += _TWO_PI
        if angle >= _TWO_PI:
            angle = 0.0
    elif angle < 0.0:
        angle = -angle
        positive = False

    value = angle * (units_per_turn / 2.0) / math.pi
    whole = int(value)
    minutes = int((value - whole) * 60)
    seconds = (value - whole) * 3600.0 - 60.0 * minutes

    return Sexagesimal(positive, whole, minutes, seconds)


def rad_to_hms(angle: float) -> Sexagesimal:
    """Split an angle into hours, minutes and seconds in ``[0h, 24h)``."""
    return rad_to_sexagesimal(angle, 24, wrap=True)


def rad_to_dms(angle: float) -> Sexagesimal:
    """Split an angle into signed degrees, arcminutes and arcseconds."""
    return rad_to_sexagesimal(angle, 360, wrap=False)


def round_sexagesimal(
    value: Sexagesimal, precision: int, wrap_at: int | None = None
) -> Sexagesimal:
    """Round the seconds for display and carry into the larger fields.

    Seconds are rounded to ``precision`` decimals as they would be printed.
    If they reach 60 they become 0 and the minutes are incremented; 60
    minutes become 0 and increment the whole part.  When ``wrap_at`` is
    given, a whole part reaching it wraps back to 0 (24 for hours).

    Args:
        value (Sexagesimal): Components from :func:`rad_to_sexagesimal`.
        precision (int): Decimal places kept in the seconds.
        wrap_at (int | None): Modulus of the whole part. Default: ``None``

    Returns:
        Sexagesimal: Rounded components.
    """
    seconds = float(f"{value.seconds:.{precision}f}")
    minutes = value.minutes
    whole = value.whole

    if seconds >= 60.0:
        seconds = 0.0
        minutes += 1
    if minutes >= 60:
        minutes -= 60
        whole += 1
    if wrap_at is not None and whole >= wrap_at:
        whole -= wrap_at

    return Sexagesimal(value.positive, whole, minutes, seconds)


def _seconds_width(precision: int) -> int:
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")
    return precision + 3 if precision > 0 else 2


def _degree_sign(use_d: bool) -> str:
    return "d" if use_d else "°"


def _has_centiseconds(seconds: float) -> bool:
    return abs(seconds * 100 - int(seconds) * 100) >= 1


def format_hms(angle: float, precision: int = 1) -> str:
    """Format an angle as ``HhMMmSS.Ss`` with all fields present.

    Args:
        angle (float): Angle in radians.
        precision (int): Decimal places of the seconds. Default: ``1``

    Returns:
        str: e.g. ``"16h29m55.3s"`` (precision 1) or ``"0h26m05s"``
            (precision 0).

    Raises:
        ValueError: If ``precision`` is negative.
    """
    width = _seconds_width(precision)
    _, h, m, s = round_sexagesimal(rad_to_hms(angle + _HMS_BIAS), precision, wrap_at=24)
    return f"{h}h{m:02d}m{s:0{width}.{precision}f}s"


def format_hms_adaptive(angle: float) -> str:
    """Format an angle in hours, leaving out trailing zero fields.

    Seconds are printed with one decimal when they carry a fraction of at
    least 0.01 s, as a whole number when they are integral and non-zero,
    and not at all when zero; minutes are dropped as well when both are
    zero.

    Args:
        angle (float): Angle in radians.

    Returns:
        str: e.g. ``"6h"``, ``"6h30m"``, ``"6h30m15s"`` or ``"6h30m15.5s"``.
    """
    value = rad_to_hms(angle + _HMS_BIAS)
    if _has_centiseconds(value.seconds):
        _, h, m, s = round_sexagesimal(value, 1, wrap_at=24)
        return f"{h}h{m}m{s:04.1f}s"

    _, h, m, s = value
    if int(s) != 0:
        return f"{h}h{m}m{int(s)}s"
    if m != 0:
        return f"{h}h{m}m"
    return f"{h}h"


def format_dms(angle: float, precision: int = 1, use_d: bool = False) -> str:
    """Format an angle as ``±D°MM'SS.S"`` with all fields present.

    Args:
        angle (float): Angle in radians.
        precision (int): Decimal places of the seconds. Default: ``1``
        use_d (bool): Use the letter ``d`` instead of the degree sign.
            Default: ``False``

    Returns:
        str: e.g. ``"+45°30'00.0\\""``.

    Raises:
        ValueError: If ``precision`` is negative.
    """
    width = _seconds_width(precision)
    bias = -_DMS_BIAS if angle < 0 else _DMS_BIAS
    positive, d, m, s = round_sexagesimal(rad_to_dms(angle + bias), precision)
    sign = "+" if positive else "-"
    return f"{sign}{d}{_degree_sign(use_d)}{m:02d}'{s:0{width}.{precision}f}\""


def format_dms_adaptive(angle: float, use_d: bool = False) -> str:
    """Format an angle in degrees, leaving out trailing zero fields.

    Fractional seconds are printed with two decimals.

    Args:
        angle (float): Angle in radians.
        use_d (bool): Use the letter ``d`` instead of the degree sign.
            Default: ``False``

    Returns:
        str: e.g. ``"+45°"``, ``"-0°30'"`` or ``"+12°5'30.25\\""``.
    """
    bias = -_DMS_BIAS if angle < 0 else _DMS_BIAS
    value = rad_to_dms(angle + bias)
    degsign = _degree_sign(use_d)

    if _has_centiseconds(value.seconds):
        positive, d, m, s = round_sexagesimal(value, 2)
        sign = "+" if positive else "-"
        return f"{sign}{d}{degsign}{m}'{s:05.2f}\""

    positive, d, m, s = value
    text = f"{'+' if positive else '-'}{d}{degsign}"
    if int(s) != 0:
        return f"{text}{m}'{int(s)}\""
    if m != 0:
        return f"{text}{m}'"
    return text


def hours_to_hms_str(hours: float) -> str:
    """Format decimal hours as ``HhMmS.Ss``.

    Args:
        hours (float): Hours.

    Returns:
        str: e.g. ``"2h30m0.0s"`` for 2.5 hours.
    """
    h = int(hours)
    minutes = (abs(hours) - abs(h)) * 60
    m = int(minutes)
    s = (minutes - m) * 60
    return f"{h}h{m}m{s:.1f}s"


def parse_dms_str(text: str) -> float:
    """Parse a strict ``±DDdMM'SS"`` string.

    The sign is mandatory and all fields are whole numbers.  A single space
    is allowed after the ``d``.

    Args:
        text (str): Angle string, e.g. ``+12d30'15"``.

    Returns:
        float: Angle in radians, or ``0.0`` if the string does not match.
    """
    match = _DMS_STRICT_PATTERN.match(text)
    if match is None:
        logger.debug("Failed to parse DMS angle string: %r", text)
        return 0.0

    sign, d, m, s = match.groups()
    return Sexagesimal(sign == "+", int(d), int(m), float(s)).to_radians(360)


def parse_angle(text: str) -> float:
    """Parse an angle given in sexagesimal or decimal degree notation.

    Two forms are accepted, with free whitespace between tokens:

    - ``[+-] D (d|h|°) M (m|') S[.F] (s|") [NSEW]``, e.g. ``12h30m00s`` or
      ``-45d 30' 12.5" S``.  An ``h`` unit scales all fields by 15.
    - ``[+-] D[.F] [sign] [NSEW]``, e.g. ``12.5`` or ``12.5°N``.

    A ``-`` sign or an ``S`` or ``W`` suffix (any case) makes the result
    negative.

    Args:
        text (str): Angle string.

    Returns:
        float: Angle in radians, or ``-0.0`` if neither form matches.
    """
    match = _SEXAGESIMAL_PATTERN.match(text)
    if match is not None:
        sign, d, unit, m, s, cardinal = match.groups()
        deg = float(d)
        minutes = float(m)
        seconds = float(s)
        if unit.upper() == "H":
            deg *= 15
            minutes *= 15
            seconds *= 15
        value = deg + minutes / 60.0 + seconds / 3600.0
        if sign == "-" or (cardinal or "").lower() in ("s", "w"):
            value = -value
        return math.radians(value)

    match = _DECIMAL_PATTERN.match(text)
    if match is not None:
        sign, d, cardinal = match.groups()
        value = float(d)
        if sign == "-" or (cardinal or "").lower() in ("s", "w"):
            value = -value
        return math.radians(value)

    logger.debug("Failed to parse angle string: %r", text)
    return -0.0
