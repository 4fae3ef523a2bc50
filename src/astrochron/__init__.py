"""
astrochron is a library of astronomical time, calendar and coordinate conversions.
"""

from .constants import (
    AS2RAD,
    SECONDS_PER_DAY,
    JD_MJD_OFFSET,
    JD_J2000,
    JD_GREGORIAN_START,
    OBLIQUITY_J2000,
)

from .config import set_dtype, get_dtype
from .clock import ElapsedClock

from .time import (
    CalendarSystem,
    DateTimeFields,
    resolve_calendar_system,
    calendar_system_for_date,
    days_in_month,
    caldate_to_jd,
    caldate_to_jd_checked,
    jd_to_caldate,
    time_of_day_from_jd,
    jd_to_datetime,
    jd_to_mjd,
    mjd_to_jd,
    decimal_year,
    jd_to_decimal_year,
    parse_iso8601,
    iso8601_to_jd,
    jd_to_iso8601,
)

from .rollover import normalize_datetime

from .angles import (
    Sexagesimal,
    hms_to_rad,
    dms_to_rad,
    rad_to_sexagesimal,
    rad_to_hms,
    rad_to_dms,
    round_sexagesimal,
    format_hms,
    format_hms_adaptive,
    format_dms,
    format_dms_adaptive,
    hours_to_hms_str,
    parse_dms_str,
    parse_angle,
)

from .delta_t import (
    DeltaTAlgorithm,
    DeltaTModel,
    DELTA_T_MODELS,
    delta_t,
    get_delta_t_model,
    models_for_year,
    delta_t_standard_error,
    moon_secular_acceleration,
)

from .coordinates import (
    spherical_to_rectangular,
    rectangular_to_spherical,
    equatorial_to_ecliptic,
    ecliptic_to_equatorial,
)

__all__ = [
    # Constants
    "AS2RAD",
    "SECONDS_PER_DAY",
    "JD_MJD_OFFSET",
    "JD_J2000",
    "JD_GREGORIAN_START",
    "OBLIQUITY_J2000",
    # Config
    "set_dtype",
    "get_dtype",
    # Clock
    "ElapsedClock",
    # Time
    "CalendarSystem",
    "DateTimeFields",
    "resolve_calendar_system",
    "calendar_system_for_date",
    "days_in_month",
    "caldate_to_jd",
    "caldate_to_jd_checked",
    "jd_to_caldate",
    "time_of_day_from_jd",
    "jd_to_datetime",
    "jd_to_mjd",
    "mjd_to_jd",
    "decimal_year",
    "jd_to_decimal_year",
    "parse_iso8601",
    "iso8601_to_jd",
    "jd_to_iso8601",
    # Rollover
    "normalize_datetime",
    # Angles
    "Sexagesimal",
    "hms_to_rad",
    "dms_to_rad",
    "rad_to_sexagesimal",
    "rad_to_hms",
    "rad_to_dms",
    "round_sexagesimal",
    "format_hms",
    "format_hms_adaptive",
    "format_dms",
    "format_dms_adaptive",
    "hours_to_hms_str",
    "parse_dms_str",
    "parse_angle",
    # DeltaT
    "DeltaTAlgorithm",
    "DeltaTModel",
    "DELTA_T_MODELS",
    "delta_t",
    "get_delta_t_model",
    "models_for_year",
    "delta_t_standard_error",
    "moon_secular_acceleration",
    # Coordinates
    "spherical_to_rectangular",
    "rectangular_to_spherical",
    "equatorial_to_ecliptic",
    "ecliptic_to_equatorial",
]
