"""
The `constants` module defines the arcsecond conversion factor and calendar epochs used across astrochron.
"""

from jax.numpy import pi as PI

# Mathematical Constants
"""
Constant to convert arcseconds to radians. Equal to 2pi/(360*3600). Units: *rad/as*
"""
AS2RAD = 2.0 * PI / 360.0 / 3600.0

# Time Constants

"""
Seconds in one civil day. Units: *s*
"""
SECONDS_PER_DAY = 86400.0

"""
Days in one Julian century. Units: *days*
"""
DAYS_PER_JULIAN_CENTURY = 36525.0

"""
Offset between Julian Date and Modified Julian Date. Units: *days*
"""
JD_MJD_OFFSET = 2400000.5

# Calendar Constants

"""
Julian Day number of 1582-10-15, the first day of the Gregorian calendar.
Day numbers below this value are dated with the Julian calendar.
"""
JD_GREGORIAN_START = 2299161

"""
Date number ``day + 31*(month + 12*year)`` of 1582-10-15. Calendar dates
whose date number is at least this value are Gregorian.
"""
DATE_NUMBER_GREGORIAN_START = 15 + 31 * (10 + 12 * 1582)

"""
Last year of the Julian leap-year rule (every fourth year is a leap year).
"""
LAST_JULIAN_LEAP_RULE_YEAR = 1582

# Reference epochs of the DeltaT polynomials. Units: *days*

"""
J2000.0 = 2000-jan-1.5
"""
JD_J2000 = 2451545.0

"""
1900.0 = 1900-jan-0.5
"""
JD_1900 = 2415020.0

"""
1820.0 = 1820-jan-0.5
"""
JD_1820 = 2385800.0

"""
1810.0 = 1810-jan-0.5
"""
JD_1810 = 2382148.0

"""
1800.0 = 1800-jan-0.5
"""
JD_1800 = 2378496.0

"""
1735.0 = 1735-jan-0.5
"""
JD_1735 = 2354755.0

"""
1625.0 = 1625-jan-0.5
"""
JD_1625 = 2314579.0

# Astronomical Constants

"""
Mean obliquity of the ecliptic at J2000.0. IAU 2006 value. Units: *arcseconds*

References:

1. N. Capitaine, P. T. Wallace, and J. Chapront, *Expressions for IAU 2000
   precession quantities*, Astronomy & Astrophysics 412, 2003
"""
OBLIQUITY_J2000 = 84381.406
