"""DeltaT (TT - UT) models from the historical literature.

Every model is a pure function of the Julian Day returning DeltaT in
seconds.  The polynomials are reproduced as published, including their
boundaries: piecewise models do not agree at the seams, and several
models return ``0.0`` outside the year range their authors covered.

Models that need a calendar year use the civil date of ``jd``; those that
need a fractional year use :func:`astrochron.time.decimal_year`.
"""

from __future__ import annotations

import math

from astrochron.constants import (
    DAYS_PER_JULIAN_CENTURY,
    JD_1625,
    JD_1735,
    JD_1800,
    JD_1810,
    JD_1820,
    JD_1900,
    JD_J2000,
)
from astrochron.delta_t._tables import (
    MEEUS_1998_FIRST_YEAR,
    MEEUS_1998_STEP_YEARS,
    MEEUS_1998_TABLE,
)
from astrochron.time import decimal_year, jd_to_caldate, jd_to_decimal_year


def _centuries_since(jd: float, epoch: float) -> float:
    return (jd - epoch) / DAYS_PER_JULIAN_CENTURY


def decimal_year_to_delta_t(y: float) -> float:
    """DeltaT from the Espenak & Meeus (2006) polynomials.

    Piecewise polynomials of the decimal year from -1999 to 3000; outside
    the tabulated pieces the long-term parabola ``-20 + 32*u^2`` with
    ``u = (y - 1820)/100`` is used.

    Args:
        y (float): Decimal year.

    Returns:
        float: DeltaT in seconds.

    References:

        1. F. Espenak and J. Meeus, *Five Millennium Canon of Solar
           Eclipses: -1999 to +3000*, NASA/TP-2006-214141, 2006.
    """
    u = (y - 1820) / 100.0
    r = -20 + 32 * u**2

    if -500 <= y < 500:
        u = y / 100
        r = (10583.6 - 1014.41 * u + 33.78311 * u**2 - 5.952053 * u**3
             - 0.1798452 * u**4 + 0.022174192 * u**5 + 0.0090316521 * u**6)
    elif 500 <= y < 1600:
        u = (y - 1000) / 100
        r = (1574.2 - 556.01 * u + 71.23472 * u**2 + 0.319781 * u**3
             - 0.8503463 * u**4 - 0.005050998 * u**5 + 0.0083572073 * u**6)
    elif 1600 <= y < 1700:
        t = y - 1600
        r = 120 - 0.9808 * t - 0.01532 * t**2 + t**3 / 7129
    elif 1700 <= y < 1800:
        t = y - 1700
        r = 8.83 + 0.1603 * t - 0.0059285 * t**2 + 0.00013336 * t**3 - t**4 / 1174000
    elif 1800 <= y < 1860:
        t = y - 1800
        r = (13.72 - 0.332447 * t + 0.0068612 * t**2 + 0.0041116 * t**3
             - 0.00037436 * t**4 + 0.0000121272 * t**5 - 0.0000001699 * t**6
             + 0.000000000875 * t**7)
    elif 1860 <= y < 1900:
        t = y - 1860
        r = (7.62 + 0.5737 * t - 0.251754 * t**2 + 0.01680668 * t**3
             - 0.0004473624 * t**4 + t**5 / 233174)
    elif 1900 <= y < 1920:
        t = y - 1900
        r = -2.79 + 1.494119 * t - 0.0598939 * t**2 + 0.0061966 * t**3 - 0.000197 * t**4
    elif 1920 <= y < 1941:
        t = y - 1920
        r = 21.20 + 0.84493 * t - 0.076100 * t**2 + 0.0020936 * t**3
    elif 1941 <= y < 1961:
        t = y - 1950
        r = 29.07 + 0.407 * t - t**2 / 233 + t**3 / 2547
    elif 1961 <= y < 1986:
        t = y - 1975
        r = 45.45 + 1.067 * t - t**2 / 260 - t**3 / 718
    elif 1986 <= y < 2005:
        t = y - 2000
        r = (63.86 + 0.3345 * t - 0.060374 * t**2 + 0.0017275 * t**3
             + 0.000651814 * t**4 + 0.00002373599 * t**5)
    elif 2005 <= y < 2050:
        t = y - 2000
        r = 62.92 + 0.32217 * t + 0.005589 * t**2
    elif 2050 <= y < 2150:
        r = -20 + 32 * ((y - 1820) / 100) ** 2 - 0.5628 * (2150 - y)

    return r


def delta_t_espenak_meeus(jd: float) -> float:
    """DeltaT by Espenak & Meeus (2006), evaluated at the decimal year of ``jd``.

    Args:
        jd (float): Julian Day.

    Returns:
        float: DeltaT in seconds.
    """
    return decimal_year_to_delta_t(jd_to_decimal_year(jd))


def delta_t_schoch(jd: float) -> float:
    """DeltaT by Schoch (1931).

    References:

        1. C. Schoch, *Die sekulare Accelaration des Mondes und der Sonne*,
           Astronomische Abhandlungen, Erganzungshefte zu den Astronomischen
           Nachrichten, Band 8, B2, Kiel, 1931.
    """
    u = _centuries_since(jd, JD_1800)
    return -36.28 + 36.28 * u**2


def delta_t_clemence(jd: float) -> float:
    """DeltaT by Clemence (1948).

    References:

        1. G. M. Clemence, *On the system of astronomical constants*,
           Astronomical Journal 53, p. 169, 1948.
    """
    u = _centuries_since(jd, JD_1900)
    return 8.72 + 26.75 * u + 11.22 * u**2


def delta_t_iau(jd: float) -> float:
    """DeltaT adopted by the IAU (1952).

    The lunar longitude fluctuation term of Spencer Jones (1939) is not
    included.
    """
    u = _centuries_since(jd, JD_1900)
    return 24.349 + 72.3165 * u + 29.949 * u**2


def delta_t_astronomical_ephemeris(jd: float) -> float:
    """DeltaT of the Astronomical Ephemeris (1960).

    Also used by Mucke & Meeus, *Canon of Solar Eclipses* (Vienna, 1983).
    As there, the lunar fluctuation term is ignored.
    """
    u = _centuries_since(jd, JD_1900)
    return 24.349 + 72.318 * u + 29.950 * u**2


def delta_t_tuckerman_goldstine(jd: float) -> float:
    """DeltaT by Tuckerman (1962, 1964) and Goldstine (1973)."""
    u = _centuries_since(jd, JD_1900)
    return 4.87 + 35.06 * u + 36.79 * u**2


def delta_t_muller_stephenson(jd: float) -> float:
    """DeltaT by Muller & Stephenson (1975).

    References:

        1. P. M. Muller and F. R. Stephenson, *The accelerations of the
           earth and moon from early astronomical observations*, Growth
           rhythms and the history of the earth's rotation, Wiley, 1975,
           pp. 459-533.
    """
    u = _centuries_since(jd, JD_1900)
    return 66.0 + 120.38 * u + 45.78 * u**2


def delta_t_stephenson_1978(jd: float) -> float:
    """DeltaT by Stephenson (1978).

    References:

        1. F. R. Stephenson, *Pre-Telescopic Astronomical Observations*,
           Tidal Friction and the Earth's Rotation, Springer, 1978, p. 5.
    """
    u = _centuries_since(jd, JD_1900)
    return 20.0 + 114.0 * u + 38.30 * u**2


def delta_t_stephenson_1997(jd: float) -> float:
    """DeltaT by Stephenson (1997), *Historical Eclipses and Earth's Rotation*."""
    u = _centuries_since(jd, JD_1735)
    return -20.0 + 35.0 * u**2


def delta_t_schmadel_zech_1979(jd: float) -> float:
    """DeltaT by Schmadel & Zech (1979), a 12th degree fit for 1800-1975.

    References:

        1. L. D. Schmadel and G. Zech, *Polynomial approximations for the
           correction delta T E.T.-U.T. in the period 1800-1975*, Acta
           Astronomica 29, pp. 101-104, 1979.
    """
    u = _centuries_since(jd, JD_1900)
    return (-0.000029 + 0.001233 * u + 0.003081 * u**2 - 0.013867 * u**3
            - 0.020446 * u**4 + 0.076929 * u**5 + 0.075456 * u**6
            - 0.200097 * u**7 - 0.159732 * u**8 + 0.247433 * u**9
            + 0.185489 * u**10 - 0.117389 * u**11 - 0.089491 * u**12)


def delta_t_morrison_stephenson_1982(jd: float) -> float:
    """DeltaT by Morrison & Stephenson (1982)."""
    u = _centuries_since(jd, JD_1810)
    return -15.0 + 32.50 * u**2


def delta_t_stephenson_morrison_1984(jd: float) -> float:
    """DeltaT by Stephenson & Morrison (1984).

    Defined for years -390 through 1600; ``0.0`` elsewhere.

    References:

        1. F. R. Stephenson and L. V. Morrison, *Long-term changes in the
           rotation of the earth - 700 B.C. to A.D. 1980*, Philosophical
           Transactions A 313, pp. 47-70, 1984.
    """
    year, month, day = jd_to_caldate(jd)
    u = (decimal_year(year, month, day) - 1800) / 100

    delta_t = 0.0
    if -391 < year <= 948:
        delta_t = 1360.0 + 320 * u + 44.3 * u**2
    if 948 < year <= 1600:
        delta_t = 25.5 * u**2
    return delta_t


def delta_t_stephenson_morrison_1995(jd: float) -> float:
    """DeltaT by Stephenson & Morrison (1995).

    References:

        1. F. R. Stephenson and L. V. Morrison, *Long-Term Fluctuations in
           the Earth's Rotation: 700 BC to AD 1990*, Philosophical
           Transactions A 351, pp. 165-202, 1995.
    """
    u = _centuries_since(jd, JD_1820)
    return -20.0 + 31.0 * u**2


def delta_t_stephenson_houlden(jd: float) -> float:
    """DeltaT by Stephenson & Houlden (1986). ``0.0`` after 1600."""
    year, month, day = jd_to_caldate(jd)
    yeardec = decimal_year(year, month, day)

    delta_t = 0.0
    if year <= 948:
        u = (yeardec - 948) / 100
        delta_t = 1830.0 - 405.0 * u + 46.5 * u**2
    if 948 < year <= 1600:
        u = (yeardec - 1850) / 100
        delta_t = 25.5 * u**2
    return delta_t


def delta_t_espenak(jd: float) -> float:
    """DeltaT by Espenak (1987, 1989).

    Not meant for use before about 1950 or after about 2100.
    """
    u = _centuries_since(jd, JD_J2000)
    return 67.0 + 61.0 * u + 64.3 * u**2


def delta_t_borkowski(jd: float) -> float:
    """DeltaT by Borkowski (1988).

    References:

        1. K. M. Borkowski, *ELP 2000-85 and the dynamic time-universal
           time relation*, Astronomy and Astrophysics 205, pp. L8-L10, 1988.
    """
    u = _centuries_since(jd, JD_1625)
    return 40.0 + 35.0 * u**2


def delta_t_schmadel_zech_1988(jd: float) -> float:
    """DeltaT by Schmadel & Zech (1988), a 12th degree fit for 1800-1988.

    References:

        1. L. D. Schmadel and G. Zech, *Empirical Transformations from U.T.
           to E.T. for the Period 1800-1988*, Astronomische Nachrichten 309,
           pp. 219-221, 1988.
    """
    u = _centuries_since(jd, JD_1900)
    return (-0.000014 + 0.001148 * u + 0.003357 * u**2 - 0.012462 * u**3
            - 0.022542 * u**4 + 0.062971 * u**5 + 0.079441 * u**6
            - 0.146960 * u**7 - 0.149279 * u**8 + 0.161416 * u**9
            + 0.145932 * u**10 - 0.067471 * u**11 - 0.058091 * u**12)


def delta_t_chapront_touze(jd: float) -> float:
    """DeltaT by Chapront-Touze & Chapront (1991).

    Defined for years -390 through 1600; ``0.0`` elsewhere.
    """
    year, _, _ = jd_to_caldate(jd)
    u = _centuries_since(jd, JD_J2000)

    delta_t = 0.0
    if -391 < year <= 948:
        delta_t = 2177.0 - 495.0 * u + 42.4 * u**2
    if 948 < year <= 1600:
        delta_t = 102.0 + 100.0 * u + 23.6 * u**2
    return delta_t


def delta_t_chapront_francou(jd: float) -> float:
    """DeltaT by Chapront, Chapront-Touze & Francou (1997).

    After 2000 the 948-1600 branch is extrapolated with a linear
    ``0.37*(year - 2100)`` correction.  Between 1601 and 2000 the model
    returns ``0.0``.
    """
    year, _, _ = jd_to_caldate(jd)
    u = _centuries_since(jd, JD_J2000)

    delta_t = 0.0
    if year <= 948:
        delta_t = 2177.0 - 497.0 * u + 44.1 * u**2
    if 948 < year <= 1600:
        delta_t = 102.0 + 102.0 * u + 25.3 * u**2
    if 2000 < year:
        delta_t = 102.0 + 102.0 * u + 25.3 * u**2 + 0.37 * (year - 2100)
    return delta_t


def delta_t_jpl_horizons(jd: float) -> float:
    """DeltaT as used by JPL Horizons before 1620.

    Defined for years -2998 through 1620, except the year 948 which falls
    between the two branches; ``0.0`` elsewhere.
    """
    year, _, _ = jd_to_caldate(jd)

    delta_t = 0.0
    if -2999 < year < 948:
        u = _centuries_since(jd, JD_1820)
        delta_t = 31.0 * u**2
    if 948 < year <= 1620:
        u = _centuries_since(jd, JD_J2000)
        delta_t = 50.6 + 67.5 * u + 22.5 * u**2
    return delta_t


def delta_t_morrison_stephenson_2004(jd: float) -> float:
    """DeltaT by Morrison & Stephenson (2004, 2005).

    References:

        1. L. V. Morrison and F. R. Stephenson, *Historical values of the
           Earth's clock error DeltaT and the calculation of eclipses*,
           Journal for the History of Astronomy 35, pp. 327-336, 2004.
        2. L. V. Morrison and F. R. Stephenson, *Addendum: Historical values
           of the Earth's clock error*, Journal for the History of Astronomy
           36, p. 339, 2005.
    """
    u = _centuries_since(jd, JD_1820)
    return -20.0 + 32.0 * u**2


def delta_t_reijs(jd: float) -> float:
    """DeltaT by Reijs (2006).

    A parabola with a superimposed 1443-year sinusoid, fitted to
    historical eclipse observations.
    """
    offset_years = (JD_1820 - jd) / 365.25
    return (
        (
            1.8 * offset_years**2 / 200
            + 1443 * 3.76 / (2 * math.pi) * (math.cos(2 * math.pi * offset_years / 1443) - 1)
        )
        * 365.25
    ) / 1000


def delta_t_meeus(jd: float) -> float:
    """DeltaT by Meeus (1998).

    Between 1620 and 1999 DeltaT is interpolated linearly in the two-year
    table of :data:`MEEUS_1998_TABLE`.  Outside that span the
    Chapront, Chapront-Touze & Francou polynomials are used, with the
    ``0.37*(year - 2100)`` correction applied from 2000 through 2099.

    Args:
        jd (float): Julian Day.

    Returns:
        float: DeltaT in seconds.

    References:

        1. J. Meeus, *Astronomical Algorithms (2nd Ed.)*, Willmann-Bell,
           1998, Ch. 10.
    """
    year, month, day = jd_to_caldate(jd)
    u = _centuries_since(jd, JD_J2000)

    if year < 948:
        return (44.1 * u + 497.0) * u + 2177.0
    if year < 1620:
        return (25.3 * u + 102.0) * u + 102.0
    if year < 2000:
        yeardec = decimal_year(year, month, day)
        pos = (year - MEEUS_1998_FIRST_YEAR) // MEEUS_1998_STEP_YEARS
        lower = MEEUS_1998_TABLE[pos]
        upper = MEEUS_1998_TABLE[pos + 1]
        node_year = MEEUS_1998_STEP_YEARS * pos + MEEUS_1998_FIRST_YEAR
        delta_t = lower + (yeardec - node_year) * 0.5 * (upper - lower)
        return delta_t / 10.0
    if year < 2100:
        return (25.3 * u + 102.0) * u + 102.0 + 0.37 * (year - 2100)
    return (25.3 * u + 102.0) * u + 102.0


def delta_t_montenbruck_pfleger(jd: float) -> float:
    """DeltaT by Montenbruck & Pfleger (2000).

    Cubic pieces over 25-year spans from 1825 through 2000; ``0.0``
    elsewhere.

    References:

        1. O. Montenbruck and T. Pfleger, *Astronomy on the Personal
           Computer (4th Ed.)*, Springer, 2000.
    """
    year, month, day = jd_to_caldate(jd)
    yeardec = decimal_year(year, month, day)

    delta_t = 0.0
    if 1825 <= year < 1850:
        u = (yeardec - 1825) / 100
        delta_t = 10.4 - 80.8 * u + 413.9 * u**2 - 572.3 * u**3
    if 1850 <= year < 1875:
        u = (yeardec - 1850) / 100
        delta_t = 6.6 + 46.3 * u - 358.4 * u**2 + 18.8 * u**3
    if 1875 <= year < 1900:
        u = (yeardec - 1875) / 100
        delta_t = -3.9 - 10.8 * u - 166.2 * u**2 + 867.4 * u**3
    if 1900 <= year < 1925:
        u = (yeardec - 1900) / 100
        delta_t = -2.6 + 114.1 * u + 327.5 * u**2 - 1467.4 * u**3
    if 1925 <= year < 1950:
        u = (yeardec - 1925) / 100
        delta_t = 24.2 - 6.3 * u - 8.2 * u**2 + 483.4 * u**3
    if 1950 <= year < 1975:
        u = (yeardec - 1950) / 100
        delta_t = 29.3 + 32.5 * u - 3.8 * u**2 + 550.7 * u**3
    if 1975 <= year <= 2000:
        u = (yeardec - 1975) / 100
        delta_t = 45.3 + 130.5 * u - 570.5 * u**2 + 1516.7 * u**3
    return delta_t


def delta_t_meeus_simons(jd: float) -> float:
    """DeltaT by Meeus & Simons (2000).

    Quartic pieces from 1620 through 2000; ``0.0`` elsewhere.  From 1900
    onward the final 1900-2000 cubic overrides the 1900-1940 and 1940-1990
    pieces, as in the published coefficient list.

    References:

        1. J. Meeus and L. Simons, *Polynomial approximations to Delta T,
           1620-2000 AD*, Journal of the British Astronomical Association
           110, p. 323, 2000.
    """
    year, month, day = jd_to_caldate(jd)
    ub = (decimal_year(year, month, day) - 2000) / 100

    delta_t = 0.0
    if 1620 <= year < 1690:
        u = 3.45 + ub
        delta_t = 40.3 - 107.0 * u + 50.0 * u**2 - 454.0 * u**3 + 1244.0 * u**4
    if 1690 <= year < 1770:
        u = 2.70 + ub
        delta_t = 10.2 + 11.3 * u - u**2 - 16.0 * u**3 + 70.0 * u**4
    if 1770 <= year < 1820:
        u = 2.05 + ub
        delta_t = 14.7 - 18.8 * u - 22.0 * u**2 + 173.0 * u**3 + 6.0 * u**4
    if 1820 <= year < 1870:
        u = 1.55 + ub
        delta_t = 5.7 + 12.7 * u + 111.0 * u**2 - 534.0 * u**3 + 1654.0 * u**4
    if 1870 <= year < 1900:
        u = 1.15 + ub
        delta_t = -5.8 - 14.6 * u + 27.0 * u**2 + 101.0 * u**3 + 8234.0 * u**4
    if 1900 <= year < 1940:
        u = 0.80 + ub
        delta_t = 21.4 + 67.0 * u + 443.0 * u**2 + 19.0 * u**3 + 4441.0 * u**4
    if 1940 <= year < 1990:
        u = 0.35 + ub
        delta_t = 36.2 + 74.0 * u + 189.0 * u**2 - 140.0 * u**3 - 1883.0 * u**4
    if 1900 <= year <= 2000:
        u = 0.05 + ub
        delta_t = 60.8 + 82.0 * u + 188.0 * u**2 - 5034.0 * u**3
    return delta_t


def moon_secular_acceleration(jd: float, nd: float) -> float:
    """Correction to DeltaT for a different lunar secular acceleration.

    DeltaT values derived with a lunar secular acceleration ``nd`` are
    rebased onto the ELP2000-82B value of -23.8946 "/cy^2:
    ``-0.91072 * (-23.8946 + |nd|) * t^2`` with ``t`` in centuries from
    1955.5.

    Args:
        jd (float): Julian Day.
        nd (float): Secular acceleration of the Moon used by the DeltaT
            model, in arcseconds per century squared.

    Returns:
        float: Correction in seconds, to be added to DeltaT.

    References:

        1. F. Espenak, *Secular Acceleration of the Moon*,
           eclipse.gsfc.nasa.gov/SEcat5/secular.html
    """
    t = (jd_to_decimal_year(jd) - 1955.5) / 100
    return -0.91072 * (-23.8946 + abs(nd)) * t**2


def delta_t_standard_error(jd: float) -> float:
    """Standard error of DeltaT, ``0.8*u^2`` seconds with ``u`` in centuries from 1820.

    Only defined for years -1000 through 1600.

    Args:
        jd (float): Julian Day.

    Returns:
        float: Standard error in seconds, or ``-1.0`` outside the covered
            years.
    """
    year, month, day = jd_to_caldate(jd)
    if not -1000 <= year <= 1600:
        return -1.0
    return 0.8 * ((decimal_year(year, month, day) - 1820.0) / 100) ** 2
