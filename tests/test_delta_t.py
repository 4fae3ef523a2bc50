"""Tests for the astrochron.delta_t model functions."""

import jax.numpy as jnp
import pytest

from astrochron.constants import (
    JD_1625,
    JD_1735,
    JD_1800,
    JD_1810,
    JD_1820,
    JD_1900,
    JD_J2000,
)
from astrochron.delta_t import (
    MEEUS_1998_TABLE,
    decimal_year_to_delta_t,
    delta_t_astronomical_ephemeris,
    delta_t_borkowski,
    delta_t_chapront_francou,
    delta_t_chapront_touze,
    delta_t_clemence,
    delta_t_espenak,
    delta_t_espenak_meeus,
    delta_t_iau,
    delta_t_jpl_horizons,
    delta_t_meeus,
    delta_t_meeus_simons,
    delta_t_montenbruck_pfleger,
    delta_t_morrison_stephenson_1982,
    delta_t_morrison_stephenson_2004,
    delta_t_muller_stephenson,
    delta_t_reijs,
    delta_t_schmadel_zech_1979,
    delta_t_schmadel_zech_1988,
    delta_t_schoch,
    delta_t_standard_error,
    delta_t_stephenson_1978,
    delta_t_stephenson_1997,
    delta_t_stephenson_houlden,
    delta_t_stephenson_morrison_1984,
    delta_t_stephenson_morrison_1995,
    delta_t_tuckerman_goldstine,
    moon_secular_acceleration,
)
from astrochron.time import caldate_to_jd


# ──────────────────────────────────────────────
# Polynomials at their reference epochs
# ──────────────────────────────────────────────


@pytest.mark.parametrize(
    "model, jd, expected",
    [
        (delta_t_schoch, JD_1800, -36.28),
        (delta_t_clemence, JD_1900, 8.72),
        (delta_t_iau, JD_1900, 24.349),
        (delta_t_astronomical_ephemeris, JD_1900, 24.349),
        (delta_t_tuckerman_goldstine, JD_1900, 4.87),
        (delta_t_muller_stephenson, JD_1900, 66.0),
        (delta_t_stephenson_1978, JD_1900, 20.0),
        (delta_t_stephenson_1997, JD_1735, -20.0),
        (delta_t_schmadel_zech_1979, JD_1900, -0.000029),
        (delta_t_morrison_stephenson_1982, JD_1810, -15.0),
        (delta_t_stephenson_morrison_1995, JD_1820, -20.0),
        (delta_t_espenak, JD_J2000, 67.0),
        (delta_t_borkowski, JD_1625, 40.0),
        (delta_t_schmadel_zech_1988, JD_1900, -0.000014),
        (delta_t_morrison_stephenson_2004, JD_1820, -20.0),
        (delta_t_reijs, JD_1820, 0.0),
    ],
)
def test_value_at_reference_epoch(model, jd, expected):
    assert model(jd) == pytest.approx(expected, abs=1e-12)


def test_quadratic_one_century_out():
    assert delta_t_morrison_stephenson_2004(JD_1820 + 36525.0) == pytest.approx(12.0)
    assert delta_t_borkowski(JD_1625 - 36525.0) == pytest.approx(75.0)


# ──────────────────────────────────────────────
# Espenak & Meeus (2006)
# ──────────────────────────────────────────────


class TestEspenakMeeus:
    def test_year_2000(self):
        assert delta_t_espenak_meeus(caldate_to_jd(2000, 1, 1)) == pytest.approx(63.86)

    def test_year_1900(self):
        assert delta_t_espenak_meeus(caldate_to_jd(1900, 1, 1)) == pytest.approx(-2.79)

    def test_year_1600(self):
        assert decimal_year_to_delta_t(1600.0) == pytest.approx(120.0)

    def test_extrapolation_2050_to_2150(self):
        assert decimal_year_to_delta_t(2100.0) == pytest.approx(202.74)

    def test_long_term_parabola(self):
        assert decimal_year_to_delta_t(2200.0) == pytest.approx(442.08)
        assert decimal_year_to_delta_t(-1000.0) == pytest.approx(-20 + 32 * 28.2**2)

    def test_ancient_piece(self):
        assert decimal_year_to_delta_t(0.0) == pytest.approx(10583.6)
        u = -2.5
        expected = (10583.6 - 1014.41 * u + 33.78311 * u**2 - 5.952053 * u**3
                    - 0.1798452 * u**4 + 0.022174192 * u**5 + 0.0090316521 * u**6)
        assert decimal_year_to_delta_t(-250.0) == pytest.approx(expected)

    def test_medieval_piece(self):
        assert decimal_year_to_delta_t(1000.0) == pytest.approx(1574.2)
        assert decimal_year_to_delta_t(500.0) == pytest.approx(
            1574.2 + 2780.05 + 71.23472 * 25 - 0.319781 * 125
            - 0.8503463 * 625 + 0.005050998 * 3125 + 0.0083572073 * 15625
        )

    def test_seam_at_1941(self):
        t = 21.0
        before = 21.20 + 0.84493 * t - 0.076100 * t**2 + 0.0020936 * t**3
        t = -9.0
        at = 29.07 + 0.407 * t - t**2 / 233 + t**3 / 2547
        assert decimal_year_to_delta_t(1941.0 - 1e-9) == pytest.approx(before)
        assert decimal_year_to_delta_t(1941.0) == pytest.approx(at)
        assert at == pytest.approx(24.773141, abs=1e-6)

    def test_seam_at_1961(self):
        before = decimal_year_to_delta_t(1961.0 - 1e-9)
        at = decimal_year_to_delta_t(1961.0)
        assert before == pytest.approx(33.550263, abs=1e-5)
        assert at == pytest.approx(33.579881, abs=1e-5)
        assert abs(at - before) > 0.02

    def test_seam_at_2005_is_discontinuous(self):
        before = decimal_year_to_delta_t(2005.0 - 1e-9)
        at = decimal_year_to_delta_t(2005.0)
        assert before == pytest.approx(64.720646, abs=1e-5)
        assert at == pytest.approx(64.670575, abs=1e-9)
        assert abs(at - before) > 0.04


# ──────────────────────────────────────────────
# Meeus (1998)
# ──────────────────────────────────────────────


class TestMeeus:
    def test_table_has_191_entries(self):
        assert len(MEEUS_1998_TABLE) == 191

    def test_first_table_node(self):
        assert delta_t_meeus(caldate_to_jd(1620, 1, 1)) == pytest.approx(121.0)

    def test_interpolation(self):
        # Between the 1998 (63.0 s) and 2000 (65.0 s) nodes
        jd = caldate_to_jd(1999, 6, 15)
        assert delta_t_meeus(jd) == pytest.approx(64.0 + 5.0 / 12.0)

    def test_polynomial_before_948(self):
        jd = caldate_to_jd(500, 1, 1)
        u = (jd - JD_J2000) / 36525.0
        assert delta_t_meeus(jd) == pytest.approx((44.1 * u + 497.0) * u + 2177.0)

    def test_jump_at_2100(self):
        before = delta_t_meeus(caldate_to_jd(2099, 12, 31))
        after = delta_t_meeus(caldate_to_jd(2100, 1, 1))
        assert after - before == pytest.approx(0.37, abs=0.01)

    def test_correction_before_2100(self):
        jd = caldate_to_jd(2050, 1, 1)
        u = (jd - JD_J2000) / 36525.0
        expected = (25.3 * u + 102.0) * u + 102.0 + 0.37 * (2050 - 2100)
        assert delta_t_meeus(jd) == pytest.approx(expected)


# ──────────────────────────────────────────────
# Piecewise models and their ranges
# ──────────────────────────────────────────────


class TestMontenbruckPfleger:
    def test_end_of_first_piece(self):
        jd = caldate_to_jd(1849, 12, 31)
        assert delta_t_montenbruck_pfleger(jd) == pytest.approx(7.1265625)

    def test_start_of_second_piece(self):
        jd = caldate_to_jd(1850, 1, 1)
        assert delta_t_montenbruck_pfleger(jd) == pytest.approx(6.6)

    def test_pieces_do_not_meet(self):
        before = delta_t_montenbruck_pfleger(caldate_to_jd(1849, 12, 31))
        after = delta_t_montenbruck_pfleger(caldate_to_jd(1850, 1, 1))
        assert abs(after - before) > 0.5

    def test_outside_range(self):
        assert delta_t_montenbruck_pfleger(caldate_to_jd(1824, 6, 1)) == 0.0
        assert delta_t_montenbruck_pfleger(caldate_to_jd(2024, 6, 1)) == 0.0


class TestMeeusSimons:
    def test_first_piece(self):
        assert delta_t_meeus_simons(caldate_to_jd(1650, 1, 1)) == pytest.approx(45.839525)

    def test_final_cubic_overrides_from_1900(self):
        # 1950.0 falls in the 1940-1990 piece, but the cubic wins
        jd = caldate_to_jd(1950, 1, 1)
        u = 0.05 - 0.5
        expected = 60.8 + 82.0 * u + 188.0 * u**2 - 5034.0 * u**3
        assert delta_t_meeus_simons(jd) == pytest.approx(expected)
        assert expected == pytest.approx(520.69325)

        u = 0.35 - 0.5
        quartic = 36.2 + 74.0 * u + 189.0 * u**2 - 140.0 * u**3 - 1883.0 * u**4
        assert abs(delta_t_meeus_simons(jd) - quartic) > 100.0

    def test_outside_range(self):
        assert delta_t_meeus_simons(caldate_to_jd(1600, 1, 1)) == 0.0
        assert delta_t_meeus_simons(caldate_to_jd(2001, 1, 1)) == 0.0


class TestJPLHorizons:
    def test_before_948(self):
        jd = caldate_to_jd(500, 1, 1)
        u = (jd - JD_1820) / 36525.0
        assert delta_t_jpl_horizons(jd) == pytest.approx(31.0 * u**2)

    def test_after_948(self):
        jd = caldate_to_jd(1200, 1, 1)
        u = (jd - JD_J2000) / 36525.0
        assert delta_t_jpl_horizons(jd) == pytest.approx(50.6 + 67.5 * u + 22.5 * u**2)

    def test_year_948_is_not_covered(self):
        assert delta_t_jpl_horizons(caldate_to_jd(948, 6, 1)) == 0.0

    def test_after_1620(self):
        assert delta_t_jpl_horizons(caldate_to_jd(1700, 1, 1)) == 0.0


class TestStephensonMorrison1984:
    def test_late_piece(self):
        assert delta_t_stephenson_morrison_1984(caldate_to_jd(1200, 1, 1)) == pytest.approx(918.0)

    def test_outside_range(self):
        assert delta_t_stephenson_morrison_1984(caldate_to_jd(2000, 1, 1)) == 0.0
        assert delta_t_stephenson_morrison_1984(caldate_to_jd(-500, 1, 1)) == 0.0


class TestStephensonHoulden:
    def test_early_piece(self):
        # Decimal year 500.0, 4.48 centuries before 948
        assert delta_t_stephenson_houlden(caldate_to_jd(500, 1, 1)) == pytest.approx(4577.6736)

    def test_late_piece(self):
        assert delta_t_stephenson_houlden(caldate_to_jd(1200, 1, 1)) == pytest.approx(1077.375)

    def test_after_1600(self):
        assert delta_t_stephenson_houlden(caldate_to_jd(1700, 1, 1)) == 0.0


class TestChapront:
    def test_touze_outside_range(self):
        assert delta_t_chapront_touze(caldate_to_jd(1700, 1, 1)) == 0.0
        assert delta_t_chapront_touze(caldate_to_jd(-500, 1, 1)) == 0.0

    def test_touze_late_piece(self):
        jd = caldate_to_jd(1200, 1, 1)
        u = (jd - JD_J2000) / 36525.0
        assert delta_t_chapront_touze(jd) == pytest.approx(102.0 + 100.0 * u + 23.6 * u**2)

    def test_francou_gap_between_1600_and_2000(self):
        assert delta_t_chapront_francou(caldate_to_jd(1700, 1, 1)) == 0.0

    def test_francou_after_2000(self):
        jd = caldate_to_jd(2050, 1, 1)
        u = (jd - JD_J2000) / 36525.0
        expected = 102.0 + 102.0 * u + 25.3 * u**2 + 0.37 * (2050 - 2100)
        assert delta_t_chapront_francou(jd) == pytest.approx(expected)


# ──────────────────────────────────────────────
# Estimators
# ──────────────────────────────────────────────


class TestStandardError:
    def test_year_1000(self):
        assert delta_t_standard_error(caldate_to_jd(1000, 1, 1)) == pytest.approx(53.792)

    def test_outside_range(self):
        assert delta_t_standard_error(caldate_to_jd(2000, 1, 1)) == -1.0
        assert delta_t_standard_error(caldate_to_jd(-1001, 1, 1)) == -1.0


class TestMoonSecularAcceleration:
    def test_reference_acceleration_needs_no_correction(self):
        jd = caldate_to_jd(1000, 1, 1)
        assert moon_secular_acceleration(jd, -23.8946) == pytest.approx(0.0)
        assert moon_secular_acceleration(jd, 23.8946) == pytest.approx(0.0)

    def test_correction(self):
        # Decimal year 2155.5, two centuries from 1955.5
        jd = caldate_to_jd(2155, 7, 1)
        expected = -0.91072 * (-23.8946 + 26.0) * 4.0
        assert moon_secular_acceleration(jd, -26.0) == pytest.approx(expected)


def test_polynomial_models_accept_arrays():
    jds = jnp.array([JD_1800, JD_1900, JD_J2000])
    for model in (delta_t_schoch, delta_t_espenak, delta_t_morrison_stephenson_2004):
        expected = jnp.array([model(float(jd)) for jd in jds])
        assert jnp.allclose(model(jds), expected)
