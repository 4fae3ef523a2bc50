"""Registry of the DeltaT models.

Maps each :class:`DeltaTAlgorithm` to a :class:`DeltaTModel` carrying the
model function together with the ranges of years its authors documented.
Choosing a model for a given epoch is left to the caller;
:func:`models_for_year` lists the candidates.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from astrochron.delta_t import _models
from astrochron.time import jd_to_caldate


class DeltaTAlgorithm(Enum):
    """Identifiers of the published DeltaT models."""

    ESPENAK_MEEUS = "EspenakMeeus"
    SCHOCH = "Schoch"
    CLEMENCE = "Clemence"
    IAU = "IAU"
    ASTRONOMICAL_EPHEMERIS = "AstronomicalEphemeris"
    TUCKERMAN_GOLDSTINE = "TuckermanGoldstine"
    MULLER_STEPHENSON = "MullerStephenson"
    STEPHENSON_1978 = "Stephenson1978"
    STEPHENSON_1997 = "Stephenson1997"
    SCHMADEL_ZECH_1979 = "SchmadelZech1979"
    MORRISON_STEPHENSON_1982 = "MorrisonStephenson1982"
    STEPHENSON_MORRISON_1984 = "StephensonMorrison1984"
    STEPHENSON_MORRISON_1995 = "StephensonMorrison1995"
    STEPHENSON_HOULDEN = "StephensonHoulden"
    ESPENAK = "Espenak"
    BORKOWSKI = "Borkowski"
    SCHMADEL_ZECH_1988 = "SchmadelZech1988"
    CHAPRONT_TOUZE = "ChaprontTouze"
    CHAPRONT_FRANCOU = "ChaprontFrancou"
    JPL_HORIZONS = "JPLHorizons"
    MORRISON_STEPHENSON_2004 = "MorrisonStephenson2004"
    REIJS = "Reijs"
    MEEUS = "Meeus"
    MONTENBRUCK_PFLEGER = "MontenbruckPfleger"
    MEEUS_SIMONS = "MeeusSimons"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DeltaTModel:
    """A DeltaT model and its documented ranges of validity.

    Most models cover one run of years.  A few are split: Chapront,
    Chapront-Touze & Francou is defined up to 1600 and again after 2000,
    and the JPL Horizons fit leaves out the year 948.

    Args:
        algorithm: Model identifier.
        function: ``f(jd) -> DeltaT`` in seconds.
        spans: Inclusive ``(first_year, last_year)`` ranges in ascending
            order.  ``None`` leaves that end open.
        reference: Short citation.
    """

    algorithm: DeltaTAlgorithm
    function: Callable[[float], float]
    spans: tuple[tuple[int | None, int | None], ...]
    reference: str

    @property
    def first_year(self) -> int | None:
        """First year covered, or ``None`` if open-ended."""
        return self.spans[0][0]

    @property
    def last_year(self) -> int | None:
        """Last year covered, or ``None`` if open-ended."""
        return self.spans[-1][1]

    def covers(self, year: int) -> bool:
        """Whether ``year`` lies in one of the documented ranges of the model."""
        for first, last in self.spans:
            if (first is None or year >= first) and (last is None or year <= last):
                return True
        return False

    def __call__(self, jd: float) -> float:
        return self.function(jd)


_ENTRIES = (
    (DeltaTAlgorithm.ESPENAK_MEEUS, _models.delta_t_espenak_meeus,
     ((-1999, 3000),), "Espenak & Meeus (2006), Five Millennium Canon of Solar Eclipses"),
    (DeltaTAlgorithm.SCHOCH, _models.delta_t_schoch,
     ((None, None),), "Schoch (1931), Astron. Abh. Erg. Astron. Nachr. 8, B2"),
    (DeltaTAlgorithm.CLEMENCE, _models.delta_t_clemence,
     ((1681, 1900),), "Clemence (1948), AJ 53, 169"),
    (DeltaTAlgorithm.IAU, _models.delta_t_iau,
     ((1681, 1936),), "IAU (1952), after Spencer Jones (1939), MNRAS 99, 541"),
    (DeltaTAlgorithm.ASTRONOMICAL_EPHEMERIS, _models.delta_t_astronomical_ephemeris,
     ((1681, 1936),), "Explanatory Supplement to the Astronomical Ephemeris (1961), p. 87"),
    (DeltaTAlgorithm.TUCKERMAN_GOLDSTINE, _models.delta_t_tuckerman_goldstine,
     ((-600, 1649),), "Tuckerman (1962, 1964), Goldstine (1973)"),
    (DeltaTAlgorithm.MULLER_STEPHENSON, _models.delta_t_muller_stephenson,
     ((-1375, 1975),), "Muller & Stephenson (1975), 1975grhe.conf..459M"),
    (DeltaTAlgorithm.STEPHENSON_1978, _models.delta_t_stephenson_1978,
     ((None, None),), "Stephenson (1978), 1978tfer.conf....5S"),
    (DeltaTAlgorithm.STEPHENSON_1997, _models.delta_t_stephenson_1997,
     ((-500, 1600),), "Stephenson (1997), Historical Eclipses and Earth's Rotation"),
    (DeltaTAlgorithm.SCHMADEL_ZECH_1979, _models.delta_t_schmadel_zech_1979,
     ((1800, 1975),), "Schmadel & Zech (1979), AcA 29, 101"),
    (DeltaTAlgorithm.MORRISON_STEPHENSON_1982, _models.delta_t_morrison_stephenson_1982,
     ((None, None),), "Morrison & Stephenson (1982)"),
    (DeltaTAlgorithm.STEPHENSON_MORRISON_1984, _models.delta_t_stephenson_morrison_1984,
     ((-390, 1600),), "Stephenson & Morrison (1984), RSPTA 313, 47"),
    (DeltaTAlgorithm.STEPHENSON_MORRISON_1995, _models.delta_t_stephenson_morrison_1995,
     ((-700, 1600),), "Stephenson & Morrison (1995), RSPTA 351, 165"),
    (DeltaTAlgorithm.STEPHENSON_HOULDEN, _models.delta_t_stephenson_houlden,
     ((None, 1600),), "Stephenson & Houlden (1986)"),
    (DeltaTAlgorithm.ESPENAK, _models.delta_t_espenak,
     ((1950, 2100),), "Espenak (1987, 1989)"),
    (DeltaTAlgorithm.BORKOWSKI, _models.delta_t_borkowski,
     ((-2136, 1715),), "Borkowski (1988), A&A 205, L8"),
    (DeltaTAlgorithm.SCHMADEL_ZECH_1988, _models.delta_t_schmadel_zech_1988,
     ((1800, 1988),), "Schmadel & Zech (1988), AN 309, 219"),
    (DeltaTAlgorithm.CHAPRONT_TOUZE, _models.delta_t_chapront_touze,
     ((-390, 1600),), "Chapront-Touze & Chapront (1991)"),
    (DeltaTAlgorithm.CHAPRONT_FRANCOU, _models.delta_t_chapront_francou,
     ((None, 1600), (2001, None)), "Chapront, Chapront-Touze & Francou (1997)"),
    (DeltaTAlgorithm.JPL_HORIZONS, _models.delta_t_jpl_horizons,
     ((-2998, 947), (949, 1620)), "JPL Horizons"),
    (DeltaTAlgorithm.MORRISON_STEPHENSON_2004, _models.delta_t_morrison_stephenson_2004,
     ((-1000, 2000),), "Morrison & Stephenson (2004, 2005), JHA 35, 327; JHA 36, 339"),
    (DeltaTAlgorithm.REIJS, _models.delta_t_reijs,
     ((-1500, 1100),), "Reijs (2006)"),
    (DeltaTAlgorithm.MEEUS, _models.delta_t_meeus,
     ((None, None),), "Meeus (1998), Astronomical Algorithms, Ch. 10"),
    (DeltaTAlgorithm.MONTENBRUCK_PFLEGER, _models.delta_t_montenbruck_pfleger,
     ((1825, 2000),), "Montenbruck & Pfleger (2000), Astronomy on the Personal Computer"),
    (DeltaTAlgorithm.MEEUS_SIMONS, _models.delta_t_meeus_simons,
     ((1620, 2000),), "Meeus & Simons (2000), JBAA 110, 323"),
)

DELTA_T_MODELS: dict[DeltaTAlgorithm, DeltaTModel] = {
    algorithm: DeltaTModel(algorithm, function, spans, reference)
    for algorithm, function, spans, reference in _ENTRIES
}


def get_delta_t_model(algorithm: DeltaTAlgorithm | str) -> DeltaTModel:
    """Look up a DeltaT model.

    Args:
        algorithm: A :class:`DeltaTAlgorithm` or its string value, e.g.
            ``"EspenakMeeus"``.

    Returns:
        DeltaTModel: The registered model.

    Raises:
        KeyError: If no model has that identifier.
    """
    if not isinstance(algorithm, DeltaTAlgorithm):
        try:
            algorithm = DeltaTAlgorithm(algorithm)
        except ValueError:
            raise KeyError(f"Unknown DeltaT model: {algorithm!r}") from None
    return DELTA_T_MODELS[algorithm]


def delta_t(jd: float, algorithm: DeltaTAlgorithm | str = DeltaTAlgorithm.ESPENAK_MEEUS) -> float:
    """Evaluate DeltaT at ``jd`` with the given model.

    The model is evaluated even outside its documented years; check
    :meth:`DeltaTModel.covers` first where that matters.

    Args:
        jd (float): Julian Day.
        algorithm: Model identifier. Default: Espenak & Meeus (2006).

    Returns:
        float: DeltaT in seconds.

    Raises:
        KeyError: If no model has that identifier.
    """
    return get_delta_t_model(algorithm)(jd)


def models_for_year(year: int) -> list[DeltaTModel]:
    """Return the models whose documented range includes ``year``."""
    return [model for model in DELTA_T_MODELS.values() if model.covers(year)]


def models_for_jd(jd: float) -> list[DeltaTModel]:
    """Return the models whose documented range includes the year of ``jd``."""
    year, _, _ = jd_to_caldate(jd)
    return models_for_year(year)
