"""DeltaT (TT - UT) models.

This sub-package implements 25 published models of DeltaT, the difference
between uniform dynamical time and Earth-rotation time, together with two
estimators used alongside them:

- **Models**: one pure function ``f(jd) -> seconds`` per publication,
  e.g. :func:`delta_t_espenak_meeus` or :func:`delta_t_meeus`
- **Registry**: :class:`DeltaTAlgorithm` identifiers mapped to
  :class:`DeltaTModel` entries with their documented year ranges
- **Estimators**: :func:`moon_secular_acceleration` and
  :func:`delta_t_standard_error`
"""

from ._models import (
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
from ._registry import (
    DELTA_T_MODELS,
    DeltaTAlgorithm,
    DeltaTModel,
    delta_t,
    get_delta_t_model,
    models_for_jd,
    models_for_year,
)
from ._tables import MEEUS_1998_TABLE

__all__ = [
    # Registry
    "DELTA_T_MODELS",
    "DeltaTAlgorithm",
    "DeltaTModel",
    "delta_t",
    "get_delta_t_model",
    "models_for_jd",
    "models_for_year",
    # Models
    "decimal_year_to_delta_t",
    "delta_t_astronomical_ephemeris",
    "delta_t_borkowski",
    "delta_t_chapront_francou",
    "delta_t_chapront_touze",
    "delta_t_clemence",
    "delta_t_espenak",
    "delta_t_espenak_meeus",
    "delta_t_iau",
    "delta_t_jpl_horizons",
    "delta_t_meeus",
    "delta_t_meeus_simons",
    "delta_t_montenbruck_pfleger",
    "delta_t_morrison_stephenson_1982",
    "delta_t_morrison_stephenson_2004",
    "delta_t_muller_stephenson",
    "delta_t_reijs",
    "delta_t_schmadel_zech_1979",
    "delta_t_schmadel_zech_1988",
    "delta_t_schoch",
    "delta_t_stephenson_1978",
    "delta_t_stephenson_1997",
    "delta_t_stephenson_houlden",
    "delta_t_stephenson_morrison_1984",
    "delta_t_stephenson_morrison_1995",
    "delta_t_tuckerman_goldstine",
    # Estimators
    "delta_t_standard_error",
    "moon_secular_acceleration",
    # Tables
    "MEEUS_1998_TABLE",
]
