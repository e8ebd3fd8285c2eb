"""
Fresh snow density parameterizations.

Available methods:
- 'constant': Fixed configured density
- 'helsen2008': Helsen et al. (2008) from annual climatology
- 'lenaerts2012': Lenaerts et al. (2012) linear regression
- 'crocus': CROCUS temperature and wind formula, floored at 50 kg/m³
- 'anderson': Anderson (1976) - CLM style
- 'anderson_liston': Anderson (1976) plus Liston et al. (2007) wind offset (CLM4.5)
- 'slater2016': Slater (2016) temperature branches plus continuous wind offset

References:
- Anderson (1976) NOAA Technical Report NWS 19
- Helsen et al. (2008) Science, doi:10.1126/science.1153894
- Liston et al. (2007) J. Glaciology, 53(181), 241-255
- Lenaerts et al. (2012) J. Geophys. Res., doi:10.1029/2011JD016145
"""

import logging

import numpy as np

from .constants import (
    T0, RHO_FRESH_MIN, RHO_FRESH_MAX,
    HELSEN_OFFSET, HELSEN_SCALE, HELSEN_A, HELSEN_T, HELSEN_ACC, HELSEN_W,
    LENAERTS_A, LENAERTS_B, LENAERTS_C,
    CROCUS_A, CROCUS_B, CROCUS_C, CROCUS_MIN,
    ANDERSON_MIN, ANDERSON_COEF, ANDERSON_T_LOW, ANDERSON_T_HIGH,
    LISTON_WIND_MIN, LISTON_BASE, LISTON_SPAN, LISTON_DECAY,
    SLATER_WARM, SLATER_COLD_A, SLATER_COLD_B,
    SLATER_WIND_MAX, SLATER_WIND_SCALE, SLATER_WIND_EXP,
)

# Identity logged when an estimator is built
METHOD_NAMES = {
    'constant': 'SurfaceDensityConstant',
    'helsen2008': 'SurfaceDensityHelsen2008',
    'lenaerts2012': 'SurfaceDensityLenaerts2012',
    'crocus': 'SurfaceDensityCROCUS',
    'anderson': 'SurfaceDensityAnderson',
    'anderson_liston': 'SurfaceDensityAndersonListon',
    'slater2016': 'SurfaceDensitySlater2016',
}


def calc_fresh_snow_density(meteo, method='helsen2008', **kwargs):
    """
    Calculate fresh snow density from the current meteorology.

    Parameters
    ----------
    meteo : MeteoProvider
        Meteorology accessors, read fresh on every call
    method : str
        Density method
    **kwargs : dict
        Method-specific parameters ('constant' takes ``value``)

    Returns
    -------
    density : float
        Fresh snow density [kg/m³]
    """

    if method == 'constant':
        return _constant(**kwargs)
    elif method == 'helsen2008':
        return helsen2008(meteo.annualTskin(), meteo.annualAcc(), meteo.annualW10m())
    elif method == 'lenaerts2012':
        return lenaerts2012(meteo.surfaceTemperature(), meteo.surfaceWind())
    elif method == 'crocus':
        return crocus(meteo.surfaceTemperature(), meteo.surfaceWind())
    elif method == 'anderson':
        return anderson(meteo.surfaceTemperature())
    elif method == 'anderson_liston':
        return anderson_liston(meteo.surfaceTemperature(), meteo.surfaceWind())
    elif method == 'slater2016':
        return slater2016(meteo.surfaceTemperature(), meteo.surfaceWind())
    else:
        raise ValueError(f"Unknown fresh snow density method: {method}")


def _constant(value=None, **kwargs):
    """Fixed density value."""
    return _check_constant(value)


def _check_constant(value):
    if value is None:
        raise ValueError("Constant fresh snow density requires a value")
    if not RHO_FRESH_MIN <= value <= RHO_FRESH_MAX:
        raise ValueError(
            f"Constant fresh snow density {value} outside "
            f"[{RHO_FRESH_MIN}, {RHO_FRESH_MAX}]"
        )
    return value


def helsen2008(t_annual, acc_annual, w10m_annual):
    """
    Helsen et al. (2008) from annual climatology.

    Parameters
    ----------
    t_annual : float
        Annual mean skin temperature [K]
    acc_annual : float
        Annual accumulation [mm w.e./yr]
    w10m_annual : float
        Annual mean 10 m wind speed [m/s]
    """
    return HELSEN_OFFSET + HELSEN_SCALE * (
        HELSEN_A + HELSEN_T * t_annual + HELSEN_ACC * acc_annual + HELSEN_W * w10m_annual
    )


def lenaerts2012(t_skin, wind):
    """
    Lenaerts et al. (2012), eq. 11.

    Multiple linear regression of fresh snow density on surface temperature
    and 10 m wind speed during accumulation.
    """
    return LENAERTS_A + LENAERTS_B * t_skin + LENAERTS_C * wind


def crocus(t_skin, wind):
    """
    CROCUS fresh snow density, never below 50 kg/m³.

    Negative wind gives NaN from the square root, which is passed through.
    """
    rho = CROCUS_A + CROCUS_B * (t_skin - T0) + CROCUS_C * np.sqrt(wind)
    return max(rho, CROCUS_MIN)


def anderson(t_skin):
    """
    Anderson (1976) fresh snow density.

    Parameters
    ----------
    t_skin : float
        Skin temperature [K]

    Returns
    -------
    density : float
        Fresh snow density [kg/m³]
    """
    if t_skin > T0 + ANDERSON_T_HIGH:
        # Saturated above +2°C; published with the literal 17
        density = ANDERSON_MIN + ANDERSON_COEF * 17.0 ** 1.5
    elif T0 + ANDERSON_T_LOW < t_skin:
        density = ANDERSON_MIN + ANDERSON_COEF * (t_skin - T0 + 15.0) ** 1.5
    else:
        density = ANDERSON_MIN
    return density


def liston_wind_offset(wind):
    """
    Liston et al. (2007) wind compaction offset, as used in CLM4.5.

    Zero below 5 m/s, 25 at 5 m/s, approaching 275 for strong wind.
    """
    if wind >= LISTON_WIND_MIN:
        return LISTON_BASE + LISTON_SPAN * (1.0 - np.exp(-LISTON_DECAY * (wind - LISTON_WIND_MIN)))
    return 0.0


def anderson_liston(t_skin, wind):
    """Anderson (1976) temperature dependence plus Liston et al. (2007) wind offset."""
    return anderson(t_skin) + liston_wind_offset(wind)


def slater2016(t_skin, wind):
    """
    Slater (2016) fresh snow density.

    A temperature of about -15°C gives the lightest powder; colder snow
    falls as smaller crystals and packs denser. The wind offset is a
    continuous version of Liston et al. (2007).

    Parameters
    ----------
    t_skin : float
        Skin temperature [K]
    wind : float
        Wind speed [m/s]
    """
    t_c = t_skin - T0

    if t_skin > T0 + ANDERSON_T_HIGH:
        density = SLATER_WARM
    elif T0 + ANDERSON_T_LOW < t_skin:
        density = ANDERSON_MIN + ANDERSON_COEF * (t_c + 15.0) ** 1.5
    else:
        density = SLATER_COLD_A * t_c + SLATER_COLD_B * t_c ** 2

    return density + slater_wind_offset(wind)


def slater_wind_offset(wind):
    """Continuous wind offset of Slater (2016), between 0 and 266.861."""
    return SLATER_WIND_MAX * ((1.0 + np.tanh(wind / SLATER_WIND_SCALE)) / 2.0) ** SLATER_WIND_EXP


class SurfaceDensity:
    """
    Fresh snow density estimator bound to a meteorology provider.

    One estimator is built per simulation and evaluated for every snowfall
    event. The provider is read on each `density` call, never modified.

    Parameters
    ----------
    meteo : MeteoProvider
        Shared meteorology accessors
    method : str
        One of `METHOD_NAMES`
    value : float, optional
        Density for the 'constant' method [kg/m³]
    logger : logging.Logger, optional
        Diagnostic sink; defaults to the module logger

    Examples
    --------
    >>> sd = SurfaceDensity(StaticMeteo(t_skin=273.15, wind=4.0), 'crocus')
    >>> rho = sd.density()  # 161 kg/m³
    """

    def __init__(self, meteo, method, value=None, logger=None):
        if method not in METHOD_NAMES:
            raise ValueError(f"Unknown fresh snow density method: {method}")
        log = logger if logger is not None else logging.getLogger(__name__)

        if method == 'constant':
            _check_constant(value)

        self.meteo = meteo
        self.method = method
        self.value = value
        self._anderson = None
        if method == 'anderson_liston':
            self._anderson = SurfaceDensity(meteo, 'anderson', logger=log)

        log.info("%s()", self.name)

    @property
    def name(self):
        return METHOD_NAMES[self.method]

    def __repr__(self):
        if self.method == 'constant':
            return f"{self.name}(value={self.value})"
        return f"{self.name}()"

    def density(self):
        """
        Fresh snow density for the current meteorology [kg/m³].
        """
        if self.method == 'constant':
            return self.value
        elif self.method == 'anderson_liston':
            return self._anderson.density() + liston_wind_offset(self.meteo.surfaceWind())
        return calc_fresh_snow_density(self.meteo, self.method)
