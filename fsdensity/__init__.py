"""
fsdensity: Fresh snow density parameterizations with a config-driven selector.

Estimates the bulk density of newly fallen snow from skin temperature, wind
and annual climatology, for initialising new layers in a snowpack model.

Usage
-----
>>> from fsdensity import Config, StaticMeteo, instantiate_surfacedensity
>>>
>>> config = Config({'fresh_snow_density:which_fsd': 3})   # CROCUS
>>> meteo = StaticMeteo(t_skin=273.15, wind=4.0)
>>> estimator = instantiate_surfacedensity(meteo, config)
>>> rho = estimator.density()  # 161 kg/m³

Available Methods (``fresh_snow_density:which_fsd``)
----------------------------------------------------
    0 - 'constant': Fixed value from ``fresh_snow_density:density``
    1 - 'helsen2008': Helsen et al. (2008), annual climatology (default)
    2 - 'lenaerts2012': Lenaerts et al. (2012) linear regression
    3 - 'crocus': CROCUS, floored at 50 kg/m³
    4 - 'anderson': Anderson (1976) - CLM style
    5 - 'anderson_liston': Anderson (1976) + Liston et al. (2007) wind offset
    6 - 'slater2016': Slater (2016) with continuous wind offset
"""

from .config import Config, ConfigurationError
from .constants import T0, TFRZ
from .density import SurfaceDensity, calc_fresh_snow_density, METHOD_NAMES
from .meteo import MeteoProvider, StaticMeteo, ForcingMeteo, load_forcing
from .selector import instantiate_surfacedensity, FSD_METHODS

__version__ = '0.1.0'
__all__ = [
    'Config', 'ConfigurationError', 'T0', 'TFRZ',
    'SurfaceDensity', 'calc_fresh_snow_density', 'METHOD_NAMES',
    'MeteoProvider', 'StaticMeteo', 'ForcingMeteo', 'load_forcing',
    'instantiate_surfacedensity', 'FSD_METHODS',
]
