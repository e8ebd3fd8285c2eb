"""
Build the fresh snow density estimator named by the configuration.
"""

import logging

from .config import Config, ConfigurationError
from .constants import RHO_FRESH_MIN, RHO_FRESH_MAX
from .density import SurfaceDensity

WHICH_FSD = 'fresh_snow_density:which_fsd'
CONSTANT_DENSITY = 'fresh_snow_density:density'

FSD_METHODS = {
    0: 'constant',
    1: 'helsen2008',
    2: 'lenaerts2012',
    3: 'crocus',
    4: 'anderson',
    5: 'anderson_liston',
    6: 'slater2016',
}


def instantiate_surfacedensity(meteo, config=None, logger=None):
    """
    Create the fresh snow density estimator selected by ``which_fsd``.

    Parameters
    ----------
    meteo : MeteoProvider
        Meteorology shared by the simulation
    config : Config, optional
        Option source; an empty `Config` selects the default (Helsen 2008)
    logger : logging.Logger, optional
        Diagnostic sink

    Returns
    -------
    SurfaceDensity
        Estimator bound to ``meteo``

    Raises
    ------
    ConfigurationError
        If ``which_fsd`` is outside 0-6, or the constant density is
        missing or outside [1, 1000]
    """
    cfg = config if config is not None else Config()
    log = logger if logger is not None else logging.getLogger(__name__)

    try:
        which_fsd = cfg.get_int(WHICH_FSD, False, 0, len(FSD_METHODS) - 1, 1)
    except ConfigurationError as err:
        log.error("ERROR: unknown value: %s for config option %s", err.value, WHICH_FSD)
        raise
    method = FSD_METHODS[which_fsd]

    if method == 'constant':
        try:
            value = cfg.get_double(CONSTANT_DENSITY, True, RHO_FRESH_MIN, RHO_FRESH_MAX, -1.0)
        except ConfigurationError as err:
            log.error("ERROR: %s", err)
            raise
        return SurfaceDensity(meteo, method, value=value, logger=log)
    return SurfaceDensity(meteo, method, logger=log)
