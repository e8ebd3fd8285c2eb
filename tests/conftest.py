"""Shared fixtures for unit tests."""

import numpy as np
import pytest

from fsdensity import Config, StaticMeteo, T0


class CountingMeteo(StaticMeteo):
    """StaticMeteo that records how often each accessor is read."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.reads = {}

    def _count(self, name):
        self.reads[name] = self.reads.get(name, 0) + 1

    def surfaceTemperature(self):
        self._count('surfaceTemperature')
        return super().surfaceTemperature()

    def surfaceWind(self):
        self._count('surfaceWind')
        return super().surfaceWind()

    def annualTskin(self):
        self._count('annualTskin')
        return super().annualTskin()

    def annualAcc(self):
        self._count('annualAcc')
        return super().annualAcc()

    def annualW10m(self):
        self._count('annualW10m')
        return super().annualW10m()


@pytest.fixture
def meteo():
    """Freezing point, light wind, cold dry climatology."""
    return StaticMeteo(t_skin=T0, wind=4.0, t_skin_annual=250.0,
                       acc_annual=300.0, w10m_annual=5.0)


@pytest.fixture
def counting_meteo():
    """Meteorology that counts accessor reads."""
    return CountingMeteo(t_skin=T0 - 5.0, wind=6.0, t_skin_annual=250.0,
                         acc_annual=300.0, w10m_annual=5.0)


@pytest.fixture
def fsd_config():
    """Factory for a config selecting one method."""
    def _make(which_fsd, **extra):
        options = {'fresh_snow_density:which_fsd': which_fsd}
        options.update({f'fresh_snow_density:{k}': v for k, v in extra.items()})
        return Config(options)
    return _make


@pytest.fixture
def forcing():
    """Four hourly CLM forcing records, two with precipitation."""
    # DSWR DLWR APCP Temp Wind-U Wind-V Press SPFH
    return np.array([
        [0.0, 250.0, 1e-4, T0 - 10.0, 3.0, 4.0, 80000.0, 0.002],
        [0.0, 250.0, 0.0, T0 - 5.0, 0.0, 0.0, 80000.0, 0.002],
        [100.0, 260.0, 0.0, T0, 6.0, 8.0, 80000.0, 0.003],
        [200.0, 270.0, 1e-4, T0 + 3.0, 0.0, 2.0, 80000.0, 0.004],
    ])
