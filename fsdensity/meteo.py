"""
Meteorology providers read by the fresh snow density estimators.

Any object with the five zero-argument accessors of `MeteoProvider` works;
`StaticMeteo` holds fixed values and `ForcingMeteo` steps through a
CLM-format forcing record.
"""

import numpy as np
from dataclasses import dataclass
from typing import Protocol

from .constants import TFRZ

SECONDS_PER_YEAR = 365.0 * 86400.0

# Column layout of CLM 1D forcing files
FORCING_COLUMNS = ('DSWR', 'DLWR', 'APCP', 'Temp', 'Wind-U', 'Wind-V', 'Press', 'SPFH')


class MeteoProvider(Protocol):
    """Read-only meteorology accessors."""

    def surfaceTemperature(self) -> float: ...

    def surfaceWind(self) -> float: ...

    def annualTskin(self) -> float: ...

    def annualAcc(self) -> float: ...

    def annualW10m(self) -> float: ...


@dataclass
class StaticMeteo:
    """Fixed meteorology values."""
    t_skin: float = TFRZ        # Skin temperature [K]
    wind: float = 0.0           # Near-surface wind speed [m/s]
    t_skin_annual: float = TFRZ # Annual mean skin temperature [K]
    acc_annual: float = 0.0     # Annual accumulation [mm w.e./yr]
    w10m_annual: float = 0.0    # Annual mean 10 m wind speed [m/s]

    def surfaceTemperature(self):
        return self.t_skin

    def surfaceWind(self):
        return self.wind

    def annualTskin(self):
        return self.t_skin_annual

    def annualAcc(self):
        return self.acc_annual

    def annualW10m(self):
        return self.w10m_annual


def load_forcing(filepath):
    """
    Load forcing file in CLM format.

    Columns: DSWR DLWR APCP Temp Wind-U Wind-V Press SPFH, APCP in mm/s.

    Returns
    -------
    data : ndarray
        Array of shape (n_steps, 8)
    """
    data = np.loadtxt(filepath, ndmin=2)
    if data.shape[1] != len(FORCING_COLUMNS):
        raise ValueError(
            f"Expected {len(FORCING_COLUMNS)} forcing columns, got {data.shape[1]}"
        )
    return data


class ForcingMeteo:
    """
    Meteorology from a forcing record.

    Instantaneous values come from the current record; the air temperature
    stands in for the skin temperature. Annual climatology is derived once
    from the full record.

    Parameters
    ----------
    forcing : ndarray
        Forcing array, columns as in `FORCING_COLUMNS`

    Examples
    --------
    >>> meteo = ForcingMeteo(load_forcing('forcing1D.txt'))
    >>> estimator = instantiate_surfacedensity(meteo, config)
    >>> rho = [estimator.density()]
    >>> while meteo.advance():
    ...     rho.append(estimator.density())
    """

    def __init__(self, forcing):
        forcing = np.asarray(forcing, dtype=float)
        if forcing.ndim != 2 or forcing.shape[1] != len(FORCING_COLUMNS):
            raise ValueError(f"Forcing must have shape (n, {len(FORCING_COLUMNS)})")
        if len(forcing) == 0:
            raise ValueError("Forcing record is empty")

        self.index = 0
        self._t_air = forcing[:, 3]
        self._wind = np.hypot(forcing[:, 4], forcing[:, 5])
        self._precip = forcing[:, 2]

        # Annual climatology; accumulation is mean precipitation rate over one year
        self._t_annual = float(np.mean(self._t_air))
        self._acc_annual = float(np.mean(self._precip) * SECONDS_PER_YEAR)
        self._w_annual = float(np.mean(self._wind))

    def __len__(self):
        return len(self._t_air)

    def advance(self):
        """Move to the next record. Returns False past the end."""
        if self.index + 1 >= len(self):
            return False
        self.index += 1
        return True

    def surfaceTemperature(self):
        return self._t_air[self.index]

    def surfaceWind(self):
        return self._wind[self.index]

    def annualTskin(self):
        return self._t_annual

    def annualAcc(self):
        return self._acc_annual

    def annualW10m(self):
        return self._w_annual
