"""
Physical constants and regression coefficients for fresh snow density.
"""

# Temperature
TFRZ = 273.15  # Freezing point [K]
T0 = TFRZ

# Bounds for a configured (constant) fresh snow density [kg/m³]
RHO_FRESH_MIN = 1.0
RHO_FRESH_MAX = 1000.0

# Helsen et al. (2008)
HELSEN_OFFSET = -154.91
HELSEN_SCALE = 1.4266
HELSEN_A = 73.6
HELSEN_T = 1.06
HELSEN_ACC = 0.0669
HELSEN_W = 4.77

# Lenaerts et al. (2012), eq. 11
LENAERTS_A = 97.5
LENAERTS_B = 0.77
LENAERTS_C = 4.49

# CROCUS
CROCUS_A = 109.0
CROCUS_B = 6.0
CROCUS_C = 26.0
CROCUS_MIN = 50.0

# Anderson (1976)
ANDERSON_MIN = 50.0
ANDERSON_COEF = 1.7
ANDERSON_T_LOW = -15.0  # [°C] relative to T0
ANDERSON_T_HIGH = 2.0   # [°C] relative to T0

# Liston et al. (2007) wind offset
LISTON_WIND_MIN = 5.0   # [m/s]
LISTON_BASE = 25.0
LISTON_SPAN = 250.0
LISTON_DECAY = 0.2

# Slater (2016)
SLATER_WARM = 170.0
SLATER_COLD_A = -3.8333
SLATER_COLD_B = -0.0333
SLATER_WIND_MAX = 266.861
SLATER_WIND_SCALE = 5.0
SLATER_WIND_EXP = 8.8
