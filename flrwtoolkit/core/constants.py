"""
Physical constants and unit factors.

SI values come from scipy.constants (CODATA); the solar mass is the IAU
nominal value.
"""
from scipy import constants as _sc

G_NEWTON = _sc.G                      # m^3 kg^-1 s^-2
C_LIGHT = _sc.c                       # m/s

KM_TO_M = _sc.kilo
MPC_TO_M = _sc.mega * _sc.parsec
MSUN_KG = 1.988409870698051e30
GYR_S = _sc.giga * _sc.Julian_year

# Omega_gamma0 h^2 = PHOTON_DENSITY_COEFF * T0^4 with T0 in kelvin
PHOTON_DENSITY_COEFF = 4.48131e-7

# rho_nu / rho_gamma per effective neutrino species
NEUTRINO_TO_PHOTON = (7.0 / 8.0) * (4.0 / 11.0) ** (4.0 / 3.0)

T0_CMB_K_DEFAULT = 2.72548
N_EFF_DEFAULT = 3.04
