"""
Configuration data structures.
"""
import math
from dataclasses import dataclass
from typing import Tuple, Dict, Any

from .constants import T0_CMB_K_DEFAULT, N_EFF_DEFAULT
from .exceptions import InvalidParameterError

@dataclass(frozen=True)
class CosmologicalParameters:
    """Immutable primary parameters of a flat FLRW cosmology."""
    h: float                               # H0 = 100*h km/s/Mpc
    Omega_chi0: float                      # Cold dark matter density parameter
    Omega_b0: float                        # Baryon density parameter
    T0_CMB_K: float = T0_CMB_K_DEFAULT     # CMB temperature today [K]
    N_eff: float = N_EFF_DEFAULT           # Effective number of neutrino species

    def __post_init__(self):
        """Validate the primary parameters."""
        for name in ('h', 'Omega_chi0', 'Omega_b0', 'T0_CMB_K', 'N_eff'):
            if not math.isfinite(getattr(self, name)):
                raise InvalidParameterError(f"{name} must be finite")

        if self.h <= 0:
            raise InvalidParameterError("h must be positive")
        if self.Omega_chi0 < 0:
            raise InvalidParameterError("Omega_chi0 cannot be negative")
        if self.Omega_b0 < 0:
            raise InvalidParameterError("Omega_b0 cannot be negative")
        if self.Omega_chi0 + self.Omega_b0 <= 0:
            raise InvalidParameterError("Omega_chi0 + Omega_b0 must be positive")
        if self.Omega_chi0 + self.Omega_b0 > 1:
            raise InvalidParameterError("Omega_chi0 + Omega_b0 cannot exceed 1")
        if self.T0_CMB_K < 0:
            raise InvalidParameterError("T0_CMB_K cannot be negative")
        if self.N_eff < 0:
            raise InvalidParameterError("N_eff cannot be negative")

    @classmethod
    def from_kwargs(cls, **kwargs):
        """Create parameters accepting either h or H0, Omega_chi0 or Omega_cdm."""
        if 'H0' in kwargs:
            h = kwargs['H0'] / 100.0
        else:
            h = kwargs['h']

        if 'Omega_cdm' in kwargs:
            omega_chi0 = kwargs['Omega_cdm']
        else:
            omega_chi0 = kwargs['Omega_chi0']

        return cls(
            h=h,
            Omega_chi0=omega_chi0,
            Omega_b0=kwargs['Omega_b0'],
            T0_CMB_K=kwargs.get('T0_CMB_K', T0_CMB_K_DEFAULT),
            N_eff=kwargs.get('N_eff', N_EFF_DEFAULT)
        )

@dataclass(frozen=True)
class RootFindingConfig:
    """Settings for the equality-redshift root search in y = ln(1+z)."""
    bracket: Tuple[float, float] = (-10.0, 10.0)
    xtol: float = 1e-12
    maxiter: int = 200
    method: str = 'bisect'

    def __post_init__(self):
        lower, upper = self.bracket
        if not lower < upper:
            raise InvalidParameterError("bracket must be an increasing interval")
        if self.xtol <= 0:
            raise InvalidParameterError("xtol must be positive")
        if self.maxiter <= 0:
            raise InvalidParameterError("maxiter must be positive")

@dataclass(frozen=True)
class IntegrationConfig:
    """Default options handed to the adaptive quadrature routine."""
    epsrel: float = 1e-3
    epsabs: float = 0.0
    limit: int = 50

    def as_quad_kwargs(self) -> Dict[str, Any]:
        """Options in the form accepted by scipy.integrate.quad."""
        return {'epsrel': self.epsrel, 'epsabs': self.epsabs, 'limit': self.limit}

DEFAULT_ROOT_FINDING = RootFindingConfig()
DEFAULT_INTEGRATION = IntegrationConfig()

# Planck 2018 TT,TE,EE+lowE+lensing best fit
PLANCK18_PARAMETERS = CosmologicalParameters(h=0.6736, Omega_chi0=0.26447, Omega_b0=0.04930)

# Matter-only companion with the Planck 2018 expansion rate
EDS_PLANCK18_PARAMETERS = CosmologicalParameters(h=0.6736, Omega_chi0=0.3, Omega_b0=0.0)
