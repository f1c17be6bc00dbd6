"""
Cosmic time between two epochs of a flat FLRW cosmology.

    t(a0 -> a1) = 1/H0 * integral_{a0}^{a1} da / (a E(z(a)))

All results are in seconds; divide by core.constants.GYR_S for gigayears.
"""
import math

from ..core.config import DEFAULT_INTEGRATION
from ..core.exceptions import InvalidParameterError
from ..core.solvers import integrate_quad
from . import abundances
from .background import redshift_to_scale_factor
from .parameters import FlatFLRW, PLANCK18


def _time_integrand(a, cosmology):
    # 1/(a E) -> a/sqrt(Omega_r0) as a -> 0, so the a = 0 end is regular
    if a <= 0:
        return 0.0
    z = 1 / a - 1
    E2 = abundances.hubble_evolution_squared(
        z, cosmology.Omega_m0, cosmology.Omega_r0, cosmology.Omega_Lambda0
    )
    return 1 / (a * math.sqrt(float(E2)))


def delta_time(a0, a1, cosmology: FlatFLRW = PLANCK18, **options) -> float:
    """
    Cosmic time [s] elapsed between scale factors ``a0`` and ``a1``.

    Parameters:
    -----------
    a0, a1 : float
        Scale factors bounding the interval, 0 <= a0, a1
    cosmology : FlatFLRW
        Cosmology to integrate (default: PLANCK18)
    **options
        Quadrature options forwarded verbatim to scipy.integrate.quad,
        overriding DEFAULT_INTEGRATION (epsrel=1e-3)

    Raises:
    -------
    InvalidParameterError
        For a negative or NaN scale factor.
    IntegrationError
        If the quadrature does not reach its tolerance.
    """
    a0 = float(a0)
    a1 = float(a1)
    if not (a0 >= 0 and a1 >= 0):
        raise InvalidParameterError(f"Scale factors must be non-negative, got ({a0}, {a1})")

    quad_options = {**DEFAULT_INTEGRATION.as_quad_kwargs(), **options}
    integral = integrate_quad(_time_integrand, a0, a1, args=(cosmology,), **quad_options)
    return integral / cosmology.H0_per_s


def age(z=0, cosmology: FlatFLRW = PLANCK18, **options) -> float:
    """Age of the universe [s] at redshift ``z``."""
    a = float(redshift_to_scale_factor(z))
    return delta_time(0.0, a, cosmology, **options)


def lookback_time(z, cosmology: FlatFLRW = PLANCK18, **options) -> float:
    """Time [s] elapsed between redshift ``z`` and today."""
    a = float(redshift_to_scale_factor(z))
    return delta_time(a, 1.0, cosmology, **options)
