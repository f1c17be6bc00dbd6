"""
Background observables of a flat FLRW cosmology as functions of redshift.

Every evaluator takes ``(z, cosmology)`` with z = 0 and the Planck 2018
cosmology as defaults. Redshifts may be scalars or arrays; results are
float64 JAX arrays. Densities are in Msun/Mpc^3, rates in km/s/Mpc.
"""
import jax.numpy as jnp

from ..core.exceptions import InvalidParameterError
from . import abundances
from .abundances import MATTER_EXPONENT, RADIATION_EXPONENT, DARK_ENERGY_EXPONENT
from .parameters import FlatFLRW, PLANCK18


def _check_redshift(z, allow_infinite=False):
    z = jnp.asarray(z, dtype=float)
    bad = jnp.isnan(z) | (z <= -1)
    if not allow_infinite:
        bad = bad | jnp.isinf(z)
    if jnp.any(bad):
        raise InvalidParameterError(f"Redshift must be finite and greater than -1, got {z}")
    return z


def _check_scale_factor(a):
    a = jnp.asarray(a, dtype=float)
    if jnp.any(jnp.isnan(a)) or jnp.any(a <= 0):
        raise InvalidParameterError(f"Scale factor must be positive, got {a}")
    return a


#########################################################
# Redshift and scale factor

def redshift_to_scale_factor(z):
    """Scale factor a = 1/(1+z); z = inf maps to the big bang, a = 0."""
    return 1 / (1 + _check_redshift(z, allow_infinite=True))


def scale_factor_to_redshift(a):
    """Redshift z = 1/a - 1."""
    return 1 / _check_scale_factor(a) - 1


def z_eq_matter_radiation(cosmology: FlatFLRW = PLANCK18) -> float:
    """Matter-radiation equality redshift (0 if undefined for ``cosmology``)."""
    return cosmology.z_eq_mr


def z_eq_matter_dark_energy(cosmology: FlatFLRW = PLANCK18) -> float:
    """Matter-dark energy equality redshift (0 if undefined for ``cosmology``)."""
    return cosmology.z_eq_Lambda_m


def a_eq_matter_radiation(cosmology: FlatFLRW = PLANCK18):
    return redshift_to_scale_factor(cosmology.z_eq_mr)


def a_eq_matter_dark_energy(cosmology: FlatFLRW = PLANCK18):
    return redshift_to_scale_factor(cosmology.z_eq_Lambda_m)


#########################################################
# Temperature and expansion rate

def temperature_CMB(z=0, cosmology: FlatFLRW = PLANCK18):
    """CMB temperature [K] at redshift ``z``."""
    return cosmology.T0_CMB_K * (1 + _check_redshift(z))


def hubble_constant(cosmology: FlatFLRW = PLANCK18) -> float:
    """Hubble constant H0 [km/s/Mpc]."""
    return cosmology.H0


def hubble_evolution_squared(z=0, cosmology: FlatFLRW = PLANCK18):
    """E(z)^2, the total density in units of the critical density today."""
    return abundances.hubble_evolution_squared(
        _check_redshift(z), cosmology.Omega_m0, cosmology.Omega_r0, cosmology.Omega_Lambda0
    )


def hubble_evolution(z=0, cosmology: FlatFLRW = PLANCK18):
    """Dimensionless Hubble evolution E(z) = H(z)/H0."""
    return jnp.sqrt(hubble_evolution_squared(z, cosmology))


def hubble_rate(z=0, cosmology: FlatFLRW = PLANCK18):
    """Hubble rate H(z) [km/s/Mpc]."""
    return hubble_constant(cosmology) * hubble_evolution(z, cosmology)


#########################################################
# Densities [Msun/Mpc^3]

def _density(z, Omega_X0, exponent, cosmology):
    return Omega_X0 * cosmology.rho_c0_Msun_Mpc3 * (1 + _check_redshift(z))**exponent


def critical_density(z=0, cosmology: FlatFLRW = PLANCK18):
    """Critical density at redshift ``z``."""
    return cosmology.rho_c0_Msun_Mpc3 * hubble_evolution_squared(z, cosmology)


def radiation_density(z=0, cosmology: FlatFLRW = PLANCK18):
    return _density(z, cosmology.Omega_r0, RADIATION_EXPONENT, cosmology)


def photon_density(z=0, cosmology: FlatFLRW = PLANCK18):
    return _density(z, cosmology.Omega_gamma0, RADIATION_EXPONENT, cosmology)


def neutrino_density(z=0, cosmology: FlatFLRW = PLANCK18):
    return _density(z, cosmology.Omega_nu0, RADIATION_EXPONENT, cosmology)


def matter_density(z=0, cosmology: FlatFLRW = PLANCK18):
    return _density(z, cosmology.Omega_m0, MATTER_EXPONENT, cosmology)


def cold_dark_matter_density(z=0, cosmology: FlatFLRW = PLANCK18):
    return _density(z, cosmology.Omega_chi0, MATTER_EXPONENT, cosmology)


def baryon_density(z=0, cosmology: FlatFLRW = PLANCK18):
    return _density(z, cosmology.Omega_b0, MATTER_EXPONENT, cosmology)


def dark_energy_density(z=0, cosmology: FlatFLRW = PLANCK18):
    """Cosmological constant density, the same at every redshift."""
    z = _check_redshift(z)
    return jnp.full_like(z, cosmology.Omega_Lambda0 * cosmology.rho_c0_Msun_Mpc3)


#########################################################
# Abundances

def _abundance(z, Omega_X0, exponent, cosmology):
    return abundances.abundance(
        _check_redshift(z), Omega_X0, exponent,
        cosmology.Omega_m0, cosmology.Omega_r0, cosmology.Omega_Lambda0
    )


def Omega_radiation(z=0, cosmology: FlatFLRW = PLANCK18):
    return _abundance(z, cosmology.Omega_r0, RADIATION_EXPONENT, cosmology)


def Omega_photon(z=0, cosmology: FlatFLRW = PLANCK18):
    return _abundance(z, cosmology.Omega_gamma0, RADIATION_EXPONENT, cosmology)


def Omega_neutrino(z=0, cosmology: FlatFLRW = PLANCK18):
    return _abundance(z, cosmology.Omega_nu0, RADIATION_EXPONENT, cosmology)


def Omega_matter(z=0, cosmology: FlatFLRW = PLANCK18):
    return _abundance(z, cosmology.Omega_m0, MATTER_EXPONENT, cosmology)


def Omega_cdm(z=0, cosmology: FlatFLRW = PLANCK18):
    return _abundance(z, cosmology.Omega_chi0, MATTER_EXPONENT, cosmology)


def Omega_baryon(z=0, cosmology: FlatFLRW = PLANCK18):
    # Baryons dilute like the rest of the matter, (1+z)^3
    return _abundance(z, cosmology.Omega_b0, MATTER_EXPONENT, cosmology)


def Omega_dark_energy(z=0, cosmology: FlatFLRW = PLANCK18):
    return _abundance(z, cosmology.Omega_Lambda0, DARK_ENERGY_EXPONENT, cosmology)
