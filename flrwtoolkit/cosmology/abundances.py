"""
Closed-form abundances of a flat FLRW background in terms of the present-day
density parameters.

These take the density parameters directly so the constructor can use them
before a FlatFLRW instance exists. All functions are JAX-traceable.
"""
import jax
import jax.numpy as jnp

# Scaling exponents of rho_X / rho_X0 in (1+z)
MATTER_EXPONENT = 3
RADIATION_EXPONENT = 4
DARK_ENERGY_EXPONENT = 0


@jax.jit
def hubble_evolution_squared(z, Omega_m0, Omega_r0, Omega_Lambda0):
    """E(z)^2 = Omega_m0 (1+z)^3 + Omega_r0 (1+z)^4 + Omega_Lambda0."""
    x = 1 + jnp.asarray(z)
    return Omega_m0 * x**3 + Omega_r0 * x**4 + Omega_Lambda0


def abundance(z, Omega_X0, exponent, Omega_m0, Omega_r0, Omega_Lambda0):
    """Fraction of the critical density in a component scaling as (1+z)^exponent."""
    x = 1 + jnp.asarray(z)
    return Omega_X0 * x**exponent / hubble_evolution_squared(z, Omega_m0, Omega_r0, Omega_Lambda0)


def Omega_m(z, Omega_m0, Omega_r0, Omega_Lambda0):
    return abundance(z, Omega_m0, MATTER_EXPONENT, Omega_m0, Omega_r0, Omega_Lambda0)


def Omega_r(z, Omega_m0, Omega_r0, Omega_Lambda0):
    return abundance(z, Omega_r0, RADIATION_EXPONENT, Omega_m0, Omega_r0, Omega_Lambda0)


def Omega_Lambda(z, Omega_m0, Omega_r0, Omega_Lambda0):
    return abundance(z, Omega_Lambda0, DARK_ENERGY_EXPONENT, Omega_m0, Omega_r0, Omega_Lambda0)
