"""
Flat FLRW cosmology: construction, background observables and cosmic time.
"""

from .parameters import FlatFLRW, make_cosmology, PLANCK18, EDS_PLANCK18, Z_EQ_SENTINEL
from .background import (
    redshift_to_scale_factor, scale_factor_to_redshift,
    z_eq_matter_radiation, z_eq_matter_dark_energy,
    a_eq_matter_radiation, a_eq_matter_dark_energy,
    temperature_CMB, hubble_constant, hubble_evolution_squared, hubble_evolution, hubble_rate,
    critical_density, radiation_density, photon_density, neutrino_density,
    matter_density, cold_dark_matter_density, baryon_density, dark_energy_density,
    Omega_radiation, Omega_photon, Omega_neutrino, Omega_matter,
    Omega_cdm, Omega_baryon, Omega_dark_energy
)
from .cosmic_time import delta_time, age, lookback_time

__all__ = [
    'FlatFLRW',
    'make_cosmology',
    'PLANCK18',
    'EDS_PLANCK18',
    'Z_EQ_SENTINEL',
    'redshift_to_scale_factor',
    'scale_factor_to_redshift',
    'z_eq_matter_radiation',
    'z_eq_matter_dark_energy',
    'a_eq_matter_radiation',
    'a_eq_matter_dark_energy',
    'temperature_CMB',
    'hubble_constant',
    'hubble_evolution_squared',
    'hubble_evolution',
    'hubble_rate',
    'critical_density',
    'radiation_density',
    'photon_density',
    'neutrino_density',
    'matter_density',
    'cold_dark_matter_density',
    'baryon_density',
    'dark_energy_density',
    'Omega_radiation',
    'Omega_photon',
    'Omega_neutrino',
    'Omega_matter',
    'Omega_cdm',
    'Omega_baryon',
    'Omega_dark_energy',
    'delta_time',
    'age',
    'lookback_time'
]
