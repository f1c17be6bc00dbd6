#!/usr/bin/env python3
"""
Walks the flrwtoolkit namespace: every submodule imports and every name
listed in an ``__all__`` resolves.
"""

import inspect
import pkgutil
import unittest
from importlib import import_module

import flrwtoolkit

PUBLIC_API = [
    'make_cosmology', 'PLANCK18', 'temperature_CMB', 'hubble_constant', 'hubble_evolution',
    'hubble_rate', 'critical_density', 'radiation_density', 'photon_density', 'neutrino_density',
    'matter_density', 'cold_dark_matter_density', 'baryon_density', 'dark_energy_density',
    'Omega_radiation', 'Omega_photon', 'Omega_neutrino', 'Omega_matter', 'Omega_cdm',
    'Omega_baryon', 'Omega_dark_energy', 'scale_factor_to_redshift', 'redshift_to_scale_factor',
    'z_eq_matter_radiation', 'z_eq_matter_dark_energy', 'a_eq_matter_radiation',
    'a_eq_matter_dark_energy', 'age', 'lookback_time',
]


def get_submodules(package):
    """Gets a list of submodules for the given package."""
    submodules = []
    for _, module_name, is_pkg in pkgutil.walk_packages(package.__path__, package.__name__ + '.'):
        if not is_pkg:
            submodules.append(module_name)
    return submodules


class TestNamespace(unittest.TestCase):

    def test_submodules_import(self):
        submodules = get_submodules(flrwtoolkit)
        self.assertIn('flrwtoolkit.cosmology.parameters', submodules)
        for name in submodules:
            with self.subTest(module=name):
                import_module(name)

    def test_all_names_resolve(self):
        packages = [flrwtoolkit, flrwtoolkit.core, flrwtoolkit.cosmology, flrwtoolkit.util]
        for package in packages:
            for name in package.__all__:
                with self.subTest(package=package.__name__, name=name):
                    self.assertTrue(hasattr(package, name))

    def test_public_api(self):
        for name in PUBLIC_API:
            with self.subTest(name=name):
                self.assertIn(name, flrwtoolkit.__all__)

    def test_evaluators_default_to_planck18(self):
        """Every redshift evaluator defaults to z = 0 and the PLANCK18 cosmology."""
        for name in PUBLIC_API:
            value = getattr(flrwtoolkit, name)
            if not inspect.isfunction(value):
                continue
            parameters = inspect.signature(value).parameters
            if 'cosmology' in parameters:
                with self.subTest(name=name):
                    self.assertIs(parameters['cosmology'].default, flrwtoolkit.PLANCK18)
            if 'z' in parameters and name not in ('lookback_time', 'redshift_to_scale_factor'):
                with self.subTest(name=name):
                    self.assertEqual(parameters['z'].default, 0)


if __name__ == '__main__':
    unittest.main()
