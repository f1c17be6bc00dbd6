"""
FLRWToolkit: background quantities of flat FLRW cosmologies.

Modules:
- flrwtoolkit.cosmology: FlatFLRW construction, density/abundance/Hubble
  evaluators and cosmic time (age, lookback time)
- flrwtoolkit.core: Parameters, solver settings, root finders, quadrature, exceptions
- flrwtoolkit.util: Logging levels and helpers

Every evaluator defaults to the Planck 2018 cosmology, ``PLANCK18``.
"""

import jax
jax.config.update("jax_enable_x64", True)

from .core import (
    FLRWToolkitError, InvalidParameterError, NumericalError, IntegrationError,
    CosmologicalParameters, RootFindingConfig, IntegrationConfig,
    RootResult, ConstructionWarning
)
from .cosmology import *
from .cosmology import __all__ as _cosmology_all

__version__ = "1.0.0"

__all__ = [
    'FLRWToolkitError',
    'InvalidParameterError',
    'NumericalError',
    'IntegrationError',
    'CosmologicalParameters',
    'RootFindingConfig',
    'IntegrationConfig',
    'RootResult',
    'ConstructionWarning'
] + list(_cosmology_all)
