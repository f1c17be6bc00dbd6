"""
Configuration, error taxonomy and numerical building blocks shared by the
cosmology modules.
"""

from .exceptions import FLRWToolkitError, InvalidParameterError, NumericalError, IntegrationError
from .config import (
    CosmologicalParameters, RootFindingConfig, IntegrationConfig,
    DEFAULT_ROOT_FINDING, DEFAULT_INTEGRATION,
    PLANCK18_PARAMETERS, EDS_PLANCK18_PARAMETERS
)
from .data_models import RootResult, ConstructionWarning
from .solvers import bisection, brent, get_root_finder, integrate_quad

__all__ = [
    'FLRWToolkitError',
    'InvalidParameterError',
    'NumericalError',
    'IntegrationError',
    'CosmologicalParameters',
    'RootFindingConfig',
    'IntegrationConfig',
    'DEFAULT_ROOT_FINDING',
    'DEFAULT_INTEGRATION',
    'PLANCK18_PARAMETERS',
    'EDS_PLANCK18_PARAMETERS',
    'RootResult',
    'ConstructionWarning',
    'bisection',
    'brent',
    'get_root_finder',
    'integrate_quad'
]
