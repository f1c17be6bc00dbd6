"""
Flat FLRW cosmology: primary parameters, derived density parameters and
equality redshifts.
"""
import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from ..core.config import (
    CosmologicalParameters, RootFindingConfig, DEFAULT_ROOT_FINDING,
    PLANCK18_PARAMETERS, EDS_PLANCK18_PARAMETERS
)
from ..core.constants import (
    G_NEWTON, KM_TO_M, MPC_TO_M, MSUN_KG,
    PHOTON_DENSITY_COEFF, NEUTRINO_TO_PHOTON, T0_CMB_K_DEFAULT, N_EFF_DEFAULT
)
from ..core.data_models import ConstructionWarning
from ..core.exceptions import InvalidParameterError
from ..core.solvers import RootFinder, get_root_finder
from ..util.log_util import log_wrapper
from . import abundances

logger = logging.getLogger(__name__)

# Value stored for an equality redshift that has no root in the search bracket
Z_EQ_SENTINEL = 0.0


@dataclass(frozen=True)
class FlatFLRW:
    """Immutable flat FLRW cosmology with all derived quantities."""

    # Primary parameters
    h: float
    Omega_chi0: float
    Omega_b0: float
    T0_CMB_K: float
    N_eff: float

    # Derived abundances
    Omega_gamma0: float
    Omega_nu0: float
    Omega_r0: float
    Omega_m0: float
    Omega_Lambda0: float

    # Critical density today [Msun/Mpc^3]
    rho_c0_Msun_Mpc3: float

    # Equality redshifts (Z_EQ_SENTINEL when undefined)
    z_eq_mr: float
    z_eq_Lambda_m: float

    diagnostics: Tuple[ConstructionWarning, ...] = ()

    @property
    def H0(self) -> float:
        """Hubble constant [km/s/Mpc]."""
        return 100 * self.h

    @property
    def H0_per_s(self) -> float:
        """Hubble constant [1/s]."""
        return self.H0 * KM_TO_M / MPC_TO_M

    @classmethod
    def from_parameters(cls, parameters: CosmologicalParameters,
                        root_finder: Optional[Union[str, RootFinder]] = None,
                        solver_config: Optional[RootFindingConfig] = None) -> 'FlatFLRW':
        """Derive every secondary quantity from validated primary parameters."""
        solver_config = solver_config or DEFAULT_ROOT_FINDING
        finder = get_root_finder(root_finder if root_finder is not None else solver_config.method)

        h = parameters.h
        Omega_gamma0 = PHOTON_DENSITY_COEFF * parameters.T0_CMB_K**4 / h**2
        Omega_nu0 = parameters.N_eff * Omega_gamma0 * NEUTRINO_TO_PHOTON
        Omega_r0 = Omega_gamma0 + Omega_nu0
        Omega_m0 = parameters.Omega_chi0 + parameters.Omega_b0
        Omega_Lambda0 = 1 - Omega_m0 - Omega_r0

        if Omega_Lambda0 < 0:
            raise InvalidParameterError(
                f"Omega_m0 + Omega_r0 = {Omega_m0 + Omega_r0:.6g} exceeds 1 "
                f"(implied Omega_Lambda0 = {Omega_Lambda0:.6g})"
            )

        H0_per_s = 100 * h * KM_TO_M / MPC_TO_M
        rho_c0_kg_m3 = 3 / (8 * math.pi * G_NEWTON) * H0_per_s**2
        rho_c0_Msun_Mpc3 = rho_c0_kg_m3 * MPC_TO_M**3 / MSUN_KG

        densities = (Omega_m0, Omega_r0, Omega_Lambda0)
        diagnostics = []

        z_eq_mr = _solve_equality(
            'z_eq_mr', 'matter-radiation', abundances.Omega_r, densities,
            finder, solver_config, diagnostics
        )
        z_eq_Lambda_m = _solve_equality(
            'z_eq_Lambda_m', 'matter-dark energy', abundances.Omega_Lambda, densities,
            finder, solver_config, diagnostics
        )

        return cls(
            h=h,
            Omega_chi0=parameters.Omega_chi0,
            Omega_b0=parameters.Omega_b0,
            T0_CMB_K=parameters.T0_CMB_K,
            N_eff=parameters.N_eff,
            Omega_gamma0=Omega_gamma0,
            Omega_nu0=Omega_nu0,
            Omega_r0=Omega_r0,
            Omega_m0=Omega_m0,
            Omega_Lambda0=Omega_Lambda0,
            rho_c0_Msun_Mpc3=rho_c0_Msun_Mpc3,
            z_eq_mr=z_eq_mr,
            z_eq_Lambda_m=z_eq_Lambda_m,
            diagnostics=tuple(diagnostics)
        )


def _solve_equality(quantity, label, other_abundance, densities, finder, solver_config, diagnostics):
    """
    Redshift at which ``other_abundance`` equals the matter abundance.

    The search runs over y = ln(1+z). On failure the sentinel is returned and a
    ConstructionWarning is appended to ``diagnostics``.
    """
    def crossing(y):
        z = math.exp(y) - 1
        return float(other_abundance(z, *densities) - abundances.Omega_m(z, *densities))

    result = finder(crossing, solver_config.bracket, solver_config.xtol, solver_config.maxiter)

    if not result.ok:
        message = f"Impossible to define {quantity} ({label} equality) for this cosmology: {result.message}"
        log_wrapper(logger, message, level='flrw_warn')
        diagnostics.append(ConstructionWarning(quantity=quantity, reason=result.failure, message=message))
        return Z_EQ_SENTINEL

    z_eq = math.exp(result.root) - 1
    log_wrapper(logger, "%s = %.6g after %d iterations", quantity, z_eq, result.iterations,
                level='flrw_debug')
    return z_eq


def make_cosmology(h, Omega_chi0, Omega_b0, T0_CMB_K=T0_CMB_K_DEFAULT, N_eff=N_EFF_DEFAULT,
                   root_finder=None, solver_config=None) -> FlatFLRW:
    """
    Build a flat FLRW cosmology.

    Parameters:
    -----------
    h : float
        Dimensionless Hubble parameter, H0 = 100*h km/s/Mpc
    Omega_chi0 : float
        Cold dark matter density parameter today
    Omega_b0 : float
        Baryon density parameter today
    T0_CMB_K : float
        CMB temperature today [K]
    N_eff : float
        Effective number of neutrino species
    root_finder : str or callable, optional
        Name in ROOT_FINDERS or a callable (func, bracket, xtol, maxiter) -> RootResult.
        Defaults to solver_config.method.
    solver_config : RootFindingConfig, optional
        Bracket and tolerances of the equality-redshift search

    Returns:
    --------
    FlatFLRW
        Fully derived cosmology. Equality redshifts that could not be found are
        set to Z_EQ_SENTINEL and described in ``diagnostics``.

    Raises:
    -------
    InvalidParameterError
        For unphysical primary parameters.
    """
    parameters = CosmologicalParameters(
        h=h, Omega_chi0=Omega_chi0, Omega_b0=Omega_b0, T0_CMB_K=T0_CMB_K, N_eff=N_eff
    )
    return FlatFLRW.from_parameters(parameters, root_finder=root_finder, solver_config=solver_config)


#########################################################
# Reference cosmologies, built once at import
PLANCK18 = FlatFLRW.from_parameters(PLANCK18_PARAMETERS)
EDS_PLANCK18 = FlatFLRW.from_parameters(EDS_PLANCK18_PARAMETERS)
#########################################################
