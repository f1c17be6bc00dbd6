"""
Root bracketing and quadrature used by the cosmology constructor and the
time evaluators.

Root finders share the signature ``finder(func, bracket, xtol, maxiter)`` and
always return a RootResult; they never raise for a bracket without a sign
change and never hand back an unconverged estimate as a root.
"""
import math
from typing import Callable, Tuple, Union

from scipy import integrate, optimize

from .data_models import RootResult, NO_SIGN_CHANGE, NOT_CONVERGED
from .exceptions import IntegrationError, InvalidParameterError

RootFinder = Callable[[Callable[[float], float], Tuple[float, float], float, int], RootResult]


def _check_bracket(func, bracket):
    """Return a failed RootResult if func does not change sign on bracket."""
    lower, upper = bracket
    f_lower = func(lower)
    f_upper = func(upper)

    if not (math.isfinite(f_lower) and math.isfinite(f_upper)):
        return RootResult.failed(
            NO_SIGN_CHANGE,
            f"function is not finite at the bracket ends ({f_lower}, {f_upper})"
        )
    if f_lower * f_upper > 0:
        return RootResult.failed(
            NO_SIGN_CHANGE,
            f"no sign change on [{lower}, {upper}]: f = ({f_lower:.6g}, {f_upper:.6g})"
        )
    return None


def _run_scipy(method, func, bracket, xtol, maxiter):
    failure = _check_bracket(func, bracket)
    if failure is not None:
        return failure

    lower, upper = bracket
    root, info = method(func, lower, upper, xtol=xtol, maxiter=maxiter,
                        full_output=True, disp=False)
    if not info.converged:
        return RootResult.failed(
            NOT_CONVERGED,
            f"{info.flag} after {info.iterations} iterations",
            iterations=info.iterations
        )
    return RootResult.found(root, iterations=info.iterations)


def bisection(func, bracket, xtol=1e-12, maxiter=200) -> RootResult:
    """Bisection root search on ``bracket``."""
    return _run_scipy(optimize.bisect, func, bracket, xtol, maxiter)


def brent(func, bracket, xtol=1e-12, maxiter=200) -> RootResult:
    """Brent's method root search on ``bracket``."""
    return _run_scipy(optimize.brentq, func, bracket, xtol, maxiter)


ROOT_FINDERS = {
    'bisect': bisection,
    'brentq': brent,
}


def get_root_finder(method: Union[str, RootFinder]) -> RootFinder:
    """Resolve a root finder from its registered name or pass a callable through."""
    if callable(method):
        return method
    try:
        return ROOT_FINDERS[method]
    except KeyError:
        raise InvalidParameterError(
            f"Unknown root finder: {method!r} (available: {sorted(ROOT_FINDERS)})"
        ) from None


def integrate_quad(func, lower, upper, **options) -> float:
    """
    Adaptive quadrature of ``func`` over [lower, upper].

    Parameters:
    -----------
    func : callable
        Scalar integrand f(x) -> float
    lower, upper : float
        Integration limits
    **options
        Forwarded verbatim to scipy.integrate.quad (epsabs, epsrel, limit, ...)

    Returns:
    --------
    float
        Value of the integral

    Raises:
    -------
    IntegrationError
        If QUADPACK reports that the tolerance was not met.
    """
    try:
        result = integrate.quad(func, lower, upper, full_output=1, **options)
    except ValueError as e:
        # ier == 6: QUADPACK rejected the tolerances or limit
        raise IntegrationError(
            f"Integration over [{lower}, {upper}] rejected its options: {e}",
            lower=lower, upper=upper
        ) from e

    # quad appends a convergence message only when ier != 0
    if len(result) > 3:
        raise IntegrationError(
            f"Integration over [{lower}, {upper}] did not converge: {result[3]}",
            lower=lower, upper=upper
        )
    value, abserr, infodict = result
    if not math.isfinite(value):
        raise IntegrationError(
            f"Integration over [{lower}, {upper}] returned {value}",
            lower=lower, upper=upper
        )
    return value
