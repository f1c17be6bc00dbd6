"""
Exception classes for the flrwtoolkit.
"""

class FLRWToolkitError(Exception):
    """Base exception for flrwtoolkit."""
    pass

class InvalidParameterError(FLRWToolkitError, ValueError):
    """Cosmological parameter or redshift outside its physical domain."""
    pass

class NumericalError(FLRWToolkitError):
    """Numerical routine failed to produce a trustworthy value."""
    pass

class IntegrationError(NumericalError):
    """Quadrature did not reach the requested tolerance."""

    def __init__(self, message, lower=None, upper=None):
        super().__init__(message)
        self.lower = lower
        self.upper = upper
