"""
Result records passed between the numerical routines and the constructor.
"""
from dataclasses import dataclass
from typing import Optional

NO_SIGN_CHANGE = 'no_sign_change'
NOT_CONVERGED = 'not_converged'

@dataclass(frozen=True)
class RootResult:
    """Outcome of a bracketing root search."""
    root: Optional[float] = None
    failure: Optional[str] = None
    iterations: int = 0
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def found(cls, root, iterations=0):
        return cls(root=float(root), iterations=iterations)

    @classmethod
    def failed(cls, failure, message, iterations=0):
        return cls(failure=failure, iterations=iterations, message=message)

@dataclass(frozen=True)
class ConstructionWarning:
    """Non-fatal problem met while deriving a cosmology."""
    quantity: str       # Name of the field that fell back to its sentinel
    reason: str         # Failure tag of the underlying root search
    message: str = ""
