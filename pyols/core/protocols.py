"""
Core protocols for pyols.

These define structural interfaces that model variants and computational
backends must satisfy. We use Protocol (structural typing) rather than ABC
(nominal typing) so variants share the numeric engine by calling it, not by
inheriting from a common base class.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, Any, TYPE_CHECKING, runtime_checkable

from numpy.typing import ArrayLike

if TYPE_CHECKING:
    from pyols.core.result import Result

# Type variables for generic payloads
P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class Regressor(Protocol):
    """
    Fit/predict contract shared by regression model variants.

    Ordinary least squares is the only variant today; ridge or logistic
    models would implement the same two methods.
    """

    def fit(self, X: ArrayLike, y: ArrayLike) -> Any:
        """
        Estimate model state from a design matrix and response vector.

        The stored coefficients are the observable outcome. Implementations
        must leave previous state untouched when fitting fails.
        """
        ...

    def predict(self, x: ArrayLike) -> float:
        """
        Predict a single response from one observation's features.

        Raises:
            NotFittedError: If called before a successful fit()
        """
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a validated design and produces a parameter payload.
    Backends are stateless: all configuration is passed at construction time.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_gauss_jordan'.
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Raises:
            NumericalError: If numerical issues prevent solution (singularity)
            ValidationError: If design is invalid for this backend
        """
        ...
