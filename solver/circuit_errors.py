"""Exceptions raised by the circuit graph engine."""


class CircuitError(Exception):
    """Base class for all graph engine errors."""


class InvalidInputError(CircuitError, ValueError):
    """Generator arguments rejected before any graph is allocated."""


class GenerationError(CircuitError, RuntimeError):
    """The generator ran out of attempts without producing a valid graph."""

    def __init__(self, n, density, attempts):
        self.n = n
        self.density = density
        self.attempts = attempts
        super().__init__(
            f"no connected Eulerian graph for n={n}, density={density} "
            f"after {attempts} attempt(s)"
        )


class PreconditionError(CircuitError, ValueError):
    """An algorithm was called on a graph that does not meet its precondition."""


class NotEulerianError(PreconditionError):
    """Eulerian circuit requested on a graph that has none."""


class VertexError(CircuitError, KeyError):
    """Vertex id outside 1..N."""


__all__ = [
    "CircuitError",
    "InvalidInputError",
    "GenerationError",
    "PreconditionError",
    "NotEulerianError",
    "VertexError",
]
