"""Row reduction algorithms."""

from densematrix.solvers.gauss_jordan import gauss_jordan

__all__ = [
    "gauss_jordan",
]
