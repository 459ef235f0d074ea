"""Presentation helpers."""

from densematrix.utils.formatting import format_matrix

__all__ = [
    "format_matrix",
]
