"""Scalar type protocol."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Scalar(Protocol):
    """
    Protocol for matrix element types.

    Any totally ordered field with an absolute value qualifies: ``float``,
    numpy floating types, ``fractions.Fraction``. Store such values with
    ``dtype=object`` when numpy has no native dtype for them.
    """

    def __add__(self, other: Any) -> Any:
        ...

    def __sub__(self, other: Any) -> Any:
        ...

    def __mul__(self, other: Any) -> Any:
        ...

    def __truediv__(self, other: Any) -> Any:
        ...

    def __neg__(self) -> Any:
        ...

    def __abs__(self) -> Any:
        ...

    def __lt__(self, other: Any) -> bool:
        ...
