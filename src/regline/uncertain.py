# Copyright (c) The RegLine Authors - All Rights Reserved

"A quantity paired with its variance."

import dataclasses as dcls
import logging
from collections.abc import Iterator
from typing import Any, Protocol, Self

import numpy as np
from numpy.typing import DTypeLike, NDArray

__all__ = ["Real", "UncertainValue", "InvalidVarianceError"]

LOGGER = logging.getLogger(__name__)


class Real(Protocol):
    """
    The numeric element type of ``UncertainValue``.

    ``int``, ``float``, ``Fraction``, ``Decimal`` and numpy scalars all qualify.
    """

    def __lt__(self, other: Any, /) -> Any: ...

    def __ge__(self, other: Any, /) -> Any: ...

    def __add__(self, other: Any, /) -> Any: ...

    def __sub__(self, other: Any, /) -> Any: ...

    def __mul__(self, other: Any, /) -> Any: ...

    def __truediv__(self, other: Any, /) -> Any: ...

    def __neg__(self) -> Any: ...


class InvalidVarianceError(ValueError):
    "Raised when a variance is not ``>= 0``."


@dcls.dataclass(frozen=True)
class UncertainValue[T: Real]:
    """
    A measured (or estimated) quantity, and its uncertainty.

    Equality is exact on both fields, no tolerance is applied.
    """

    value: T
    """
    The quantity.
    """

    variance: T
    """
    The variance of ``value``. Always ``>= 0``.
    """

    def __post_init__(self) -> None:
        if not self._valid_variance():
            LOGGER.debug("Rejected variance %r for value %r.", self.variance, self.value)
            raise InvalidVarianceError(
                f"Variance should be non-negative. Got {self.variance=}"
            )

    def _valid_variance(self) -> bool:
        # Written as ``>=`` s.t. NaN is rejected as well.
        try:
            return bool(self.variance >= 0)

        # ``Decimal`` NaNs cannot be ordered at all.
        except ArithmeticError:
            return False

    def __iter__(self) -> Iterator[T]:
        yield self.value
        yield self.variance

    def __array__(self, dtype: DTypeLike = None, copy: bool | None = None) -> NDArray:
        if copy is False:
            raise ValueError("A new array is always created for ``UncertainValue``.")

        return np.array([self.value, self.variance], dtype=dtype)

    @classmethod
    def exact(cls, value: T) -> Self:
        """
        A value known without uncertainty.

        Args:
            value: The quantity.

        Returns:
            An ``UncertainValue`` whose variance is zero, of the same type as ``value``.
        """

        return cls(value=value, variance=type(value)(0))
