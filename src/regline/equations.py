# Copyright (c) The RegLine Authors - All Rights Reserved

"The equation of a fitted line, in one of its three possible forms."

import dataclasses as dcls
import logging
import typing
from collections.abc import Sequence
from numbers import Number
from typing import Self

import torch
from torch import Tensor
from typing_extensions import TypeIs

from .uncertain import Real, UncertainValue

__all__ = [
    "Form",
    "FiniteSlope",
    "InfiniteSlope",
    "Degenerate",
    "LinearRegressionEquation",
]

LOGGER = logging.getLogger(__name__)


@dcls.dataclass(frozen=True)
class FiniteSlope[T: Real]:
    """
    A non-vertical line ``y = slope * x + intercept_y``.
    """

    slope: UncertainValue[T]
    """
    The slope. Might be exactly zero, for horizontal lines.
    """

    intercept_y: UncertainValue[T]
    """
    The line passes over (0, intercept_y).
    """


@dcls.dataclass(frozen=True)
class InfiniteSlope[T: Real]:
    """
    A vertical line ``x = intercept_x``.
    """

    intercept_x: T
    """
    The line passes over (intercept_x, 0).
    """


@dcls.dataclass(frozen=True)
class Degenerate[T: Real]:
    """
    A single point (intercept_x, intercept_y). There is no direction.

    Both coordinates are exact.
    """

    intercept_x: T
    "The x coordinate of the point."

    intercept_y: T
    "The y coordinate of the point."


type Form[T: Real] = FiniteSlope[T] | InfiniteSlope[T] | Degenerate[T]

_FORMS = FiniteSlope, InfiniteSlope, Degenerate


@dcls.dataclass(frozen=True)
class LinearRegressionEquation[T: Real]:
    """
    The result of a linear regression.

    Exactly one of the forms ``FiniteSlope``, ``InfiniteSlope`` and ``Degenerate``
    is held, and it never changes. Equations of different forms are never equal.
    """

    form: Form[T]
    """
    The active form.
    """

    def __post_init__(self) -> None:
        if not isinstance(self.form, _FORMS):
            raise TypeError(f"Unsupported form: {type(self.form)=}")

    @property
    def is_degenerate(self) -> bool:
        "The data collapsed into a single point."

        return isinstance(self.form, Degenerate)

    @property
    def has_finite_slope(self) -> bool:
        "The line is not vertical, and not degenerate."

        return isinstance(self.form, FiniteSlope)

    @property
    def has_zero_slope(self) -> bool:
        "The line is horizontal."

        match self.form:
            case FiniteSlope(slope=slope):
                return bool(slope.value == 0)
            case InfiniteSlope() | Degenerate():
                return False
            case _:
                typing.assert_never(self.form)

    @property
    def slope(self) -> UncertainValue[T] | None:
        match self.form:
            case FiniteSlope(slope=slope):
                return slope
            case InfiniteSlope() | Degenerate():
                return None
            case _:
                typing.assert_never(self.form)

    @property
    def intercept_y(self) -> UncertainValue[T] | None:
        """
        Where the line crosses ``x = 0``.

        ``None`` for vertical lines. For degenerate equations,
        the y coordinate of the point, with zero variance.
        """

        match self.form:
            case FiniteSlope(intercept_y=intercept_y):
                return intercept_y
            case InfiniteSlope():
                return None
            case Degenerate(intercept_y=intercept_y):
                return UncertainValue.exact(intercept_y)
            case _:
                typing.assert_never(self.form)

    @property
    def intercept_x(self) -> T | None:
        """
        Where the line crosses ``y = 0``.

        ``None`` for horizontal lines, even for the line ``y = 0`` itself.
        """

        match self.form:
            case FiniteSlope(slope=slope, intercept_y=intercept_y):
                if slope.value == 0:
                    LOGGER.debug("No x intercept for zero slope: %s", self.form)
                    return None

                return -(intercept_y.value / slope.value)
            case InfiniteSlope(intercept_x=intercept_x):
                return intercept_x
            case Degenerate(intercept_x=intercept_x):
                return intercept_x
            case _:
                typing.assert_never(self.form)

    def solve(self, x: T | Sequence[int | float] | Tensor, /) -> T | Tensor | None:
        """
        Get the y value of the line equation when x is given.

        Args:
            x: The x value. Scalars are kept as-is, sequences are promoted to tensors.
                With tensors, the coefficients are converted to ``float``.

        Raises:
            TypeError: If ``x`` is not a scalar, a sequence of numbers, or a tensor.

        Returns:
            The y value, or ``None`` if y is not a function of x (vertical or degenerate).
        """

        x = _promote(x)

        match self.form:
            case FiniteSlope(slope=slope, intercept_y=intercept_y):
                m = _coefficient(slope.value, x)
                b = _coefficient(intercept_y.value, x)
                return m * x + b
            case InfiniteSlope() | Degenerate():
                return None
            case _:
                typing.assert_never(self.form)

    @classmethod
    def finite_slope(
        cls, slope: UncertainValue[T], intercept_y: UncertainValue[T]
    ) -> Self:
        "Create a line in the ``y = mx + b`` form."

        return cls(form=FiniteSlope(slope=slope, intercept_y=intercept_y))

    @classmethod
    def infinite_slope(cls, intercept_x: T) -> Self:
        "Create a vertical line ``x = a``."

        return cls(form=InfiniteSlope(intercept_x=intercept_x))

    @classmethod
    def degenerate(cls, intercept_x: T, intercept_y: T) -> Self:
        "Create a degenerate equation, a single point (a, b)."

        return cls(form=Degenerate(intercept_x=intercept_x, intercept_y=intercept_y))


def _promote[T: Real](x: T | Sequence[int | float] | Tensor, /) -> T | Tensor:
    if isinstance(x, Tensor | Number):
        return x

    # Check this last because it can be expensive.
    if _is_seq_of_numbers(x):
        return torch.tensor(x)

    raise TypeError(f"Unsupported type: {type(x)=}")


def _coefficient[T: Real](value: T, x: T | Tensor, /) -> T | float:
    "Tensors only multiply with builtin numbers, not with ``Fraction`` or ``Decimal``."

    if isinstance(x, Tensor) and type(value) not in (int, float):
        return float(value)

    return value


def _is_seq_of_numbers(x: object) -> TypeIs[Sequence[int | float]]:
    return isinstance(x, Sequence) and all(isinstance(v, int | float) for v in x)
