# Copyright (c) The RegLine Authors - All Rights Reserved

from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest
from pytest import FixtureRequest

from regline import LinearRegressionEquation, UncertainValue


@pytest.fixture
def slope() -> UncertainValue[float]:
    return UncertainValue(value=3.0, variance=5.0)


@pytest.fixture
def intercept_y() -> UncertainValue[float]:
    return UncertainValue(value=-4.0, variance=2.0)


@pytest.fixture
def intercept_x() -> float:
    return 7.0


@pytest.fixture
def finite(slope, intercept_y) -> LinearRegressionEquation[float]:
    return LinearRegressionEquation.finite_slope(slope=slope, intercept_y=intercept_y)


@pytest.fixture
def infinite(intercept_x) -> LinearRegressionEquation[float]:
    return LinearRegressionEquation.infinite_slope(intercept_x=intercept_x)


@pytest.fixture
def degenerate(intercept_x, intercept_y) -> LinearRegressionEquation[float]:
    return LinearRegressionEquation.degenerate(
        intercept_x=intercept_x, intercept_y=intercept_y.value
    )


def _reals():
    yield float
    yield Fraction
    yield Decimal
    yield np.float64


@pytest.fixture(params=_reals())
def real(request: FixtureRequest) -> type:
    "A numeric type the equations should be generic over."

    return request.param
