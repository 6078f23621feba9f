"""Tests for the flat sampling functions."""

from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest
from pseudo_rand import InvalidParameterError, api


class TestArgumentTypes:
    """Non-numeric arguments raise TypeError."""

    @pytest.mark.parametrize('bad', ['1', None, [1], True, False, Decimal('1.5'), 1 + 2j])
    def test_rejects_non_real(self, bad: object) -> None:
        """Strings, None, bools, Decimal and complex raise TypeError."""
        with pytest.raises(TypeError, match='Wrong types of arguments'):
            api.uni_int(bad, 6)  # type: ignore[arg-type]
        with pytest.raises(TypeError, match='Wrong types of arguments'):
            api.norm(0.0, bad)  # type: ignore[arg-type]
        with pytest.raises(TypeError, match='Wrong types of arguments'):
            api.geo(bad)  # type: ignore[arg-type]

    def test_wrong_argument_count(self) -> None:
        """A wrong argument count is a plain call TypeError."""
        with pytest.raises(TypeError):
            api.exp(1.0, 2.0)  # type: ignore[call-arg]
        with pytest.raises(TypeError):
            api.pnorm(1.0)  # type: ignore[call-arg]

    def test_accepts_numpy_and_fraction(self) -> None:
        """numpy scalars and Fractions count as real numbers."""
        assert 0.0 <= api.uni_real(np.float64(0.0), Fraction(1, 2)) < 0.5
        assert 1 <= api.uni_int(np.int64(1), np.int32(3)) <= 3


class TestUniInt:
    """Tests for uni_int()."""

    def test_range(self) -> None:
        """Draws stay within the closed range."""
        assert all(1 <= api.uni_int(1, 6) <= 6 for _ in range(1000))

    def test_real_bounds_truncate_toward_zero(self) -> None:
        """Real bounds are truncated toward zero before sampling."""
        assert {api.uni_int(1.9, 2.9) for _ in range(200)} <= {1, 2}
        assert api.uni_int(-2.7, -2.2) == -2

    def test_non_finite_bound(self) -> None:
        """Infinite bounds raise InvalidParameterError instead of truncating."""
        with pytest.raises(InvalidParameterError) as exc_info:
            api.uni_int(0, math.inf)
        assert exc_info.value.parameter == 'max'

    def test_inverted_bounds(self) -> None:
        """min > max raises InvalidParameterError."""
        with pytest.raises(InvalidParameterError):
            api.uni_int(5, 1)


class TestOtherFunctions:
    """Tests for uni_real(), geo(), exp(), norm() and pnorm()."""

    def test_uni_real(self) -> None:
        """uni_real() returns a float in [min, max)."""
        value = api.uni_real(-1, 1)
        assert isinstance(value, float)
        assert -1.0 <= value < 1.0

    def test_geo(self) -> None:
        """geo() returns a non-negative int and rejects p == 0."""
        value = api.geo(0.3)
        assert isinstance(value, int)
        assert value >= 0
        with pytest.raises(InvalidParameterError):
            api.geo(0)

    def test_exp(self) -> None:
        """exp() returns a non-negative float and rejects negative rates."""
        assert api.exp(3) >= 0.0
        with pytest.raises(InvalidParameterError):
            api.exp(-1)

    def test_norm(self) -> None:
        """norm() with stddev 0 returns the mean and rejects negative stddev."""
        assert api.norm(5, 0) == 5.0
        with pytest.raises(InvalidParameterError):
            api.norm(0, -1)

    def test_pnorm(self) -> None:
        """pnorm() returns a finite float and rejects a zero rate."""
        value = api.pnorm(1, 1)
        assert isinstance(value, float)
        assert math.isfinite(value)
        with pytest.raises(InvalidParameterError):
            api.pnorm(1, 0)
