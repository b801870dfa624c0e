from __future__ import annotations

import dataclasses

import pytest

from tempcast.errors import ScaleMismatchError, TempcastError
from tempcast.models.quantity import EPSILON, Celsius, Fahrenheit, Kelvin, Quantity, are_equal
from tempcast.models.scale import Scale


class TestConstruction:
    def test_int_is_coerced_to_float(self) -> None:
        q = Celsius(36)
        assert q.value == 36.0
        assert isinstance(q.value, float)

    def test_float_conversion(self) -> None:
        assert float(Kelvin(100.0)) == 100.0

    def test_scale_is_bound_per_class(self) -> None:
        assert Celsius(0.0).scale is Scale.CELSIUS
        assert Fahrenheit(0.0).scale is Scale.FAHRENHEIT
        assert Kelvin(0.0).scale is Scale.KELVIN

    def test_any_finite_value_accepted(self) -> None:
        # No physical validation: below absolute zero is still a value.
        assert Kelvin(-5.0).value == -5.0

    def test_string_rejected(self) -> None:
        with pytest.raises(TypeError, match="real number"):
            Celsius("36.5")  # type: ignore[arg-type]

    def test_bool_rejected(self) -> None:
        with pytest.raises(TypeError, match="real number"):
            Celsius(True)

    def test_base_class_is_abstract(self) -> None:
        with pytest.raises(TypeError, match="abstract"):
            Quantity(1.0)

    def test_immutable(self) -> None:
        q = Celsius(1.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            q.value = 2.0  # type: ignore[misc]

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(Celsius(1.0))

    def test_for_scale(self) -> None:
        assert Quantity.for_scale(Scale.CELSIUS) is Celsius
        assert Quantity.for_scale(Scale.FAHRENHEIT) is Fahrenheit
        assert Quantity.for_scale(Scale.KELVIN) is Kelvin

    def test_second_class_for_same_scale_rejected(self) -> None:
        with pytest.raises(TypeError, match="already defined"):

            class OtherCelsius(Quantity, scale=Scale.CELSIUS):
                pass

        assert Quantity.for_scale(Scale.CELSIUS) is Celsius


class TestDisplay:
    def test_str(self) -> None:
        assert str(Celsius(36.5)) == "36.5°C"
        assert str(Fahrenheit(79.0)) == "79.0°F"
        assert str(Kelvin(100.0)) == "100.0K"

    def test_repr(self) -> None:
        assert repr(Celsius(36.5)) == "Celsius(value=36.5)"


class TestEquality:
    def test_epsilon_value(self) -> None:
        assert EPSILON == 0.001

    def test_within_tolerance(self) -> None:
        assert Celsius(36.5) == Celsius(36.5005)
        assert are_equal(36.5, 36.5009)

    def test_outside_tolerance(self) -> None:
        assert Celsius(36.5) != Celsius(36.502)

    def test_boundary_is_exclusive(self) -> None:
        assert Celsius(0.0) != Celsius(0.001)

    def test_non_quantity_is_not_equal(self) -> None:
        assert Celsius(1.0) != 1.0
        assert not (Celsius(1.0) == 1.0)

    def test_cross_scale_raises(self) -> None:
        with pytest.raises(ScaleMismatchError) as exc_info:
            _ = Celsius(1.0) == Kelvin(1.0)
        assert exc_info.value.left is Scale.CELSIUS
        assert exc_info.value.right is Scale.KELVIN

    def test_cross_scale_not_equal_raises(self) -> None:
        with pytest.raises(ScaleMismatchError):
            _ = Fahrenheit(1.0) != Celsius(1.0)

    def test_mismatch_is_a_type_error(self) -> None:
        assert issubclass(ScaleMismatchError, TypeError)
        assert issubclass(ScaleMismatchError, TempcastError)


class TestOrdering:
    def test_raw_comparison(self) -> None:
        a, b = Celsius(1.0), Celsius(2.0)
        assert a < b
        assert b > a
        assert a <= b
        assert b >= a
        assert not (a > b)
        assert not (b <= a)

    def test_equal_values(self) -> None:
        a, b = Kelvin(5.0), Kelvin(5.0)
        assert a <= b
        assert a >= b
        assert not (a < b)

    def test_tolerance_equal_yet_ordered(self) -> None:
        a, b = Celsius(1.0), Celsius(1.0005)
        assert a == b
        assert a < b

    def test_sorting(self) -> None:
        values = [Fahrenheit(3.0), Fahrenheit(-1.0), Fahrenheit(2.0)]
        assert [q.value for q in sorted(values)] == [-1.0, 2.0, 3.0]

    @pytest.mark.parametrize("op", ["__lt__", "__gt__", "__le__", "__ge__"])
    def test_cross_scale_raises(self, op: str) -> None:
        with pytest.raises(ScaleMismatchError):
            getattr(Celsius(1.0), op)(Fahrenheit(1.0))

    def test_non_quantity_raises_type_error(self) -> None:
        with pytest.raises(TypeError):
            _ = Celsius(1.0) < 2.0  # type: ignore[operator]


class TestArithmetic:
    def test_addition_preserves_scale(self) -> None:
        total = Celsius(1.5) + Celsius(2.0)
        assert type(total) is Celsius
        assert total.value == 3.5

    def test_subtraction_preserves_scale(self) -> None:
        diff = Kelvin(300.0) - Kelvin(0.5)
        assert type(diff) is Kelvin
        assert diff.value == 299.5

    def test_operands_unchanged(self) -> None:
        a, b = Fahrenheit(1.0), Fahrenheit(2.0)
        _ = a + b
        assert a.value == 1.0
        assert b.value == 2.0

    @pytest.mark.parametrize(
        ("a", "b", "c"),
        [(0.1, 0.2, 0.3), (1e6, -1e6, 0.001), (36.5, 79.0, 100.0)],
    )
    def test_addition_is_associative(self, a: float, b: float, c: float) -> None:
        qa, qb, qc = Celsius(a), Celsius(b), Celsius(c)
        assert (qa + qb) + qc == qa + (qb + qc)

    def test_cross_scale_addition_raises(self) -> None:
        with pytest.raises(ScaleMismatchError, match="convert"):
            _ = Celsius(1.0) + Kelvin(1.0)  # type: ignore[operator]

    def test_cross_scale_subtraction_raises(self) -> None:
        with pytest.raises(ScaleMismatchError):
            _ = Kelvin(1.0) - Fahrenheit(1.0)  # type: ignore[operator]

    def test_non_quantity_addition_raises_type_error(self) -> None:
        with pytest.raises(TypeError):
            _ = Celsius(1.0) + 1.0  # type: ignore[operator]
