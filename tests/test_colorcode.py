import math

import pytest

from ohmbadge.colorcode import E24, ColorCode, color_code, normalize_to_e24


@pytest.mark.parametrize("value", E24[:-1])
def test_series_values_are_unchanged(value):
    assert normalize_to_e24(value) == value


@pytest.mark.parametrize("value", [1000, 4700, 22000, 330000])
def test_series_values_in_higher_decades_are_unchanged(value):
    assert normalize_to_e24(value) == value


@pytest.mark.parametrize("value", range(10, 5000, 7))
def test_normalized_value_belongs_to_series(value):
    result = normalize_to_e24(value)
    decade = 10 ** max(0, len(str(value)) - 2)
    assert result % decade == 0
    assert result // decade in E24


def test_tie_goes_to_lower_value():
    assert normalize_to_e24(14) == 13


def test_small_values_round_up_to_ten():
    assert normalize_to_e24(0) == E24[0]
    assert normalize_to_e24(4) == E24[0]


def test_color_code_of_standard_resistor():
    code = color_code(4700)
    assert (code.digit1, code.digit2) == (4, 7)
    assert code.exponent == 2
    assert code.multiplier_index == 2
    assert code.normalized == 4700


def test_gold_multiplier_below_ten_ohms():
    code = color_code(4.7)
    assert code.exponent == -1
    assert code.multiplier_index == 10


def test_silver_multiplier_below_one_ohm():
    code = color_code(0.47)
    assert code.exponent == -2
    assert code.multiplier_index == 11
    assert code.normalized == E24[0]


@pytest.mark.parametrize("resistance", [12.0, 150.0, 3300.0, 68000.0, 1.0e6, 2.2e9])
def test_bands_reconstruct_resistance(resistance):
    code = color_code(resistance)
    rebuilt = (code.digit1 * 10 + code.digit2) * 10.0 ** code.exponent
    assert math.isclose(rebuilt, resistance, rel_tol=0.05)


def test_result_is_frozen():
    code = color_code(1000)
    with pytest.raises(AttributeError):
        code.digit1 = 3
    assert isinstance(code, ColorCode) and code.digit1 == 1


@pytest.mark.parametrize("resistance", [0, -100, 0.01, 1.0e12, float("nan"), float("inf")])
def test_out_of_range_raises(resistance):
    with pytest.raises(ValueError):
        color_code(resistance)