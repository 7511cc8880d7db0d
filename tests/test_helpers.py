import pytest

from senseshift.helpers import (
    CallbackManager,
    lerp,
    lookup_table_interpolate_linear,
    remap,
    remap_simple,
)

FILTER_TABLE = {0.0: 0.0, 1.0: 3.5, 2.0: 7.0, 3.0: 10.5, 4.0: 14.0, 5.0: 17.5}


@pytest.mark.parametrize("start,end", [(0.0, 1.0), (10, 20), (-5.0, 5.0)])
def test_lerp_endpoints(start, end):
    assert lerp(0.0, start, end) == start
    assert lerp(1.0, start, end) == end


def test_lerp_is_monotonic_between_endpoints():
    results = [lerp(c / 10, 0.0, 8.0) for c in range(11)]
    assert results == sorted(results)


@pytest.mark.parametrize(
    "low,high,out_low,out_high",
    [(0, 100, 0, 255), (0.0, 1.0, 0.0, 4095.0), (10, 20, -3, 3)],
)
def test_remap_endpoints(low, high, out_low, out_high):
    assert remap(low, low, high, out_low, out_high) == out_low
    assert remap(high, low, high, out_low, out_high) == out_high


def test_remap_integers_truncate():
    result = remap(1, 0, 3, 0, 10)
    assert result == 3
    assert isinstance(result, int)


def test_remap_invalid_range_returns_midpoint():
    assert remap(5, 10, 10, 0, 100) == 50


def test_remap_simple_endpoints():
    assert remap_simple(255, 255, 100) == 100
    assert remap_simple(0, 255, 100) == 0


def test_remap_simple_integer_stays_integral():
    result = remap_simple(200, 255, 100)
    assert isinstance(result, int)
    assert 0 <= result <= 100


def test_lookup_exact_keys():
    for key, expected in FILTER_TABLE.items():
        assert lookup_table_interpolate_linear(FILTER_TABLE, key) == pytest.approx(expected)


@pytest.mark.parametrize(
    "value,expected",
    [(0.5, 1.75), (1.5, 5.25), (2.5, 8.75), (3.5, 12.25), (4.5, 15.75)],
)
def test_lookup_between_keys(value, expected):
    assert lookup_table_interpolate_linear(FILTER_TABLE, value) == pytest.approx(expected)


def test_lookup_out_of_range_clamps():
    assert lookup_table_interpolate_linear(FILTER_TABLE, -1.0) == 0.0
    assert lookup_table_interpolate_linear(FILTER_TABLE, 6.0) == 17.5


def test_lookup_order_of_mapping_does_not_matter():
    reversed_table = dict(reversed(list(FILTER_TABLE.items())))
    assert lookup_table_interpolate_linear(reversed_table, 2.5) == pytest.approx(8.75)


def test_lookup_empty_table_raises():
    with pytest.raises(ValueError):
        lookup_table_interpolate_linear({}, 1.0)


def test_callback_manager_calls_all_in_order():
    manager = CallbackManager()
    seen = []
    manager.add(lambda value: seen.append(("a", value)))
    manager.add(lambda value: seen.append(("b", value)))

    manager.call(7)

    assert seen == [("a", 7), ("b", 7)]
    assert len(manager) == 2


def test_callback_manager_dunder_call_matches_call():
    manager = CallbackManager()
    seen = []
    manager.add(lambda *args: seen.append(args))

    manager(1, 2)
    manager.call(3, 4)

    assert seen == [(1, 2), (3, 4)]


def test_callback_manager_starts_empty():
    assert len(CallbackManager()) == 0