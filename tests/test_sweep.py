import pytest

from ballistix.analysis import simulate_for_graph
from ballistix.parameters import ParameterError, Parameters
from ballistix.sweep import (
    GraphParameter,
    GraphQuantity,
    GraphType,
    default_sweep_range,
    graph_type_from_index,
    sweep,
)


@pytest.mark.parametrize("index", range(27))
def test_index_round_trip(index):
    assert graph_type_from_index(index).index == index


@pytest.mark.parametrize("index", [-1, 27, 100])
def test_unknown_index_raises(index):
    with pytest.raises(ValueError):
        graph_type_from_index(index)


def test_first_graph_is_distance_against_speed():
    graph = graph_type_from_index(0)
    assert graph == GraphType(GraphParameter.INITIAL_SPEED, GraphQuantity.DISTANCE)
    assert graph.x_label() == GraphParameter.INITIAL_SPEED.label
    assert graph.y_label() == GraphQuantity.DISTANCE.label


def test_last_graph_is_flight_time_against_azimuth():
    graph = graph_type_from_index(26)
    assert graph.parameter is GraphParameter.AZIMUTH
    assert graph.quantity is GraphQuantity.FLIGHT_TIME


def test_angle_default_range():
    rng = default_sweep_range(3)
    assert (rng.start, rng.stop, rng.step) == (0.0, 90.0, 5.0)
    assert (rng.lower, rng.upper) == (0.0, 90.0)


@pytest.mark.parametrize("index", range(27))
def test_default_ranges_are_consistent(index):
    rng = default_sweep_range(graph_type_from_index(index))
    assert rng.lower <= rng.start < rng.stop <= rng.upper
    assert rng.step > 0


def test_sweep_points_match_single_simulations():
    base = Parameters()
    result = sweep(base, 4, 30.0, 60.0, 15.0)
    assert [x for x, _ in result.points] == [30.0, 45.0, 60.0]
    for x, y in result.points:
        expected = simulate_for_graph(base.with_value("angle_deg", x)).max_height
        assert y == expected


def test_sweep_skips_invalid_angles():
    result = sweep(Parameters(), 3, -10.0, 10.0, 5.0)
    assert [x for x, _ in result.points] == [0.0, 5.0, 10.0]


def test_sweep_skips_non_positive_speed():
    result = sweep(Parameters(), 2, -10.0, 10.0, 5.0)
    assert [x for x, _ in result.points] == [5.0, 10.0]


def test_sweep_keeps_negative_wind():
    result = sweep(Parameters(), 18, -10.0, 10.0, 10.0)
    assert [x for x, _ in result.points] == [-10.0, 0.0, 10.0]


def test_sweep_ranges_cover_points():
    result = sweep(Parameters(), 2, 10.0, 40.0, 10.0)
    xs = [x for x, _ in result.points]
    ys = [y for _, y in result.points]
    assert result.x_min == min(xs) and result.x_max == max(xs)
    assert result.y_min == min(ys) and result.y_max == max(ys)


def test_flight_time_grows_with_speed():
    result = sweep(Parameters(), 2, 10.0, 40.0, 10.0)
    ys = [y for _, y in result.points]
    assert ys == sorted(ys)


def test_empty_sweep_falls_back_to_defaults():
    result = sweep(Parameters(), 6, -10.0, -1.0, 1.0)
    assert result.is_empty
    assert (result.x_min, result.x_max) == (-10.0, -1.0)
    assert (result.y_min, result.y_max) == (0.0, 1.0)


def test_start_not_below_stop_raises():
    with pytest.raises(ParameterError):
        sweep(Parameters(), 0, 10.0, 10.0, 1.0)


def test_non_positive_step_raises():
    with pytest.raises(ParameterError):
        sweep(Parameters(), 0, 1.0, 10.0, 0.0)


def test_invalid_base_raises():
    with pytest.raises(ParameterError):
        sweep(Parameters(mass=0.0), 0, 1.0, 10.0, 1.0)