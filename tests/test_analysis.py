import math

import pytest

from ballistix.analysis import (
    GRAPH_DT,
    GRAPH_PI,
    PREVIEW_DT,
    PREVIEW_MAX_POINTS,
    PREVIEW_PI,
    TrajectorySummary,
    preview_trajectory,
    simulate_for_graph,
    summarize,
)
from ballistix.parameters import Parameters
from ballistix.physics import State, integrate


def test_summarize_empty_gives_zeros():
    assert summarize([], 0.01) == TrajectorySummary()


def test_summarize_uses_last_state_and_max_height():
    states = [
        State(0.0, 0.0, 0.0, 1.0, 1.0, 1.0),
        State(1.0, 5.0, 2.0, 1.0, 0.0, 1.0),
        State(3.0, 1.0, 4.0, 1.0, -1.0, 1.0),
    ]
    summary = summarize(states, 0.5)
    assert summary.max_height == 5.0
    assert summary.final_x == 3.0
    assert summary.final_z == 4.0
    assert summary.total_distance == pytest.approx(math.hypot(3.0, 4.0))
    assert summary.flight_time == pytest.approx(2 * 0.5)


def test_summarize_max_height_not_negative():
    states = [State(0.0, -2.0, 0.0, 0.0, 0.0, 0.0), State(1.0, -3.0, 0.0, 0.0, 0.0, 0.0)]
    assert summarize(states, 0.1).max_height == 0.0


def test_preview_matches_integration():
    params = Parameters()
    states, summary = preview_trajectory(params)
    expected = integrate(params, dt=PREVIEW_DT, max_points=PREVIEW_MAX_POINTS, pi=PREVIEW_PI)
    assert states == expected
    assert summary == summarize(expected, PREVIEW_DT)


def test_preview_is_capped():
    params = Parameters(initial_speed=5000.0, drag_coefficient=0.0, angle_deg=80.0)
    states, summary = preview_trajectory(params)
    assert len(states) == PREVIEW_MAX_POINTS
    assert summary.flight_time == pytest.approx((PREVIEW_MAX_POINTS - 1) * PREVIEW_DT)


def test_graph_simulation_matches_integration():
    params = Parameters()
    expected = summarize(integrate(params, dt=GRAPH_DT, max_points=10000, pi=GRAPH_PI), GRAPH_DT)
    assert simulate_for_graph(params) == expected


def test_graph_distance_consistent_with_final_position():
    summary = simulate_for_graph(Parameters())
    assert summary.total_distance == pytest.approx(math.hypot(summary.final_x, summary.final_z))
    assert summary.flight_time > 0
    assert summary.max_height > 0


def test_faster_launch_goes_further():
    slow = simulate_for_graph(Parameters(initial_speed=20.0))
    fast = simulate_for_graph(Parameters(initial_speed=60.0))
    assert fast.total_distance > slow.total_distance
    assert fast.max_height > slow.max_height
    assert fast.flight_time > slow.flight_time


def test_drag_free_height_bounded_by_ballistic_peak():
    params = Parameters(drag_coefficient=0.0, wind_x=0.0, angle_deg=60.0, initial_speed=40.0)
    summary = simulate_for_graph(params)
    vy = params.initial_speed * math.sin(params.angle_deg * GRAPH_PI / 180.0)
    peak = vy * vy / (2 * params.g)
    assert summary.max_height <= peak + 1e-6
    assert summary.max_height == pytest.approx(peak, rel=1e-2)


def test_drag_shortens_flight():
    free = simulate_for_graph(Parameters(drag_coefficient=0.0, wind_x=0.0))
    dragged = simulate_for_graph(Parameters(drag_coefficient=1.0, wind_x=0.0))
    assert dragged.total_distance < free.total_distance