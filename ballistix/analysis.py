"""Trajectory summaries for the preview panel and for dependency graphs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .parameters import Parameters
from .physics import State, integrate

PREVIEW_DT = 0.05
PREVIEW_MAX_POINTS = 200
PREVIEW_PI = 3.14

GRAPH_DT = 0.01
GRAPH_MAX_POINTS = 10000
GRAPH_PI = 3.1415926535


@dataclass(frozen=True)
class TrajectorySummary:
    """Key figures of one flight."""

    max_height: float = 0.0
    final_x: float = 0.0
    final_z: float = 0.0
    total_distance: float = 0.0
    flight_time: float = 0.0


def summarize(states: Sequence[State], dt: float) -> TrajectorySummary:
    """Summarise a sequence of states sampled every ``dt`` seconds.

    The maximum height never drops below zero, the distance is measured
    from the origin to the last state, and an empty sequence gives zeros.
    """
    if not states:
        return TrajectorySummary()
    max_height = max(0.0, max(s.y for s in states))
    last = states[-1]
    return TrajectorySummary(
        max_height=max_height,
        final_x=last.x,
        final_z=last.z,
        total_distance=math.sqrt(last.x * last.x + last.z * last.z),
        flight_time=(len(states) - 1) * dt,
    )


def simulate_for_graph(params: Parameters) -> TrajectorySummary:
    """Run the finer simulation used for one point of a dependency graph."""
    states = integrate(params, dt=GRAPH_DT, max_points=GRAPH_MAX_POINTS, pi=GRAPH_PI)
    return summarize(states, GRAPH_DT)


def preview_trajectory(params: Parameters) -> tuple[list[State], TrajectorySummary]:
    """Run the coarse preview simulation and return its states and summary."""
    states = integrate(
        params, dt=PREVIEW_DT, max_points=PREVIEW_MAX_POINTS, pi=PREVIEW_PI
    )
    return states, summarize(states, PREVIEW_DT)