"""Parameter sweeps: how range, height or flight time depend on one input."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union

from .analysis import TrajectorySummary, simulate_for_graph
from .parameters import ParameterError, Parameters


def _positive(value: float) -> bool:
    return value > 0


def _non_negative(value: float) -> bool:
    return value >= 0


def _between(low: float, high: float) -> Callable[[float], bool]:
    def check(value: float) -> bool:
        return low <= value <= high

    return check


class GraphParameter(Enum):
    """The input that varies along the horizontal axis of a graph."""

    INITIAL_SPEED = ("initial_speed", "Initial speed (m/s)")
    ANGLE = ("angle_deg", "Angle (degrees)")
    MASS = ("mass", "Mass (kg)")
    DRAG_COEFFICIENT = ("Cd", "Drag coefficient")
    AIR_DENSITY = ("air_density", "Air density (kg/m³)")
    RADIUS = ("radius", "Radius (m)")
    WIND_X = ("wind_x", "Wind X (m/s)")
    WIND_Z = ("wind_z", "Wind Z (m/s)")
    AZIMUTH = ("azimuth_deg", "Azimuth (degrees)")

    def __init__(self, key: str, label: str) -> None:
        self.key = key
        self.label = label

    def accepts(self, value: float) -> bool:
        """Whether a simulation can be run with this parameter set to ``value``."""
        check = _ACCEPTS.get(self)
        return check is None or check(value)


# Parameters without an entry (the wind components) take any value.
_ACCEPTS: dict[GraphParameter, Callable[[float], bool]] = {
    GraphParameter.INITIAL_SPEED: _positive,
    GraphParameter.ANGLE: _between(0.0, 90.0),
    GraphParameter.MASS: _positive,
    GraphParameter.DRAG_COEFFICIENT: _non_negative,
    GraphParameter.AIR_DENSITY: _non_negative,
    GraphParameter.RADIUS: _positive,
    GraphParameter.AZIMUTH: _between(0.0, 360.0),
}


class GraphQuantity(Enum):
    """The simulation result plotted on the vertical axis."""

    DISTANCE = ("total_distance", "Distance (m)")
    MAX_HEIGHT = ("max_height", "Max height (m)")
    FLIGHT_TIME = ("flight_time", "Flight time (s)")

    def __init__(self, attribute: str, label: str) -> None:
        self.attribute = attribute
        self.label = label

    def value_of(self, summary: TrajectorySummary) -> float:
        """Pick this quantity out of a trajectory summary."""
        return getattr(summary, self.attribute)


_PARAMETERS = list(GraphParameter)
_QUANTITIES = list(GraphQuantity)
GRAPH_TYPE_COUNT = len(_PARAMETERS) * len(_QUANTITIES)


@dataclass(frozen=True)
class GraphType:
    """A dependency graph: one quantity as a function of one parameter."""

    parameter: GraphParameter
    quantity: GraphQuantity

    @property
    def index(self) -> int:
        """Position of this graph type in the list of graph choices."""
        return _PARAMETERS.index(self.parameter) * len(_QUANTITIES) + _QUANTITIES.index(
            self.quantity
        )

    def x_label(self) -> str:
        return self.parameter.label

    def y_label(self) -> str:
        return self.quantity.label


def graph_type_from_index(index: int) -> GraphType:
    """Graph type at ``index`` in the list of graph choices."""
    if not 0 <= index < GRAPH_TYPE_COUNT:
        raise ValueError(f"unknown graph type: {index}")
    row, column = divmod(index, len(_QUANTITIES))
    return GraphType(_PARAMETERS[row], _QUANTITIES[column])


@dataclass(frozen=True)
class SweepRange:
    """Suggested sweep for a parameter and the limits its inputs are kept within."""

    start: float
    stop: float
    step: float
    lower: float
    upper: float


_DEFAULT_RANGES = {
    GraphParameter.INITIAL_SPEED: SweepRange(1.0, 200.0, 10.0, 0.001, 1e6),
    GraphParameter.ANGLE: SweepRange(0.0, 90.0, 5.0, 0.0, 90.0),
    GraphParameter.MASS: SweepRange(1.0, 100.0, 5.0, 0.001, 1e6),
    GraphParameter.DRAG_COEFFICIENT: SweepRange(0.0, 2.0, 0.1, 0.0, 10.0),
    GraphParameter.AIR_DENSITY: SweepRange(0.1, 2.0, 0.1, 0.0, 5.0),
    GraphParameter.RADIUS: SweepRange(0.01, 1.0, 0.05, 0.001, 10.0),
    GraphParameter.WIND_X: SweepRange(-50.0, 50.0, 5.0, -1000.0, 1000.0),
    GraphParameter.WIND_Z: SweepRange(-50.0, 50.0, 5.0, -1000.0, 1000.0),
    GraphParameter.AZIMUTH: SweepRange(0.0, 360.0, 15.0, 0.0, 360.0),
}


def default_sweep_range(graph_type: Union[GraphType, int]) -> SweepRange:
    """Suggested sweep for the parameter of ``graph_type``."""
    if isinstance(graph_type, int):
        graph_type = graph_type_from_index(graph_type)
    return _DEFAULT_RANGES[graph_type.parameter]


@dataclass(frozen=True)
class SweepResult:
    """Points of a dependency graph and the ranges of both axes."""

    graph_type: GraphType
    points: tuple[tuple[float, float], ...]
    x_min: float
    x_max: float
    y_min: float
    y_max: float

    @property
    def is_empty(self) -> bool:
        return not self.points


def sweep(
    base: Parameters,
    graph_type: Union[GraphType, int],
    start: float,
    stop: float,
    step: float,
) -> SweepResult:
    """Simulate with one parameter stepped from ``start`` to ``stop``.

    Values the parameter cannot take are skipped. With no points left the
    ranges fall back to ``start``..``stop`` and 0..1.
    """
    if isinstance(graph_type, int):
        graph_type = graph_type_from_index(graph_type)
    if start >= stop:
        raise ParameterError("The minimum parameter value must be less than the maximum.")
    if step <= 0:
        raise ParameterError("The parameter step must be greater than zero.")
    base.validate()

    parameter = graph_type.parameter
    points: list[tuple[float, float]] = []
    value = start
    while value <= stop:
        if parameter.accepts(value):
            summary = simulate_for_graph(base.with_value(parameter.key, value))
            points.append((value, graph_type.quantity.value_of(summary)))
        value += step

    if not points:
        return SweepResult(graph_type, (), start, stop, 0.0, 1.0)
    xs = [x for x, _ in points]
    ys = [y for _, y in points]
    return SweepResult(graph_type, tuple(points), min(xs), max(xs), min(ys), max(ys))