"""Two-dimensional drawings: the trajectory preview and dependency graphs."""

from __future__ import annotations

from typing import Optional, Sequence

from matplotlib.axes import Axes
from matplotlib.figure import Figure

from .physics import State
from .sweep import SweepResult

GRID_STEP = 20.0
TICK_COUNT = 5


def grid_ticks(limit: float, step: float = GRID_STEP) -> list[float]:
    """Non-negative multiples of ``step`` up to and including ``limit``."""
    if step <= 0:
        raise ValueError("grid step must be positive")
    ticks = [0.0]
    i = 1
    while i * step <= limit:
        ticks.append(float(i * step))
        i += 1
    return ticks


def _new_axes() -> Axes:
    return Figure().add_subplot()


def plot_preview(states: Sequence[State], ax: Optional[Axes] = None) -> Axes:
    """Draw the side view (X against height) of a trajectory with a metre grid."""
    if not states:
        raise ValueError("no states to draw")
    if ax is None:
        ax = _new_axes()

    max_x = max(abs(s.x) for s in states)
    max_y = max(0.0, max(s.y for s in states))
    half_width = (max_x + 0.5) / 0.8
    top = (max_y + 1.0) / 0.8
    bottom = -top * 0.1

    xs = [s.x for s in states]
    ys = [s.y for s in states]
    ax.plot(xs, ys, color="red", linewidth=2, label="trajectory")
    ax.plot([xs[0]], [ys[0]], "o", color="blue", label="projectile")
    ax.axhline(0.0, color="black", linewidth=2)

    positive = grid_ticks(half_width)
    ax.set_xticks([-t for t in reversed(positive[1:])] + positive)
    ax.set_yticks(grid_ticks(top))
    ax.grid(True, color="lightgray", linewidth=0.5)

    ax.set_xlim(-half_width, half_width)
    ax.set_ylim(bottom, top)
    ax.set_aspect("equal", adjustable="box")
    ax.set_xlabel("X (m)")
    ax.set_ylabel("Y (m)")
    return ax


def _ticks(low: float, span: float) -> list[float]:
    return [low + span / TICK_COUNT * i for i in range(TICK_COUNT + 1)]


def plot_dependency(result: SweepResult, ax: Optional[Axes] = None) -> Axes:
    """Draw a dependency graph with five divisions on each axis."""
    if ax is None:
        ax = _new_axes()
    if result.is_empty:
        ax.text(0.5, 0.5, "No data to plot.", ha="center", va="center",
                transform=ax.transAxes)
        ax.set_axis_off()
        return ax

    x_span = result.x_max - result.x_min or 1.0
    y_span = result.y_max - result.y_min or 1.0

    xs = [x for x, _ in result.points]
    ys = [y for _, y in result.points]
    ax.plot(xs, ys, color="blue", linewidth=2)

    x_ticks = _ticks(result.x_min, x_span)
    y_ticks = _ticks(result.y_min, y_span)
    ax.set_xticks(x_ticks)
    ax.set_xticklabels([f"{v:.1f}" for v in x_ticks])
    ax.set_yticks(y_ticks)
    ax.set_yticklabels([f"{v:.1f}" for v in y_ticks])
    ax.set_xlim(result.x_min, result.x_min + x_span)
    ax.set_ylim(result.y_min, result.y_min + y_span)
    ax.set_xlabel(result.graph_type.x_label())
    ax.set_ylabel(result.graph_type.y_label())
    return ax