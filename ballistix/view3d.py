"""Three-dimensional view of a finished flight."""

from __future__ import annotations

from typing import Optional, Sequence

from matplotlib.axes import Axes
from matplotlib.figure import Figure

from .parameters import Parameters
from .physics import State
from .scene import scene_bounds

GROUND_SIZE = 100.0
WIND_ORIGIN = (5.0, 0.0, 0.0)
TITLE = "3D Simulation"
FIGURE_SIZE = (12, 8)


def _plot_coords(states: Sequence[State]) -> tuple[list[float], list[float], list[float]]:
    """Map simulation (x, y, z) onto plot axes, with the height on the vertical axis."""
    return [s.x for s in states], [s.z for s in states], [s.y for s in states]


def _new_axes(fig: Optional[Figure] = None) -> Axes:
    if fig is None:
        fig = Figure(figsize=FIGURE_SIZE)
    return fig.add_subplot(projection="3d")


def _setup_scene(states: Sequence[State], params: Parameters, ax: Optional[Axes]) -> Axes:
    """Draw the ground, the wind arrow, the labelled axes and fit them to the flight."""
    if not states:
        raise ValueError("no states to draw")
    if ax is None:
        ax = _new_axes()

    half = GROUND_SIZE / 2
    ax.plot_trisurf(
        [-half, half, half, -half],
        [-half, -half, half, half],
        [0.0, 0.0, 0.0, 0.0],
        color="gray",
        alpha=0.5,
        label="ground",
    )

    wx, wy, wz = WIND_ORIGIN
    ax.quiver(
        wx, wz, wy,
        params.wind_x, params.wind_z, 0.0,
        color="green",
        alpha=0.5,
        label="wind",
    )

    bounds = scene_bounds(states)
    ax.set_xlim(bounds.min_x, bounds.max_x)
    ax.set_ylim(bounds.min_z, bounds.max_z)
    ax.set_zlim(bounds.min_y, bounds.max_y)
    ax.set_xlabel("X (m)")
    ax.set_ylabel("Z (m)")
    ax.set_zlabel("Y (m)")
    ax.set_title(TITLE)
    return ax


def plot_trajectory_3d(
    states: Sequence[State], params: Parameters, ax: Optional[Axes] = None
) -> Axes:
    """Draw the whole trajectory in 3D with the projectile at its landing point."""
    ax = _setup_scene(states, params, ax)
    xs, ys, zs = _plot_coords(states)
    ax.plot(xs, ys, zs, color="red", linewidth=3, label="trajectory")
    last = states[-1]
    ax.plot([last.x], [last.z], [last.y], "o", color="blue", markersize=8,
            label="projectile")
    return ax