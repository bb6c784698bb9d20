"""Animated three-dimensional view of a flight."""

from __future__ import annotations

from typing import Optional, Sequence

from matplotlib.animation import FuncAnimation
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from .parameters import Parameters
from .physics import State
from .scene import animation_indices, coordinates_label
from .view3d import FIGURE_SIZE, _new_axes, _plot_coords, _setup_scene

ANIMATION_SPEED = 2.0
FRAME_INTERVAL_MS = 30
INITIAL_LABEL = "X: 0.00 Y: 0.00 Z: 0.00"


class _TrajectoryAnimator:
    """Artists of the animation and how each frame changes them."""

    def __init__(self, states: Sequence[State], ax: Axes) -> None:
        self.states = list(states)
        self.path: list[State] = []
        (self.trail,) = ax.plot([], [], [], color="red", linewidth=3, label="trajectory")
        first = self.states[0]
        (self.projectile,) = ax.plot(
            [first.x], [first.z], [first.y], "o", color="blue", markersize=8,
            label="projectile",
        )
        self.label = ax.text2D(0.02, 0.1, INITIAL_LABEL, transform=ax.transAxes,
                               fontsize=12, color="black")

    def update(self, index: int):
        """Show the projectile at state ``index`` and extend the drawn path to it."""
        state = self.states[index]
        self.path.append(state)
        self.trail.set_data_3d(*_plot_coords(self.path))
        self.projectile.set_data_3d([state.x], [state.z], [state.y])
        self.label.set_text(coordinates_label(state))
        return self.trail, self.projectile, self.label


def animate_trajectory_3d(
    states: Sequence[State],
    params: Parameters,
    fig: Optional[Figure] = None,
    ax: Optional[Axes] = None,
) -> FuncAnimation:
    """Build an animation that flies the projectile along ``states``."""
    if not states:
        raise ValueError("no states to animate")
    if ax is None:
        if fig is None:
            fig = Figure(figsize=FIGURE_SIZE)
        ax = _new_axes(fig)
    elif fig is None:
        fig = ax.figure
    elif ax.figure is not fig:
        raise ValueError("axes do not belong to the given figure")

    _setup_scene(states, params, ax)
    animator = _TrajectoryAnimator(states, ax)
    frames = list(animation_indices(len(states), ANIMATION_SPEED))
    return FuncAnimation(
        fig,
        animator.update,
        frames=frames,
        interval=FRAME_INTERVAL_MS,
        repeat=False,
        blit=False,
    )