"""Geometry helpers for the 3D views: axis bounds, animation frames and labels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from .physics import State


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned box enclosing a trajectory."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float
    min_z: float
    max_z: float


def scene_bounds(states: Sequence[State]) -> Bounds:
    """Bounds of the trajectory padded by 10% of the largest extent plus one metre.

    The floor is never padded and never lies above zero.
    """
    if states:
        min_x = min(s.x for s in states)
        max_x = max(s.x for s in states)
        min_y = min(s.y for s in states)
        max_y = max(s.y for s in states)
        min_z = min(s.z for s in states)
        max_z = max(s.z for s in states)
    else:
        min_x = max_x = min_y = max_y = min_z = max_z = 0.0

    padding = max(max_x - min_x, max_y, max_z - min_z) * 0.1 + 1.0
    return Bounds(
        min_x=min_x - padding,
        max_x=max_x + padding,
        min_y=min(0.0, min_y),
        max_y=max_y + padding,
        min_z=min_z - padding,
        max_z=max_z + padding,
    )


def animation_indices(count: int, speed: float) -> Iterator[int]:
    """Yield the state indices shown frame by frame, ending on the last state.

    The index advances by ``int(speed)`` per frame; the last state is always
    shown and is where the animation stays.
    """
    step = int(speed)
    if step < 1:
        raise ValueError("animation speed must be at least 1")
    if count <= 0:
        return
    index = 0
    while True:
        yield index
        if index == count - 1:
            return
        index = min(index + step, count - 1)


def coordinates_label(state: State) -> str:
    """Text showing the projectile position with two decimals."""
    return f"X: {state.x:.2f} Y: {state.y:.2f} Z: {state.z:.2f}"