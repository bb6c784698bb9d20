"""Equations of motion for a projectile with quadratic drag and wind, and their integration."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .parameters import Parameters

DEFAULT_PI = 3.14


@dataclass(frozen=True)
class State:
    """Position and velocity; also used for their time derivatives."""

    x: float
    y: float
    z: float
    vx: float
    vy: float
    vz: float

    def _advanced(self, rate: State, h: float) -> State:
        return State(
            self.x + h * rate.x,
            self.y + h * rate.y,
            self.z + h * rate.z,
            self.vx + h * rate.vx,
            self.vy + h * rate.vy,
            self.vz + h * rate.vz,
        )


def compute_derivatives(state: State, params: Parameters) -> State:
    """Return the time derivative of ``state`` under gravity, drag and wind."""
    dvx = state.vx - params.wind_x
    dvy = state.vy
    dvz = state.vz - params.wind_z
    speed = math.sqrt(dvx * dvx + dvy * dvy + dvz * dvz)
    area = DEFAULT_PI * params.radius * params.radius
    k = (0.5 * params.drag_coefficient * params.air_density * area) / params.mass
    return State(
        x=state.vx,
        y=state.vy,
        z=state.vz,
        vx=-k * dvx * speed,
        vy=-params.g - k * dvy * speed,
        vz=-k * dvz * speed,
    )


def runge_kutta_step(state: State, params: Parameters, dt: float) -> State:
    """Advance ``state`` by ``dt`` with the classic fourth-order Runge-Kutta method."""
    k1 = compute_derivatives(state, params)
    k2 = compute_derivatives(state._advanced(k1, 0.5 * dt), params)
    k3 = compute_derivatives(state._advanced(k2, 0.5 * dt), params)
    k4 = compute_derivatives(state._advanced(k3, dt), params)

    def combine(name: str) -> float:
        return (
            getattr(k1, name)
            + 2 * getattr(k2, name)
            + 2 * getattr(k3, name)
            + getattr(k4, name)
        )

    return State(
        **{
            name: getattr(state, name) + (dt / 6.0) * combine(name)
            for name in ("x", "y", "z", "vx", "vy", "vz")
        }
    )


def initial_state(params: Parameters, pi: float = DEFAULT_PI) -> State:
    """Launch state at the origin; ``pi`` sets the degree-to-radian conversion used."""
    angle = params.angle_deg * pi / 180.0
    azimuth = params.azimuth_deg * pi / 180.0
    speed = params.initial_speed
    return State(
        0.0,
        0.0,
        0.0,
        speed * math.cos(angle) * math.cos(azimuth),
        speed * math.sin(angle),
        speed * math.cos(angle) * math.sin(azimuth),
    )


def integrate(
    params: Parameters,
    dt: float = 0.01,
    max_points: int | None = None,
    pi: float = DEFAULT_PI,
) -> list[State]:
    """Integrate from launch until the projectile is about to go below ground.

    The launch state is always included; at most ``max_points`` states are
    returned when a limit is given.
    """
    state = initial_state(params, pi)
    states: list[State] = []
    while True:
        states.append(state)
        state = runge_kutta_step(state, params, dt)
        if state.y + dt * state.vy < 0.0:
            break
        if max_points is not None and len(states) >= max_points:
            break
    return states