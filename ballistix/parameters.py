"""Projectile launch parameters, their validation and the key=value file format."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


class ParameterError(ValueError):
    """Raised when a set of parameters cannot be simulated."""


# File key -> dataclass field name.
_KEY_TO_FIELD = {
    "mass": "mass",
    "Cd": "drag_coefficient",
    "air_density": "air_density",
    "radius": "radius",
    "g": "g",
    "wind_x": "wind_x",
    "wind_z": "wind_z",
    "angle_deg": "angle_deg",
    "initial_speed": "initial_speed",
    "azimuth_deg": "azimuth_deg",
}
_FIELD_TO_KEY = {field: key for key, field in _KEY_TO_FIELD.items()}

# Accepted input range for each file key; loaded values are clamped into it.
INPUT_RANGES = {
    "mass": (0.001, 1e6),
    "Cd": (0.0, 1e6),
    "air_density": (0.0, 1e6),
    "radius": (0.001, 1e3),
    "g": (0.001, 100.0),
    "wind_x": (-1000.0, 1000.0),
    "wind_z": (-1000.0, 1000.0),
    "angle_deg": (0.0, 90.0),
    "initial_speed": (0.001, 1e6),
    "azimuth_deg": (0.0, 360.0),
}

_DECIMALS = 3


@dataclass(frozen=True)
class Parameters:
    """Physical and launch parameters of a single shot."""

    mass: float = 10.0
    drag_coefficient: float = 0.47
    air_density: float = 1.225
    radius: float = 0.1
    g: float = 9.81
    wind_x: float = 5.0
    wind_z: float = 0.0
    angle_deg: float = 45.0
    initial_speed: float = 50.0
    azimuth_deg: float = 30.0

    def validate(self) -> Parameters:
        """Return self if the parameters are usable, else raise ParameterError."""
        if self.mass <= 0:
            raise ParameterError("Projectile mass must be greater than zero.")
        if self.drag_coefficient < 0:
            raise ParameterError("Drag coefficient cannot be negative.")
        if self.air_density < 0:
            raise ParameterError("Air density cannot be negative.")
        if self.radius <= 0:
            raise ParameterError("Projectile radius must be greater than zero.")
        if self.g <= 0:
            raise ParameterError("Gravitational acceleration must be greater than zero.")
        low, high = INPUT_RANGES["angle_deg"]
        if not low <= self.angle_deg <= high:
            raise ParameterError(
                f"Launch angle must be between {low:g} and {high:g} degrees."
            )
        if self.initial_speed <= 0:
            raise ParameterError("Initial speed must be greater than zero.")
        low, high = INPUT_RANGES["azimuth_deg"]
        if not low <= self.azimuth_deg <= high:
            raise ParameterError(f"Azimuth must be between {low:g} and {high:g} degrees.")
        return self

    def with_value(self, name: str, value: float) -> Parameters:
        """Return a copy with one parameter, named by file key or field name, replaced."""
        field = _KEY_TO_FIELD.get(name, name)
        if field not in _FIELD_TO_KEY:
            raise KeyError(f"unknown parameter: {name!r}")
        return dataclasses.replace(self, **{field: float(value)})

    def items(self):
        """Yield (file key, value) pairs in the order the file format uses."""
        for key in sorted(_KEY_TO_FIELD):
            yield key, getattr(self, _KEY_TO_FIELD[key])


def _to_number(text: str) -> float:
    if "_" in text:
        return 0.0
    try:
        value = float(text)
    except ValueError:
        return 0.0
    return 0.0 if math.isnan(value) else value


def _fit_input(key: str, value: float) -> float:
    low, high = INPUT_RANGES[key]
    return round(min(max(value, low), high), _DECIMALS)


def parse_parameters(text: str, base: Parameters | None = None) -> Parameters:
    """Read ``key=value`` lines over ``base``; malformed lines and unknown keys are ignored."""
    params = base if base is not None else Parameters()
    for line in text.splitlines():
        parts = line.split("=")
        if len(parts) != 2:
            continue
        key = parts[0].strip()
        if key not in _KEY_TO_FIELD:
            continue
        value = _fit_input(key, _to_number(parts[1].strip()))
        params = params.with_value(key, value)
    return params


def format_parameters(params: Parameters) -> str:
    """Render parameters as ``key=value`` lines sorted by key."""
    return "".join(f"{key}={value:g}\n" for key, value in params.items())


def load_parameters(path: PathLike, base: Parameters | None = None) -> Parameters:
    """Load parameters from a file, starting from ``base``."""
    return parse_parameters(Path(path).read_text(encoding="utf-8"), base)


def save_parameters(params: Parameters, path: PathLike) -> None:
    """Write parameters to a file."""
    Path(path).write_text(format_parameters(params), encoding="utf-8")