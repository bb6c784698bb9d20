"""Command line entry point: preview a shot, sweep a parameter, draw views."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .analysis import preview_trajectory
from .animation import animate_trajectory_3d
from .parameters import (
    INPUT_RANGES,
    ParameterError,
    Parameters,
    load_parameters,
    save_parameters,
)
from .physics import integrate
from .preview import plot_dependency, plot_preview
from .sweep import GRAPH_TYPE_COUNT, default_sweep_range, graph_type_from_index, sweep
from .view3d import plot_trajectory_3d

SIMULATION_DT = 0.01

# (option, file key, help text)
_PARAMETER_OPTIONS = (
    ("--mass", "mass", "projectile mass (kg)"),
    ("--cd", "Cd", "drag coefficient"),
    ("--air-density", "air_density", "air density (kg/m³)"),
    ("--radius", "radius", "projectile radius (m)"),
    ("--g", "g", "gravitational acceleration (m/s²)"),
    ("--wind-x", "wind_x", "wind speed along X (m/s)"),
    ("--wind-z", "wind_z", "wind speed along Z (m/s)"),
    ("--angle", "angle_deg", "launch angle (degrees)"),
    ("--speed", "initial_speed", "initial speed (m/s)"),
    ("--azimuth", "azimuth_deg", "azimuth (degrees)"),
)

INSTRUCTIONS = """\
Instructions for the simulator:

Parameters:
- Set the shot with --mass, --cd, --air-density, --radius, --g, --wind-x,
  --wind-z, --angle, --speed and --azimuth, or load them with --load FILE.
- --save FILE stores the resulting parameters as key=value lines.

Output:
- By default the preview results are printed: maximum height, range along
  X and Z, total distance and flight time.
- --preview-image FILE draws the side view of the trajectory.
- --view-3d FILE draws the whole trajectory in 3D.
- --animation FILE writes an animated 3D flight (GIF).

Dependency graphs:
- --graph N chooses the graph type (0-26): distance, maximum height and
  flight time against initial speed, angle, mass, drag coefficient, air
  density, radius, wind X, wind Z and azimuth, in that order.
- --graph-min, --graph-max and --graph-step set the range of the parameter.
- --graph-image FILE draws the graph.
"""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the command."""
    parser = argparse.ArgumentParser(
        prog="ballistix",
        description="Projectile trajectory with air drag and wind.",
    )
    parser.add_argument("--load", metavar="FILE", help="load parameters from FILE")
    parser.add_argument("--save", metavar="FILE", help="save parameters to FILE")
    group = parser.add_argument_group("parameters")
    for option, key, help_text in _PARAMETER_OPTIONS:
        group.add_argument(option, dest=key, type=float, default=None, help=help_text)

    parser.add_argument(
        "--graph", type=int, metavar="N",
        help=f"plot a dependency graph of type N (0-{GRAPH_TYPE_COUNT - 1})",
    )
    parser.add_argument("--graph-min", type=float, help="lowest parameter value")
    parser.add_argument("--graph-max", type=float, help="highest parameter value")
    parser.add_argument("--graph-step", type=float, help="parameter step")
    parser.add_argument("--graph-image", metavar="FILE", help="save the graph to FILE")

    parser.add_argument("--preview-image", metavar="FILE",
                        help="save the trajectory preview to FILE")
    parser.add_argument("--view-3d", metavar="FILE",
                        help="save the 3D view of the trajectory to FILE")
    parser.add_argument("--animation", metavar="FILE",
                        help="save the animated 3D flight to FILE (GIF)")
    parser.add_argument("--instructions", action="store_true",
                        help="print the instructions and exit")
    return parser


def preview_report(params: Parameters) -> str:
    """Text summary of the coarse preview simulation."""
    _, summary = preview_trajectory(params)
    return (
        "Results (preview):\n"
        "-----------------------------\n"
        f"Max height: {summary.max_height:.2f} m\n"
        f"Range X: {summary.final_x:.2f} m\n"
        f"Range Z: {summary.final_z:.2f} m\n"
        f"Total distance: {summary.total_distance:.2f} m\n"
        f"Flight time: {summary.flight_time:.2f} s"
    )


def _collect_parameters(args: argparse.Namespace) -> Parameters:
    params = Parameters()
    if args.load:
        params = load_parameters(args.load, params)
    for _, key, _ in _PARAMETER_OPTIONS:
        value = getattr(args, key)
        if value is not None:
            params = params.with_value(key, value)
    return params.validate()


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _run_graph(args: argparse.Namespace, params: Parameters, out) -> None:
    graph_type = graph_type_from_index(args.graph)
    defaults = default_sweep_range(graph_type)
    start = args.graph_min if args.graph_min is not None else defaults.start
    stop = args.graph_max if args.graph_max is not None else defaults.stop
    step = args.graph_step if args.graph_step is not None else defaults.step
    start = _clamp(start, defaults.lower, defaults.upper)
    stop = _clamp(stop, defaults.lower, defaults.upper)

    result = sweep(params, graph_type, start, stop, step)
    if result.is_empty:
        print(
            "No data to plot. Check that the parameters and the step are valid "
            "and that at least one simulation in the range gave a result.",
            file=out,
        )
    else:
        print(f"{graph_type.y_label()} vs {graph_type.x_label()}", file=out)
        for x, y in result.points:
            print(f"{x:g}\t{y:.2f}", file=out)
    if args.graph_image:
        plot_dependency(result).figure.savefig(args.graph_image)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; returns the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.instructions:
        print(INSTRUCTIONS, end="")
        return 0
    if args.graph is not None and not 0 <= args.graph < GRAPH_TYPE_COUNT:
        parser.error(f"--graph must be between 0 and {GRAPH_TYPE_COUNT - 1}")

    try:
        params = _collect_parameters(args)
        if args.save:
            save_parameters(params, args.save)

        if args.graph is not None:
            _run_graph(args, params, sys.stdout)
        else:
            print(preview_report(params))
            if args.preview_image:
                states, _ = preview_trajectory(params)
                plot_preview(states).figure.savefig(args.preview_image)

        if args.view_3d or args.animation:
            states = integrate(params, dt=SIMULATION_DT)
            if args.view_3d:
                plot_trajectory_3d(states, params).figure.savefig(args.view_3d)
            if args.animation:
                animate_trajectory_3d(states, params).save(args.animation, writer="pillow")
    except ParameterError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    except OSError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


# Input ranges are shown in the help of the parameter options.
for _option, _key, _help in _PARAMETER_OPTIONS:
    assert _key in INPUT_RANGES