# ballistix

ballistix simulates the flight of a spherical projectile. The model has
quadratic air drag and a horizontal wind. The equations of motion are
integrated with the classic fourth-order Runge–Kutta method.

The package provides:

- a point-mass model with these inputs: mass, drag coefficient, air density,
  radius, gravity, wind along X and Z, launch angle, initial speed and azimuth;
- trajectory summaries: maximum height, final X and Z, total distance from
  the origin and flight time;
- parameter sweeps, which show how distance, maximum height or flight time
  depends on one input;
- matplotlib drawings: a 2D side-view preview, dependency graphs, a 3D view
  of the whole flight and a 3D animation;
- a plain `key=value` parameter file format.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
ballistix --help
```

The shot is built from the defaults. `--load FILE` replaces them with the
values in a parameter file. The options `--mass`, `--cd`, `--air-density`,
`--radius`, `--g`, `--wind-x`, `--wind-z`, `--angle`, `--speed` and
`--azimuth` then override single values. If the parameters are invalid, the
command writes `error: ...` to standard error and exits with status 1.

- Without `--graph`, the command prints the preview figures: maximum height,
  range along X and Z, total distance and flight time.
  `--preview-image FILE` saves the side view.
- `--graph N` (0–26) runs a sweep and prints one `value<TAB>result` line per
  point. `--graph-min`, `--graph-max` and `--graph-step` set the range; when
  they are left out, the suggested range for that parameter is used.
  `--graph-image FILE` saves the graph.
- `--view-3d FILE` saves the 3D view of the trajectory. `--animation FILE`
  writes the animated flight as a GIF.
- `--save FILE` writes the resulting parameters to a parameter file.
- `--instructions` prints a short guide.

## Library use

```python
from ballistix.parameters import Parameters
from ballistix.physics import integrate
from ballistix.analysis import summarize, simulate_for_graph
from ballistix.sweep import GraphType, GraphParameter, GraphQuantity, sweep

params = Parameters()          # 10 kg, Cd 0.47, 50 m/s at 45°, azimuth 30°
params.validate()              # raises ParameterError on invalid input

states = integrate(params, dt=0.01)
print(summarize(states, 0.01))

print(simulate_for_graph(params.with_value("initial_speed", 80.0)))

graph = GraphType(GraphParameter.ANGLE, GraphQuantity.DISTANCE)
result = sweep(params, graph, 0.0, 90.0, 5.0)
for x, y in result.points:
    print(x, y)
```

`Parameters.with_value` accepts either a file key (such as `Cd`) or a field
name (such as `drag_coefficient`). `sweep` skips values that the varied
parameter cannot take. For example, it skips a negative mass or an angle
outside 0–90°.

### Parameter files

A parameter file holds one `name=value` line per parameter:

```
Cd=0.47
angle_deg=45
mass=10
```

`save_parameters` writes all ten keys sorted by name. `load_parameters` and
`parse_parameters` read the lines over a base set of parameters. They ignore
malformed lines and unknown keys. A value that is not a number reads as 0.
Each value is clamped to the accepted range for its key and rounded to three
decimals.

### Drawings

- `ballistix.preview.plot_preview` draws the side view of a trajectory.
- `ballistix.preview.plot_dependency` draws a `SweepResult`.
- `ballistix.view3d.plot_trajectory_3d` draws the whole flight in 3D.
- `ballistix.animation.animate_trajectory_3d` returns a matplotlib
  `FuncAnimation` that moves the projectile along the path and shows its
  current coordinates.

Each function draws on the axes it is given, or on a new figure.

## What it does not do

ballistix has no interactive window. The command prints text and saves
images or GIF files. To look at a drawing interactively, show the returned
axes or animation with matplotlib yourself.