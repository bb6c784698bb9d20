import pytest
from matplotlib.figure import Figure

from ballistix.parameters import Parameters
from ballistix.physics import integrate
from ballistix.scene import scene_bounds
from ballistix.view3d import plot_trajectory_3d


@pytest.fixture(scope="module")
def states():
    return integrate(Parameters(), dt=0.05)


def _line(ax, label):
    matches = [line for line in ax.lines if line.get_label() == label]
    assert len(matches) == 1
    return matches[0]


def test_creates_3d_axes_when_none_given(states):
    ax = plot_trajectory_3d(states, Parameters())
    assert ax.name == "3d"


def test_trajectory_uses_height_as_vertical_axis(states):
    ax = plot_trajectory_3d(states, Parameters())
    xs, ys, zs = _line(ax, "trajectory").get_data_3d()
    assert list(xs) == pytest.approx([s.x for s in states])
    assert list(ys) == pytest.approx([s.z for s in states])
    assert list(zs) == pytest.approx([s.y for s in states])


def test_projectile_is_at_landing_point(states):
    ax = plot_trajectory_3d(states, Parameters())
    xs, ys, zs = _line(ax, "projectile").get_data_3d()
    last = states[-1]
    assert (xs[0], ys[0], zs[0]) == pytest.approx((last.x, last.z, last.y))


def test_limits_follow_scene_bounds(states):
    ax = plot_trajectory_3d(states, Parameters())
    bounds = scene_bounds(states)
    assert ax.get_xlim() == pytest.approx((bounds.min_x, bounds.max_x))
    assert ax.get_ylim() == pytest.approx((bounds.min_z, bounds.max_z))
    assert ax.get_zlim() == pytest.approx((bounds.min_y, bounds.max_y))


def test_axis_labels_and_title(states):
    ax = plot_trajectory_3d(states, Parameters())
    assert ax.get_xlabel() == "X (m)"
    assert ax.get_ylabel() == "Z (m)"
    assert ax.get_zlabel() == "Y (m)"
    assert ax.get_title() == "3D Simulation"


def test_ground_and_wind_are_drawn(states):
    ax = plot_trajectory_3d(states, Parameters())
    labels = {c.get_label() for c in ax.collections}
    assert {"ground", "wind"} <= labels


def test_draws_into_given_axes(states):
    fig = Figure()
    given = fig.add_subplot(projection="3d")
    ax = plot_trajectory_3d(states, Parameters(), given)
    assert ax is given
    assert len(given.lines) == 2


def test_empty_states_rejected():
    with pytest.raises(ValueError):
        plot_trajectory_3d([], Parameters())