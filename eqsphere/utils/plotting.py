"""Helper functions for plotting partitions of the sphere."""
import numpy as np
import matplotlib.pyplot as plt
from matplotlib import colors as mcolors

from eqsphere.dimension import Dimension
from eqsphere.partition import Partition


def set_axes_equal(ax: plt.Axes):
    # reference:
    # https://stackoverflow.com/questions/13685386/matplotlib-equal-unit-length-with-equal-aspect-ratio-z-axis-is-not-equal-to

    """Set 3D plot axes to equal scale.

    Make axes of 3D plot have equal scale so that spheres appear as
    spheres and cubes as cubes.  Required since `ax.axis('equal')`
    and `ax.set_aspect('equal')` don't work on 3D.
    """
    limits = np.array([
        ax.get_xlim3d(),
        ax.get_ylim3d(),
        ax.get_zlim3d(),
    ])
    origin = np.mean(limits, axis=1)
    radius = 0.5 * np.max(np.abs(limits[:, 1] - limits[:, 0]))
    _set_axes_radius(ax, origin, radius)

def _set_axes_radius(ax, origin, radius):
    x, y, z = origin
    ax.set_xlim3d([x - radius, x + radius])
    ax.set_ylim3d([y - radius, y + radius])
    ax.set_zlim3d([z - radius, z + radius])


def plot_sphere_points(ax, points, connect=True, size=10, **kwargs):
    """
    Scatters points on the sphere, colored by index along the hue
    circle, and joins consecutive points with a line if connect is true.

    Args:
        ax: 3d axes
        points: points to plot, y-up
            (M, 3) array
    """
    points = np.asarray(points)
    hues = np.arange(len(points)) / max(len(points), 1)
    hsv = np.stack(
        (hues, np.ones_like(hues), np.ones_like(hues))).T
    colors = mcolors.hsv_to_rgb(hsv)
    # matplotlib is z-up
    ax.scatter(
        points[:, 0], points[:, 2], points[:, 1],
        c=colors, s=size, **kwargs)
    if connect and len(points) > 1:
        ax.plot(
            points[:, 0], points[:, 2], points[:, 1],
            color='k', linewidth=0.3, alpha=0.5)
    return ax


def plot_collar_boundaries(ax, partition: Partition, num_points=100,
    color='k', alpha=0.5):
    """Plots the boundary circle at the bottom of each collar."""
    if partition.dim == Dimension.CIRCLE:
        return ax
    azimuths = np.linspace(0, 2*np.pi, num_points)
    for colatitude in partition.colatitudes[:-1]:
        x = np.sin(colatitude) * np.sin(azimuths)
        y = np.cos(colatitude) * np.ones(num_points)
        z = np.sin(colatitude) * np.cos(azimuths)
        ax.plot(x, z, y, color=color, linestyle=':', alpha=alpha)
    return ax
