"""Tests plotting.py in utils"""
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from eqsphere.partition import partition_sphere
from eqsphere.vertices import partition_vertices
from eqsphere.utils.plotting import *


def test_plot_partition():
    partition = partition_sphere(2, 50)
    points, _ = partition_vertices(partition)
    fig = plt.figure()
    ax = fig.add_subplot(111, projection='3d')
    plot_sphere_points(ax, points)
    plot_collar_boundaries(ax, partition)
    set_axes_equal(ax)
    assert len(ax.lines) == 1 + len(partition.colatitudes) - 1
    plt.close(fig)

def test_plot_circle_partition():
    partition = partition_sphere(1, 10)
    points, _ = partition_vertices(partition)
    fig = plt.figure()
    ax = fig.add_subplot(111, projection='3d')
    plot_sphere_points(ax, points, connect=False)
    plot_collar_boundaries(ax, partition)
    assert len(ax.lines) == 0
    plt.close(fig)
