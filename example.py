import numpy as np
import matplotlib.pyplot as plt

from eqsphere.partition import partition_sphere
from eqsphere.sets import LatitudeLongitudeBox
from eqsphere.vertices import partition_vertices, sphere_vertices
from eqsphere.utils.fibonacci import \
    fibonacci_lattice_3d, \
    fibonacci_lattice_3d_in_box, \
    delta_covering_distance
from eqsphere.utils.plotting import \
    set_axes_equal, \
    plot_sphere_points, \
    plot_collar_boundaries

# -----------------------------------------------
# Parameters
N = 200 # number of regions
box = LatitudeLongitudeBox(
    min_latitude=-30., max_latitude=60.,
    min_longitude=-90., max_longitude=120.)
# -----------------------------------------------

# -----------------------------------------------
# Equal-area partition
partition = partition_sphere(2, N, verbose=True)
print("> colatitudes =", np.round(partition.colatitudes, 3))
print("> regions     =", partition.regions)
points, _ = partition_vertices(partition)
boxed_points, _ = sphere_vertices(N, box)
print("delta (partition) =", delta_covering_distance(points))
# -----------------------------------------------

# -----------------------------------------------
# Fibonacci lattice, for comparison
lattice = fibonacci_lattice_3d(1., N)
boxed_lattice = fibonacci_lattice_3d_in_box(N, box)
print("delta (fibonacci) =", delta_covering_distance(lattice))
# -----------------------------------------------

# -----------------------------------------------
fig = plt.figure(figsize=[10, 10])
titles = [
    "equal-area partition", "equal-area partition (box)",
    "Fibonacci lattice", "Fibonacci lattice (box)"]
for i, pts in enumerate([points, boxed_points, lattice, boxed_lattice]):
    ax = fig.add_subplot(2, 2, i + 1, projection='3d')
    plot_sphere_points(ax, pts)
    if i == 0:
        plot_collar_boundaries(ax, partition)
    ax.set_title(titles[i])
    set_axes_equal(ax)
plt.tight_layout()
plt.show()
# -----------------------------------------------
