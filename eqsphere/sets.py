"""Set classes."""
import numpy as np
import jax.numpy as jnp

from eqsphere.partition import generate_caps
from eqsphere.vertices import sphere_vertices
from eqsphere.utils.fibonacci import delta_covering_distance


def wrap_longitude(longitude):
    """Wraps a longitude in degrees to [-180, 180)."""
    return (longitude + 180.) % 360. - 180.


class Set:
    """Base class set."""
    def __init__(
        self,
        num_variables: int):
        self._num_variables = num_variables

    @property
    def num_variables(self) -> int:
        """Returns the number of variables n."""
        return self._num_variables

    def is_in_the_set(self, p: jnp.ndarray) -> bool:
        """
        Returns true if p is in the set.

        Args:
            p: point in R^n
                (num_variables) array

        Returns:
            is_in: true if p is in the set
                (bool)
        """
        raise NotImplementedError


class LatitudeLongitudeBox(Set):
    """
    Subset of the unit sphere S^2 in R^3 of the directions d whose
    latitude and longitude (in degrees) are within given bounds.

    The north pole is d = (0, 1, 0). The latitude of d is
    90 - colatitude, and its longitude is atan2(d_x, d_z),
    both in degrees.
    """
    def __init__(
        self,
        min_latitude: float = -90.,
        max_latitude: float = 90.,
        min_longitude: float = -180.,
        max_longitude: float = 180.):
        """
        Initializes the class.

        Args:
            min_latitude: minimum latitude, in [-90, 90]
                (float)
            max_latitude: maximum latitude, in [min_latitude, 90]
                (float)
            min_longitude: minimum longitude, in [-180, 180]
                (float)
            max_longitude: maximum longitude, in [min_longitude, 180]
                (float)
        """
        if not -90. <= min_latitude <= max_latitude <= 90.:
            raise ValueError(
                "Latitudes should satisfy "
                "-90 <= min_latitude <= max_latitude <= 90.")
        if not -180. <= min_longitude <= max_longitude <= 180.:
            raise ValueError(
                "Longitudes should satisfy "
                "-180 <= min_longitude <= max_longitude <= 180.")
        super().__init__(3)
        self._min_latitude = float(min_latitude)
        self._max_latitude = float(max_latitude)
        self._min_longitude = float(min_longitude)
        self._max_longitude = float(max_longitude)

    @property
    def min_latitude(self) -> float:
        """Returns the minimum latitude."""
        return self._min_latitude

    @property
    def max_latitude(self) -> float:
        """Returns the maximum latitude."""
        return self._max_latitude

    @property
    def min_longitude(self) -> float:
        """Returns the minimum longitude."""
        return self._min_longitude

    @property
    def max_longitude(self) -> float:
        """Returns the maximum longitude."""
        return self._max_longitude

    @property
    def is_full(self) -> bool:
        """Returns true if the box covers the whole sphere."""
        return (self.min_latitude == -90. and
            self.max_latitude == 90. and
            self.min_longitude == -180. and
            self.max_longitude == 180.)

    @property
    def longitude_fraction(self) -> float:
        """Returns the fraction of all longitudes covered by the box."""
        return (self.max_longitude - self.min_longitude) / 360.

    def contains_angles(self, colatitude, azimuth):
        """
        Returns true if the direction with the given spherical
        coordinates is in the box.

        Args:
            colatitude: colatitude, in radians
                (float or array)
            azimuth: azimuth, in radians
                (float or array)

        Returns:
            is_in: true if the direction is in the box
                (bool or array)
        """
        latitude = 90. - jnp.degrees(colatitude)
        longitude = wrap_longitude(jnp.degrees(azimuth))
        if self.max_longitude == 180.:
            # +180 wraps to -180
            is_in_longitudes = (longitude >= self.min_longitude) | \
                (longitude == -180.)
        else:
            is_in_longitudes = (longitude >= self.min_longitude) & \
                (longitude <= self.max_longitude)
        is_in_latitudes = (latitude >= self.min_latitude) & \
            (latitude <= self.max_latitude)
        return is_in_latitudes & is_in_longitudes

    def is_in_the_set(self, d: jnp.ndarray) -> bool:
        """
        Returns true if the unit direction d is in the box.

        Args:
            d: unit direction in R^3
                (3) array

        Returns:
            is_in: true if d is in the box
                (bool)
        """
        colatitude = jnp.arccos(jnp.clip(d[1], -1., 1.))
        azimuth = jnp.arctan2(d[0], d[2])
        return self.contains_angles(colatitude, azimuth)

    def __repr__(self) -> str:
        return ("LatitudeLongitudeBox(latitudes=[" +
            str(self.min_latitude) + ", " + str(self.max_latitude) +
            "], longitudes=[" +
            str(self.min_longitude) + ", " + str(self.max_longitude) + "])")


class UnitSphere:
    """
    Sphere S^{n-1} in R^n defined as
    S^{n-1} = {d in R^n : ||d||=1}.
    """
    def __init__(self, ambient_dimension):
        self._ambient_dimension = ambient_dimension

    @property
    def ambient_dimension(self) -> int:
        """Returns the dimension n."""
        return self._ambient_dimension

    def sample(self, sample_size: int) -> jnp.ndarray:
        """
        Samples points on the sphere, one per region of an
        equal-area partition.

        Args:
            sample_size: number of points to sample from S^{n-1}
                (int)

        Returns:
            points: points on the sphere
                (sample_size, ambient_dimension) array
        """
        if self.ambient_dimension == 1:
            ones = jnp.ones(sample_size)
            middle = int(sample_size / 2)
            ds = jnp.concatenate([ones[:middle], -ones[middle:]])
            ds = ds[:, jnp.newaxis]
        elif self.ambient_dimension == 2:
            # middle of the arcs of a partition of the circle
            ends, _ = generate_caps(1, sample_size)
            theta_vals = jnp.asarray(ends - np.pi / sample_size)
            ds_x = jnp.cos(theta_vals)
            ds_y = jnp.sin(theta_vals)
            ds = jnp.stack((ds_x, ds_y)).T
        elif self.ambient_dimension == 3:
            ds, _ = sphere_vertices(sample_size)
        else:
            raise NotImplementedError
        return ds

    def get_internal_covering_delta(self, sample_size: int) -> float:
        """
        Assuming sample_size points are sampled on the sphere, returns the value
        of delta such that the sample is an inner delta-covering of the sphere.

        Args:
            sample_size: number of points to sample from S^{n-1}
                (int)

        Returns:
            delta: radius of the covering using sample_size points
                (float)
        """
        if self.ambient_dimension != 3:
            raise NotImplementedError
        if sample_size < 2:
            raise ValueError("sample_size should be at least 2.")
        delta = delta_covering_distance(self.sample(sample_size))
        return delta

    def level_set_function(self, p: jnp.ndarray) -> float:
        """
        Evaluate the level set function h(.) at p, where
        the sphere is represented as
        S^{n-1} = {p in R^n : h(p) = 1}
        with h(p) = ||p||

        Args:
            p: point in R^n
                (num_variables) array

        Returns:
            h(p): value of the level set function at p
                (float)
        """
        h_value = jnp.linalg.norm(p)
        return h_value

    def is_in_the_set(self, p: jnp.ndarray) -> bool:
        """
        Returns true if p is in the sphere S^{n-1}.

        Args:
            p: point in R^n
                (num_variables) array

        Returns:
            is_in: true if p is in the sphere S^{n-1}
                (bool)
        """
        is_in = jnp.abs(self.level_set_function(p) - 1) <= 1e-6
        return is_in
