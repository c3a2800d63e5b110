import logging
import math
import numbers

from errors import ConfigError

logger = logging.getLogger(__name__)


def _is_count(value):
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


class Params:
    """
    All tunable knobs live here so you don't hunt through code.

    Values are fixed once the sim is built; pass keyword overrides to the
    constructor if you want something different (tests do this a lot).
    """
    def __init__(self, **overrides):
        # Particle count tiers (keyed by canvas width)
        self.particle_base_count = 100
        self.particle_count_large_screen_factor = 4.5
        self.small_screen_width_threshold = 600

        # Particle shape + drift
        self.particle_radius_min = 1        # inclusive
        self.particle_radius_max = 11       # exclusive (radius is floored)
        self.particle_velocity_factor = 1.0

        # Pointer interaction
        self.pointer_influence_radius = 200.0
        self.pointer_push_strength = 5.0
        self.particle_push_friction = 0.55  # push multiplier per tick

        # Connections (visual only)
        self.connection_max_distance = 100.0
        self.connection_max_peers = 4
        self.connection_opacity_factor = 0.5

        # Renderer gradient, top-left -> bottom-right
        self.gradient_colors = ["#d4362b", "#f89334", "#e4e706", "#00c975", "#1091e7"]

        for key, value in overrides.items():
            if not hasattr(self, key):
                raise ConfigError(f"Unknown parameter: {key}")
            setattr(self, key, value)

        self.validate()

    @property
    def largest_radius(self):
        # floor(uniform(min, max)) tops out just under max
        return math.ceil(self.particle_radius_max) - 1

    def validate(self):
        if self.particle_radius_min < 1:
            raise ConfigError(f"particle_radius_min must be >= 1, got {self.particle_radius_min}")
        if self.particle_radius_max <= self.particle_radius_min:
            raise ConfigError(
                f"particle_radius_max ({self.particle_radius_max}) must exceed "
                f"particle_radius_min ({self.particle_radius_min})"
            )
        if not 0.0 < self.particle_push_friction < 1.0:
            raise ConfigError(f"particle_push_friction must be in (0, 1), got {self.particle_push_friction}")
        if self.pointer_influence_radius <= 0:
            raise ConfigError("pointer_influence_radius must be positive")
        if self.connection_max_distance <= 0:
            raise ConfigError("connection_max_distance must be positive")
        if not _is_count(self.connection_max_peers) or self.connection_max_peers < 0:
            raise ConfigError(f"connection_max_peers must be a non-negative int, got {self.connection_max_peers!r}")
        if not _is_count(self.particle_base_count) or self.particle_base_count < 0:
            raise ConfigError(f"particle_base_count must be a non-negative int, got {self.particle_base_count!r}")
        if len(self.gradient_colors) < 2:
            raise ConfigError("gradient_colors needs at least two stops")

    def check_extent(self, width, height):
        """
        Reject extents that can't hold the largest particle.

        Spawning places a particle uniformly in [r, W - r], which is empty or
        inverted once 2r >= W.
        """
        if width <= 0 or height <= 0:
            logger.debug("Rejected extent %sx%s", width, height)
            raise ConfigError(f"Canvas extent must be positive, got {width}x{height}")
        r = self.largest_radius
        if not (2 * r < width and 2 * r < height):
            logger.debug("Rejected extent %sx%s for radius %s", width, height, r)
            raise ConfigError(
                f"Canvas {width}x{height} is too small for particles of radius {r}"
            )

    def particle_count(self, width):
        if width > self.small_screen_width_threshold:
            return int(math.floor(self.particle_base_count * self.particle_count_large_screen_factor))
        return int(self.particle_base_count)
