"""
Particle state, stored as arrays.

State (N rows, one per particle):
- pos: Nx2 canvas pixels
- vel: Nx2 base drift (never decays, flips on wall contact)
- push: Nx2 pointer-driven push, decays by `friction` every tick
- radius, friction: N

Walls bounce drift with coefficient 1 and push with coefficient 0.5, so a
shove from the pointer dies out at the edges while the drift carries on.
"""

from dataclasses import dataclass

import numpy as np

WALL_PUSH_BOUNCE = -0.5


@dataclass
class Particle:
    """One row of a ParticleSet, for building sets by hand and reading them back."""
    x: float
    y: float
    vx: float
    vy: float
    radius: float
    friction: float
    push_x: float = 0.0
    push_y: float = 0.0


class ParticleSet:
    def __init__(self, pos, vel, radius, friction, push=None):
        self.pos = np.asarray(pos, dtype=np.float64).reshape(-1, 2)
        self.vel = np.asarray(vel, dtype=np.float64).reshape(-1, 2)
        self.radius = np.asarray(radius, dtype=np.float64).reshape(-1)
        self.friction = np.asarray(friction, dtype=np.float64).reshape(-1)
        if push is None:
            self.push = np.zeros_like(self.pos)
        else:
            self.push = np.asarray(push, dtype=np.float64).reshape(-1, 2)

    @classmethod
    def from_particles(cls, particles):
        return cls(
            pos=[(p.x, p.y) for p in particles],
            vel=[(p.vx, p.vy) for p in particles],
            radius=[p.radius for p in particles],
            friction=[p.friction for p in particles],
            push=[(p.push_x, p.push_y) for p in particles],
        )

    def __len__(self):
        return len(self.pos)

    def particle(self, i) -> Particle:
        return Particle(
            x=float(self.pos[i, 0]),
            y=float(self.pos[i, 1]),
            vx=float(self.vel[i, 0]),
            vy=float(self.vel[i, 1]),
            radius=float(self.radius[i]),
            friction=float(self.friction[i]),
            push_x=float(self.push[i, 0]),
            push_y=float(self.push[i, 1]),
        )

    def apply_physics(self, width, height):
        # Push decays geometrically, it is never reset
        self.push *= self.friction[:, None]

        self.pos += self.push + self.vel

        self._solve_bounds(0, width)
        self._solve_bounds(1, height)

    def _solve_bounds(self, axis, extent):
        # One side per axis per step: right only counts if left didn't fire
        r = self.radius
        coord = self.pos[:, axis]

        low = coord < r
        high = ~low & (coord > extent - r)

        self.pos[low, axis] = r[low]
        self.pos[high, axis] = extent - r[high]

        hit = low | high
        self.vel[hit, axis] *= -1.0
        self.push[hit, axis] *= WALL_PUSH_BOUNCE


def spawn_particles(params, width, height, rng):
    """
    Build a fresh particle set for a (width, height) canvas.

    Radius is floored from [radius_min, radius_max), position is uniform inside
    the walls for that radius, drift is uniform in [-0.5, 0.5) * velocity_factor.
    Callers are expected to have run `params.check_extent` first.
    """
    n = params.particle_count(width)

    radii = np.floor(rng.uniform(params.particle_radius_min, params.particle_radius_max, n))
    xs = rng.uniform(radii, width - radii)
    ys = rng.uniform(radii, height - radii)
    vel = (rng.random((n, 2)) - 0.5) * params.particle_velocity_factor

    return ParticleSet(
        pos=np.column_stack([xs, ys]),
        vel=vel,
        radius=radii,
        friction=np.full(n, float(params.particle_push_friction)),
    )
