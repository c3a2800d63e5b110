"""
Pointer-reactive particle field.

State:
- particles: ParticleSet (Nx2 arrays), rebuilt as a whole whenever extents change
- pointer: single PointerState, absent until the first move

Per tick:
- pointer push (repulsive, linear falloff)
- integrate + wall bounce
- proximity lines over the new positions, then one circle per particle

The sim never draws. It hands out Line/Circle requests and lets whatever
surface is plugged into FrameDriver rasterise them.
"""

import logging
from typing import List, NamedTuple

import numpy as np

from connections import iter_connections
from force_field import PointerState, apply_pointer_force
from particle import ParticleSet, spawn_particles

logger = logging.getLogger(__name__)


class Circle(NamedTuple):
    x: float
    y: float
    radius: float


class Line(NamedTuple):
    x1: float
    y1: float
    x2: float
    y2: float
    opacity: float


class Frame(NamedTuple):
    lines: List[Line]
    circles: List[Circle]


class ParticleSim:
    def __init__(self, params, width, height, seed=None):
        self.params = params
        self.rng = np.random.default_rng(seed)

        self.width = 0.0
        self.height = 0.0
        self.particles = ParticleSet.from_particles([])
        self.pointer = PointerState(influence_radius=float(params.pointer_influence_radius))

        self.resize(width, height)

    # ---------- host input ----------
    def resize(self, width, height):
        """Replace extents and rebuild every particle. Raises ConfigError on bad extents."""
        self.params.check_extent(width, height)
        self.width = float(width)
        self.height = float(height)
        self.reset()

    def reset(self):
        self.particles = spawn_particles(self.params, self.width, self.height, self.rng)
        # New particle set, pointer has to announce itself again
        self.pointer.clear()
        logger.info(
            "Spawned %d particles for %gx%g canvas", len(self.particles), self.width, self.height
        )

    def set_pointer(self, x, y):
        self.pointer.move_to(x, y)

    # ---------- core loop ----------
    def step(self):
        apply_pointer_force(self.pointer, self.particles, self.params.pointer_push_strength)
        self.particles.apply_physics(self.width, self.height)

    def connections(self):
        p = self.params
        return iter_connections(
            self.particles.pos,
            p.connection_max_distance,
            p.connection_max_peers,
            p.connection_opacity_factor,
        )

    def lines(self):
        for e in self.connections():
            yield Line(e.a[0], e.a[1], e.b[0], e.b[1], e.opacity)

    def circles(self):
        ps = self.particles
        for (x, y), r in zip(ps.pos.tolist(), ps.radius.tolist()):
            yield Circle(x, y, r)

    def frame(self):
        """Advance one tick and collect its draw requests (headless use)."""
        self.step()
        return Frame(lines=list(self.lines()), circles=list(self.circles()))


class TickScheduler:
    """
    Cooperative "run one tick, then ask again" loop.

    At most one callback is pending. `pump` runs between ticks, that's where
    the host delivers pointer and resize events, so they never land mid-tick.
    """

    def __init__(self, pump=None):
        self.pump = pump
        self._pending = None
        self._stopped = False

    def request(self, callback):
        if not self._stopped:
            self._pending = callback

    def stop(self):
        self._stopped = True
        self._pending = None

    @property
    def stopped(self):
        return self._stopped

    def run(self, max_ticks=None):
        ticks = 0
        while self._pending is not None and not self._stopped:
            if max_ticks is not None and ticks >= max_ticks:
                break
            callback, self._pending = self._pending, None
            callback()
            ticks += 1
            if self.pump is not None:
                self.pump()
        return ticks


class FrameDriver:
    """
    Orders one tick: clear, push, integrate, lines, circles, reschedule.

    Lines go out before circles so particle fills sit on top of line ends.
    Both read the same post-integration positions.
    """

    def __init__(self, sim, surface, scheduler):
        self.sim = sim
        self.surface = surface
        self.scheduler = scheduler
        self.running = False
        self.frame_count = 0

    def start(self):
        self.running = True
        self.scheduler.request(self.tick)

    def stop(self):
        self.running = False

    def tick(self):
        self.surface.clear()

        self.sim.step()

        for line in self.sim.lines():
            self.surface.stroke_line(line)
        for circle in self.sim.circles():
            self.surface.fill_circle(circle)

        self.frame_count += 1
        if self.running:
            self.scheduler.request(self.tick)
