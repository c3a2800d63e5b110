from particle import Particle, ParticleSet


def make_particle(x, y, vx=0.0, vy=0.0, radius=1.0, friction=0.55, push_x=0.0, push_y=0.0):
    return Particle(x=x, y=y, vx=vx, vy=vy, radius=radius, friction=friction, push_x=push_x, push_y=push_y)


def particle_set(*particles):
    return ParticleSet.from_particles(particles)


def step_one(p, width, height):
    ps = particle_set(p)
    ps.apply_physics(width, height)
    return ps.particle(0)


class RecordingSurface:
    """Stands in for a renderer, keeps every call in order."""

    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(("clear", None))

    def stroke_line(self, line):
        self.calls.append(("line", line))

    def fill_circle(self, circle):
        self.calls.append(("circle", circle))

    def kinds(self):
        return [k for k, _ in self.calls]
