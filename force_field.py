from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

# Closer than this and the direction is numerically meaningless
DEAD_ZONE = 0.1


@dataclass
class PointerState:
    """Single pointer. `pos` stays None until the first move event."""
    influence_radius: float
    pos: Optional[Tuple[float, float]] = None

    def move_to(self, x, y):
        self.pos = (float(x), float(y))

    def clear(self):
        self.pos = None


def pointer_push(pointer, pos, strength):
    """
    Push contribution for each row of `pos` (Nx2).

    Repulsive, linear falloff: full `strength` at the pointer, zero at the
    influence radius. Rows outside the ring or inside the dead zone get (0, 0).
    """
    pos = np.asarray(pos, dtype=np.float64).reshape(-1, 2)
    out = np.zeros_like(pos)
    if pointer.pos is None:
        return out

    away = pos - np.asarray(pointer.pos, dtype=np.float64)[None, :]
    d = np.hypot(away[:, 0], away[:, 1])
    inside = (d < pointer.influence_radius) & (d > DEAD_ZONE)

    if np.any(inside):
        di = d[inside]
        falloff = 1.0 - di / pointer.influence_radius
        out[inside] = away[inside] / di[:, None] * (falloff * strength)[:, None]
    return out


def apply_pointer_force(pointer, particles, strength):
    """Add this tick's pointer push onto every particle's accumulator."""
    if pointer.pos is None:
        return
    particles.push += pointer_push(pointer, particles.pos, strength)
