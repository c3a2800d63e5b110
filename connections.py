"""
Proximity graph for the connecting lines.

Pairs are visited once, attributed to the lower index, and each source index
stops after `max_peers` accepted partners. The cap only counts outgoing
edges, so a particle can still collect more than `max_peers` lines from
lower-indexed neighbours.

Still O(N^2) for simplicity; each source row's squared distances are
computed in one numpy pass, sqrt only runs for accepted pairs.
"""

import math
from typing import NamedTuple, Tuple

import numpy as np


class Edge(NamedTuple):
    a: Tuple[float, float]
    b: Tuple[float, float]
    opacity: float
    i: int
    j: int


def _clamp01(x):
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else x


def iter_connections(positions, max_distance, max_peers, opacity_factor):
    """
    Yield edges in (i ascending, j ascending) order for an Nx2 position array.

    Positions are copied once, when iteration starts. Exhausting the
    generator gives the whole frame's graph; take a new one for the next frame.
    """
    pos = np.array(positions, dtype=np.float64).reshape(-1, 2)
    n = len(pos)
    if n < 2 or max_peers <= 0:
        return

    max_d2 = float(max_distance) * float(max_distance)

    for i in range(n - 1):
        diff = pos[i + 1:] - pos[i]
        d2 = diff[:, 0] * diff[:, 0] + diff[:, 1] * diff[:, 1]

        # First max_peers hits by ascending j
        hits = np.flatnonzero(d2 < max_d2)[:max_peers]
        if hits.size == 0:
            continue

        a = (float(pos[i, 0]), float(pos[i, 1]))
        for k in hits:
            j = i + 1 + int(k)
            dist = math.sqrt(float(d2[k]))
            opacity = _clamp01((1.0 - dist / max_distance) * opacity_factor)
            yield Edge(a, (float(pos[j, 0]), float(pos[j, 1])), opacity, i, j)
