import types

import pytest

from connections import Edge, iter_connections


def line_of(n, spacing=1.0):
    return [(i * spacing, 0.0) for i in range(n)]


def pairs(edges):
    return [(e.i, e.j) for e in edges]


def test_end_to_end_three_points():
    edges = list(iter_connections([(0.0, 0.0), (10.0, 0.0), (200.0, 0.0)], 100.0, 4, 0.5))
    assert len(edges) == 1
    assert edges[0].a == (0.0, 0.0) and edges[0].b == (10.0, 0.0)
    assert edges[0].opacity == pytest.approx(0.45)
    assert all(2 not in (e.i, e.j) for e in edges)


def test_peer_cap_on_source():
    edges = list(iter_connections(line_of(6), 100.0, 4, 0.5))
    assert [e.j for e in edges if e.i == 0] == [1, 2, 3, 4]
    assert len(edges) == 4 + 4 + 3 + 2 + 1


def test_inbound_edges_are_not_capped():
    edges = iter_connections([(0.0, 0.0), (200.0, 0.0), (100.0, 0.0)], 150.0, 1, 0.5)
    assert pairs(edges) == [(0, 2), (1, 2)]


def test_edge_count_bounded_when_everything_overlaps():
    n, cap = 30, 4
    edges = list(iter_connections([(5.0, 5.0)] * n, 100.0, cap, 0.5))
    assert len(edges) <= n * cap
    assert len(edges) == cap * (n - cap) + sum(range(cap))


def test_order_is_source_then_target():
    pts = [(0, 0), (30, 5), (10, 40), (60, 60), (5, 5)]
    found = pairs(iter_connections(pts, 100.0, 4, 0.5))
    assert found == sorted(found)
    assert all(i < j for i, j in found)


def test_exact_max_distance_is_rejected():
    assert list(iter_connections([(0.0, 0.0), (100.0, 0.0)], 100.0, 4, 0.5)) == []


def test_opacity_is_clamped():
    (edge,) = iter_connections([(0.0, 0.0), (1.0, 0.0)], 100.0, 4, 5.0)
    assert edge.opacity == 1.0


def test_empty_and_single():
    assert list(iter_connections([], 100.0, 4, 0.5)) == []
    assert list(iter_connections([(0.0, 0.0)], 100.0, 4, 0.5)) == []


def test_zero_cap_yields_nothing():
    assert list(iter_connections(line_of(5), 100.0, 0, 0.5)) == []


def test_is_lazy_generator():
    gen = iter_connections(line_of(3), 100.0, 4, 0.5)
    assert isinstance(gen, types.GeneratorType)
    first = next(gen)
    assert isinstance(first, Edge)
    assert len(list(gen)) == 2
    assert list(gen) == []
