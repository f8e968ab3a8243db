#!/usr/bin/env python3
"""
Toroidal boundary policy.

A body leaving one edge of the viewport re-enters from the opposite edge. Only
the stored position is wrapped; the force model keeps using plain Euclidean
distance between stored positions, so attraction across an edge is weak even
when two bodies look adjacent on screen. That inconsistency is a known visual
artifact near the viewport boundaries.
"""
from typing import List, Sequence, Tuple


def wrap_coord(coord: float, extent: float) -> float:
    """Wrap a single coordinate into [0, extent)."""
    if extent <= 0:
        raise ValueError(f"viewport extent must be positive, got {extent!r}")
    wrapped = ((coord % extent) + extent) % extent
    # Tiny negative inputs can round up to exactly `extent`
    if wrapped >= extent:
        return 0.0
    return wrapped


def wrap(position: Tuple[float, float], viewport_width: float, viewport_height: float) -> Tuple[float, float]:
    """Wrap a position into the viewport, independently on each axis."""
    return (wrap_coord(position[0], viewport_width), wrap_coord(position[1], viewport_height))


def split_at_wraps(points: Sequence[Tuple[float, float]], viewport_width: float,
                   viewport_height: float) -> List[List[Tuple[float, float]]]:
    """
    Split a trail into runs with no wrap jump inside them.

    Consecutive samples more than half an extent apart on either axis are taken
    to straddle a wrap, so the renderer does not draw a line across the screen.
    """
    runs: List[List[Tuple[float, float]]] = []
    current: List[Tuple[float, float]] = []
    for p in points:
        if current:
            q = current[-1]
            if abs(p[0] - q[0]) > viewport_width / 2 or abs(p[1] - q[1]) > viewport_height / 2:
                runs.append(current)
                current = []
        current.append(p)
    if current:
        runs.append(current)
    return runs
