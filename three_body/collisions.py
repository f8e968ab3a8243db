#!/usr/bin/env python3
"""
Close-approach detection.

Bodies are point masses and never merge or bounce. When two of them come
within COLLISION_DISTANCE the controller records a status message; it does not
pause, since only input commands change the run state.
"""
import itertools
from typing import List, Optional, Sequence, Tuple

from .constants import COLLISION_DISTANCE
from .data_models import Body
from .vector_utils import vec_distance


def find_close_pairs(bodies: Sequence[Body], min_distance: float = COLLISION_DISTANCE) -> List[Tuple[int, int]]:
    """Index pairs (i, j), i < j, whose separation is below min_distance."""
    pairs: List[Tuple[int, int]] = []
    for (i, bi), (j, bj) in itertools.combinations(enumerate(bodies), 2):
        if vec_distance(bi.position, bj.position) < min_distance:
            pairs.append((i, j))
    return pairs


def describe_close_pairs(bodies: Sequence[Body], pairs: Sequence[Tuple[int, int]]) -> Optional[str]:
    """Human-readable message for the status line, None when nothing is close."""
    if not pairs:
        return None
    names = ", ".join(f"{bodies[i].name} ↔ {bodies[j].name}" for i, j in pairs)
    return f"Close approach: {names}"
