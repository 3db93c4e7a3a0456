from __future__ import annotations
import math
from typing import Dict, List, Tuple


def circle_layout(
    node_ids: List[str],
    radius: float = 1.0,
) -> Dict[str, Tuple[float, float]]:
    """
    Place nodes evenly on a circle, first node at the top, going clockwise.
    A single node sits at the origin.
    """
    n = len(node_ids)
    if n == 0:
        return {}
    if n == 1:
        return {node_ids[0]: (0.0, 0.0)}

    pos: Dict[str, Tuple[float, float]] = {}
    step = 2.0 * math.pi / n
    for i, nid in enumerate(node_ids):
        angle = math.pi / 2.0 - i * step
        pos[nid] = (radius * math.cos(angle), radius * math.sin(angle))
    return pos
