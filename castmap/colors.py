from __future__ import annotations

from typing import Dict, Iterable, Sequence

from .models import Pairing

# Border colors shared by the two members of a pairing
PALETTE = (
    "#f032e6", "#f58231", "#46f0f0", "#ffe119",
    "#6a3d9a", "#ff9f80", "#008080", "#808000",
)


def assign_colors(
    pairings: Iterable[Pairing],
    episode: int,
    palette: Sequence[str] = PALETTE,
) -> Dict[int, str]:
    """
    Map person id -> border color for the pairings of one episode.

    The i-th pairing of the episode (in input order) gets palette[i % len].
    A person listed in two pairings keeps the color of the later one, and
    once the palette is exhausted colors repeat.
    """
    if not palette:
        raise ValueError("palette must contain at least one color")

    color_map: Dict[int, str] = {}
    this_episode = [p for p in pairings if p.episode == episode]
    for i, pair in enumerate(this_episode):
        col = palette[i % len(palette)]
        color_map[pair.person_a] = col
        color_map[pair.person_b] = col
    return color_map
