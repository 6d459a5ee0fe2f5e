"""Greedy nearest-colour chain over a set of named colours.

Walks every language in ascending name order. For each one ("from"), picks
the closest language that is neither itself nor already used, and appends
it. Only the very first "from" language is appended directly, as the
anchor; later "from" languages contribute just their nearest pick.

This is a cheap heuristic, not a shortest-path solve. Its output (order,
anchor, tie-breaks) is part of the contract, so the loop shape matters:
  - the outer loop always visits every language, used or not
  - ties go to the name that sorts first (strict '<' against the running best)

The inner search is a numpy argmin over squared integer distances.
argmin returns the first minimum, and squared ints compare exactly, so the
tie-break matches a plain first-seen scan. Channels outside 0..255 switch
the arrays to Python ints (dtype=object), which never overflow.
"""

from __future__ import annotations

import math
from collections.abc import Mapping

import numpy as np

from linguist_colors.core.color import Color, distance

Chain = list[tuple[str, Color]]


def build_chain(colors: Mapping[str, Color]) -> Chain:
    """Return the nearest-colour chain for a name -> Color mapping."""
    names = sorted(colors)
    if not names:
        return []

    channels = [colors[n].as_tuple() for n in names]
    # Color is not range-checked; outside 0..255 use Python ints so squares cannot wrap
    in_range = all(0 <= v <= 255 for triple in channels for v in triple)
    rgb = np.array(channels, dtype=np.int64 if in_range else object)
    used = np.zeros(len(names), dtype=bool)
    chain: Chain = []

    for i, name in enumerate(names):
        available = ~used
        available[i] = False
        candidates = np.flatnonzero(available)

        nearest = None
        if len(candidates):
            diff = rgb[candidates] - rgb[i]
            d2 = (diff * diff).sum(axis=1)
            nearest = int(candidates[int(np.argmin(d2))])

        # Anchor: only the first "from" language is appended itself
        if i == 0:
            used[i] = True
            chain.append((name, colors[name]))

        if nearest is not None:
            used[nearest] = True
            chain.append((names[nearest], colors[names[nearest]]))

    return chain


def chain_gaps(chain: Chain) -> list[float]:
    """Distance between each pair of consecutive chain entries."""
    return [distance(a, b) for (_, a), (_, b) in zip(chain, chain[1:])]


def chain_length(chain: Chain) -> float:
    """Total distance travelled along the chain."""
    return math.fsum(chain_gaps(chain))
