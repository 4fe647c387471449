"""Search helpers for lookup tables."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np


def _first_greater(val, tab: np.ndarray) -> int:
    hits = np.flatnonzero(tab > val)
    if hits.size == 0:
        return int(tab.size)
    return int(hits[0])


def ifirstgt(val: int, tab: Sequence[int], n: Optional[int] = None) -> int:
    """Smallest i with tab[i] > val (strictly), or n when no entry exceeds val.

    Args:
        val: value to compare against
        tab: integer table
        n: number of leading entries to search (default: len(tab))
    """
    arr = np.asarray(tab, dtype=np.int64).reshape(-1)
    if n is not None:
        arr = arr[:n]
    return _first_greater(int(val), arr)


def firstgt(val: float, tab: Sequence[float], n: Optional[int] = None) -> int:
    """Float version of ifirstgt."""
    arr = np.asarray(tab, dtype=float).reshape(-1)
    if n is not None:
        arr = arr[:n]
    return _first_greater(float(val), arr)
