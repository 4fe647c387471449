"""statfuncs.core.special.bernoulli

Bernoulli numbers for the asymptotic series of log-gamma, digamma, trigamma
and the dilogarithm.

The table is owned by a ``BernoulliTable`` instance and filled on the first
``load()``. Loading is guarded by a lock so concurrent first calls compute the
table once; after that the table is read-only. Reading a number from a table
that was never loaded raises ``BernoulliTableError``.

Values are generated exactly with ``fractions.Fraction`` from the recurrence

    B_0 = 1,   B_m = -1/(m+1) * sum_{k<m} C(m+1, k) B_k

which gives the convention B_1 = -1/2.
"""

from __future__ import annotations

import logging
import math
import threading
from fractions import Fraction
from typing import List, Optional

from ..errors import BernoulliTableError, DomainError

logger = logging.getLogger(__name__)

BERNOULLI_MAX = 100


def _bernoulli_fractions(max_index: int) -> List[Fraction]:
    table: List[Fraction] = [Fraction(1)]
    for m in range(1, max_index + 1):
        if m > 1 and m % 2 == 1:
            table.append(Fraction(0))
            continue
        acc = Fraction(0)
        for k in range(m):
            if table[k]:
                acc += math.comb(m + 1, k) * table[k]
        table.append(-acc / (m + 1))
    return table


_FRACTIONS: tuple = ()
_FRACTIONS_LOCK = threading.Lock()


def _fraction_table(max_index: int) -> tuple:
    """Exact table covering B_0 .. B_max_index.

    A single table is kept and only regrown when a larger index is requested.
    """
    global _FRACTIONS
    table = _FRACTIONS
    if len(table) > max_index:
        return table
    with _FRACTIONS_LOCK:
        if len(_FRACTIONS) <= max_index:
            _FRACTIONS = tuple(_bernoulli_fractions(max_index))
        return _FRACTIONS


def bernoulli_fraction(k: int) -> Fraction:
    """Exact Bernoulli number B_k (B_1 = -1/2).

    Stateless; no table needs to be loaded.
    """
    if k < 0:
        raise DomainError("k must be non-negative")
    return _fraction_table(max(k, 1))[k]


class BernoulliTable:
    """
    Lazily loaded table of Bernoulli numbers B_0 .. B_max_index as floats.

    Attributes:
        max_index: Largest index held by the table
    """

    def __init__(self, max_index: int = BERNOULLI_MAX):
        if max_index < 1:
            raise ValueError("max_index must be at least 1")
        self.max_index = int(max_index)
        self._values: Optional[List[float]] = None
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._values is not None

    def load(self) -> None:
        """Populate the table. Safe to call any number of times."""
        if self._values is not None:
            return
        with self._lock:
            if self._values is not None:
                return
            values = [float(b) for b in _fraction_table(self.max_index)[: self.max_index + 1]]
            self._values = values
            logger.debug("Loaded %d Bernoulli numbers", len(values))

    def number(self, k: int) -> float:
        """Bernoulli number B_k.

        Raises:
            BernoulliTableError: if load() has not been called
            DomainError: if k is outside [0, max_index]
        """
        values = self._values
        if values is None:
            raise BernoulliTableError("Bernoulli table read before load()")
        if not (0 <= k <= self.max_index):
            raise DomainError(f"Bernoulli index {k} outside [0, {self.max_index}]")
        return values[k]

    def __len__(self) -> int:
        return self.max_index + 1

    def __repr__(self) -> str:
        return f"BernoulliTable(max_index={self.max_index}, loaded={self.loaded})"


_DEFAULT_TABLE = BernoulliTable()


def bernload() -> None:
    """Load the default Bernoulli table (idempotent)."""
    _DEFAULT_TABLE.load()


def bernum(k: int) -> float:
    """Bernoulli number B_k from the default table.

    bernload() must have been called first.
    """
    return _DEFAULT_TABLE.number(k)


_SERIES_TABLE = BernoulliTable(max_index=40)


def series_table() -> BernoulliTable:
    """Table backing the Stirling and digamma series, loaded on first use."""
    _SERIES_TABLE.load()
    return _SERIES_TABLE
