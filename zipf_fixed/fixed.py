import logging
import math
import operator
from bisect import bisect_right
from typing import Any, List, Optional, Tuple

from zipf_fixed.models import Distribution, UniformSource
from zipf_fixed.utils import draw

logger = logging.getLogger(__name__)


def _pow(base: float, exponent: float) -> float:
    # float ** raises on overflow, the table wants IEEE inf instead
    try:
        return base**exponent
    except OverflowError:
        return math.inf


def _div(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a)


def cumulative_table(size: int, exponent: float) -> Tuple[float, ...]:
    """
    Build the cumulative probability table of a bounded Zipf distribution.

    Entry 0 is a 0.0 sentinel, entry i holds the normalized mass of ranks 1..i,
    where rank i weighs ``i ** -exponent``. The last entry is 1.0 up to rounding.
    """
    powers: List[float] = [0.0] * size
    total = 0.0
    for i in range(1, size):
        p = _pow(float(i), exponent)
        powers[i] = p
        total += _div(1.0, p)
    norm = _div(1.0, total)

    table: List[float] = [0.0] * size
    last = 0.0
    for i in range(1, size):
        last += _div(norm, powers[i])
        table[i] = last
    return tuple(table)


class ZipfFixed(Distribution[int]):
    """
    Zipf sampler over [0, size) backed by a precomputed cumulative table.
    Construction is O(size), each sample is one uniform draw plus a binary search.

    Any real exponent is accepted. Exponents <= 0 give flat or inverted distributions.

    :param size: number of outcomes, must be >= 1.
    :param exponent: skew, larger values concentrate samples on small indices.
    """

    __slots__ = ("_size", "_exponent", "_cumulative")

    def __init__(self, size: int, exponent: float):
        size = operator.index(size)
        if size < 1:
            raise ValueError("size must be >= 1")
        self._size = size
        self._exponent = float(exponent)
        self._cumulative = cumulative_table(size, self._exponent)
        logger.debug(
            "zipf table built: size=%d exponent=%s last=%r",
            size,
            self._exponent,
            self._cumulative[-1],
        )

    @property
    def size(self) -> int:
        return self._size

    @property
    def exponent(self) -> float:
        return self._exponent

    @property
    def cumulative(self) -> Tuple[float, ...]:
        return self._cumulative

    def sample(self, rng: Optional[UniformSource] = None) -> int:
        r = draw(rng)
        # bisect_right steps past entries equal to r, so ties land in the upper bucket
        return bisect_right(self._cumulative, r) - 1

    def __len__(self) -> int:
        return self._size

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ZipfFixed):
            return NotImplemented
        return self._cumulative == other._cumulative

    def __hash__(self) -> int:
        return hash(self._cumulative)

    def __repr__(self) -> str:
        return f"ZipfFixed(size={self._size}, exponent={self._exponent!r})"
