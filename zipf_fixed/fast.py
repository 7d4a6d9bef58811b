import logging
import math
from dataclasses import dataclass, field
from typing import Optional

from zipf_fixed.errors import InvalidExponent, InvalidStart
from zipf_fixed.models import Distribution, UniformSource
from zipf_fixed.utils import draw

logger = logging.getLogger(__name__)


# values derived from exponent and start, used by every iteration of the sampling loop
@dataclass(frozen=True)
class Precomputes:
    q: float
    v: float
    one_minus_q: float = field(init=False)
    one_minus_q_inv: float = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "one_minus_q", 1.0 - self.q)
        object.__setattr__(self, "one_minus_q_inv", 1.0 / self.one_minus_q)

    def h(self, x: float) -> float:
        return math.exp(self.one_minus_q * math.log(self.v + x)) * self.one_minus_q_inv

    def hinv(self, x: float) -> float:
        return math.exp(math.log(self.one_minus_q * x) * self.one_minus_q_inv) - self.v


class ZipfFast(Distribution[int]):
    """
    Zipf sampler using rejection-inversion, so construction is O(1) whatever the range.

    Algorithm from "Rejection-Inversion to Generate Variates from Monotone Discrete
    Distributions", W. Hörmann and G. Derflinger, 1996.

    Increasing exponent makes large values less likely, increasing start makes them
    more likely. Samples are non-negative and in practice never exceed max_index,
    though the bound comes from the shape of the hat function rather than a clamp.

    :param exponent: skew, must be greater than 1. Something slightly above 1 (like 1.1) is typical.
    :param start: offset of the first rank, must be >= 1. Typically 1.
    :param max_index: largest value the distribution is shaped for.
    """

    __slots__ = ("_pre", "_max_index", "_hxm", "_hx0_minus_hxm", "_squeeze")

    def __init__(self, exponent: float, start: float, max_index: int):
        if not exponent > 1.0:
            raise InvalidExponent()
        if not start >= 1.0:
            raise InvalidStart()
        # TODO: raise InvalidMax once the accepted max_index range is decided
        pre = Precomputes(float(exponent), float(start))
        imax = float(max_index)
        self._pre = pre
        self._max_index = max_index
        self._hxm = pre.h(imax + 0.5)
        self._hx0_minus_hxm = (
            pre.h(0.5) - math.exp(math.log(pre.v) * -pre.q) - self._hxm
        )
        # widest k - x for which k is accepted without evaluating h,
        # none when the bound underflows for huge exponents
        bound = pre.h(1.5) - math.exp(-pre.q * math.log(pre.v + 1.0))
        self._squeeze = 1.0 - pre.hinv(bound) if bound else -math.inf
        logger.debug(
            "zipf rejection-inversion ready: exponent=%s start=%s max_index=%s hxm=%r",
            pre.q,
            pre.v,
            max_index,
            self._hxm,
        )

    @property
    def exponent(self) -> float:
        return self._pre.q

    @property
    def start(self) -> float:
        return self._pre.v

    @property
    def max_index(self) -> int:
        return self._max_index

    @property
    def one_minus_q(self) -> float:
        return self._pre.one_minus_q

    @property
    def one_minus_q_inv(self) -> float:
        return self._pre.one_minus_q_inv

    @property
    def hxm(self) -> float:
        return self._hxm

    @property
    def hx0_minus_hxm(self) -> float:
        return self._hx0_minus_hxm

    @property
    def squeeze(self) -> float:
        return self._squeeze

    @property
    def precomputes(self) -> Precomputes:
        return self._pre

    def h(self, x: float) -> float:
        return self._pre.h(x)

    def hinv(self, x: float) -> float:
        return self._pre.hinv(x)

    def sample(self, rng: Optional[UniformSource] = None) -> int:
        pre = self._pre
        # no iteration cap, the source is trusted to be uniform
        while True:
            r = draw(rng)
            ur = self._hxm + r * self._hx0_minus_hxm
            # h(max_index + 0.5) underflowed and r was 0, hinv is undefined there
            if ur == 0.0:
                continue
            x = pre.hinv(ur)
            k = math.floor(x + 0.5)
            if k - x <= self._squeeze:
                return k
            if ur >= pre.h(k + 0.5) - math.exp(-math.log(k + pre.v) * pre.q):
                return k

    def __repr__(self) -> str:
        return (
            f"ZipfFast(exponent={self._pre.q!r}, start={self._pre.v!r}, "
            f"max_index={self._max_index!r})"
        )
