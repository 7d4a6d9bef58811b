import random
from typing import Optional

from zipf_fixed.models import BitSource, UniformSource

# 53 bits fit the double mantissa exactly, so the result is always < 1.0
_DOUBLE_BITS = 53
_SCALE = 1.0 / (1 << _DOUBLE_BITS)
_MAX_U64 = (1 << 64) - 1


def draw(rng: Optional[UniformSource]) -> float:
    if rng is None:
        return random.random()
    return rng.random()


def u64_to_unit(v: int) -> float:
    return ((v & _MAX_U64) >> (64 - _DOUBLE_BITS)) * _SCALE


class BitsSource:
    """
    Adapt a source of uniform 64-bit integers into a float source.

    :param bits: object with ``getrandbits(k)``, e.g. ``random.Random`` or ``random.SystemRandom``.
    """

    __slots__ = ("bits",)

    def __init__(self, bits: BitSource) -> None:
        self.bits = bits

    def random(self) -> float:
        return u64_to_unit(self.bits.getrandbits(64))
