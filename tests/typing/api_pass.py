import random
from typing import Iterator, List, Optional

from zipf_fixed import (
    BitsSource,
    Distribution,
    UniformSource,
    Zipf,
    ZipfError,
    ZipfFast,
    ZipfFixed,
)


class Counter:
    def __init__(self) -> None:
        self.n = 0

    def random(self) -> float:
        self.n += 1
        return (self.n % 10) / 10


def keys(dist: Distribution[int], rng: Optional[UniformSource], n: int) -> List[int]:
    return list(dist.sample_iter(rng, n))


def run() -> None:
    table: ZipfFixed = Zipf(10, 0.5)
    i: int = table.sample(random.Random(1))
    j: int = table.sample()
    k: int = table.sample(Counter())
    size: int = table.size
    first: float = table.cumulative[0]

    try:
        fast = ZipfFast(1.2, 1.0, 99)
    except ZipfError:
        return
    v: int = fast.sample(BitsSource(random.Random(2)))
    it: Iterator[int] = fast.sample_iter()
    ks: List[int] = keys(fast, None, 10) + keys(table, Counter(), 10)
    hxm: float = fast.hxm
