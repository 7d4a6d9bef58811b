import random
from typing import List, Optional

from zipf_fixed import BitsSource, Zipf, ZipfFast


class NoRandom:
    def uniform(self) -> float:
        return 0.5


def run() -> None:
    table = Zipf(10.5, 0.5)
    i: str = table.sample(random.Random(1))
    j: int = table.sample(NoRandom())
    table.size = 3

    fast = ZipfFast(1.2, "1.0", 99)
    v: str = fast.sample(BitsSource(0.5))
    it: List[int] = fast.sample_iter()
    fast.hxm = 1.0
