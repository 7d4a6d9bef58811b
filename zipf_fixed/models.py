import itertools
from abc import ABC, abstractmethod
from typing import Generic, Iterable, Iterator, Optional, TypeVar

from typing_extensions import Protocol

T = TypeVar("T", covariant=True)


class UniformSource(Protocol):
    def random(self) -> float: ...


class BitSource(Protocol):
    def getrandbits(self, k: int) -> int: ...


class Distribution(ABC, Generic[T]):
    """
    Base class of the samplers. A distribution holds no random state, every
    call to sample draws from the source passed in.

    :param rng: anything with a ``random()`` method returning floats in [0, 1),
        ``random.Random`` and ``numpy.random.Generator`` both qualify.
        None uses the shared generator of the ``random`` module.
    """

    __slots__ = ()

    @abstractmethod
    def sample(self, rng: Optional[UniformSource] = None) -> T: ...

    def sample_iter(
        self, rng: Optional[UniformSource] = None, n: Optional[int] = None
    ) -> Iterator[T]:
        """
        Lazily yield samples. The stream is endless if n is None.
        """
        counter: Iterable[int] = itertools.count() if n is None else range(n)
        for _ in counter:
            yield self.sample(rng)
