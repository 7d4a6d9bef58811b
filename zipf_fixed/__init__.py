from zipf_fixed.errors import InvalidExponent, InvalidMax, InvalidStart, ZipfError
from zipf_fixed.fast import Precomputes, ZipfFast
from zipf_fixed.fixed import ZipfFixed
from zipf_fixed.models import BitSource, Distribution, UniformSource
from zipf_fixed.utils import BitsSource

Zipf = ZipfFixed

__all__ = [
    "BitSource",
    "BitsSource",
    "Distribution",
    "InvalidExponent",
    "InvalidMax",
    "InvalidStart",
    "Precomputes",
    "UniformSource",
    "Zipf",
    "ZipfError",
    "ZipfFast",
    "ZipfFixed",
]
