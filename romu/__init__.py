"""Romu pseudorandom number generators. Not for cryptographic use."""

from .generators import (
    C1,
    C2,
    C3,
    Duo,
    DuoJr,
    Mono32,
    Quad,
    Quad32,
    RomuGenerator,
    Trio,
    Trio32,
)
from .quality import ChiSquareResult, chi_square, chi_square_uniformity, frequency_counts
from .splitmix import SplitMix32, SplitMix64
from .stream import VARIANTS, StreamConfig, make_generator, run_stream

__all__ = [
    "C1",
    "C2",
    "C3",
    "ChiSquareResult",
    "Duo",
    "DuoJr",
    "Mono32",
    "Quad",
    "Quad32",
    "RomuGenerator",
    "SplitMix32",
    "SplitMix64",
    "StreamConfig",
    "Trio",
    "Trio32",
    "VARIANTS",
    "chi_square",
    "chi_square_uniformity",
    "frequency_counts",
    "make_generator",
    "run_stream",
]
