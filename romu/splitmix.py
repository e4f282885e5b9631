"""SplitMix seed expanders.

A seed expander is a tiny PRNG used only while a Romu generator is being
seeded: it turns one integer into as many well mixed state words as the
generator needs, so that nearby seeds do not give correlated initial states.
Generators never keep a reference to the expander that seeded them.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, ClassVar, Optional

from .bits import MASK32, MASK64, fold, wrap

logger = logging.getLogger(__name__)

EntropySource = Callable[[], int]


def time_entropy() -> int:
    """Wall-clock nanoseconds. Coarse, and not unique across rapid calls."""
    return time.time_ns()


def entropy_seed(bits: int, entropy: Optional[EntropySource] = None) -> int:
    """Draw a ``bits`` wide seed from ``entropy`` (wall clock when omitted)."""
    source = entropy if entropy is not None else time_entropy
    seed = fold(source(), bits)
    logger.debug("Derived %d-bit seed 0x%x from %s", bits, seed, getattr(source, "__name__", source))
    return seed


@dataclass
class _SplitMix:
    state: Optional[int] = None
    entropy: Optional[EntropySource] = field(default=None, repr=False, compare=False)

    bits: ClassVar[int] = 64

    def __post_init__(self) -> None:
        if self.state is None:
            self.state = entropy_seed(self.bits, self.entropy)
        else:
            self.state = wrap(self.state, self.bits)

    def next(self) -> int:
        raise NotImplementedError


@dataclass
class SplitMix64(_SplitMix):
    """SplitMix64 (Steele, Lea & Flood), the 64-bit seed expander."""

    bits: ClassVar[int] = 64

    def next(self) -> int:
        self.state = (self.state + 0x9E3779B97F4A7C15) & MASK64
        z = self.state
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
        return z ^ (z >> 31)


@dataclass
class SplitMix32(_SplitMix):
    """32-bit SplitMix variant: an LCG step followed by a murmur-style finaliser."""

    bits: ClassVar[int] = 32

    def next(self) -> int:
        self.state = (1664525 * (self.state + 314159265)) & MASK32
        z = self.state
        z = ((z ^ (z >> 15)) * 0x5CE4E5B9) & MASK32
        z = ((z ^ (z >> 13)) * 0x1331C1EB) & MASK32
        return z ^ (z >> 15)
