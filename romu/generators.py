"""Romu generators (Overton, 2020).

Every variant is a fixed-size vector of unsigned words plus a pure transform.
A transform reads the old words, builds the new vector only from those old
values, and returns ``(new_state, output)`` where ``output`` is a word captured
before the update. ``RomuGenerator`` binds one transform to a word width, a
state arity and a seed expander; the seven public classes only fill in those
class attributes.

None of these generators are suitable for cryptography. Instances are not
thread-safe: give each thread its own independently seeded instance.
"""

import logging
import operator
from typing import Callable, ClassVar, Iterable, List, Optional, Tuple, Union

from .bits import MASK32, MASK64, rotl, wrap
from .splitmix import EntropySource, SplitMix32, SplitMix64, entropy_seed

logger = logging.getLogger(__name__)

C1 = 15241094284759029579  # 64-bit multiplier shared by every 64-bit variant
C2 = 3323815723  # Quad32 multiplier
C3 = 3611795771  # Mono32 multiplier

MONO32_SEED_MASK = 0x1FFFFFFF
MONO32_SEED_OFFSET = 1156979152

State = Tuple[int, ...]
Transform = Callable[[State], Tuple[State, int]]


def quad_step(state: State) -> Tuple[State, int]:
    w, x, y, z = state
    return (
        (C1 * z) & MASK64,
        (z + rotl(w, 52, 64)) & MASK64,
        (y - x) & MASK64,
        rotl(y + w, 19, 64),
    ), x


def trio_step(state: State) -> Tuple[State, int]:
    x, y, z = state
    return (
        (C1 * z) & MASK64,
        rotl(y - x, 12, 64),
        rotl(z - y, 44, 64),
    ), x


def duo_step(state: State) -> Tuple[State, int]:
    x, y = state
    return (
        (C1 * y) & MASK64,
        (rotl(y, 36, 64) + rotl(y, 15, 64) - x) & MASK64,
    ), x


def duo_jr_step(state: State) -> Tuple[State, int]:
    x, y = state
    return ((C1 * y) & MASK64, rotl(y - x, 27, 64)), x


def quad32_step(state: State) -> Tuple[State, int]:
    w, x, y, z = state
    return (
        (C2 * z) & MASK32,
        (z + rotl(w, 26, 32)) & MASK32,
        (y - x) & MASK32,
        rotl(y + w, 9, 32),
    ), x


def trio32_step(state: State) -> Tuple[State, int]:
    # Same constants as Trio: C1 truncates to its low 32 bits, 44 rotates as 12.
    x, y, z = state
    return (
        (C1 * z) & MASK32,
        rotl(y - x, 12, 32),
        rotl(z - y, 44, 32),
    ), x


def mono32_step(state: State) -> Tuple[State, int]:
    (s,) = state
    return (rotl(C3 * s, 12, 32),), s >> 16


class RomuGenerator:
    """A fixed-size word vector advanced by one closed-form transform.

    Construct with no arguments to seed from the wall clock (or from
    ``entropy``), with one integer to seed through the matching SplitMix
    expander, or with ``state=`` to resume an exact stream. An explicit state
    is loaded as given: a degenerate vector such as all zeros is a fixed point
    of several transforms and yields a constant stream.
    """

    bits: ClassVar[int] = 64
    words: ClassVar[int] = 4
    output_bits: ClassVar[int] = 64
    expander: ClassVar[Optional[type]] = SplitMix64
    step: ClassVar[Transform]

    def __init__(
        self,
        seed: Optional[int] = None,
        *,
        state: Optional[Union[int, Iterable[int]]] = None,
        entropy: Optional[EntropySource] = None,
    ) -> None:
        if not hasattr(type(self), "step"):
            raise TypeError(
                f"{type(self).__name__} has no transform; construct a variant such as Quad"
            )
        if seed is not None and state is not None:
            raise TypeError(f"{type(self).__name__} takes a seed or a state, not both")
        self._state: State = ()
        if state is not None:
            self._load(state)
        else:
            self.seed(seed, entropy=entropy)

    @classmethod
    def from_state(cls, state: Union[int, Iterable[int]]) -> "RomuGenerator":
        return cls(state=state)

    def _load(self, state: Union[int, Iterable[int]]) -> None:
        try:
            words = (operator.index(state),)
        except TypeError:
            words = tuple(operator.index(word) for word in state)
        if len(words) != self.words:
            raise ValueError(
                f"{type(self).__name__} state needs {self.words} words, got {len(words)}"
            )
        self._state = tuple(wrap(word, self.bits) for word in words)
        logger.debug("Loaded explicit %s state %s", type(self).__name__, self._state)

    def seed(self, value: Optional[int] = None, *, entropy: Optional[EntropySource] = None) -> None:
        """Re-seed in place; ``None`` draws the seed from the entropy source."""
        if value is not None:
            value = operator.index(value)
        smix = self.expander(value, entropy=entropy)
        self._state = tuple(smix.next() for _ in range(self.words))

    def state(self) -> State:
        return self._state

    def next(self) -> int:
        self._state, output = self.step(self._state)
        return output

    def outputs(self, n: int) -> List[int]:
        return [self.next() for _ in range(n)]

    def uniform(self) -> float:
        """Float in [0, 1) from one output (top 53 bits for 64-bit outputs)."""
        if self.output_bits > 53:
            return (self.next() >> (self.output_bits - 53)) / 2**53
        return self.next() / 2**self.output_bits

    def randbits(self, k: int) -> int:
        """Integer with ``k`` random bits, taken from the top of concatenated outputs."""
        if k < 0:
            raise ValueError(f"number of bits must be non-negative, got {k}")
        value = 0
        drawn = 0
        while drawn < k:
            value = (value << self.output_bits) | self.next()
            drawn += self.output_bits
        return value >> (drawn - k)

    def randint(self, a: int, b: int) -> int:
        # inclusive a..b, rejection sampled so every value is reachable
        if b < a:
            raise ValueError(f"empty range for randint({a}, {b})")
        span = b - a + 1
        k = (span - 1).bit_length()
        while True:
            r = self.randbits(k)
            if r < span:
                return a + r

    def __copy__(self) -> "RomuGenerator":
        clone = type(self).__new__(type(self))
        clone._state = self._state
        return clone

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._state == other._state

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"{type(self).__name__}(state={self._state!r})"


class Quad(RomuGenerator):
    """RomuQuad: four 64-bit words, the largest capacity of the family."""

    words = 4
    step = staticmethod(quad_step)


class Trio(RomuGenerator):
    words = 3
    step = staticmethod(trio_step)


class Duo(RomuGenerator):
    """RomuDuo: two 64-bit words. ``random()`` is its native name for ``next()``."""

    words = 2
    step = staticmethod(duo_step)

    def random(self) -> int:
        return self.next()


class DuoJr(RomuGenerator):
    words = 2
    step = staticmethod(duo_jr_step)


class Quad32(RomuGenerator):
    bits = 32
    words = 4
    output_bits = 32
    expander = SplitMix32
    step = staticmethod(quad32_step)


class Trio32(RomuGenerator):
    bits = 32
    words = 3
    output_bits = 32
    expander = SplitMix32
    step = staticmethod(trio32_step)


class Mono32(RomuGenerator):
    """RomuMono32: one 32-bit word, 16-bit outputs.

    Seeds are masked and offset into the range that keeps the period intact.
    A raw ``state=`` bypasses that and leaves the period to the caller.
    """

    bits = 32
    words = 1
    output_bits = 16
    expander = None  # seeds are masked directly, no expander
    step = staticmethod(mono32_step)

    def seed(self, value: Optional[int] = None, *, entropy: Optional[EntropySource] = None) -> None:
        if value is None:
            value = entropy_seed(self.bits, entropy)
        value = operator.index(value)
        self._state = ((value & MONO32_SEED_MASK) + MONO32_SEED_OFFSET,)
