"""Fixed-width unsigned integer helpers shared by the seed expanders and generators."""

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF


def wrap(value: int, bits: int) -> int:
    """Reduce ``value`` modulo 2**bits, the same as a cast to uintN_t in C."""
    return value & ((1 << bits) - 1)


def rotl(value: int, k: int, bits: int) -> int:
    """Rotate ``value`` left by ``k`` positions inside a ``bits`` wide word."""
    mask = (1 << bits) - 1
    value &= mask
    # amounts at or past the width wrap around (Trio32 rotates by 44)
    k %= bits
    if k == 0:
        return value
    return ((value << k) | (value >> (bits - k))) & mask


def fold(value: int, bits: int) -> int:
    """Xor every ``bits`` wide chunk of a non-negative ``value`` into one word."""
    mask = (1 << bits) - 1
    folded = 0
    value = abs(value)
    while value:
        folded ^= value & mask
        value >>= bits
    return folded
