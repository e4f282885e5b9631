"""Frequency and chi-square checks for generator output streams.

These are smoke tests for equidistribution, not proofs of quality: bucket
the outputs by their top (or bottom) bits and compare the bucket counts to a
uniform expectation with Pearson's statistic.
"""

import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence


def frequency_counts(
    outputs: Iterable[int],
    output_bits: int,
    bins: int = 256,
    low_bits: bool = False,
) -> List[int]:
    if bins <= 0 or bins & (bins - 1):
        raise ValueError(f"bins must be a power of two, got {bins}")
    if bins > 1 << output_bits:
        raise ValueError(f"{bins} bins exceed the {output_bits}-bit output range")

    shift = output_bits - (bins.bit_length() - 1)
    index_mask = bins - 1
    counts = [0] * bins
    for value in outputs:
        if low_bits:
            counts[value & index_mask] += 1
        else:
            counts[(value >> shift) & index_mask] += 1
    return counts


def chi_square(counts: Sequence[int]) -> float:
    """Pearson statistic of ``counts`` against equal expected frequencies."""

    total = sum(counts)
    if not counts or total == 0:
        raise ValueError("chi-square needs at least one sample")
    expected = total / len(counts)
    return sum((observed - expected) ** 2 / expected for observed in counts)


@dataclass
class ChiSquareResult:
    statistic: float
    dof: int
    samples: int
    bins: int

    @property
    def z_score(self) -> float:
        if self.dof == 0:
            return 0.0
        return (self.statistic - self.dof) / math.sqrt(2 * self.dof)

    def is_uniform(self, threshold: float = 5.0) -> bool:
        """False only when the counts deviate more than ``threshold`` sigmas above expectation."""
        return self.z_score < threshold


def chi_square_uniformity(
    outputs: Iterable[int],
    output_bits: int,
    bins: int = 256,
    low_bits: bool = False,
) -> ChiSquareResult:
    counts = frequency_counts(outputs, output_bits, bins, low_bits=low_bits)
    return ChiSquareResult(
        statistic=chi_square(counts),
        dof=bins - 1,
        samples=sum(counts),
        bins=bins,
    )
