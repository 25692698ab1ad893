"""Inference of a tuning's scale size and period.

A tuning is periodic when, after some fixed number of notes (the scale
size), every frequency is multiplied by the same whole number (the period
ratio). For 12-TET the scale size is 12 and the period is 2 (the octave);
for Bohlen-Pierce it is 13 steps per tritave (period 3).

Only whole-number periods can be found. Scales with stretched octaves or a
period such as 1190 cents are reported as not periodic.
"""

from dataclasses import dataclass
from typing import Sequence

from . import config


@dataclass(frozen=True)
class PeriodicityResult:
    """Scale size and period ratio of a tuning, or -1 for both if unknown."""
    scale_size: int
    period: int

    @property
    def found(self) -> bool:
        """Whether a periodicity was found."""
        return self.scale_size > 0


NOT_FOUND = PeriodicityResult(scale_size=-1, period=-1)


def infer_period(
    frequencies: Sequence[float],
    min_period: int = config.MIN_PERIOD_RATIO,
    max_period: int = config.MAX_PERIOD_RATIO,
    min_base_frequency: float = config.MIN_BASE_FREQUENCY,
    tolerance: float = config.PERIOD_TOLERANCE,
) -> PeriodicityResult:
    """Infer the scale size and period from a table of 128 frequencies.

    Searches period ratios in increasing order. For each ratio p, a base
    note i and a candidate note j >= i are accepted when both
    frequency[j] == p * frequency[i] and frequency[j + 1] == p * frequency[i + 1]
    within the absolute tolerance. The first accepted pair, in increasing
    (i, j) order within the smallest ratio, gives scale size j - i.

    Notes at or below min_base_frequency are never used as the base note,
    since the absolute tolerance is unreliable for tiny values. They can
    still be matched as j.

    Args:
        frequencies: At least 128 frequencies; only the first 128 are read
        min_period: Smallest whole-number period ratio to try
        max_period: Largest whole-number period ratio to try (inclusive)
        min_base_frequency: Base notes must be above this frequency (Hz)
        tolerance: Absolute tolerance for frequency comparisons (Hz)

    Returns:
        PeriodicityResult, or NOT_FOUND if no whole-number period exists

    Examples:
        >>> from tonewheel_tuning.pitch import note_to_frequency
        >>> infer_period([note_to_frequency(n) for n in range(128)])
        PeriodicityResult(scale_size=12, period=2)
    """
    last = config.NUM_MTS_NOTES - 1

    for period in range(min_period, max_period + 1):
        for i in range(last):
            if frequencies[i] <= min_base_frequency:
                continue
            target = period * frequencies[i]
            next_target = period * frequencies[i + 1]
            for j in range(i, last):
                if (abs(frequencies[j] - target) < tolerance
                        and abs(frequencies[j + 1] - next_target) < tolerance):
                    return PeriodicityResult(scale_size=j - i, period=period)

    return NOT_FOUND


def describe_period(result: PeriodicityResult) -> str:
    """Return a one-line human-readable summary of a PeriodicityResult."""
    if not result.found:
        return "no periodicity found"
    return f"{result.scale_size} steps per period ratio {result.period}"
