"""Frequency tables for instruments with more than 128 tonewheels.

This is the entry point callers use: it samples the 128 frequencies of the
current tuning and extends them to the requested number of tonewheels.
"""

import math
from typing import Optional, Sequence

from . import config
from .extender import extend_frequencies
from .period import PeriodicityResult, describe_period, infer_period
from .pitch import frequency_to_note_float
from .sampler import sample_frequencies
from .tuning_source import EqualTemperamentSource, TuningSource


def get_frequencies(
    length: int = config.DEFAULT_TABLE_LENGTH,
    source: Optional[TuningSource] = None,
) -> list[float]:
    """Get a frequency table of the given length.

    Pulls the 128 frequencies from the tuning source, then extends them.

    Args:
        length: Number of table entries (>= 128)
        source: Tuning source to sample (default: 12-TET at A4 = 440 Hz)

    Returns:
        List of `length` frequencies in Hz

    Raises:
        ValueError: If length is less than 128
    """
    return build_table(length, source)[0]


def build_table(
    length: int = config.DEFAULT_TABLE_LENGTH,
    source: Optional[TuningSource] = None,
) -> tuple[list[float], PeriodicityResult]:
    """Sample, infer and extend, returning the table and its periodicity.

    The period is inferred once from the 128 samples and reused for the
    extension.

    Raises:
        ValueError: If length is less than 128
    """
    if length < config.NUM_MTS_NOTES:
        raise ValueError(
            f"Table length must be at least {config.NUM_MTS_NOTES}, got {length}"
        )
    if source is None:
        source = EqualTemperamentSource()

    samples = sample_frequencies(source)
    result = infer_period(samples)
    return extend_frequencies(samples, length, result), result


def dump_table(frequencies: Sequence[float], result: PeriodicityResult) -> str:
    """Return a human-readable dump of a frequency table.

    Shows each entry's frequency, its offset in cents from the nearest
    12-TET note, and whether it was sampled or extended.
    """
    lines = [
        f"Frequency Table ({len(frequencies)} entries, {describe_period(result)})",
        "-" * 60,
    ]

    for index, freq in enumerate(frequencies):
        source = "sampled" if index < config.NUM_MTS_NOTES else "extended"
        if freq > 0 and math.isfinite(freq):
            note = frequency_to_note_float(freq)
            cents = (note - round(note)) * 100.0
            sign = '+' if cents >= 0 else ''
            lines.append(
                f"{index:4d}: {freq:14.4f} Hz  (note {round(note):4d} "
                f"{sign}{cents:5.1f}¢)  {source}"
            )
        else:
            lines.append(f"{index:4d}: {freq:>14} Hz  (no pitch)  {source}")

    return "\n".join(lines)
