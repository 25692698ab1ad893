"""Extension of the 128-note frequency table to any number of tonewheels.

Uses the inferred scale size and period to continue the tuning to higher
frequencies: each new entry is the entry one scale size below, times the
period. If no period can be inferred, every new entry repeats the highest
sampled frequency.
"""

from typing import Optional, Sequence

from . import config
from .period import PeriodicityResult, infer_period


def extend_frequencies(
    frequencies: Sequence[float],
    length: int,
    result: Optional[PeriodicityResult] = None,
) -> list[float]:
    """Extend a 128-entry frequency table to a given length.

    Args:
        frequencies: Table whose first 128 entries are the sampled tuning
        length: Requested table length (>= 128)
        result: Periodicity already inferred from these 128 entries;
            inferred here when None

    Returns:
        New list of `length` frequencies; entries 0-127 are copied unchanged

    Raises:
        ValueError: If length is less than 128 or fewer than 128
            frequencies are given
    """
    if len(frequencies) < config.NUM_MTS_NOTES:
        raise ValueError(
            f"Expected at least {config.NUM_MTS_NOTES} frequencies, got {len(frequencies)}"
        )
    if length < config.NUM_MTS_NOTES:
        raise ValueError(
            f"Table length must be at least {config.NUM_MTS_NOTES}, got {length}"
        )

    table = list(frequencies[:config.NUM_MTS_NOTES])
    if result is None:
        result = infer_period(table)
    assert result.scale_size <= config.NUM_MTS_NOTES

    if result.found:
        # Reads back entries extended earlier once k - scale_size >= 128
        for k in range(config.NUM_MTS_NOTES, length):
            table.append(result.period * table[k - result.scale_size])
    else:
        highest = table[-1]
        table.extend(highest for _ in range(config.NUM_MTS_NOTES, length))

    return table
