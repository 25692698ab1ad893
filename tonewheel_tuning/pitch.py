"""Pitch and frequency conversions.

Equal-division tunings are described by the number of steps per period,
the period ratio, and an anchor note with a known frequency. The default
arguments give standard 12-TET with A4 = 440 Hz.
"""

import math

from . import config


def note_to_frequency(
    note: float,
    divisions: int = config.DEFAULT_DIVISIONS,
    period_ratio: float = config.DEFAULT_PERIOD_RATIO,
    anchor_note: int = config.ANCHOR_MIDI_NOTE,
    anchor_frequency: float = config.ANCHOR_FREQUENCY,
) -> float:
    """Convert a (fractional) note number to frequency in an equal division.

    Args:
        note: Note number (can be fractional for microtones)
        divisions: Number of equal steps per period
        period_ratio: Frequency ratio of one period (2.0 = octave)
        anchor_note: Note number that sounds at anchor_frequency
        anchor_frequency: Frequency of the anchor note in Hz

    Returns:
        Frequency in Hz

    Examples:
        >>> note_to_frequency(69)
        440.0
        >>> note_to_frequency(81)
        880.0
    """
    if divisions < 1:
        raise ValueError(f"Divisions must be >= 1, got {divisions}")
    steps = (note - anchor_note) / divisions
    return anchor_frequency * (period_ratio ** steps)


def frequency_to_note_float(freq: float) -> float:
    """Convert a frequency in Hz to a fractional 12-TET MIDI note number.

    Args:
        freq: Frequency in Hz

    Returns:
        Fractional MIDI note number (e.g., 69.5 = A4 + 50 cents)
    """
    if freq <= 0:
        raise ValueError(f"Frequency must be positive, got {freq}")
    return config.ANCHOR_MIDI_NOTE + 12.0 * math.log2(freq / config.ANCHOR_FREQUENCY)


def cents_difference(freq1: float, freq2: float) -> float:
    """Calculate the difference between two frequencies in cents.

    Args:
        freq1: First frequency in Hz
        freq2: Second frequency in Hz

    Returns:
        Difference in cents (1 cent = 1/100 of a semitone)
    """
    if freq1 <= 0 or freq2 <= 0:
        raise ValueError("Frequencies must be positive")
    return 1200.0 * math.log2(freq2 / freq1)
