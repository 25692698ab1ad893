"""Sampling of the 128 canonical frequencies from a tuning source."""

import threading
from contextlib import contextmanager
from typing import Iterator

from . import config
from .tuning_source import TuningSource

# Tuning sources may not support concurrent clients
_sampler_lock = threading.Lock()


@contextmanager
def tuning_client(source: TuningSource) -> Iterator[object]:
    """Register with a tuning source for the duration of a with-block.

    The client is deregistered on every exit path, including when a
    frequency query raises.
    """
    client = source.register()
    try:
        yield client
    finally:
        source.deregister(client)


def sample_frequencies(source: TuningSource) -> list[float]:
    """Pull all 128 note frequencies from a tuning source.

    Values are returned exactly as reported, even if implausible.

    Args:
        source: The tuning source to query

    Returns:
        List of 128 frequencies in Hz, indexed by MIDI note number
    """
    with _sampler_lock, tuning_client(source) as client:
        return [
            source.note_to_frequency(client, note, config.MTS_CHANNEL)
            for note in range(config.NUM_MTS_NOTES)
        ]
