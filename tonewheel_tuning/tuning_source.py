"""Tuning sources that report one frequency per MIDI note.

A tuning source follows the MTS-ESP client lifecycle: register to obtain a
client handle, query the frequency of each note, then deregister. The
sampler only ever holds a handle for the duration of a single sampling pass.
"""

from typing import Sequence

from . import config
from .pitch import note_to_frequency


class TuningSource:
    """Base class for providers of the 128-note frequency mapping.

    Subclasses override note_to_frequency(), and register()/deregister()
    when they hold a real connection.
    """

    def register(self) -> object:
        """Register a client with the tuning source.

        Returns:
            Opaque client handle, passed back to the query and deregister calls
        """
        return self

    def note_to_frequency(
        self,
        client: object,
        note: int,
        channel: int = config.MTS_CHANNEL,
    ) -> float:
        """Get the frequency of a MIDI note.

        Args:
            client: Handle returned by register()
            note: MIDI note number (0-127)
            channel: Tuning channel (only 0 is queried)

        Returns:
            Frequency in Hz
        """
        raise NotImplementedError

    def deregister(self, client: object) -> None:
        """Release a client handle obtained from register()."""


class EqualTemperamentSource(TuningSource):
    """Equal division of a period, anchored to a reference note.

    With default arguments this reports standard 12-TET at A4 = 440 Hz,
    the same table an MTS-ESP client returns when no master is connected.
    """

    def __init__(
        self,
        divisions: int = config.DEFAULT_DIVISIONS,
        period_ratio: float = config.DEFAULT_PERIOD_RATIO,
        anchor_note: int = config.ANCHOR_MIDI_NOTE,
        anchor_frequency: float = config.ANCHOR_FREQUENCY,
    ):
        """Initialize the equal temperament.

        Args:
            divisions: Number of equal steps per period
            period_ratio: Frequency ratio of one period (2.0 = octave)
            anchor_note: MIDI note that sounds at anchor_frequency
            anchor_frequency: Frequency of the anchor note in Hz
        """
        if divisions < 1:
            raise ValueError(f"Divisions must be >= 1, got {divisions}")
        self.divisions = divisions
        self.period_ratio = period_ratio
        self.anchor_note = anchor_note
        self.anchor_frequency = anchor_frequency

    def note_to_frequency(
        self,
        client: object,
        note: int,
        channel: int = config.MTS_CHANNEL,
    ) -> float:
        return note_to_frequency(
            note,
            divisions=self.divisions,
            period_ratio=self.period_ratio,
            anchor_note=self.anchor_note,
            anchor_frequency=self.anchor_frequency,
        )


class FixedTableSource(TuningSource):
    """Serves a caller-supplied table of 128 frequencies.

    Values are returned unchanged, including zero or negative entries.
    """

    def __init__(self, frequencies: Sequence[float]):
        if len(frequencies) != config.NUM_MTS_NOTES:
            raise ValueError(
                f"Expected {config.NUM_MTS_NOTES} frequencies, got {len(frequencies)}"
            )
        self.frequencies = [float(f) for f in frequencies]

    def note_to_frequency(
        self,
        client: object,
        note: int,
        channel: int = config.MTS_CHANNEL,
    ) -> float:
        return self.frequencies[note]
