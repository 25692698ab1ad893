"""MIDI Tuning Standard (MTS) input using mido and python-rtmidi.

Listens on a MIDI input port for MTS SysEx messages and keeps a retuned
128-note frequency table that can be sampled like any other tuning source.

Supported messages (mido sysex data, without the F0/F7 framing):
- Bulk tuning dump (non-real-time):
    7E dev 08 01 program name[16] (xx yy zz)*128 checksum
- Single note tuning change (real-time):
    7F dev 08 02 program count (kk xx yy zz)*count

A frequency word xx yy zz is semitone xx plus (yy << 7 | zz) / 16384 of a
semitone, in 12-TET with A4 = 440 Hz. The word 7F 7F 7F means "no change".
"""

import math
import time
from typing import Optional, Sequence

import mido

from . import config
from .pitch import frequency_to_note_float, note_to_frequency
from .tuning_source import TuningSource

# =============================================================================
# Constants
# =============================================================================

NON_REAL_TIME = 0x7E
REAL_TIME = 0x7F
MIDI_TUNING = 0x08
BULK_DUMP = 0x01
SINGLE_NOTE_CHANGE = 0x02

ALL_CALL = 0x7F
NO_CHANGE = (0x7F, 0x7F, 0x7F)
FRACTION_STEPS = 1 << 14
NAME_LENGTH = 16

# Header (4) + program (1) + name (16) + 128 words (384) + checksum (1)
BULK_DUMP_LENGTH = 5 + NAME_LENGTH + 3 * config.NUM_MTS_NOTES + 1


# =============================================================================
# Frequency words
# =============================================================================

def decode_frequency(xx: int, yy: int, zz: int) -> Optional[float]:
    """Decode an MTS frequency word.

    Args:
        xx: Semitone (MIDI note number at or below the frequency)
        yy: High 7 bits of the fraction of a semitone
        zz: Low 7 bits of the fraction of a semitone

    Returns:
        Frequency in Hz, or None for the "no change" word
    """
    if (xx, yy, zz) == NO_CHANGE:
        return None
    fraction = ((yy << 7) | zz) / FRACTION_STEPS
    return note_to_frequency(xx + fraction)


def encode_frequency(freq: float) -> tuple[int, int, int]:
    """Encode a frequency as the nearest MTS frequency word.

    Frequencies outside the range of MIDI notes 0-127 are clamped.

    Args:
        freq: Frequency in Hz

    Returns:
        Tuple of (xx, yy, zz) data bytes
    """
    note = frequency_to_note_float(freq)
    if note <= 0:
        return 0, 0, 0

    semitone = int(math.floor(note))
    fraction = round((note - semitone) * FRACTION_STEPS)
    if fraction == FRACTION_STEPS:
        semitone += 1
        fraction = 0

    if semitone > 127:
        semitone, fraction = 127, FRACTION_STEPS - 1

    word = (semitone, fraction >> 7, fraction & 0x7F)
    if word == NO_CHANGE:
        # 7F 7F 7F is reserved; the highest tunable word is 7F 7F 7E
        word = (0x7F, 0x7F, 0x7E)
    return word


# =============================================================================
# SysEx parsing
# =============================================================================

def _check_data_bytes(data: Sequence[int]) -> None:
    for value in data:
        if not 0 <= value <= 0x7F:
            raise ValueError(f"SysEx data byte out of range: {value}")


def checksum(data: Sequence[int]) -> int:
    """Compute the bulk dump checksum (XOR of all bytes, 7 bits)."""
    result = 0
    for value in data:
        result ^= value
    return result & 0x7F


def is_tuning_message(data: Sequence[int]) -> bool:
    """Check whether sysex data is a supported MTS message."""
    if len(data) < 4 or data[2] != MIDI_TUNING:
        return False
    return (
        (data[0] == NON_REAL_TIME and data[3] == BULK_DUMP)
        or (data[0] == REAL_TIME and data[3] == SINGLE_NOTE_CHANGE)
    )


def parse_bulk_dump(data: Sequence[int]) -> list[Optional[float]]:
    """Parse a bulk tuning dump into 128 frequencies.

    Args:
        data: SysEx data bytes without F0/F7

    Returns:
        List of 128 frequencies in Hz; None where the dump says "no change"

    Raises:
        ValueError: If the message is truncated, malformed or the checksum
            does not match
    """
    if len(data) != BULK_DUMP_LENGTH:
        raise ValueError(
            f"Bulk tuning dump must be {BULK_DUMP_LENGTH} bytes, got {len(data)}"
        )
    if data[0] != NON_REAL_TIME or data[2] != MIDI_TUNING or data[3] != BULK_DUMP:
        raise ValueError("Not a bulk tuning dump")
    _check_data_bytes(data)

    expected = checksum(data[:-1])
    if data[-1] != expected:
        raise ValueError(
            f"Bulk tuning dump checksum mismatch: got {data[-1]:#04x}, "
            f"expected {expected:#04x}"
        )

    start = 5 + NAME_LENGTH
    return [
        decode_frequency(*data[start + 3 * note:start + 3 * note + 3])
        for note in range(config.NUM_MTS_NOTES)
    ]


def parse_single_note_change(data: Sequence[int]) -> list[tuple[int, Optional[float]]]:
    """Parse a real-time single note tuning change.

    Args:
        data: SysEx data bytes without F0/F7

    Returns:
        List of (note, frequency) pairs; frequency is None for "no change"

    Raises:
        ValueError: If the message is truncated or malformed
    """
    if len(data) < 6:
        raise ValueError("Single note tuning change is truncated")
    if data[0] != REAL_TIME or data[2] != MIDI_TUNING or data[3] != SINGLE_NOTE_CHANGE:
        raise ValueError("Not a single note tuning change")
    _check_data_bytes(data)

    count = data[5]
    if len(data) != 6 + 4 * count:
        raise ValueError(
            f"Single note tuning change announces {count} notes "
            f"but carries {len(data) - 6} data bytes"
        )

    changes = []
    for offset in range(6, len(data), 4):
        note, xx, yy, zz = data[offset:offset + 4]
        changes.append((note, decode_frequency(xx, yy, zz)))
    return changes


def bulk_dump_message(
    frequencies: Sequence[float],
    device_id: int = ALL_CALL,
    program: int = 0,
    name: str = "tonewheel",
) -> mido.Message:
    """Build a bulk tuning dump message for 128 frequencies.

    Args:
        frequencies: 128 frequencies in Hz
        device_id: SysEx device ID (0x7F = all call)
        program: Tuning program number (0-127)
        name: Tuning name (ASCII, padded or cut to 16 characters)

    Returns:
        A mido sysex message
    """
    if len(frequencies) != config.NUM_MTS_NOTES:
        raise ValueError(
            f"Expected {config.NUM_MTS_NOTES} frequencies, got {len(frequencies)}"
        )

    name_bytes = [ord(c) & 0x7F for c in name[:NAME_LENGTH].ljust(NAME_LENGTH)]
    data = [NON_REAL_TIME, device_id, MIDI_TUNING, BULK_DUMP, program]
    data.extend(name_bytes)
    for freq in frequencies:
        data.extend(encode_frequency(freq))
    data.append(checksum(data))
    return mido.Message("sysex", data=data)


# =============================================================================
# MIDI Tuning Source
# =============================================================================

class MidiTuningSource(TuningSource):
    """Tuning source fed by MTS SysEx messages on a MIDI input port.

    Each registration opens the input port, listens for tuning messages
    for listen_time seconds, and answers frequency queries from the retuned
    table until deregistration closes the port. The table starts as 12-TET
    at A4 = 440 Hz and keeps its retuning between registrations.
    """

    def __init__(
        self,
        port_pattern: Optional[str] = config.MIDI_PORT_PATTERN,
        device_id: int = config.MTS_DEVICE_ID,
        listen_time: float = config.MIDI_LISTEN_TIME,
        verbose: bool = False,
    ):
        """Initialize the MIDI tuning source.

        Args:
            port_pattern: Substring to match in port names, or None for first port
            device_id: SysEx device ID to answer to (0x7F = any)
            listen_time: Seconds to listen for tuning messages per registration
            verbose: If True, print applied tuning messages
        """
        self.port_pattern = port_pattern
        self.device_id = device_id
        self.listen_time = listen_time
        self.verbose = verbose
        self.frequencies = [note_to_frequency(n) for n in range(config.NUM_MTS_NOTES)]

    def _find_port_name(self) -> str:
        available_ports = mido.get_input_names()
        if not available_ports:
            raise RuntimeError("No MIDI input ports found")

        if self.port_pattern is None:
            return available_ports[0]

        for name in available_ports:
            if self.port_pattern.lower() in name.lower():
                return name
        raise RuntimeError(f"No MIDI input port matching '{self.port_pattern}'")

    def _accepts_device(self, device_id: int) -> bool:
        return ALL_CALL in (self.device_id, device_id) or device_id == self.device_id

    def apply_message(self, msg: mido.Message) -> bool:
        """Apply a MIDI message to the tuning table.

        Args:
            msg: Any MIDI message

        Returns:
            True if the message was a tuning message for this device

        Raises:
            ValueError: If a tuning message is malformed
        """
        if msg.type != "sysex":
            return False

        data = list(msg.data)
        if not is_tuning_message(data) or not self._accepts_device(data[1]):
            return False

        if data[3] == BULK_DUMP:
            for note, freq in enumerate(parse_bulk_dump(data)):
                if freq is not None:
                    self.frequencies[note] = freq
            if self.verbose:
                name = bytes(data[5:5 + NAME_LENGTH]).decode("ascii").rstrip()
                print(f"[MTS] Bulk tuning dump applied (program {data[4]}, '{name}')")
        else:
            changes = parse_single_note_change(data)
            for note, freq in changes:
                if freq is not None:
                    self.frequencies[note] = freq
            if self.verbose:
                print(f"[MTS] Single note tuning change: {len(changes)} note(s)")
        return True

    def listen(self, port: mido.ports.BaseInput) -> int:
        """Apply tuning messages arriving on a port for listen_time seconds.

        Returns:
            Number of tuning messages applied
        """
        applied = 0
        deadline = time.monotonic() + self.listen_time
        while True:
            for msg in port.iter_pending():
                if self.apply_message(msg):
                    applied += 1
            if time.monotonic() >= deadline:
                break
            time.sleep(config.MIDI_POLL_INTERVAL)
        return applied

    def register(self) -> mido.ports.BaseInput:
        """Open the MIDI input port and collect pending tuning messages.

        Returns:
            The open input port, used as the client handle

        Raises:
            RuntimeError: If no matching MIDI input port is found
        """
        port_name = self._find_port_name()
        port = mido.open_input(port_name)
        try:
            applied = self.listen(port)
        except BaseException:
            port.close()
            raise
        if self.verbose:
            print(f"✓ MIDI: Listened on '{port_name}' ({applied} tuning message(s))")
        return port

    def note_to_frequency(
        self,
        client: object,
        note: int,
        channel: int = config.MTS_CHANNEL,
    ) -> float:
        return self.frequencies[note]

    def deregister(self, client: mido.ports.BaseInput) -> None:
        """Close the MIDI input port opened by register()."""
        client.close()

    @staticmethod
    def list_ports() -> list[str]:
        """List all available MIDI input ports."""
        return mido.get_input_names()
