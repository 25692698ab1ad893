"""OSC output of the extended frequency table.

Sends each tonewheel frequency to a synth or tonewheel engine via OSC,
so the full table can be loaded without going through MIDI.

OSC Format:
- /tonewheel/frequency index frequency   - one message per table entry
- /tonewheel/period scale_size period    - inferred periodicity (-1 -1 if none)
"""

from typing import Optional, Sequence

from pythonosc import udp_client

from . import config
from .period import PeriodicityResult


class OscTableSender:
    """Sends frequency tables over OSC.

    Uses python-osc to send the table to a UDP target. Sending while the
    connection is closed does nothing.
    """

    def __init__(
        self,
        host: str = config.OSC_HOST,
        port: int = config.OSC_PORT,
        frequency_address: str = config.OSC_FREQUENCY_ADDRESS,
        period_address: str = config.OSC_PERIOD_ADDRESS,
    ):
        """Initialize the OSC sender.

        Args:
            host: Target host address
            port: Target UDP port
            frequency_address: OSC address for table entries
            period_address: OSC address for the inferred period
        """
        self.host = host
        self.port = port
        self.frequency_address = frequency_address
        self.period_address = period_address
        self._client: Optional[udp_client.SimpleUDPClient] = None

    def open(self) -> None:
        """Open the OSC connection."""
        self._client = udp_client.SimpleUDPClient(self.host, self.port)

    def close(self) -> None:
        """Close the OSC connection."""
        self._client = None

    def send_frequency(self, index: int, frequency: float) -> None:
        """Send a single table entry.

        Args:
            index: Table index (tonewheel number)
            frequency: Frequency in Hz
        """
        if self._client is None:
            return
        self._client.send_message(
            self.frequency_address,
            [int(index), float(frequency)]
        )

    def send_table(self, frequencies: Sequence[float]) -> None:
        """Send every entry of a frequency table.

        Args:
            frequencies: Frequencies in Hz, indexed by tonewheel number
        """
        for index, frequency in enumerate(frequencies):
            self.send_frequency(index, frequency)

    def send_period(self, result: PeriodicityResult) -> None:
        """Send the inferred scale size and period ratio."""
        if self._client is None:
            return
        self._client.send_message(
            self.period_address,
            [int(result.scale_size), int(result.period)]
        )

    @property
    def is_open(self) -> bool:
        """Whether the OSC connection is open."""
        return self._client is not None

    def __enter__(self) -> "OscTableSender":
        """Context manager entry."""
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()


class MockOscTableSender(OscTableSender):
    """Mock OSC sender for dry runs and tests.

    Records all messages instead of sending them via OSC.
    """

    def __init__(self, *args, verbose: bool = True, **kwargs):
        """Initialize without opening a socket."""
        super().__init__(*args, **kwargs)
        self.verbose = verbose
        self._message_log: list[dict] = []

    def open(self) -> None:
        """Mock open."""
        self._client = "mock"  # type: ignore
        if self.verbose:
            print(f"[MockOSC] Opened connection to {self.host}:{self.port}")

    def close(self) -> None:
        """Mock close."""
        self._client = None
        if self.verbose:
            print("[MockOSC] Connection closed")

    def send_frequency(self, index: int, frequency: float) -> None:
        """Log a table entry message."""
        if self._client is None:
            return
        self._message_log.append({
            "address": self.frequency_address,
            "index": index,
            "frequency": frequency,
        })
        if self.verbose:
            print(f"[MockOSC] {self.frequency_address} {index} {frequency:.4f}")

    def send_period(self, result: PeriodicityResult) -> None:
        """Log a period message."""
        if self._client is None:
            return
        self._message_log.append({
            "address": self.period_address,
            "scale_size": result.scale_size,
            "period": result.period,
        })
        if self.verbose:
            print(f"[MockOSC] {self.period_address} {result.scale_size} {result.period}")

    def get_log(self) -> list[dict]:
        """Get the message log."""
        return self._message_log.copy()

    def clear_log(self) -> None:
        """Clear the message log."""
        self._message_log.clear()
