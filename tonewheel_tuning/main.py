"""Command-line entry point for the tonewheel frequency table.

Samples the current tuning, infers its period, extends it to the requested
number of tonewheels, and prints or sends the resulting table.
"""

import argparse
from typing import Optional

from . import config
from .frequencies import build_table, dump_table
from .midi_tuning import MidiTuningSource
from .osc_sender import MockOscTableSender, OscTableSender
from .period import describe_period
from .tuning_source import EqualTemperamentSource, TuningSource


def build_source(args: argparse.Namespace) -> TuningSource:
    """Create the tuning source selected on the command line."""
    if args.source == "midi":
        return MidiTuningSource(
            port_pattern=args.port,
            listen_time=args.listen,
            verbose=not args.quiet,
        )
    return EqualTemperamentSource(
        divisions=args.divisions,
        period_ratio=args.period_ratio,
        anchor_note=args.anchor_note,
        anchor_frequency=args.anchor_freq,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Tonewheel Tuning - extend a 128-note tuning to any number of tonewheels"
    )
    parser.add_argument(
        "--length",
        type=int,
        default=config.DEFAULT_TABLE_LENGTH,
        help=f"Number of table entries, at least {config.NUM_MTS_NOTES} "
             f"(default: {config.DEFAULT_TABLE_LENGTH})",
    )
    parser.add_argument(
        "--source",
        choices=["et", "midi"],
        default="et",
        help="Tuning source: equal temperament or MIDI Tuning Standard input (default: et)",
    )
    parser.add_argument(
        "--divisions",
        type=int,
        default=config.DEFAULT_DIVISIONS,
        help=f"Equal temperament steps per period (default: {config.DEFAULT_DIVISIONS})",
    )
    parser.add_argument(
        "--period-ratio",
        type=float,
        default=config.DEFAULT_PERIOD_RATIO,
        help=f"Equal temperament period ratio (default: {config.DEFAULT_PERIOD_RATIO})",
    )
    parser.add_argument(
        "--anchor-note",
        type=int,
        default=config.ANCHOR_MIDI_NOTE,
        help=f"MIDI note of the anchor frequency (default: {config.ANCHOR_MIDI_NOTE})",
    )
    parser.add_argument(
        "--anchor-freq",
        type=float,
        default=config.ANCHOR_FREQUENCY,
        help=f"Anchor frequency in Hz (default: {config.ANCHOR_FREQUENCY})",
    )
    parser.add_argument(
        "--port",
        default=config.MIDI_PORT_PATTERN,
        help="Substring of the MIDI input port to listen on (default: first port)",
    )
    parser.add_argument(
        "--listen",
        type=float,
        default=config.MIDI_LISTEN_TIME,
        help=f"Seconds to listen for tuning messages (default: {config.MIDI_LISTEN_TIME})",
    )
    parser.add_argument(
        "--list-ports",
        action="store_true",
        help="List available MIDI input ports and exit",
    )
    parser.add_argument(
        "--osc",
        action="store_true",
        help=f"Send the table via OSC to {config.OSC_HOST}:{config.OSC_PORT}",
    )
    parser.add_argument(
        "--mock",
        action="store_true",
        help="Use mock OSC sender (print messages instead of sending)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Reduce output verbosity",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for the Tonewheel Tuning CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # List ports mode
    if args.list_ports:
        ports = MidiTuningSource.list_ports()
        print("Available MIDI input ports:")
        for i, port in enumerate(ports):
            print(f"  [{i}] {port}")
        if not ports:
            print("  (none)")
        return

    if args.length < config.NUM_MTS_NOTES:
        parser.error(f"--length must be at least {config.NUM_MTS_NOTES}")

    source = build_source(args)
    frequencies, result = build_table(args.length, source=source)

    if not args.quiet:
        print(f"✓ Tuning: {describe_period(result)}")
        print(dump_table(frequencies, result))

    if args.osc or args.mock:
        sender = MockOscTableSender(verbose=not args.quiet) if args.mock else OscTableSender()
        with sender:
            sender.send_period(result)
            sender.send_table(frequencies)
        if not args.quiet:
            print(f"✓ OSC: Sent {len(frequencies)} frequencies to {sender.host}:{sender.port}")


if __name__ == "__main__":
    main()
