#!/usr/bin/env python3
"""Send an equal-temperament MTS bulk tuning dump to a MIDI output port.

Use this to test `tonewheel-tuning --source midi` without an MTS master:
1. Route this script's output port to the port the CLI listens on
   (e.g. a virtual MIDI cable or loopback device)
2. Start `tonewheel-tuning --source midi --listen 5`
3. Run this script within the listen window
"""

import argparse

import mido

from tonewheel_tuning import config
from tonewheel_tuning.midi_tuning import bulk_dump_message
from tonewheel_tuning.pitch import note_to_frequency


def send_tuning(port_filter=None, divisions=12, period_ratio=2.0, name="tonewheel"):
    outputs = mido.get_output_names()
    if not outputs:
        print("No MIDI output ports found.")
        return

    # Auto-select port
    port_name = outputs[0]
    if port_filter:
        matches = [n for n in outputs if port_filter.lower() in n.lower()]
        if matches:
            port_name = matches[0]
        else:
            print(f"No port matching '{port_filter}' found. Using '{port_name}'")

    frequencies = [
        note_to_frequency(n, divisions=divisions, period_ratio=period_ratio)
        for n in range(config.NUM_MTS_NOTES)
    ]
    msg = bulk_dump_message(frequencies, name=name)

    print(f"Sending {divisions}-EDO (period {period_ratio}) to '{port_name}'...")
    with mido.open_output(port_name) as port:
        port.send(msg)
    print(f"Sent bulk tuning dump ({len(msg.data) + 2} bytes).")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Send an MTS bulk tuning dump")
    parser.add_argument("--port", help="Filter for MIDI output port name")
    parser.add_argument("--divisions", type=int, default=12, help="Steps per period")
    parser.add_argument("--period-ratio", type=float, default=2.0, help="Period ratio")
    parser.add_argument("--name", default="tonewheel", help="Tuning name (16 chars max)")
    args = parser.parse_args()

    send_tuning(args.port, args.divisions, args.period_ratio, args.name)
