"""Configuration constants for the tonewheel frequency table."""

# =============================================================================
# Tuning Source
# =============================================================================

# Number of notes a tuning source reports (MIDI note numbers 0-127)
NUM_MTS_NOTES = 128

# Tuning source channel queried for every note
# Only channel 0 is used; per-channel tunings are not supported
MTS_CHANNEL = 0

# =============================================================================
# Period Inference
# =============================================================================

# Range of whole-number period ratios searched (2 = octave, 3 = tritave)
MIN_PERIOD_RATIO = 2
MAX_PERIOD_RATIO = 100

# Frequencies at or below this are never used as a base point (in Hz)
# Absolute tolerance is unreliable at very small magnitudes
MIN_BASE_FREQUENCY = 10.0

# Absolute tolerance (in Hz) when comparing a frequency with its period image
PERIOD_TOLERANCE = 1e-6

# =============================================================================
# Table Extension
# =============================================================================

# Default number of tonewheels (table entries) to generate
DEFAULT_TABLE_LENGTH = 256

# =============================================================================
# Equal Temperament (default tuning source)
# =============================================================================

# Reference pitch: A4 = 440 Hz, as reported by an unconfigured MTS-ESP client
ANCHOR_MIDI_NOTE = 69
ANCHOR_FREQUENCY = 440.0

# Steps per period and the period itself (12 steps per octave)
DEFAULT_DIVISIONS = 12
DEFAULT_PERIOD_RATIO = 2.0

# =============================================================================
# MIDI Tuning Standard Input
# =============================================================================

# Pattern to match MIDI input port name (case-insensitive substring match)
# Set to None to use the first available port
MIDI_PORT_PATTERN = None

# SysEx device ID we answer to (0x7F = "all call", accept any device)
MTS_DEVICE_ID = 0x7F

# How long to listen for tuning messages while sampling (seconds)
MIDI_LISTEN_TIME = 1.0

# MIDI polling interval (seconds)
MIDI_POLL_INTERVAL = 0.001

# =============================================================================
# OSC Configuration
# =============================================================================

# Synth / tonewheel engine OSC target
OSC_HOST = "127.0.0.1"
OSC_PORT = 53280

# OSC address patterns for the extended table
OSC_FREQUENCY_ADDRESS = "/tonewheel/frequency"
OSC_PERIOD_ADDRESS = "/tonewheel/period"
