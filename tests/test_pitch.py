"""Unit tests for pitch conversions."""

import pytest

from tonewheel_tuning.pitch import (
    cents_difference,
    frequency_to_note_float,
    note_to_frequency,
)


class TestNoteToFrequency:

    def test_a4_is_440(self):
        assert note_to_frequency(69) == 440.0

    def test_octave_above(self):
        assert note_to_frequency(81) == 880.0

    def test_c1(self):
        assert note_to_frequency(24) == pytest.approx(32.70319566257483)

    def test_midi_note_0(self):
        assert note_to_frequency(0) == pytest.approx(8.175798915643707)

    def test_fractional_note(self):
        assert note_to_frequency(69.5) == pytest.approx(440.0 * 2 ** (1 / 24))

    def test_bohlen_pierce_tritave(self):
        """13 steps of Bohlen-Pierce multiply by 3."""
        low = note_to_frequency(60, divisions=13, period_ratio=3.0)
        high = note_to_frequency(73, divisions=13, period_ratio=3.0)
        assert high == pytest.approx(3 * low)

    def test_custom_anchor(self):
        assert note_to_frequency(60, anchor_note=60, anchor_frequency=261.6) == 261.6

    def test_zero_divisions_rejected(self):
        with pytest.raises(ValueError):
            note_to_frequency(60, divisions=0)


class TestFrequencyToNoteFloat:

    def test_a4(self):
        assert frequency_to_note_float(440.0) == 69.0

    def test_quarter_tone(self):
        assert frequency_to_note_float(440.0 * 2 ** (1 / 24)) == pytest.approx(69.5)

    def test_inverse_of_note_to_frequency(self):
        for note in (0, 24, 60, 127):
            assert frequency_to_note_float(note_to_frequency(note)) == pytest.approx(note)

    @pytest.mark.parametrize("freq", [0.0, -440.0])
    def test_non_positive_rejected(self, freq):
        with pytest.raises(ValueError):
            frequency_to_note_float(freq)


class TestCentsDifference:

    def test_octave(self):
        assert cents_difference(440.0, 880.0) == 1200.0

    def test_unison(self):
        assert cents_difference(440.0, 440.0) == 0.0

    def test_downward(self):
        assert cents_difference(880.0, 440.0) == -1200.0

    def test_non_positive_rejected(self):
        with pytest.raises(ValueError):
            cents_difference(0.0, 440.0)
