"""Tests for the command-line interface."""

import json

from typer.testing import CliRunner

from notekit.cli import app

runner = CliRunner()


class TestNoteCommand:
    """Tests for `notekit note`."""

    def test_note_table(self):
        result = runner.invoke(app, ["note", "A", "5"])
        assert result.exit_code == 0
        assert "A5" in result.output
        assert "440.00" in result.output
        assert "69" in result.output

    def test_note_json(self):
        result = runner.invoke(app, ["note", "C#", "4", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["pitch"] == "C_SHARP"
        assert data["midi_value"] == 49
        assert data["english_description"] == "C Sharp 4"
        assert data["musical_description"] == "C♯4"

    def test_unknown_pitch(self):
        result = runner.invoke(app, ["note", "H", "4"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_out_of_range(self):
        result = runner.invoke(app, ["note", "A", "10"])
        assert result.exit_code == 1
        assert "out of range" in result.output


class TestFreqCommand:
    """Tests for `notekit freq`."""

    def test_concert_pitch(self):
        result = runner.invoke(app, ["freq", "440"])
        assert result.exit_code == 0
        assert "MIDI value 69" in result.output
        assert "A5" in result.output

    def test_zero_frequency(self):
        result = runner.invoke(app, ["freq", "0"])
        assert result.exit_code == 1
        assert "Error" in result.output


class TestOctaveCommand:
    """Tests for `notekit octave`."""

    def test_full_octave(self):
        result = runner.invoke(app, ["octave", "4"])
        assert result.exit_code == 0
        assert "C4" in result.output
        assert "B4" in result.output

    def test_top_octave_stops_at_g(self):
        result = runner.invoke(app, ["octave", "10"])
        assert result.exit_code == 0
        assert "G10" in result.output
        assert "G♯10" not in result.output

    def test_invalid_octave(self):
        result = runner.invoke(app, ["octave", "11"])
        assert result.exit_code == 1
