"""Tests for the command line interface."""

import json

from typer.testing import CliRunner

from cli.app import app
from owmidi import __version__

runner = CliRunner()


class TestConvertCommand:
    """Test cases for `owmidi convert`."""

    def test_convert_writes_rules(self, simple_midi_file, tmp_path):
        """Converting writes the rules file and exits 0."""
        output = tmp_path / "song.txt"
        result = runner.invoke(app, ["convert", str(simple_midi_file), "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert output.read_text(encoding="utf-8").startswith(
            'rule("Max amount of bots required")'
        )
        assert "Converted" in result.output

    def test_default_output_path(self, simple_midi_file):
        """Without -o the rules are written next to the MIDI file."""
        result = runner.invoke(app, ["convert", str(simple_midi_file)])

        assert result.exit_code == 0, result.output
        assert simple_midi_file.with_suffix(".txt").exists()

    def test_json_output(self, simple_midi_file, tmp_path):
        """--json prints the result dictionary."""
        result = runner.invoke(
            app,
            [
                "convert",
                str(simple_midi_file),
                "-o",
                str(tmp_path / "out.txt"),
                "--voices",
                "8",
                "--json",
            ],
        )

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["transposedNotes"] == 1
        assert data["totalElements"] == 2 * 2 + 3
        assert "Global.maxBots = 8;" in data["rules"]

    def test_missing_file(self, tmp_path):
        """A missing source file exits 1."""
        result = runner.invoke(app, ["convert", str(tmp_path / "missing.mid")])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_invalid_midi(self, tmp_path):
        """A file that is not MIDI exits 1 with an error."""
        bad = tmp_path / "bad.mid"
        bad.write_bytes(b"garbage")
        result = runner.invoke(app, ["convert", str(bad)])

        assert result.exit_code == 1
        assert "Invalid MIDI data" in result.output

    def test_start_time_after_song(self, simple_midi_file, tmp_path):
        """No notes after the start time exits 1 and writes nothing."""
        output = tmp_path / "song.txt"
        result = runner.invoke(
            app, ["convert", str(simple_midi_file), "-o", str(output), "--start-time", "60"]
        )

        assert result.exit_code == 1
        assert "no notes found" in result.output
        assert not output.exists()


class TestInfoCommand:
    """Test cases for `owmidi info`."""

    def test_info(self, simple_midi_file):
        """Info lists the tracks of the file."""
        result = runner.invoke(app, ["info", str(simple_midi_file)])

        assert result.exit_code == 0, result.output
        assert "Piano" in result.output
        assert "Drums" in result.output

    def test_info_missing_file(self, tmp_path):
        """A missing file exits 1."""
        result = runner.invoke(app, ["info", str(tmp_path / "missing.mid")])

        assert result.exit_code == 1


class TestVersion:
    """Test cases for version output."""

    def test_version_command(self):
        """The version command prints the package version."""
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert __version__ in result.output
