# ABOUTME: Tests the command-line interface for decoding and checking FEN strings.
# ABOUTME: Covers table output, JSON output and failing exit codes.
import json
from pathlib import Path

from typer.testing import CliRunner

from fen_reader import STARTING_FEN
from fen_reader import cli

runner = CliRunner()


def test_parse_prints_position() -> None:
    result = runner.invoke(cli.app, ["parse", STARTING_FEN])

    assert result.exit_code == 0, result.output
    assert "white" in result.stdout
    assert "both" in result.stdout
    assert "r n b q k b n r" in result.stdout


def test_parse_json() -> None:
    result = runner.invoke(cli.app, ["parse", "8/8/8/8/4P3/8/8/8 b - e3 12 40", "--json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["active_color"] == "black"
    assert payload["en_passant"] == [4, 5]
    assert payload["board"][4][4] == "P"
    assert payload["white_castling"] == "none"
    assert payload["halfmove_clock"] == 12
    assert payload["fullmove_number"] == 40


def test_parse_reports_error_kind() -> None:
    result = runner.invoke(cli.app, ["parse", "8/8/8/8/8/8/8/8 w - - 0 x"])

    assert result.exit_code == 1
    assert "invalid number" in result.stdout


def test_check_file(tmp_path: Path) -> None:
    source = tmp_path / "positions.txt"
    source.write_text(STARTING_FEN + "\n\n8/8/8/8/8/8/8/8 w - - 0 1\n", encoding="utf-8")

    result = runner.invoke(cli.app, ["check", str(source)])

    assert result.exit_code == 0, result.output
    assert "All FEN lines are valid" in result.stdout


def test_check_file_with_failures(tmp_path: Path) -> None:
    source = tmp_path / "positions.txt"
    source.write_text(STARTING_FEN + "\n8/8/8/8/8/8/8/8 w - o1 0 1\n", encoding="utf-8")

    result = runner.invoke(cli.app, ["check", str(source)])

    assert result.exit_code == 1
    assert "invalid coordinates" in result.stdout
    assert "1 invalid FEN line(s)" in result.stdout


def test_verbose_flag() -> None:
    result = runner.invoke(cli.app, ["--verbose", "parse", STARTING_FEN])

    assert result.exit_code == 0, result.output


def test_check_rejects_undecodable_file(tmp_path: Path) -> None:
    source = tmp_path / "positions.txt"
    source.write_bytes(b"8/8/8/8/8/8/8/8 w - - 0 1\n\xff\xfe\n")

    result = runner.invoke(cli.app, ["check", str(source)])

    assert result.exit_code == 2
    assert not isinstance(result.exception, UnicodeDecodeError)
