from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .board import render_ascii
from .coordinates import coordinates_to_square
from .errors import FenError
from .fen import parse_fen
from .log import configure_logging
from .position import Position

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()


def _en_passant_label(position: Position) -> str:
    if position.en_passant is None:
        return "-"
    return coordinates_to_square(position.en_passant)


def _as_dict(position: Position) -> dict:
    return {
        "board": [[square.symbol if square is not None else None for square in rank] for rank in position.board],
        "active_color": position.active_color.name.lower(),
        "white_castling": position.white_castling.value,
        "black_castling": position.black_castling.value,
        "en_passant": list(position.en_passant) if position.en_passant is not None else None,
        "halfmove_clock": position.halfmove_clock,
        "fullmove_number": position.fullmove_number,
    }


@app.callback()
def main_options(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every decoding step."),
) -> None:
    """Decode and validate chess positions written in FEN."""

    configure_logging(verbose)


@app.command()
def parse(
    fen: str = typer.Argument(..., help="FEN string, quoted so the six fields stay together"),
    as_json: bool = typer.Option(False, "--json", help="Print the decoded position as JSON."),
) -> None:
    """Decode a single FEN string and show the resulting position."""

    try:
        position = parse_fen(fen)
    except FenError as exc:
        console.print(f"[red]Invalid FEN ({exc.kind.value}): {escape(str(exc))}")
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(_as_dict(position)))
        return

    table = Table(title="Position", show_header=True, header_style="bold magenta")
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Active color", position.active_color.name.lower())
    table.add_row("White castling", position.white_castling.value)
    table.add_row("Black castling", position.black_castling.value)
    table.add_row("En passant", _en_passant_label(position))
    table.add_row("Half-move clock", str(position.halfmove_clock))
    table.add_row("Full-move number", str(position.fullmove_number))
    console.print(table)
    console.print(render_ascii(position.board), highlight=False)


@app.command()
def check(
    path: Path = typer.Argument(..., exists=True, file_okay=True, dir_okay=False, help="File with one FEN per line"),
) -> None:
    """Validate every FEN in a file and report the failures."""

    table = Table(title=f"FEN check: {escape(path.name)}", show_header=True, header_style="bold magenta")
    table.add_column("Line")
    table.add_column("Status")
    table.add_column("Error", no_wrap=True)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise typer.BadParameter(f"Unable to read {path}: {exc}")

    failures = 0
    for number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            parse_fen(line)
        except FenError as exc:
            failures += 1
            table.add_row(str(number), "[red]invalid", exc.kind.value)
        else:
            table.add_row(str(number), "[green]ok", "")

    console.print(table)
    if failures:
        console.print(f"[red]{failures} invalid FEN line(s)")
        raise typer.Exit(code=1)
    console.print("[green]All FEN lines are valid")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
