"""Main CLI entry point for reviewmap"""

import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import click
from rich.console import Console
from rich.table import Table
from rich import box

from reviewmap import __version__
from reviewmap.annotations.keys import InvalidCoordinateError, create_comment_key
from reviewmap.annotations.linter import find_most_severe_type, get_message_map
from reviewmap.config import ShapeConfig
from reviewmap.diff.comparison import ForwardComparisonMap
from reviewmap.diff.parser import ABSENT_LINE, FileDiff, parse_unified_diff
from reviewmap.shapes import AllLineShapes, Token, generate_line_shapes, get_lines

console = Console()

SEVERITY_STYLES = {
    "error": "bold red",
    "warning": "bold yellow",
    "notice": "dim",
}


def _fail(message: str) -> None:
    console.print(f"[bold red]❌ Error:[/bold red] {message}")
    sys.exit(1)


def _read_text(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8", errors="replace")
    except (IOError, OSError) as exc:
        _fail(f"could not read {path}: {exc}")
        return ""


def _render_shape(tokens) -> str:
    return "".join(
        ("▇" if shape.token is Token.CODE else " ") * shape.count for shape in tokens
    )


def _display_shapes_table(all_line_shapes: AllLineShapes, path: str) -> None:
    table = Table(title=f"Line shapes: {path}", box=box.SIMPLE)
    table.add_column("Line", style="dim", justify="right")
    table.add_column("Shape", style="cyan", no_wrap=True)
    table.add_column("Tokens")

    for line_shapes in all_line_shapes:
        summary = ", ".join(
            f"{shape.token.value}:{shape.count} ({shape.percent_of_width:.1f}%)"
            for shape in line_shapes.tokens
        )
        table.add_row(str(line_shapes.line), _render_shape(line_shapes.tokens), summary)

    console.print(table)


def _diff_line_numbers(file_diff: FileDiff) -> List[int]:
    """All line numbers that appear on either side of a file diff."""
    numbers = set()
    for hunk in file_diff.hunks:
        for change in hunk.changes:
            for number in (change.old_line_number, change.new_line_number):
                if number != ABSENT_LINE:
                    numbers.add(number)
    return sorted(numbers)


def _collect_anchors(
    files: List[FileDiff], lines: Tuple[int, ...]
) -> Dict[str, Dict[int, str]]:
    anchors: Dict[str, Dict[int, str]] = {}
    for file_diff in files:
        comparison_map = ForwardComparisonMap(file_diff)
        get_anchor = comparison_map.create_code_line_anchor_getter()
        wanted = list(lines) if lines else _diff_line_numbers(file_diff)
        anchors[file_diff.path or "<unknown>"] = {line: get_anchor(line) for line in wanted}
    return anchors


@click.group()
@click.version_option(version=__version__, prog_name="reviewmap")
@click.option("--debug", is_flag=True, help="Show verbose diagnostic output")
def cli(debug: bool):
    """
    🧭 reviewmap - Line anchors and code shapes for code review

    Map diff lines to stable anchors, sketch file shapes and group
    reviewer annotations.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--max-line-length",
    "-w",
    type=click.IntRange(min=1),
    default=None,
    help=f"Shape window length (default: {ShapeConfig.DEFAULT_MAX_LINE_LENGTH})",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format (default: table)",
)
def shapes(path: str, max_line_length: Optional[int], output_format: str):
    """Print the code shape of every line in a file."""
    all_line_shapes = generate_line_shapes(
        get_lines(_read_text(path)), max_line_length=max_line_length
    )

    if output_format == "json":
        console.print_json(data=[line_shapes.to_dict() for line_shapes in all_line_shapes])
        return

    _display_shapes_table(all_line_shapes, path)


@cli.command()
@click.argument("diff_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--line", "-l", "lines", type=int, multiple=True, help="Line number to resolve")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format (default: table)",
)
def anchors(diff_path: str, lines: Tuple[int, ...], output_format: str):
    """Resolve line anchors for every file in a unified diff."""
    files = parse_unified_diff(_read_text(diff_path))
    if not files:
        _fail(f"no file changes found in {diff_path}")

    collected = _collect_anchors(files, lines)

    if output_format == "json":
        console.print_json(
            data={
                path: {str(line): anchor for line, anchor in by_line.items()}
                for path, by_line in collected.items()
            }
        )
        return

    table = Table(title="🔗 Line anchors", box=box.ROUNDED)
    table.add_column("File", style="cyan")
    table.add_column("Line", justify="right")
    table.add_column("Anchor", style="bold")

    for path, by_line in collected.items():
        for line, anchor in by_line.items():
            table.add_row(path, str(line), anchor or "[dim]-[/dim]")

    console.print(table)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--file", "file_name", help="Only show messages for this file")
def lint(path: str, file_name: Optional[str]):
    """Group a linter JSON result by file and line."""
    try:
        result = json.loads(_read_text(path))
        message_map = get_message_map(result)
    except (json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
        _fail(f"invalid linter result in {path}: {exc}")
        return

    if file_name is not None:
        message_map = {k: v for k, v in message_map.items() if k == file_name}

    table = Table(title="🔍 Linter messages", box=box.ROUNDED)
    table.add_column("File", style="cyan")
    table.add_column("Global", justify="right")
    table.add_column("Lines", justify="right")
    table.add_column("Most severe")

    for path_key in sorted(message_map):
        by_path = message_map[path_key]
        most_severe = find_most_severe_type(by_path.all_messages())
        severity = most_severe.value if most_severe else "-"
        style = SEVERITY_STYLES.get(severity, "white")
        table.add_row(
            path_key,
            str(len(by_path.global_messages)),
            str(sum(len(messages) for messages in by_path.by_line.values())),
            f"[{style}]{severity}[/{style}]",
        )

    console.print(table)


@cli.command()
@click.option("--file", "file_name", default=None, help="File name inside the version")
@click.option("--line", type=int, default=None, help="Line number inside the file")
@click.option("--version-id", type=int, default=None, help="Version the annotation belongs to")
def key(file_name: Optional[str], line: Optional[int], version_id: Optional[int]):
    """Print the grouping key for an annotation coordinate."""
    try:
        click.echo(create_comment_key(file_name, line, version_id=version_id))
    except InvalidCoordinateError as exc:
        _fail(str(exc))


if __name__ == "__main__":
    cli()
