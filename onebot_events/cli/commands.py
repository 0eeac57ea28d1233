"""CLI commands for onebot-events."""

import json
import sys
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from onebot_events import __logo__, __version__

app = typer.Typer(
    name="onebot-events",
    help=f"{__logo__} onebot-events - OneBot event decoder",
    no_args_is_help=True,
)

console = Console()


def _setup_logging(config, verbose: bool) -> None:
    """Route loguru output to stderr (and the configured file)."""
    level = "DEBUG" if verbose else config.logging.level.upper()
    logger.remove()
    logger.add(sys.stderr, level=level)
    if config.logging.file:
        logger.add(Path(config.logging.file).expanduser(), level="DEBUG", rotation="10 MB")


def _read_lines(path: str) -> list[str]:
    if path == "-":
        return sys.stdin.read().splitlines()
    return Path(path).read_text(encoding="utf-8").splitlines()


def _split_payloads(lines: list[str]) -> list[str]:
    """A file holding one (possibly pretty-printed) JSON object is a single payload."""
    text = "\n".join(lines).strip()
    if text.startswith("{"):
        try:
            json.loads(text)
        except (json.JSONDecodeError, RecursionError):
            return lines
        return [text]
    return lines


def version_callback(value: bool):
    if value:
        console.print(f"{__logo__} onebot-events v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
):
    """onebot-events - OneBot event decoder."""
    pass


@app.command()
def decode(
    path: str = typer.Argument(..., help="JSON or JSON-lines file, '-' for stdin"),
    as_json: bool = typer.Option(False, "--json", help="Dump decoded events as JSON"),
    config_path: Path = typer.Option(None, "--config", "-c", help="Config file"),
    verbose: bool = typer.Option(False, "--verbose", help="Debug logging"),
):
    """Decode gateway payloads and report the ones that fail."""
    from onebot_events.config.loader import load_config
    from onebot_events.events import MessageEvent
    from onebot_events.stream import DecodeDiagnostic, decode_lines
    from onebot_events.utils.text import preview_text

    config = load_config(config_path)
    _setup_logging(config, verbose)

    try:
        lines = _split_payloads(_read_lines(path))
    except OSError as e:
        console.print(f"[red]Cannot read {escape(path)}: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    failures: list[DecodeDiagnostic] = []
    events = list(decode_lines(lines, on_error=failures.append))

    if as_json:
        for event in events:
            console.print_json(
                json.dumps({"type": type(event).__name__, **event.model_dump(mode="json")})
            )
    else:
        table = Table(title="Decoded events")
        table.add_column("Event", style="cyan")
        table.add_column("Class")
        table.add_column("To me")
        table.add_column("Session")
        table.add_column("Text")

        head = config.description.preview_head
        tail = config.description.preview_tail
        for event in events:
            is_message = isinstance(event, MessageEvent)
            table.add_row(
                event.event_name,
                type(event).__name__,
                "[green]yes[/green]" if event.is_to_me() else "no",
                event.session_id if is_message else "",
                escape(preview_text(event.extract_plain_text(), head, tail)) if is_message else "",
            )
        console.print(table)

    for failure in failures:
        console.print(f"[red]✗[/red] {escape(failure.summary())}")

    console.print(f"{len(events)} decoded, {len(failures)} dropped")
    if failures:
        raise typer.Exit(1)


@app.command()
def names():
    """List the event names the decoder understands."""
    from onebot_events.resolver import EVENT_TYPES

    table = Table(title="Supported events")
    table.add_column("Event name", style="cyan")
    table.add_column("Class")

    for (type_name, sub_type), event_class in EVENT_TYPES.items():
        name = f"{type_name}.{sub_type}" if sub_type else f"{type_name} (any sub_type)"
        table.add_row(name, event_class.__name__)

    console.print(table)


if __name__ == "__main__":
    app()
