"""Main CLI application using Typer."""
import asyncio

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import load_config
from ..errors import NotepadError
from ..notes import Note, create_note_store

# Create Typer app
app = typer.Typer(
    name="notepad-pro",
    help="Note-taking app shell with a placeholder Gemini key login",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


def _notes_table(notes: list[Note]) -> Table:
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=3)
    table.add_column("Title", style="bold")
    table.add_column("Snippet")
    table.add_column("Tags", style="yellow")
    table.add_column("When", style="green")

    for i, note in enumerate(notes, 1):
        table.add_row(str(i), note.title, note.snippet, ", ".join(note.tags), note.timestamp)
    return table


@app.command(name="tui")
def tui_command(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
    start: str | None = typer.Option(
        None,
        "--start",
        "-s",
        help="Route shown after login: home, search, editor or settings"
    ),
    theme: str | None = typer.Option(
        None,
        "--theme",
        help="Textual theme name"
    ),
):
    """Launch the interactive TUI."""
    try:
        config = load_config(log_level=log_level, start_route=start, theme=theme)
    except (NotepadError, ValidationError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    from ..ui import run_textual_tui

    try:
        asyncio.run(run_textual_tui(config))
    except KeyboardInterrupt:
        pass
    console.print("\n[dim]Goodbye![/dim]")


@app.command()
def notes(
    backend: str = typer.Option(
        "sample",
        "--backend",
        "-b",
        help="Note store backend"
    ),
):
    """List all notes."""
    try:
        store = create_note_store(backend)
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    all_notes = store.list_notes()
    console.print(f"[green]{len(all_notes)} notes[/green] [dim]({store.backend_type})[/dim]\n")
    console.print(_notes_table(all_notes))


@app.command()
def search(
    query: str = typer.Argument(..., help="Text to find in note titles and snippets"),
    backend: str = typer.Option(
        "sample",
        "--backend",
        "-b",
        help="Note store backend"
    ),
):
    """Search notes by title or snippet (case-insensitive)."""
    try:
        store = create_note_store(backend)
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    results = store.filter_notes(query)
    if not results:
        console.print(f"[yellow]No notes match {escape(repr(query))}[/yellow]")
        return

    console.print(f"[green]Found {len(results)} results[/green]\n")
    console.print(_notes_table(results))


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
