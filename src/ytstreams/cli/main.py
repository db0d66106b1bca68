"""
Main CLI entry point for ytstreams.
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.panel import Panel

from ytstreams import __version__
from ytstreams.cli.commands.streams import streams_command

console = Console()

app = typer.Typer(
    name="ytstreams",
    help="List live, upcoming and past streams of a YouTube channel",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command(name="streams")(streams_command)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(
        Panel(
            f"[bold blue]ytstreams[/bold blue] v{__version__}",
            title="Version",
            border_style="blue",
        )
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit"
    ),
) -> None:
    """
    ytstreams - YouTube channel streams listing.

    Reads a channel's Streams tab and lists every stream with its status,
    title, duration and thumbnails.
    """
    if version:
        console.print(f"ytstreams v{__version__}")
        raise typer.Exit(code=0)

    if ctx.invoked_subcommand is None:
        console.print("[yellow]Use 'ytstreams --help' for available commands[/yellow]")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
