from __future__ import annotations

import os
from pathlib import Path

import typer

from playpub import __version__
from playpub.cli.commands.check import check, tracks
from playpub.cli.commands.publish import publish
from playpub.cli.context import WORKSPACE_ENV
from playpub.core.errors import ErrorCode


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


app.command()(publish)
app.command()(check)
app.command()(tracks)


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    workspace: Path | None = typer.Option(
        None,
        "--workspace",
        help="Build workspace root (default: current directory)",
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if workspace is not None:
        try:
            root = workspace.expanduser().resolve()
        except OSError as e:
            typer.echo(f"error: invalid --workspace: {e}", err=True)
            raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))

        if not root.is_dir():
            typer.echo(f"error: --workspace '{root}' is not a directory", err=True)
            raise typer.Exit(code=int(ErrorCode.IO_ERROR))

        os.environ[WORKSPACE_ENV] = str(root)


def main() -> None:
    app()
