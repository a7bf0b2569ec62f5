"""molcodec CLI entrypoint (Typer).

Commands:
- `molcodec version`
- `molcodec demo` (see `molcodec.cli.commands.demo`)
"""

from __future__ import annotations

import typer

from molcodec.cli.commands import demo as demo_cmd

app = typer.Typer(
    name="molcodec",
    add_completion=False,
    no_args_is_help=True,
    help="Encode molecules to JSON and decode them back.",
)


@app.callback()
def _callback() -> None:
    """molcodec CLI."""


@app.command("version")
def version() -> None:
    """Print the installed molcodec version."""
    from molcodec import __version__

    typer.echo(__version__)


demo_cmd.register(app)
