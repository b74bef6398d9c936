from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from .version import __version__
from .format.line import DEFAULT_WIDTH
from .utils.logging import setup_logger
from .pipeline import RunConfig, run


app = typer.Typer(add_completion=False, help="Word-wrap plain text for terminal display.")


@app.command()
def main(
    source: Optional[Path] = typer.Argument(None, help="Text file to wrap ('-' or omitted reads stdin)", show_default=False),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write wrapped text to this file instead of stdout"),
    width: int = typer.Option(DEFAULT_WIDTH, "-w", "--width", min=1, envvar="TERMWRAP_WIDTH", help="Maximum line width"),
    encoding: str = typer.Option("utf-8", "--encoding", help="Encoding for reading and writing files"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level"),
    version: bool = typer.Option(False, "--version", help="Print version and exit"),
):
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    setup_logger(log_level)
    cfg = RunConfig(
        source=source,
        output=output,
        width=width,
        encoding=encoding,
        log_level=log_level,
    )
    run(cfg)


def entrypoint():
    app()

if __name__ == "__main__":
    entrypoint()
