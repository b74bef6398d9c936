from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from .format.document import wrap
from .format.line import DEFAULT_WIDTH
from .utils.io import is_stdin, read_text_source, write_text_file
from .utils.logging import get_logger


@dataclass
class RunConfig:
    source: Optional[Path] = None  # None or "-" = stdin
    output: Optional[Path] = None  # None = stdout
    width: int = DEFAULT_WIDTH
    encoding: str = "utf-8"
    log_level: str = "WARNING"


def _read_source(cfg: RunConfig, logger) -> str:
    try:
        return read_text_source(cfg.source, encoding=cfg.encoding)
    except OSError as e:
        logger.error(f"Cannot read {cfg.source}: {e.strerror or e}")
        raise SystemExit(1)
    except UnicodeDecodeError as e:
        logger.error(f"Cannot decode {cfg.source} as {cfg.encoding}: {e.reason}")
        raise SystemExit(1)


def run(cfg: RunConfig) -> str:
    logger = get_logger()
    logger.info(f"Source: {'<stdin>' if is_stdin(cfg.source) else cfg.source}")

    text = _read_source(cfg, logger)
    wrapped = wrap(text, width=cfg.width)

    # no trailing newline for empty output
    content = wrapped + "\n" if wrapped else ""
    if cfg.output:
        written = write_text_file(cfg.output, content, encoding=cfg.encoding)
        logger.info(f"Saved: {written.path} ({written.bytes_written} bytes)")
    elif content:
        typer.echo(content, nl=False)
    return wrapped
