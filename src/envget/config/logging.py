"""structlog rendering for envget's own log records.

envget's modules log through stdlib ``logging`` under the ``envget``
namespace and never configure anything on import. An application that
wants those records rendered calls :func:`configure_logging`:

- Human (default): console lines, colored when the stream is a tty
- JSON (``log_json``): one JSON object per line

Only the ``envget`` logger is touched. The root logger, its handlers, and
the global structlog configuration belong to the host application.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

from envget.config.settings import EnvgetSettings

HANDLER_NAME = "envget"

SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _renderer(log_json: bool, stream: TextIO) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def configure_logging(
    *,
    verbose: bool | None = None,
    log_json: bool | None = None,
    stream: TextIO | None = None,
    settings: EnvgetSettings | None = None,
) -> None:
    """Render ``envget`` records through a structlog ``ProcessorFormatter``.

    Repeated calls replace the handler installed by the previous call.
    Records do not propagate to the root logger once configured.

    Args:
        verbose: DEBUG when True, WARNING+ when False. None defers to
            *settings*.
        log_json: Use JSON renderer instead of console renderer. None defers
            to *settings*.
        stream: Output stream. Defaults to the current ``sys.stderr``.
        settings: Source for unset flags. Defaults to :class:`EnvgetSettings`
            read from ``ENVGET_*``; only built when a flag is left unset.
    """
    if verbose is None or log_json is None:
        if settings is None:
            settings = EnvgetSettings()
        if verbose is None:
            verbose = settings.verbose
        if log_json is None:
            log_json = settings.log_json

    out = stream if stream is not None else sys.stderr

    handler = logging.StreamHandler(out)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json, out),
            ],
        )
    )

    envget_logger = logging.getLogger("envget")
    for existing in envget_logger.handlers[:]:
        if existing.get_name() == HANDLER_NAME:
            envget_logger.removeHandler(existing)
    envget_logger.addHandler(handler)
    envget_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    envget_logger.propagate = False
