"""Structured logging via structlog.

Configured once by the CLI before the pipeline starts. The CLI emits its
structured events through structlog. Library modules log through
`logging.getLogger(__name__)`; those lines do not pass through the structlog
processors, they get a plain `levelname name: message` formatter on the
same stderr stream at the same level.

Renderer selection:
  debug=True  — `ConsoleRenderer` with colours for local iteration.
  debug=False — `JSONRenderer` for CI logs.

Logs go to stderr, as do error messages and compiler output. Stdout is
reserved for the `>>` stage-progress lines.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_structlog(debug: bool = False) -> None:
    """Configure structlog for the process lifetime.

    Calling multiple times is safe — structlog is idempotent and
    `logging.basicConfig(force=True)` replaces the previous handler.
    """
    shared_processors: list = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if debug:
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    level = logging.DEBUG if debug else logging.WARNING

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    # Plain stdlib handler for lambdapush modules and botocore; same stream
    # and level as structlog, but not rendered by its processors.
    logging.basicConfig(
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )
    # botocore is chatty at DEBUG; keep it at INFO even in debug mode.
    logging.getLogger("botocore").setLevel(max(level, logging.INFO))
