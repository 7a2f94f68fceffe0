"""Log routing for tinydash.

Everything goes to one stderr handler, rendered by structlog either for a
console or as JSON lines. Two loggers carry levels of their own:

- ``tinydash``: DEBUG when ``[logging] verbose`` is set, WARNING otherwise.
  Covers the ``Mappings differ`` diagnostics from ``mappings``.
- ``tinydash.telemetry``: DEBUG whenever ``[telemetry] enabled`` is set, so
  ``span.complete`` events show up without turning on every other debug line.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "tinydash"
TELEMETRY_LOGGER = "tinydash.telemetry"


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    telemetry: bool = False,
) -> None:
    """Route tinydash logs to stderr. Safe to call repeatedly.

    Args:
        verbose: DEBUG for the whole ``tinydash`` tree.
        log_json: JSON lines instead of console output.
        telemetry: DEBUG for ``tinydash.telemetry`` regardless of *verbose*.
    """
    # Logger name distinguishes span events from package diagnostics.
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    package_level = logging.DEBUG if verbose else logging.WARNING
    logging.getLogger(PACKAGE_LOGGER).setLevel(package_level)
    logging.getLogger(TELEMETRY_LOGGER).setLevel(
        logging.DEBUG if telemetry else package_level
    )
