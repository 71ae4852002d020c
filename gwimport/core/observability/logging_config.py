"""
Logging configuration — central setup for the CLI entrypoint.

Called once at startup by main.py.  Every module that does
``logger = logging.getLogger(__name__)`` inherits this config.

Levels are resolved in precedence order:
    CLI flag  >  GWIMPORT_LOG_LEVEL env var  >  INFO (default)

Console lines at INFO and above are resolver diagnostics, printed
the way a deploy log reads them::

    gwimport: Imported API Gateway ({"restApiId": "api123", ...})
    gwimport: WARNING Unable to resolve layer 'common' for provider; ...

Optional file output via GWIMPORT_LOG_FILE / GWIMPORT_LOG_FILE_LEVEL env vars.
"""

from __future__ import annotations

import logging
import sys

DEFAULT_LEVEL = "INFO"

# ── Format strings ──────────────────────────────────────────────

# INFO and above: one diagnostic line per event, tagged with the tool name
DIAGNOSTIC_PREFIX = "gwimport: "
_FMT_DIAGNOSTIC = DIAGNOSTIC_PREFIX + "%(message)s"
_FMT_DIAGNOSTIC_LEVEL = DIAGNOSTIC_PREFIX + "%(levelname)s %(message)s"

# DEBUG level — full diagnostic with file:line
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_DEBUG = "%H:%M:%S"

# File output — always full detail
_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"

# AWS SDK loggers log every request below WARNING
_NOISY_LOGGERS = ("boto3", "botocore", "urllib3", "s3transfer")


class DiagnosticFormatter(logging.Formatter):
    """Console formatter for resolver output.

    INFO records print as plain diagnostic lines. WARNING and above
    carry their level name so dropped layers and aborts stand out.
    """

    def __init__(self) -> None:
        super().__init__(_FMT_DIAGNOSTIC)
        self._with_level = logging.Formatter(_FMT_DIAGNOSTIC_LEVEL)

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno >= logging.WARNING:
            return self._with_level.format(record)
        return super().format(record)


def setup_logging(
    level: str = DEFAULT_LEVEL,
    log_file: str | None = None,
    log_file_level: str | None = None,
    quiet_third_party: bool = True,
) -> None:
    """Configure Python logging for the entire process.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a log file.
        log_file_level: Optional separate level for the log file.
            Defaults to the same as ``level``.
        quiet_third_party: If True, keep the AWS SDK loggers at WARNING
            unless we're at DEBUG level.
    """
    numeric_level = _parse_level(level)

    # ── Console handler (stderr) ────────────────────────────────
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    if numeric_level <= logging.DEBUG:
        console.setFormatter(logging.Formatter(_FMT_DEBUG, datefmt=_DATEFMT_DEBUG))
    else:
        console.setFormatter(DiagnosticFormatter())

    # ── Root logger ─────────────────────────────────────────────
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)

    # Effective root level = minimum of console and file levels
    effective_level = numeric_level

    # ── File handler (optional) ─────────────────────────────────
    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else numeric_level
        effective_level = min(effective_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
        root.addHandler(fh)

    root.setLevel(effective_level)

    # ── Third-party noise control ───────────────────────────────
    if quiet_third_party and numeric_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.raiseExceptions = False


def _parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return logging.INFO
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.INFO
    return numeric
