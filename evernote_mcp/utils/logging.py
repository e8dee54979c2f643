"""
Logging for the Evernote MCP server (loguru).

stdout carries the stdio transport, so every sink is stderr or a file.
"""

import sys

from loguru import logger

_CONSOLE_FORMAT = "{time:HH:mm:ss} | {level: <8} | {extra[name]} - {message}"
_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]} - {message}"


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    json_logs: bool = False,
) -> None:
    """
    Route server logs to stderr and, when LOG_FILE is set, to that file.

    json_logs switches both sinks to loguru's serialized records.
    """
    logger.remove()
    logger.configure(extra={"name": "evernote_mcp"})

    logger.add(sys.stderr, format=_CONSOLE_FORMAT, level=level, serialize=json_logs)
    if log_file:
        # loguru creates missing parent directories itself
        logger.add(log_file, format=_FILE_FORMAT, level=level, serialize=json_logs)


def get_logger(name: str = "evernote_mcp"):  # type: ignore[no-untyped-def]
    """Logger bound to a module name, shown in the {extra[name]} field."""
    return logger.bind(name=name)
