import logging
import logging.handlers
import os
import sys
from pathlib import Path

import structlog

_LOGGING_CONFIGURED = False

LOG_LEVEL_ENV = "TREEFETCH_LOG_LEVEL"
LOG_FILE_ENV = "TREEFETCH_LOG_FILE"


def _foreign_pre_chain():
    return [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def setup_logging(log_level_name: str = "WARNING", log_file_path: Path = None, console_output: bool = True):
    """
    Configure logging for the application.
    - Uses structlog on top of the stdlib logging module.
    - Console output goes to stderr; stdout only ever carries the banner.
    - Writes to a rotating file if log_file_path is given or TREEFETCH_LOG_FILE is set.
      Files ending in .json get JSON lines, anything else the plain console format.
    - Log level can be set with the TREEFETCH_LOG_LEVEL environment variable or function argument.
    """
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    effective_log_level_name = os.environ.get(LOG_LEVEL_ENV, log_level_name).upper()
    log_level = getattr(logging, effective_log_level_name, logging.WARNING)

    if log_file_path is None and os.environ.get(LOG_FILE_ENV):
        log_file_path = Path(os.environ[LOG_FILE_ENV]).expanduser()

    handlers = []
    file_error = None

    if log_file_path:
        try:
            log_file_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_file_path,
                maxBytes=1024 * 1024,  # 1 MB
                backupCount=3,
                encoding="utf-8",
            )
        except OSError as e:
            # An unusable log file never stops the banner; fall back to console logging.
            file_error = e
            console_output = True
        else:
            file_handler.setFormatter(structlog.stdlib.ProcessorFormatter(
                processor=structlog.processors.JSONRenderer() if log_file_path.name.endswith(".json") else structlog.dev.ConsoleRenderer(colors=False),
                foreign_pre_chain=_foreign_pre_chain(),
            ))
            handlers.append(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=False),
            foreign_pre_chain=_foreign_pre_chain(),
        ))
        handlers.append(console_handler)

    if not handlers:
        handlers.append(logging.NullHandler())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        level=log_level,
        handlers=handlers,
        force=True,
    )
    _LOGGING_CONFIGURED = True

    if file_error is not None:
        get_logger(__name__).warning(
            "Log file unavailable, logging to console only",
            path=str(log_file_path),
            error=str(file_error),
        )


def reset_logging():
    """Forget the configured state so setup_logging can run again (used by tests)."""
    global _LOGGING_CONFIGURED
    _LOGGING_CONFIGURED = False
    structlog.reset_defaults()
    for handler in list(logging.root.handlers):
        logging.root.removeHandler(handler)
        handler.close()
    logging.root.setLevel(logging.WARNING)


def get_logger(name: str | None = None):
    return structlog.get_logger(name)
