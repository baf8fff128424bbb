"""
Logging setup for the API process and the maintenance scripts.

One stdout handler on the root logger. Pipelines and routes log through
`logging.getLogger(__name__)` and attach context with `extra={...}`.

Dependencies: logging (stdlib)
System role: Centralized logging configuration
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# SDK and HTTP client loggers that flood INFO with per-request lines
NOISY_LOGGERS = ("httpx", "httpcore", "urllib3", "botocore", "boto3", "google_genai", "anthropic")


def configure_logging(level: str = "INFO") -> None:
    """
    Route all records to stdout at the given level.

    Calling it again (uvicorn reload, a script run after import) replaces the
    previous handler instead of stacking a second one.

    Args:
        level: Level name from settings.log_level; unknown names mean INFO
    """
    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)

    stdout = logging.StreamHandler(sys.stdout)
    stdout.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(stdout)
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
