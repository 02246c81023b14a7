"""
Logging setup shared by the API process.

Configures the root logger once at startup and tags every record with the
id of the request being served, so log lines from the router, the auth
service and the store can be correlated.

Example:
    from common.utils.log_config import configure_logging, request_id_var

    configure_logging("DEBUG")
    request_id_var.set("abc123")
    logging.getLogger(__name__).info("hello")  # ... - [abc123] hello
"""

import logging
import sys
from contextvars import ContextVar

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


class RequestIdFilter(logging.Filter):
    """Attach the current request id to each log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger with the request-aware format.

    Safe to call more than once; existing handlers installed by a previous
    call are replaced rather than duplicated.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...)
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    for handler in list(root.handlers):
        if getattr(handler, "_fintrack", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RequestIdFilter())
    handler._fintrack = True  # type: ignore[attr-defined]
    root.addHandler(handler)

    # pymongo is chatty at DEBUG
    logging.getLogger("pymongo").setLevel(logging.WARNING)


def mask_uri(uri: str) -> str:
    """Strip credentials from a connection URI for logging."""
    if "@" not in uri:
        return uri
    scheme, sep, rest = uri.partition("://")
    if not sep:
        return uri.split("@")[-1]
    return f"{scheme}://***@{rest.split('@')[-1]}"
