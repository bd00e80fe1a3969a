"""
Structured logging configuration for LearnGitHub API.

- Production (ENVIRONMENT=production): one JSON object per line
- Development (default): human-readable format for the terminal

GitHub tokens are masked in every record before it is formatted.
"""

import json
import logging
import os
import re
import sys
from datetime import datetime, timezone

TOKEN_PATTERN = re.compile(r"\b(?:gh[pousr]_[A-Za-z0-9]{20,}|github_pat_[A-Za-z0-9_]{20,})\b")
MASK = "***"


class JSONFormatter(logging.Formatter):
    """JSON log formatter; `severity` is the key log collectors read."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "severity": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info and record.exc_info[0] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


class TokenRedactionFilter(logging.Filter):
    """Replaces GitHub tokens (and the configured GITHUB_TOKEN) with ***."""

    def __init__(self, token: str | None = None):
        super().__init__()
        self.token = token

    def redact(self, text: str) -> str:
        if self.token:
            text = text.replace(self.token, MASK)
        return TOKEN_PATTERN.sub(MASK, text)

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = self.redact(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def build_formatter(environment: str) -> logging.Formatter:
    if environment == "production":
        return JSONFormatter()
    return logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def setup_logging() -> None:
    """Configure the root logger from ENVIRONMENT and LOG_LEVEL."""
    environment = os.getenv("ENVIRONMENT", "development").lower()
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level, logging.INFO))

    # Remove any existing handlers to avoid duplicates on reload
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter(environment))
    handler.addFilter(TokenRedactionFilter(os.getenv("GITHUB_TOKEN")))
    root_logger.addHandler(handler)

    # httpx logs every request URL at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
