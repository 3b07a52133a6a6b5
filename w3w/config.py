"""
Configuration Module
------------------
Settings read from ``W3W_*`` environment variables (or a ``.env`` file) and
the logging setup shared by the command line front end.
"""
import json
import logging
import sys
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from w3w.geocoding.client import DEFAULT_BASE_URL, REQUEST_TIMEOUT


class OutputFormat(str, Enum):
    plain = "plain"
    json = "json"


class LogFormat(str, Enum):
    compact = "compact"
    full = "full"
    json = "json"
    pretty = "pretty"


class Settings(BaseSettings):
    """Command line configuration. Explicit options take precedence."""

    api_key: Optional[SecretStr] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = REQUEST_TIMEOUT
    output_format: OutputFormat = OutputFormat.plain
    log_format: LogFormat = LogFormat.full
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="W3W_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


class JSONLogFormatter(logging.Formatter):
    """Serialize log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


LOG_FORMATS = {
    LogFormat.compact: "%(levelname)s %(message)s",
    LogFormat.full: "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    LogFormat.pretty: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d]\n    %(message)s",
}


def configure_logging(log_format: LogFormat = LogFormat.full, level: str = "INFO") -> None:
    """Send log records to stderr in the requested format, replacing earlier handlers."""
    handler = logging.StreamHandler(sys.stderr)
    if log_format == LogFormat.json:
        handler.setFormatter(JSONLogFormatter())
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMATS[log_format]))

    logging.basicConfig(level=level.upper(), handlers=[handler], force=True)
    # Connection pool chatter logs full request URLs
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)
