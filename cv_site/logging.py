"""logging.py
Holds configured loggers for the API, the extraction chain and the publisher.
"""
from typing import Dict, Iterable, Literal, Optional
import logging
import os
import re
import sys
from datetime import datetime
from functools import lru_cache
from dotenv import load_dotenv

load_dotenv()  # load .env

ENV = os.getenv("ENV", "development")  # e.g., development, staging, prod

LoggerType = Literal["default", "pytest", "extraction", "publish"]

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Environments that also write log files next to the console output
FILE_LOGGING_ENVS = ["development", "local", "test"]

LOGGER_LEVELS: Dict[str, int] = {
    "default": logging.DEBUG,
    "pytest": logging.DEBUG,
    "extraction": logging.INFO,
    "publish": logging.INFO,
}

# GitHub personal access / app tokens and bearer headers
TOKEN_PATTERNS = [
    re.compile(r"\b(?:ghp|gho|ghu|ghs|ghr)_[A-Za-z0-9]{20,}\b"),
    re.compile(r"\bgithub_pat_[A-Za-z0-9_]{20,}\b"),
    re.compile(r"(?i)(bearer\s+)[A-Za-z0-9._\-]+"),
]
REDACTED = "***"


def redact_secrets(message: str, secrets: Iterable[str] = ()) -> str:
    """Mask token-like substrings and any of the given literal secrets."""
    for secret in secrets:
        if secret:
            message = message.replace(secret, REDACTED)
    for pattern in TOKEN_PATTERNS:
        if pattern.groups:
            message = pattern.sub(lambda m: m.group(1) + REDACTED, message)
        else:
            message = pattern.sub(REDACTED, message)
    return message


class SecretRedactingFilter(logging.Filter):
    """
    Rewrites every record so repository credentials never reach a handler.
    The current GITHUB_TOKEN is always masked, on top of `secrets`.
    """

    def __init__(self, secrets: Optional[Iterable[str]] = None):
        super().__init__()
        self.secrets = [s for s in (secrets or []) if s]
        env_token = os.getenv("GITHUB_TOKEN")
        if env_token:
            self.secrets.append(env_token)

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = redact_secrets(record.getMessage(), self.secrets)
        record.args = None
        return True


class LoggerFactory:
    """
    Factory to create configured loggers for different purposes.

    Logging behavior depends on environment (ENV):
      - Console logging is optional.
      - Local file logging in development (separate folders per logger type).
      - Console only in staging/production, where stdout is collected by the host.
      - `publish` loggers mask GitHub tokens before anything is written.
    """

    def __init__(self, env: str = ENV, base_log_folder: str = "logs"):
        self.env = env
        self.base_log_folder = base_log_folder

    def get_logger(
        self,
        name: str,
        logger_type: LoggerType = "default",
        console: bool = True
    ) -> logging.Logger:
        """
        Create and return a configured logger based on type. Calling again with
        the same name returns the already configured logger.
        """
        logger = logging.getLogger(name)
        if logger.hasHandlers():
            return logger

        logger.propagate = False
        logger.setLevel(LOGGER_LEVELS.get(logger_type, logging.INFO))

        if logger_type == "publish":
            logger.addFilter(SecretRedactingFilter())

        formatter = logging.Formatter(LOG_FORMAT)

        if console:
            ch = logging.StreamHandler()
            ch.setFormatter(formatter)
            logger.addHandler(ch)

        if self.env in FILE_LOGGING_ENVS:
            log_folder = self._get_log_folder_for_type(logger_type)
            logger.addHandler(self._file_handler(log_folder, name, formatter))

        # Never leave a logger silent
        if not logger.handlers:
            ch = logging.StreamHandler()
            ch.setFormatter(formatter)
            logger.addHandler(ch)

        return logger

    @lru_cache(maxsize=None)
    def get_source_failure_logger(self, source_name: str) -> logging.Logger:
        """
        Return a file-only logger for one text source's failures, e.g.
        `logs/extraction_failures/pdf/pdf_20251028_103022.log`.
        """
        safe_source_name = source_name or "other"

        logger = logging.getLogger(f"source_{safe_source_name}")
        if logger.hasHandlers():
            return logger

        logger.setLevel(logging.INFO)
        logger.propagate = False

        log_folder = os.path.join(self.base_log_folder, "extraction_failures", safe_source_name)
        logger.addHandler(
            self._file_handler(log_folder, safe_source_name, logging.Formatter(LOG_FORMAT))
        )
        return logger

    def _file_handler(
        self,
        log_folder: str,
        prefix: str,
        formatter: logging.Formatter
    ) -> logging.FileHandler:
        os.makedirs(log_folder, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file_path = os.path.join(log_folder, f"{prefix}_{timestamp}.log")
        fh = logging.FileHandler(log_file_path, mode="a", encoding="utf-8")
        fh.setFormatter(formatter)
        return fh

    def _get_log_folder_for_type(self, logger_type: LoggerType) -> str:
        """Return folder path based on logger type. Test runs all log to `tests`."""
        if any("pytest" in arg for arg in sys.argv):
            return os.path.join(self.base_log_folder, "tests")
        if logger_type == "default":
            return self.base_log_folder
        folder = "tests" if logger_type == "pytest" else logger_type
        return os.path.join(self.base_log_folder, folder)


def mask_secret(logger: logging.Logger, secret: str):
    """Add `secret` to every redacting filter attached to `logger`."""
    for log_filter in logger.filters:
        if isinstance(log_filter, SecretRedactingFilter) and secret and secret not in log_filter.secrets:
            log_filter.secrets.append(secret)
