import logging
import os
import sys

from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

_console_handler = None


@dataclass(frozen=True)
class Settings:
    encoding: str
    encoding_errors: str
    strict: bool
    log_level: str


def _bool(value, default=False):
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def get_settings() -> Settings:
    """Read the current environment into a Settings instance"""
    return Settings(
        encoding=os.getenv("FILESTORE_ENCODING") or "utf-8",
        encoding_errors=os.getenv("FILESTORE_ENCODING_ERRORS") or "replace",
        strict=_bool(os.getenv("FILESTORE_STRICT")),
        log_level=(os.getenv("FILESTORE_LOG_LEVEL") or "WARNING").upper(),
    )


def _resolve_level(level):
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        logging.warning(f"Unknown log level '{level}', falling back to WARNING")
        return logging.WARNING
    return resolved


def configure_logging(level=None) -> logging.Logger:
    """Attach a console handler to the package logger"""
    global _console_handler

    logger = logging.getLogger("filestore")

    if _console_handler is None:
        _console_handler = logging.StreamHandler(sys.stderr)
        _console_handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))
    if _console_handler not in logger.handlers:
        logger.addHandler(_console_handler)

    logger.setLevel(_resolve_level(level or get_settings().log_level))
    return logger
