"""
CLI helper utilities.

This module provides shared utilities for CLI commands including:
- Configuration loading
- Logging setup
- Console formatting
"""

import json
import logging
import os
import sys
import tempfile
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Tuple

from ...constants import LoggingConfig

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class JSONFormatter(logging.Formatter):
    """Render log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(
                LoggingConfig.JSON_DATE_FORMAT
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "line": record.lineno,
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


# Handlers installed by setup_logging, replaced on every call
_installed_handlers: List[logging.Handler] = []


def get_default_config_path() -> str:
    """Return ``owlgraph.json`` in the current working directory."""
    return str(Path.cwd() / "owlgraph.json")


def _build_formatter(log_config: Dict[str, Any]) -> logging.Formatter:
    style = str(log_config.get('format', LoggingConfig.DEFAULT_FORMAT_STYLE)).lower()
    if style not in LoggingConfig.SUPPORTED_FORMATS:
        style = LoggingConfig.DEFAULT_FORMAT_STYLE
    if style == 'json':
        return JSONFormatter()
    return logging.Formatter(
        fmt=log_config.get('pattern') or LoggingConfig.LOG_FORMAT,
        datefmt=log_config.get('date_format', LoggingConfig.DATE_FORMAT),
    )


def _open_log_file(file_path: str, rotation: Dict[str, Any]) -> Tuple[Optional[logging.Handler], Optional[str]]:
    """Open ``file_path`` for logging, falling back to the temp directory."""
    max_mb = rotation.get('max_mb', LoggingConfig.MAX_LOG_FILE_MB)
    backup_count = rotation.get('backup_count', LoggingConfig.LOG_BACKUP_COUNT)
    rotate = rotation.get('enabled', LoggingConfig.ROTATION_ENABLED)

    candidates = [file_path, os.path.join(tempfile.gettempdir(), os.path.basename(file_path) or "owlgraph.log")]
    for candidate in candidates:
        try:
            parent = os.path.dirname(candidate)
            if parent:
                os.makedirs(parent, exist_ok=True)
            if rotate:
                handler: logging.Handler = RotatingFileHandler(
                    candidate,
                    maxBytes=int(max_mb) * 1024 * 1024,
                    backupCount=max(int(backup_count), 1),
                    encoding='utf-8',
                )
            else:
                handler = logging.FileHandler(candidate, encoding='utf-8')
        except OSError as exc:
            print(f"  Could not create log at {candidate}: {exc}", file=sys.stderr)
            continue
        if candidate != file_path:
            print(f"Note: Using fallback log file: {candidate}", file=sys.stderr)
        return handler, candidate

    print("Warning: Could not write log file to any location; logging to console only", file=sys.stderr)
    return None, None


def setup_logging(
    level: LogLevel = LoggingConfig.DEFAULT_LOG_LEVEL,
    log_file: Optional[str] = None,
    *,
    config: Optional[Dict[str, Any]] = None,
    include_console: bool = True,
) -> Optional[str]:
    """
    Configure the root logger from the ``logging`` section of the config file.

    Args:
        level: Log level used when the config does not set one.
        log_file: Log file override.
        config: Optional ``logging`` section of the config file.
        include_console: If False, skip the stderr handler.

    Returns:
        The log file path actually opened, or None for console-only logging.
    """
    log_config = dict(config or {})
    log_level = getattr(logging, str(log_config.get('level', level)).upper(), logging.INFO)
    formatter = _build_formatter(log_config)

    handlers: List[logging.Handler] = []
    if include_console:
        handlers.append(logging.StreamHandler(sys.stderr))

    actual_log_file = None
    file_path = log_file if log_file is not None else log_config.get('file')
    if file_path:
        rotation = log_config.get('rotation')
        file_handler, actual_log_file = _open_log_file(
            file_path, rotation if isinstance(rotation, dict) else {}
        )
        if file_handler is not None:
            handlers.append(file_handler)

    if not handlers:
        handlers.append(logging.StreamHandler(sys.stderr))

    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    root_logger.setLevel(log_level)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
        _installed_handlers.append(handler)

    if actual_log_file:
        logging.getLogger(__name__).info(f"Logging to: {actual_log_file}")
    return actual_log_file


def load_config(config_path: str) -> Dict[str, Any]:
    """
    Load configuration from a JSON file.

    Raises:
        ValueError: If config_path is empty, not a .json file, or not a JSON object.
        FileNotFoundError: If the configuration file doesn't exist.
        PermissionError: If the path is a symlink.
    """
    if not config_path:
        raise ValueError("config_path cannot be empty")

    path = Path(config_path)
    if path.suffix.lower() != '.json':
        raise ValueError(f"Configuration file must be a .json file: {config_path}")
    if path.is_symlink():
        raise PermissionError(f"Symlinks are not allowed for configuration files: {config_path}")
    if not path.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}\n"
            f"Create an owlgraph.json file or pass one with --config"
        )

    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in configuration file {path} at line {e.lineno}, column {e.colno}: {e.msg}"
        ) from e

    if not isinstance(config, dict):
        raise ValueError(f"Configuration file must contain a JSON object, got {type(config).__name__}")
    return config


def print_header(title: str, width: int = 60) -> None:
    print("\n" + "=" * width)
    print(title)
    print("=" * width)


def print_footer(width: int = 60) -> None:
    print("=" * width + "\n")


def format_count_summary(items: Dict[str, int], prefix: str = "  ") -> str:
    """Format entity counts one per line, in the order given."""
    return "\n".join(f"{prefix}{name}: {count}" for name, count in items.items())
