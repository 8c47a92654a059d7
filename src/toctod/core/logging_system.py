"""Logging system for the calculator components and the command line tool.

This module provides YAML-configured logging with per-component levels,
platform-aware log locations, and startup-based rotation.

Platform-specific log locations:
    - macOS: ~/Library/Logs/TocTod/toctod.log
    - Linux: ~/.toctod/logs/toctod.log
    - Windows: %AppData%/TocTod/Logs/toctod.log

Each run rotates logs, keeping the last 5 runs.

Typical usage example:
    from toctod.core.logging_system import get_logger

    logger = get_logger(__name__)
    logger.info("Computed profile for %s -> %s", departure, arrival)
"""

import logging
import os
import platform
import time
from pathlib import Path
from typing import Any

import yaml

# Global configuration
_logging_config: dict[str, Any] = {}
_loggers_cache: dict[str, logging.Logger] = {}
_console_handler: logging.Handler | None = None


class LoggingError(Exception):
    """Raised when logging system operations fail."""


def get_platform_log_dir() -> Path:
    """Get platform-specific log directory.

    Returns:
        Path to the platform-appropriate log directory:
        - macOS: ~/Library/Logs/TocTod
        - Linux: ~/.toctod/logs
        - Windows: %AppData%/TocTod/Logs
    """
    system = platform.system()

    if system == "Darwin":  # macOS
        return Path.home() / "Library" / "Logs" / "TocTod"
    elif system == "Windows":
        appdata = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return appdata / "TocTod" / "Logs"
    else:  # Linux and other Unix-like systems
        return Path.home() / ".toctod" / "logs"


def rotate_logs(log_dir: Path, log_filename: str = "toctod.log", keep_count: int = 5) -> None:
    """Rotate logs on startup, keeping the last N runs.

    Renames current log to toctod.log.1, shifts older logs, and deletes
    logs beyond keep_count.

    Args:
        log_dir: Directory containing log files.
        log_filename: Base name of the log file (default: "toctod.log").
        keep_count: Number of old logs to keep (default: 5).

    Examples:
        >>> rotate_logs(Path("logs"), "toctod.log", 5)
        # toctod.log -> toctod.log.1
        # toctod.log.1 -> toctod.log.2
        # ...
        # toctod.log.5 -> deleted
    """
    log_file = log_dir / log_filename

    if not log_file.exists():
        return

    oldest_log = log_dir / f"{log_filename}.{keep_count}"
    if oldest_log.exists():
        oldest_log.unlink()

    for i in range(keep_count - 1, 0, -1):
        old_log = log_dir / f"{log_filename}.{i}"
        new_log = log_dir / f"{log_filename}.{i + 1}"
        if old_log.exists():
            old_log.rename(new_log)

    log_file.rename(log_dir / f"{log_filename}.1")


def initialize_logging(config_path: str | Path | None = None, use_platform_dir: bool = True) -> None:
    """Initialize the logging system from YAML configuration.

    This should be called once at startup before any logging occurs.

    Args:
        config_path: Path to logging configuration YAML file.
            If None, uses default configuration.
        use_platform_dir: If True, use platform-specific log directory.
            If False, use directory from config (for development/testing).

    Raises:
        LoggingError: If the configuration file cannot be read.

    Examples:
        >>> initialize_logging("config/logging.yaml")
        >>> log = get_logger("calculator")
        >>> log.info("Logging initialized")
    """
    global _logging_config

    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise LoggingError(f"Logging config file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                _logging_config = yaml.safe_load(f) or {}
        except Exception as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e
    else:
        _logging_config = _get_default_config()

    if use_platform_dir:
        _logging_config["log_dir"] = str(get_platform_log_dir())

    _setup_directories()

    log_dir = Path(_logging_config.get("log_dir", "logs"))
    log_filename = _logging_config.get("combined_log", {}).get("filename", "toctod.log")
    keep_count = _logging_config.get("combined_log", {}).get("backup_count", 5)
    rotate_logs(log_dir, log_filename, keep_count)

    _configure_root_logger()

    # Modules using logging.getLogger directly get their levels here
    for name in set(_logging_config.get("components", {})) | set(_loggers_cache):
        _apply_component_config(name, logging.getLogger(name))



def _get_default_config() -> dict[str, Any]:
    """Get default logging configuration."""
    return {
        "version": 1,
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "log_dir": "logs",
        "combined_log": {
            "enabled": True,
            "filename": "toctod.log",
            "backup_count": 5,
        },
        "console": {
            "enabled": True,
            "level": "WARNING",
        },
        "components": {},
    }


def _setup_directories() -> None:
    """Create log directories if they don't exist."""
    log_dir = Path(_logging_config.get("log_dir", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)


def _configure_root_logger() -> None:
    """Configure the root logger with handlers."""
    global _console_handler

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all, filter in handlers

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    if _logging_config.get("console", {}).get("enabled", True):
        console_handler = logging.StreamHandler()
        console_level = _logging_config.get("console", {}).get("level", "WARNING")
        console_handler.setLevel(getattr(logging, console_level))
        console_handler.setFormatter(_get_formatter())
        root_logger.addHandler(console_handler)
        _console_handler = console_handler
    else:
        _console_handler = None

    # Simple FileHandler since rotation happens on startup, not by size
    if _logging_config.get("combined_log", {}).get("enabled", True):
        combined_config = _logging_config["combined_log"]
        log_dir = Path(_logging_config.get("log_dir", "logs"))
        log_file = log_dir / combined_config.get("filename", "toctod.log")

        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(getattr(logging, _logging_config.get("level", "INFO")))
        file_handler.setFormatter(_get_formatter())
        root_logger.addHandler(file_handler)


class MillisecondFormatter(logging.Formatter):
    """Formatter that shows milliseconds with dot separator."""

    def formatTime(self, record, datefmt=None):
        ct = self.converter(record.created)
        if datefmt:
            s = time.strftime(datefmt, ct)
        else:
            s = time.strftime("%Y-%m-%d %H:%M:%S", ct)
        return f"{s}.{int(record.msecs):03d}"


def _get_formatter() -> logging.Formatter:
    fmt = _logging_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    datefmt = _logging_config.get("date_format", "%Y-%m-%d %H:%M:%S")
    return MillisecondFormatter(fmt, datefmt)


def _apply_component_config(name: str, logger: logging.Logger) -> None:
    """Apply the 'components' section of the config to a logger."""
    component_config = _logging_config.get("components", {}).get(name, {})

    if component_config.get("enabled", True):
        logger.disabled = False
        if "level" in component_config:
            logger.setLevel(getattr(logging, component_config["level"]))
    else:
        logger.disabled = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component.

    Loggers are cached and reused. Each logger can have its own level
    specified in the logging config YAML under the 'components' section.

    Getting a logger never initializes logging, so modules may call this at
    import time; the entry point calls initialize_logging once per run.

    Args:
        name: Logger name (typically the module's __name__).

    Returns:
        Configured logger instance.

    Examples:
        >>> log = get_logger("toctod.performance.profile_calculator")
        >>> log.debug("Climb time: %.3f h", climb_time_h)

    Note:
        Use lazy formatting (%) instead of f-strings.
    """
    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = logging.getLogger(name)
    _apply_component_config(name, logger)

    _loggers_cache[name] = logger
    return logger


def shutdown_logging() -> None:
    """Shutdown the logging system gracefully.

    Flushes all handlers and closes log files.
    """
    logging.shutdown()
    _loggers_cache.clear()


def set_console_level(level: str) -> None:
    """Change the level of the console handler.

    Args:
        level: Level name (e.g., "DEBUG")

    Examples:
        >>> set_console_level("DEBUG")  # --verbose
    """
    if _console_handler is not None:
        _console_handler.setLevel(getattr(logging, level))
