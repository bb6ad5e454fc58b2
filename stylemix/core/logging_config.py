"""
Logging Configuration for STYLEMIX

Library modules only create loggers; handlers are installed
here, by the command-line entry point.

Features:
- Colored console output on terminals
- Optional rotating file handler
- Configurable log level (LOG_LEVEL)
"""
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

from .config import get_log_level


class ColoredFormatter(logging.Formatter):
    """Colored formatter for console output"""

    COLORS = {
        'DEBUG': '\033[36m',  # Cyan
        'INFO': '\033[32m',  # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',  # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


class LoggingConfig:
    """Centralized logging configuration"""

    DEFAULT_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
    DEFAULT_BACKUP_COUNT = 3

    @staticmethod
    def setup_logging(
            log_level: Optional[str] = None,
            log_file: Optional[str] = None,
            enable_console: bool = True,
            enable_colors: bool = True,
    ) -> None:
        """Install console (and optionally file) handlers on the root logger"""
        log_level = (log_level or get_log_level()).upper()
        level = getattr(logging, log_level, None)
        if not isinstance(level, int):
            level = logging.INFO

        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        root_logger.handlers.clear()

        detailed_format = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # diagnostics go to stderr so rendered CSS can be piped from stdout
        if enable_console and sys.stderr is not None:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(level)

            is_tty = hasattr(sys.stderr, "isatty") and sys.stderr.isatty()

            if enable_colors and is_tty:
                console_handler.setFormatter(ColoredFormatter(
                    '%(asctime)s - %(levelname)s - %(message)s',
                    datefmt='%H:%M:%S'
                ))
            else:
                console_handler.setFormatter(detailed_format)

            root_logger.addHandler(console_handler)

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(exist_ok=True, parents=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_path,
                maxBytes=LoggingConfig.DEFAULT_MAX_BYTES,
                backupCount=LoggingConfig.DEFAULT_BACKUP_COUNT,
                encoding='utf-8'
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(detailed_format)
            root_logger.addHandler(file_handler)

        root_logger.debug("Logging initialized.")
