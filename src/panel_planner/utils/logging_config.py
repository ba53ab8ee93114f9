"""
Logging configuration for the panel planner.

Sets up a timestamped log file plus console output for command-line runs.
Library modules only call ``logging.getLogger(__name__)``.
"""

import logging
import os
import sys
from datetime import datetime
from typing import Optional


class PanelPlannerLogger:
    """
    Configures logging for the panel planner.

    Supports:
    - File output with full detail
    - Console output with a shorter format
    - Module-specific levels through get_logger
    """

    @staticmethod
    def configure(
        debug_mode: bool = False,
        log_dir: Optional[str] = "logs",
        verbose_console: bool = False,
    ) -> Optional[str]:
        """
        Configure the logging system for the entire application.

        Args:
            debug_mode: If True, sets DEBUG level for all loggers
            log_dir: Directory to store log files; None disables file logging
            verbose_console: If True, console lines include the logger name

        Returns:
            Path to the created log file, or None without file logging
        """
        level = logging.DEBUG if debug_mode else logging.INFO

        root_logger = logging.getLogger()
        root_logger.setLevel(level)

        # Clear any existing handlers
        if root_logger.handlers:
            root_logger.handlers.clear()

        log_file = None
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = os.path.join(log_dir, f"panel_planner_{timestamp}.log")

            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            file_handler.setLevel(level)
            root_logger.addHandler(file_handler)

        console_handler = logging.StreamHandler(sys.stdout)
        if verbose_console:
            console_formatter = logging.Formatter('%(name)s - %(levelname)s: %(message)s')
        else:
            console_formatter = logging.Formatter('%(levelname)s: %(message)s')
        console_handler.setFormatter(console_formatter)
        console_handler.setLevel(level)
        root_logger.addHandler(console_handler)

        return log_file

    @staticmethod
    def get_logger(name: str, level: Optional[int] = None):
        """
        Get a logger for a specific module.

        Args:
            name: Logger name, typically __name__
            level: Optional specific level for this logger

        Returns:
            A configured logger
        """
        logger = logging.getLogger(name)
        if level:
            logger.setLevel(level)
        return logger


def get_logger(name: str, level: Optional[int] = None):
    """Convenience wrapper around PanelPlannerLogger.get_logger."""
    return PanelPlannerLogger.get_logger(name, level)
