"""
Logging Setup for the Remote Loader.

Provides centralized logging configuration with:
- Rotating file handler
- Console handler
- Queue-based logging so device reports never block on file I/O
"""

import logging
import os
import threading
from logging.handlers import RotatingFileHandler, QueueHandler, QueueListener
from queue import Queue
from typing import Callable, Tuple

# Centralized logging format with thread, module, function, and line number
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(threadName)s %(module)s:%(funcName)s:%(lineno)d - %(message)s'

LOG_LEVELS = ["DEBUG", "INFO", "NONE"]


def setup_logging(
    log_level: str,
    log_file_name: str,
    log_dir: str,
    version: str = "",
    script_name: str = "Remote Loader",
    max_bytes: int = 1024*1024,
    backup_count: int = 3,
) -> Tuple[logging.Logger, Callable[[], None]]:
    """
    Set up logging with rotating file handler and console output.

    All records go through a QueueHandler on the root logger and are written
    by a QueueListener running on "LoggingThread".

    Args:
        log_level: Logging level ("DEBUG", "INFO", or "NONE")
        log_file_name: Name of the log file
        log_dir: Directory where log file should be created
        version: Version string to log at startup
        script_name: Name of the program for startup message
        max_bytes: Maximum size of log file before rotation
        backup_count: Number of backup log files to keep

    Returns:
        Tuple of (logger, stop_logging_func). stop_logging_func flushes the
        queue and waits for the logging thread to exit.
    """
    if log_level not in LOG_LEVELS:
        raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {log_level!r}")

    log_file_path = os.path.join(log_dir, log_file_name)
    log_queue = Queue()

    # File Handler
    file_handler = RotatingFileHandler(log_file_path, maxBytes=max_bytes, backupCount=backup_count)
    file_handler.setLevel(logging.DEBUG if log_level != "NONE" else logging.CRITICAL)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    # Console Handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO if log_level in ["INFO", "DEBUG"] else logging.CRITICAL)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    # Root Logger
    root_logger = logging.getLogger()
    root_logger.handlers = []  # Clear all handlers
    root_logger.setLevel(logging.DEBUG if log_level == "DEBUG" else logging.INFO)
    root_logger.addHandler(QueueHandler(log_queue))

    logger = logging.getLogger("remote_manager")

    # Listener Thread
    stop_event = threading.Event()

    def log_listener_thread():
        listener = QueueListener(log_queue, file_handler, console_handler, respect_handler_level=True)
        listener.start()
        stop_event.wait()
        listener.stop()
        file_handler.close()

    logging_thread = threading.Thread(target=log_listener_thread, name="LoggingThread", daemon=False)
    logging_thread.start()

    version_str = f" v{version}" if version else ""
    logger.info(f">----- Starting {script_name}{version_str}. Initializing...")

    def stop_logging():
        stop_event.set()
        logging_thread.join()

    return logger, stop_logging
