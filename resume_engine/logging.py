"""logging.py
Holds configured loggers for the resume engine.
"""
from typing import Literal
import logging
import os
import sys
from datetime import datetime
from dotenv import load_dotenv

load_dotenv()  # load .env

ENV = os.getenv("ENV", "development")  # e.g., development, test, staging, production

LoggerType = Literal["default", "pytest", "extractor"]

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

CLOUDWATCH_LOG_GROUPS = {
    "default": "resume_engine_logs",
    "pytest": "resume_engine_test_logs",
    "extractor": "resume_engine_extractor_logs",
}


def running_under_pytest() -> bool:
    """True when the current process was started by pytest."""
    return "pytest" in sys.modules or any("pytest" in arg for arg in sys.argv)


class LoggerFactory:
    """
    Factory to create configured loggers for the parser, the matcher and the
    extractor fallback chain.

    Logging behavior depends on environment (ENV):
      - Console logging is optional.
      - Local file logging in development/test (separate folders per logger type).
      - Cloud logging (optional) in staging/production using watchtower.
      - Duplicate handlers and propagation are avoided automatically.
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
        Create and return a configured logger based on type.
        """
        logger = logging.getLogger(name)

        # Only this logger's own handlers; ancestors (root) may carry unrelated ones
        if logger.handlers:
            return logger

        logger.propagate = False

        level = logging.DEBUG if logger_type in ["default", "pytest"] else logging.INFO
        logger.setLevel(level)

        formatter = logging.Formatter(LOG_FORMAT)

        if console:
            ch = logging.StreamHandler()
            ch.setFormatter(formatter)
            # Parsing chatter stays at INFO on the console, files keep DEBUG
            ch.setLevel(logging.INFO)
            logger.addHandler(ch)

        if self.env in ["development", "local", "test"]:
            logger.addHandler(self._build_file_handler(name, logger_type, formatter))

        elif self.env in ["staging", "production"]:
            self._add_cloudwatch_handler(logger, logger_type, formatter)

        if not logger.handlers:
            ch = logging.StreamHandler()
            ch.setFormatter(formatter)
            logger.addHandler(ch)

        return logger

    def _build_file_handler(
        self,
        name: str,
        logger_type: LoggerType,
        formatter: logging.Formatter,
    ) -> logging.FileHandler:
        log_folder = self._get_log_folder_for_type(logger_type)
        os.makedirs(log_folder, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file_path = os.path.join(log_folder, f"{name}_{timestamp}.log")
        # delay=True: no empty log files for loggers that never emit
        fh = logging.FileHandler(log_file_path, mode="a", encoding="utf-8", delay=True)
        fh.setFormatter(formatter)
        return fh

    def _get_log_folder_for_type(self, logger_type: LoggerType) -> str:
        """Return folder path based on logger type."""
        if running_under_pytest():
            return os.path.join(self.base_log_folder, "tests")

        mapping = {
            "default": self.base_log_folder,
            "pytest": os.path.join(self.base_log_folder, "tests"),
            "extractor": os.path.join(self.base_log_folder, "extraction_failures"),
        }
        return mapping.get(logger_type, self.base_log_folder)

    def _add_cloudwatch_handler(
        self,
        logger: logging.Logger,
        logger_type: LoggerType,
        formatter: logging.Formatter,
    ):
        """Optional AWS CloudWatch logging for staging/production."""
        try:
            import watchtower
        except ImportError:
            logger.warning("watchtower not installed, skipping cloud logging.")
            return

        log_group = CLOUDWATCH_LOG_GROUPS.get(logger_type, CLOUDWATCH_LOG_GROUPS["default"])
        aws_handler = watchtower.CloudWatchLogHandler(log_group=log_group)
        aws_handler.setFormatter(formatter)
        logger.addHandler(aws_handler)


logger_factory = LoggerFactory()
