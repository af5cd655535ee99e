"""logging.py
LoggerFactory and the per-feature logging layout.

Where log records go depends on the ENV variable (read from .env):
  - development / local / test: a timestamped file per logger under `logs/<feature>/`
  - staging / production: an AWS CloudWatch log group per feature (needs `watchtower`)
"""
import logging
import os
import sys
from datetime import datetime
from typing import Literal

from dotenv import load_dotenv

load_dotenv()

ENV = os.getenv("ENV", "development")

LoggerType = Literal["default", "pytest", "extraction", "translation", "export"]

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

FILE_LOGGING_ENVS = ("development", "local", "test")
CLOUD_LOGGING_ENVS = ("staging", "production")

# Sub-folder of the log folder each logger type writes to ("" = the log folder itself)
LOG_SUBFOLDERS = {
    "default": "",
    "pytest": "tests",
    "extraction": "extraction",
    "translation": "translation",
    "export": "export",
}

CLOUDWATCH_LOG_GROUPS = {
    "default": "resume_architect_logs",
    "extraction": "resume_architect_extraction_logs",
    "translation": "resume_architect_translation_logs",
    "export": "resume_architect_export_logs",
}


def running_under_pytest() -> bool:
    return any("pytest" in arg for arg in sys.argv)


class LoggerFactory:
    """
    Builds loggers for the builder's features.

    A logger is configured once: asking again for the same name returns the
    existing logger untouched. Loggers don't propagate to the root logger.
    "default" and "pytest" loggers log at DEBUG, feature loggers at INFO.

    Args:
        env (str): Deployment environment (defaults to the ENV variable).
        base_log_folder (str): Root folder for file logs.

    Example:
        >>> export_logger = LoggerFactory().get_logger("resume_export", logger_type="export")
        >>> export_logger.info("Exported resume")
    """

    def __init__(self, env: str = ENV, base_log_folder: str = "logs"):
        self.env = env
        self.base_log_folder = base_log_folder
        self.formatter = logging.Formatter(LOG_FORMAT)

    def get_logger(
        self,
        name: str,
        logger_type: LoggerType = "default",
        console: bool = True
    ) -> logging.Logger:
        logger = logging.getLogger(name)
        if logger.hasHandlers():
            return logger

        logger.propagate = False
        logger.setLevel(logging.DEBUG if logger_type in ("default", "pytest") else logging.INFO)

        if console:
            self._attach(logger, logging.StreamHandler())

        if self.env in FILE_LOGGING_ENVS:
            self._attach(logger, self._file_handler(name, logger_type))
        elif self.env in CLOUD_LOGGING_ENVS:
            self._add_cloudwatch_handler(logger, logger_type)

        # Never leave a logger without somewhere to write
        if not logger.handlers:
            self._attach(logger, logging.StreamHandler())

        return logger

    def log_folder(self, logger_type: LoggerType) -> str:
        """Folder a logger type writes to. Everything goes to `tests/` during a pytest run."""
        subfolder = "tests" if running_under_pytest() else LOG_SUBFOLDERS.get(logger_type, "")
        return os.path.join(self.base_log_folder, subfolder) if subfolder else self.base_log_folder

    def _attach(self, logger: logging.Logger, handler: logging.Handler) -> None:
        handler.setFormatter(self.formatter)
        logger.addHandler(handler)

    def _file_handler(self, name: str, logger_type: LoggerType) -> logging.FileHandler:
        folder = self.log_folder(logger_type)
        os.makedirs(folder, exist_ok=True)
        started = datetime.now().strftime("%Y%m%d_%H%M%S")
        return logging.FileHandler(os.path.join(folder, f"{name}_{started}.log"), mode="a", encoding="utf-8")

    def _add_cloudwatch_handler(self, logger: logging.Logger, logger_type: LoggerType) -> None:
        try:
            import watchtower
        except ImportError:
            logger.warning("watchtower not installed, skipping cloud logging.")
            return

        log_group = CLOUDWATCH_LOG_GROUPS.get(logger_type, CLOUDWATCH_LOG_GROUPS["default"])
        self._attach(logger, watchtower.CloudWatchLogHandler(log_group=log_group))
