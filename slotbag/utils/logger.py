# slotbag/utils/logger.py
import datetime

from slotbag.config import LOG_LEVEL, LOG_TIME_FORMAT

class LogLevel:
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4

    @classmethod
    def from_name(cls, name: str) -> int:
        """Resolves a config level name such as 'warning' to its number."""
        level = getattr(cls, name.strip().upper(), None)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level '{name}'.")
        return level

_LEVEL_LABELS = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.CRITICAL: "CRIT",
}

class Logger:
    _instance = None
    _level = LogLevel.from_name(LOG_LEVEL)

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Logger, cls).__new__(cls)
        return cls._instance

    @classmethod
    def set_level(cls, level: int):
        """Sets the minimum logging level."""
        cls._level = level

    @classmethod
    def get_level(cls) -> int:
        return cls._level

    @classmethod
    def _log(cls, level: int, source: str, message: str):
        if level < cls._level:
            return
        timestamp = datetime.datetime.now().strftime(LOG_TIME_FORMAT)
        label = _LEVEL_LABELS.get(level, "LOG")
        # Format: [TIME] [LEVEL] [Source] Message
        print(f"[{timestamp}] [{label:<5}] [{source}] {message}")

    @classmethod
    def debug(cls, source: str, message: str):
        cls._log(LogLevel.DEBUG, source, message)

    @classmethod
    def info(cls, source: str, message: str):
        cls._log(LogLevel.INFO, source, message)

    @classmethod
    def warning(cls, source: str, message: str):
        cls._log(LogLevel.WARNING, source, message)

    @classmethod
    def error(cls, source: str, message: str):
        cls._log(LogLevel.ERROR, source, message)

    @classmethod
    def critical(cls, source: str, message: str):
        cls._log(LogLevel.CRITICAL, source, message)
