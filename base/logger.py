import logging
import os
from collections import deque
from datetime import datetime
from reportportal_client import RPLogHandler


def _env_flag(name):
    return os.getenv(name, '').strip().lower() in ('1', 'true', 'yes', 'on')


class Logger:
    """
    Process-wide logger for the API client facade

    Only a console handler is attached by default. A timestamped log file
    (log_path / LOG_PATH) and the ReportPortal handler (reportportal /
    LOG_REPORTPORTAL) are opt-in. Error collection is off until
    init_error_collection() is called, and is bounded when on.
    """
    _instance = None
    _initialized = False
    _rp_handler = None
    _error_logs = None  # deque while error collection is on

    LOGGER_NAME = 'ApiClientFacade'

    # Default log levels
    DEFAULT_FILE_LEVEL = "DEBUG"
    DEFAULT_CONSOLE_LEVEL = "INFO"

    # Most recent error messages kept while collecting
    DEFAULT_ERROR_LIMIT = 100

    # Map string levels to logging constants
    LOG_LEVELS = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL
    }

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, log_path=None, file_level=None, console_level=None, reportportal=None):
        if not Logger._initialized:
            self.logger = logging.getLogger(self.LOGGER_NAME)

            # Set propagate to False to prevent duplicate logs
            self.logger.propagate = False

            self.logger.setLevel(logging.DEBUG)  # Capture all logs

            # Clear any existing handlers to avoid duplicates
            self.logger.handlers.clear()

            formatter = logging.Formatter(
                '%(asctime)s - %(levelname)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )

            console_handler = logging.StreamHandler()
            console_handler.setLevel(self._level(console_level or os.getenv('LOG_CONSOLE_LEVEL'), self.DEFAULT_CONSOLE_LEVEL))
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

            # File logging only when a directory is configured
            self.log_dir = log_path or os.getenv('LOG_PATH')
            self.log_file = None
            if self.log_dir:
                os.makedirs(self.log_dir, exist_ok=True)
                timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
                self.log_file = os.path.join(self.log_dir, f'api_client_{timestamp}.log')

                file_handler = logging.FileHandler(self.log_file)
                file_handler.setLevel(self._level(file_level or os.getenv('LOG_FILE_LEVEL'), self.DEFAULT_FILE_LEVEL))
                file_handler.setFormatter(formatter)
                self.logger.addHandler(file_handler)

            if reportportal is None:
                reportportal = _env_flag('LOG_REPORTPORTAL')
            if reportportal:
                try:
                    rp_handler = RPLogHandler()
                    rp_handler.setLevel(logging.DEBUG)  # We need to capture all logs for ReportPortal
                    self.logger.addHandler(rp_handler)
                    Logger._rp_handler = rp_handler
                except Exception as e:
                    self.logger.warning(f"Failed to initialize ReportPortal handler: {str(e)}")
                    Logger._rp_handler = None

            Logger._initialized = True

    @classmethod
    def _level(cls, name, default):
        return cls.LOG_LEVELS.get((name or default).upper(), cls.LOG_LEVELS[default])

    @classmethod
    def get_instance(cls, log_path=None, file_level=None, console_level=None, reportportal=None):
        if cls._instance is None or not cls._initialized:
            cls._instance = Logger(log_path, file_level, console_level, reportportal)
        return cls._instance

    @classmethod
    def shutdown(cls):
        """Close and detach every handler; the next call configures afresh"""
        if cls._initialized:
            logger = cls._instance.logger
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)
        cls._instance = None
        cls._initialized = False
        cls._rp_handler = None

    @classmethod
    def _log(cls, level, message):
        cls.get_instance().logger.log(level, message)

    @classmethod
    def debug(cls, message):
        cls._log(logging.DEBUG, message)

    @classmethod
    def info(cls, message):
        cls._log(logging.INFO, message)

    @classmethod
    def error(cls, message):
        """Log error level message, recording it while error collection is on"""
        if cls._error_logs is not None:
            cls._error_logs.append(message)
        cls._log(logging.ERROR, message)

    @classmethod
    def init_error_collection(cls, limit=DEFAULT_ERROR_LIMIT):
        """
        Start (or restart) collecting error messages

        Args:
            limit: Number of most recent messages kept
        """
        cls._error_logs = deque(maxlen=limit)

    @classmethod
    def stop_error_collection(cls):
        cls._error_logs = None

    @classmethod
    def get_errors(cls):
        """Return the collected error messages, oldest first"""
        if cls._error_logs is None:
            return []
        return list(cls._error_logs)
