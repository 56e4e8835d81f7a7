"""
Pytest configuration for the API client facade test suite.

ARCHITECTURE NOTE:
- All pytest options are defined HERE in conftest.py (single source of truth)
- All fixtures are in fixtures.py (imported via "from fixtures import *")
- Test files only contain test functions, no fixtures or options
"""

import pytest
from base.logger import Logger

# Import shared fixtures to make them available to all tests
from fixtures import *


def pytest_addoption(parser):
    """
    Add custom command line options
    
    Note: All pytest options should be defined here, not in individual test files
    """
    parser.addoption(
        "--log-path", action="store", default=None,
        help="Log directory (no log file when unset)"
    )
    parser.addoption(
        "--file-log-level", action="store", default="DEBUG",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="File log level"
    )
    parser.addoption(
        "--console-log-level", action="store", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level"
    )
    parser.addoption(
        "--rp-logging", action="store_true", default=False,
        help="Send log records to ReportPortal"
    )


@pytest.fixture(scope="session", autouse=True)
def setup_logger(request):
    """Initialize logger once per session"""
    return Logger.get_instance(**logger_options(request.config))
