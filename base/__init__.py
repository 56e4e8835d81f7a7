"""
Base infrastructure components for the API client facade.

- Logger: singleton around the stdlib logging module with file, console
  and ReportPortal handlers
"""

from .logger import Logger

__all__ = [
    'Logger',
]
