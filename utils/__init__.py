"""
Utility functions for the API client facade.
"""

from utils.case import camelize, decamelize, camelize_keys, decamelize_keys

__all__ = [
    'camelize',
    'decamelize',
    'camelize_keys',
    'decamelize_keys',
]
