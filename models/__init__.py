"""
Models package
Pydantic models and internal types for the request facade
"""

from models.request import RequestOptions
from models.types import HttpMethod, InterceptorPhase, InterceptorHandler

__all__ = [
    'RequestOptions',
    'HttpMethod',
    'InterceptorPhase',
    'InterceptorHandler',
]
