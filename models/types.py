"""
Internal Types
Enums and dataclasses for framework-internal data structures
"""

from enum import Enum
from typing import Optional, Callable, Any
from dataclasses import dataclass


# ==================== Framework Enums ====================

class HttpMethod(str, Enum):
    """HTTP verbs supported by the request facade"""
    GET = "GET"
    DELETE = "DELETE"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class InterceptorPhase(str, Enum):
    """Point of the request lifecycle an interceptor is attached to"""
    REQUEST = "request"
    RESPONSE = "response"


# ==================== Dataclasses ====================

@dataclass
class InterceptorHandler:
    """
    A fulfilled/rejected handler pair installed on an interceptor chain

    Either side may be None, in which case the chain passes the value
    (or the error) straight through to the next handler.
    """
    handler_id: int
    on_fulfilled: Optional[Callable[[Any], Any]] = None
    on_rejected: Optional[Callable[[BaseException], Any]] = None
