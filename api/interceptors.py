"""
Interceptor Chains
Request and response hooks around each HTTP exchange

requests has no request-side hook and its response hooks cannot see transport
errors, so the facade keeps its own chains. A chain behaves like a promise
chain: handlers run in registration order, an exception skips to the next
rejection handler, and a rejection handler that returns a value recovers.
"""

from itertools import count
from typing import Any, Callable, Dict, Optional, Union

from api.errors import InvalidInterceptorPhaseError
from models.types import InterceptorHandler, InterceptorPhase


class InterceptorChain:
    """Ordered list of fulfilled/rejected handler pairs"""

    def __init__(self):
        self._handlers: Dict[int, InterceptorHandler] = {}
        self._ids = count()

    def use(
        self,
        on_fulfilled: Optional[Callable[[Any], Any]],
        on_rejected: Optional[Callable[[BaseException], Any]] = None
    ) -> int:
        """
        Append a handler pair

        Returns:
            int: handler id usable with eject()
        """
        handler_id = next(self._ids)
        self._handlers[handler_id] = InterceptorHandler(handler_id, on_fulfilled, on_rejected)
        return handler_id

    def eject(self, handler_id: int):
        """Remove a handler pair; unknown ids are ignored"""
        self._handlers.pop(handler_id, None)

    def run(self, value: Any = None, error: Optional[BaseException] = None) -> Any:
        """
        Pass a value (or an error) through every handler

        Args:
            value: Initial value, used when error is None
            error: Initial error, the chain starts in the rejected state

        Returns:
            The value produced by the last handler

        Raises:
            The error the chain ends with, if no rejection handler recovered
        """
        for handler in list(self._handlers.values()):
            if error is None:
                if handler.on_fulfilled is None:
                    continue
                try:
                    value = handler.on_fulfilled(value)
                except Exception as exc:
                    error = exc
            elif handler.on_rejected is not None:
                try:
                    value = handler.on_rejected(error)
                    error = None
                except Exception as exc:
                    error = exc

        if error is not None:
            raise error
        return value

    def __len__(self):
        return len(self._handlers)


class Interceptors:
    """The request and response chains of one APIClient"""

    def __init__(self):
        self.request = InterceptorChain()
        self.response = InterceptorChain()

    def chain(self, phase: Union[str, InterceptorPhase]) -> InterceptorChain:
        """
        Return the chain for a phase

        Raises:
            InvalidInterceptorPhaseError: phase is not 'request' or 'response'
        """
        try:
            phase = InterceptorPhase(phase)
        except ValueError:
            raise InvalidInterceptorPhaseError(phase) from None

        if phase is InterceptorPhase.REQUEST:
            return self.request
        return self.response
