"""
API Errors
Exceptions raised by the facade itself

Transport failures are never wrapped: requests exceptions reach the caller as-is.
"""


class APIClientError(Exception):
    """Base class for errors raised by the API client facade"""


class EndpointConfigurationError(APIClientError, ValueError):
    """Endpoint registration failed; the facade must not be used"""


class DuplicateEndpointError(EndpointConfigurationError):
    """An endpoint with the same group and name is already registered"""

    def __init__(self, group: str, name: str):
        self.group = group
        self.name = name
        super().__init__(f"Endpoint {group}.{name} already defined.")


class RegistrySealedError(EndpointConfigurationError):
    """Registration attempted after the facade finished construction"""

    def __init__(self, group: str, name: str):
        self.group = group
        self.name = name
        super().__init__(f"Cannot register {group}.{name}: endpoint registry is sealed.")


class InvalidInterceptorPhaseError(APIClientError, ValueError):
    """Interceptor phase is neither 'request' nor 'response'"""

    def __init__(self, phase):
        self.phase = phase
        super().__init__(f"Unknown interceptor phase: {phase!r} (expected 'request' or 'response')")
