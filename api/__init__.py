"""
API Module
Provides the endpoint registry and request facade

This module contains:
- APIClient: facade over a requests.Session with verb helpers and interceptors
- EndpointRegistry: group -> name -> bound callable mapping
- Endpoint / FunctionEndpoint / endpoint: endpoint descriptors
- APIConfig: environment-driven settings

Endpoints are registered once, when the client is constructed:

    client = APIClient('https://api.example.com', [GetUser(), CreateItem()])
    client.registry['users']['get'](42)
"""

from api.client import APIClient
from api.config import APIConfig
from api.endpoint import Endpoint, FunctionEndpoint, endpoint
from api.errors import (
    APIClientError,
    EndpointConfigurationError,
    DuplicateEndpointError,
    RegistrySealedError,
    InvalidInterceptorPhaseError,
)
from api.interceptors import InterceptorChain, Interceptors
from api.registry import EndpointRegistry

__all__ = [
    'APIClient',
    'APIConfig',
    'Endpoint',
    'FunctionEndpoint',
    'endpoint',
    'EndpointRegistry',
    'InterceptorChain',
    'Interceptors',
    'APIClientError',
    'EndpointConfigurationError',
    'DuplicateEndpointError',
    'RegistrySealedError',
    'InvalidInterceptorPhaseError',
]
