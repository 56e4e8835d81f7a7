"""
API Client Facade
Registers endpoint descriptors and issues HTTP calls through a requests.Session
"""

import requests
from typing import Optional, Dict, Any, Iterable, Union, Callable

from api.config import APIConfig, join_url
from api.endpoint import Endpoint
from api.errors import EndpointConfigurationError
from api.interceptors import Interceptors
from api.registry import EndpointRegistry
from base.logger import Logger
from models.request import RequestOptions
from models.types import HttpMethod, InterceptorPhase
from utils.case import camelize_keys, decamelize_keys

Options = Union[RequestOptions, Dict[str, Any], str]


class APIClient:
    """
    HTTP API client facade

    - Endpoints passed at construction are reachable as
      `client.registry[group][name](...)`
    - Verb helpers (get, delete, post, put, patch) delegate to `request`
    - JSON response bodies come back with camelCase keys; outbound bodies
      can be converted to snake_case per call
    """

    def __init__(
        self,
        base_url: str,
        endpoints: Optional[Iterable[Endpoint]] = None,
        timeout: Optional[float] = None,
        validate_status: Optional[bool] = None
    ):
        """
        Initialize the API client

        Args:
            base_url: Base address every relative URL is joined to
            endpoints: Endpoint descriptors to register
            timeout: Transport timeout in seconds. Defaults to APIConfig.DEFAULT_TIMEOUT
            validate_status: Raise requests.HTTPError on non-2xx responses.
                Defaults to APIConfig.VALIDATE_STATUS

        Raises:
            DuplicateEndpointError: two descriptors share the same group and name
        """
        self.base_url = base_url
        self.timeout = timeout if timeout is not None else APIConfig.DEFAULT_TIMEOUT
        self.validate_status = APIConfig.VALIDATE_STATUS if validate_status is None else validate_status
        self.logger = Logger()

        self.session = requests.Session()
        self.session.headers.update(APIConfig.DEFAULT_HEADERS)

        self.interceptors = Interceptors()
        self.registry = EndpointRegistry(self)
        try:
            self.registry.register_all(endpoints or [])
        except EndpointConfigurationError as e:
            self.logger.error(f"Endpoint registration failed: {str(e)}")
            self.session.close()
            raise
        self.registry.seal()

        self.logger.info(f"APIClient initialized for {self.base_url} with {len(self.registry)} endpoints")

    @classmethod
    def from_env(cls, endpoints: Optional[Iterable[Endpoint]] = None, env: Optional[str] = None) -> 'APIClient':
        """
        Build a client from APIConfig

        Args:
            endpoints: Endpoint descriptors to register
            env: Environment to use (test, staging, prod)
        """
        return cls(APIConfig.get_base_url(env), endpoints)

    # ==================== Interceptors ====================

    def intercept(
        self,
        phase: Union[str, InterceptorPhase],
        on_fulfilled: Optional[Callable[[Any], Any]],
        on_rejected: Optional[Callable[[BaseException], Any]] = None
    ) -> int:
        """
        Install a request or response interceptor

        Request handlers receive and return RequestOptions; response handlers
        receive and return a requests.Response. Rejection handlers receive
        the exception and either raise or return a replacement value.

        Args:
            phase: 'request' or 'response'
            on_fulfilled: Handler for the success path
            on_rejected: Handler for the error path (optional)

        Returns:
            int: handler id, see eject()

        Raises:
            InvalidInterceptorPhaseError: unknown phase
        """
        handler_id = self.interceptors.chain(phase).use(on_fulfilled, on_rejected)
        self.logger.debug(f"Installed {phase} interceptor #{handler_id}")
        return handler_id

    def eject(self, phase: Union[str, InterceptorPhase], handler_id: int):
        """Remove an interceptor installed with intercept()"""
        self.interceptors.chain(phase).eject(handler_id)

    # ==================== Request ====================

    def _log_request(self, method: str, url: str, body: Any = None):
        """Log API request details"""
        self.logger.info(f"API Request: {method} {url}")
        if body is not None:
            self.logger.debug(f"Request Body: {body}")

    def _log_response(self, response: requests.Response):
        """Log API response details"""
        self.logger.info(f"API Response: {response.status_code} {response.request.method} {response.url}")
        self.logger.debug(f"Response Body: {response.text}")

    @staticmethod
    def parse_response_body(response: Any) -> Any:
        """
        Normalize a response body

        JSON bodies (by Content-Type, case-insensitive header lookup) are
        decoded and their keys converted to camelCase. Anything else is
        returned as text. Values that are not a requests.Response, e.g. a
        replacement produced by a response interceptor, pass through.
        """
        if not isinstance(response, requests.Response):
            return response

        content_type = response.headers.get('Content-Type', '')
        if 'application/json' in content_type:
            if not response.content:
                return None
            return camelize_keys(response.json())

        return response.text

    def request(self, options: Options, convert_body_to_snake_case: bool = False) -> Any:
        """
        Send one HTTP request

        Args:
            options: RequestOptions, dict of its fields, or a URL string
            convert_body_to_snake_case: Convert body keys to snake_case before sending

        Returns:
            Parsed response body, see parse_response_body()

        Raises:
            requests.exceptions.RequestException: transport failure or, when
                validate_status is on, a non-2xx status
        """
        options = RequestOptions.coerce(options)

        fields = {
            'url': options.url,
            'method': options.method or HttpMethod.GET,
            'headers': dict(options.headers),
            'params': options.params,
        }
        if options.data is not None:
            fields['data'] = decamelize_keys(options.data) if convert_body_to_snake_case else options.data

        options = RequestOptions.coerce(self.interceptors.request.run(RequestOptions(**fields)))

        method = options.method.value if options.method else HttpMethod.GET.value
        url = join_url(self.base_url, options.url)
        kwargs: Dict[str, Any] = {
            'headers': options.headers,
            'params': options.params,
            'timeout': self.timeout,
        }
        if options.data is not None:
            if isinstance(options.data, (str, bytes)):
                kwargs['data'] = options.data
            else:
                kwargs['json'] = options.data

        self._log_request(method, url, options.data)

        try:
            response = self.session.request(method, url, **kwargs)
            if self.validate_status:
                response.raise_for_status()
        except requests.exceptions.RequestException as e:
            self.logger.error(f"{method} request failed: {str(e)}")
            response = self.interceptors.response.run(error=e)
        else:
            self._log_response(response)
            response = self.interceptors.response.run(response)

        return self.parse_response_body(response)

    # ==================== HTTP methods ====================

    def get(self, options: Options) -> Any:
        """Send GET request"""
        return self.request(RequestOptions.coerce(options).with_defaults(method=HttpMethod.GET))

    def delete(self, options: Options) -> Any:
        """Send DELETE request"""
        return self.request(RequestOptions.coerce(options).with_defaults(method=HttpMethod.DELETE))

    def post(self, options: Options, data: Any = None, convert_body_to_snake_case: Optional[bool] = None) -> Any:
        """
        Send POST request

        Args:
            options: Request options (url, headers, params)
            data: Request body
            convert_body_to_snake_case: Convert body keys to snake_case, False when None

        Returns:
            Parsed response body
        """
        options = RequestOptions.coerce(options).with_defaults(method=HttpMethod.POST, data=data)
        return self.request(options, bool(convert_body_to_snake_case))

    def put(self, options: Options, data: Any = None, convert_body_to_snake_case: Optional[bool] = None) -> Any:
        """Send PUT request, see post()"""
        options = RequestOptions.coerce(options).with_defaults(method=HttpMethod.PUT, data=data)
        return self.request(options, bool(convert_body_to_snake_case))

    def patch(self, options: Options, data: Any = None, convert_body_to_snake_case: Optional[bool] = None) -> Any:
        """Send PATCH request, see post()"""
        options = RequestOptions.coerce(options).with_defaults(method=HttpMethod.PATCH, data=data)
        return self.request(options, bool(convert_body_to_snake_case))

    # ==================== Lifecycle ====================

    def close(self):
        """Close the underlying session"""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __repr__(self):
        return f"APIClient(base_url={self.base_url!r}, registry={self.registry!r})"
