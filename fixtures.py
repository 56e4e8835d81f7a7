"""
Test Fixtures
Provides reusable fixtures for all tests

ARCHITECTURE NOTE:
- All pytest fixtures are defined HERE (single source of truth)
- Fixtures are imported in conftest.py via "from fixtures import *"
- HTTP traffic never leaves the process: FakeTransport is mounted on the
  client's requests.Session and answers from a route table
"""

import json
from http import HTTPStatus
from urllib.parse import urlsplit

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from api.client import APIClient
from base.logger import Logger


BASE_URL = 'https://api.test'


class FakeTransport(BaseAdapter):
    """
    requests transport adapter answering from registered routes

    Every PreparedRequest that reaches the adapter is kept in `sent`, so
    tests can assert on the exact method, URL, headers and body on the wire.
    """

    def __init__(self):
        super().__init__()
        self.routes = {}
        self.sent = []

    def add(self, method, path, status=200, json_body=None, text=None, headers=None, echo=False, error=None):
        """
        Register a canned answer for METHOD path

        Args:
            json_body: Serialized as JSON with an application/json Content-Type
            text: Returned as text/plain
            headers: Extra/overriding response headers
            echo: Reply with the request body as JSON
            error: Exception instance raised instead of answering
        """
        self.routes[(method.upper(), path)] = {
            'status': status,
            'json_body': json_body,
            'text': text,
            'headers': headers or {},
            'echo': echo,
            'error': error,
        }

    @property
    def last(self):
        return self.sent[-1]

    def last_json(self):
        body = self.last.body
        if isinstance(body, bytes):
            body = body.decode('utf-8')
        return json.loads(body)

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.sent.append(request)
        route = self.routes.get((request.method, urlsplit(request.url).path))

        if route is None:
            return self._build(request, 404, b'Not Found', {'Content-Type': 'text/plain'})
        if route['error'] is not None:
            raise route['error']

        headers = CaseInsensitiveDict()
        if route['echo']:
            body = request.body or b''
            if isinstance(body, str):
                body = body.encode('utf-8')
            headers['Content-Type'] = 'application/json; charset=utf-8'
        elif route['json_body'] is not None:
            body = json.dumps(route['json_body']).encode('utf-8')
            headers['Content-Type'] = 'application/json'
        elif route['text'] is not None:
            body = route['text'].encode('utf-8')
            headers['Content-Type'] = 'text/plain; charset=utf-8'
        else:
            body = b''
        headers.update(route['headers'])

        return self._build(request, route['status'], body, headers)

    @staticmethod
    def _build(request, status, body, headers):
        response = requests.Response()
        response.status_code = status
        response.reason = HTTPStatus(status).phrase
        response.headers = CaseInsensitiveDict(headers)
        response._content = body
        response.encoding = 'utf-8'
        response.url = request.url
        response.request = request
        return response

    def close(self):
        pass


# ==================== Transport Fixtures ====================

@pytest.fixture
def transport():
    """Fresh fake transport per test"""
    return FakeTransport()


# ==================== API Fixtures ====================

@pytest.fixture
def make_client(transport):
    """
    Factory creating APIClient instances wired to the fake transport

    Usage:
        client = make_client([GetItem()], validate_status=False)
    """
    clients = []

    def _make(endpoints=None, **kwargs):
        client = APIClient(BASE_URL, endpoints, **kwargs)
        client.session.mount(BASE_URL, transport)
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()


@pytest.fixture
def api_client(make_client):
    """APIClient without endpoints"""
    return make_client()


# ==================== Logger Fixtures ====================

def logger_options(config):
    """Logger settings taken from the command line options in conftest.py"""
    return {
        'log_path': config.getoption("--log-path"),
        'file_level': config.getoption("--file-log-level"),
        'console_level': config.getoption("--console-log-level"),
        'reportportal': config.getoption("--rp-logging"),
    }


@pytest.fixture
def error_collection():
    """Collect Logger error messages for the duration of a test"""
    Logger.init_error_collection()
    yield Logger
    Logger.stop_error_collection()


@pytest.fixture
def isolated_logger(request, monkeypatch):
    """
    Unconfigured Logger for tests that check handler setup

    The session configuration is restored afterwards.
    """
    for name in ('LOG_PATH', 'LOG_REPORTPORTAL'):
        monkeypatch.delenv(name, raising=False)
    Logger.shutdown()
    yield Logger
    Logger.shutdown()
    Logger.get_instance(**logger_options(request.config))
