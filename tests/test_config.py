"""
Configuration and Request Model Tests
"""

import pytest
from api.config import APIConfig, join_url
from models.request import RequestOptions
from models.types import HttpMethod


@pytest.mark.unit
class TestAPIConfig:
    """Base URL resolution"""

    def test_get_base_url_per_environment(self, monkeypatch):
        monkeypatch.setattr(APIConfig, 'API_TEST_URL', 'https://test.api.example')
        monkeypatch.setattr(APIConfig, 'API_PROD_URL', 'https://api.example')

        assert APIConfig.get_base_url('test') == 'https://test.api.example'
        assert APIConfig.get_base_url('PROD') == 'https://api.example'

    def test_unknown_or_empty_environment_falls_back(self, monkeypatch):
        monkeypatch.setattr(APIConfig, 'API_BASE_URL', 'http://fallback.local')
        monkeypatch.setattr(APIConfig, 'API_STAGING_URL', '')

        assert APIConfig.get_base_url('staging') == 'http://fallback.local'
        assert APIConfig.get_base_url('qa') == 'http://fallback.local'

    def test_default_environment(self, monkeypatch):
        monkeypatch.setattr(APIConfig, 'DEFAULT_ENV', 'prod')
        monkeypatch.setattr(APIConfig, 'API_PROD_URL', 'https://api.example')

        assert APIConfig.get_base_url() == 'https://api.example'

    def test_get_full_url(self, monkeypatch):
        monkeypatch.setattr(APIConfig, 'API_TEST_URL', 'https://test.api.example/')

        assert APIConfig.get_full_url('items', env='test') == 'https://test.api.example/items'

    @pytest.mark.parametrize("base, endpoint, expected", [
        ('https://api.example', '/items', 'https://api.example/items'),
        ('https://api.example/', '/items', 'https://api.example/items'),
        ('https://api.example/v1', 'items', 'https://api.example/v1/items'),
        ('https://api.example', 'https://other.example/x', 'https://other.example/x'),
    ])
    def test_join_url(self, base, endpoint, expected):
        assert join_url(base, endpoint) == expected


@pytest.mark.unit
class TestRequestOptions:
    """RequestOptions coercion and defaults"""

    def test_coerce_from_string(self):
        options = RequestOptions.coerce('/ping')

        assert options.url == '/ping'
        assert options.method is None
        assert options.headers == {}
        assert options.data is None

    def test_coerce_from_dict_normalizes_method(self):
        options = RequestOptions.coerce({'url': '/items', 'method': 'patch'})

        assert options.method is HttpMethod.PATCH

    def test_coerce_copies_model(self):
        original = RequestOptions(url='/items', headers={'X-A': '1'})
        copy = RequestOptions.coerce(original)
        copy.headers['X-B'] = '2'

        assert original.headers == {'X-A': '1'}

    def test_coerce_rejects_other_types(self):
        with pytest.raises(TypeError):
            RequestOptions.coerce(42)

    def test_with_defaults_keeps_explicit_fields(self):
        options = RequestOptions(url='/items', method='PUT').with_defaults(method=HttpMethod.POST, data={'a': 1})

        assert options.method is HttpMethod.PUT
        assert options.data == {'a': 1}

    def test_with_defaults_fills_unset_fields(self):
        options = RequestOptions(url='/items').with_defaults(method=HttpMethod.DELETE)

        assert options.method is HttpMethod.DELETE
