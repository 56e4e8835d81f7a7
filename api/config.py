"""
API Configuration Module
Manages environment variables and transport settings
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


def _env_flag(name, default):
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class APIConfig:
    """Configuration class for base URLs and transport settings"""

    # Base URL used when no environment is selected
    API_BASE_URL = os.getenv('API_BASE_URL', 'http://localhost:8000')

    # Base URLs for different environments
    API_TEST_URL = os.getenv('API_TEST_URL', API_BASE_URL)
    API_STAGING_URL = os.getenv('API_STAGING_URL', '')
    API_PROD_URL = os.getenv('API_PROD_URL', '')

    # Default environment (test, staging, prod)
    DEFAULT_ENV = os.getenv('TEST_ENV', 'test')

    # Request timeout settings (in seconds)
    DEFAULT_TIMEOUT = float(os.getenv('API_TIMEOUT', '30'))

    # Raise requests.HTTPError on non-2xx responses
    VALIDATE_STATUS = _env_flag('API_VALIDATE_STATUS', 'true')

    # Headers sent with every request
    DEFAULT_HEADERS = {
        'Content-Type': 'application/json',
        'Accept': 'application/json'
    }

    @classmethod
    def get_base_url(cls, env=None):
        """
        Get the base URL for the specified environment
        
        Args:
            env: Environment name (test, staging, prod). If None, uses DEFAULT_ENV
            
        Returns:
            str: Base URL for the environment, API_BASE_URL when the
                environment is unknown or has no URL configured
        """
        env = env or cls.DEFAULT_ENV
        env = env.lower()
        
        url_map = {
            'test': cls.API_TEST_URL,
            'staging': cls.API_STAGING_URL,
            'prod': cls.API_PROD_URL
        }
        
        return url_map.get(env) or cls.API_BASE_URL

    @classmethod
    def get_full_url(cls, endpoint, env=None):
        """
        Get the full URL for an endpoint
        
        Args:
            endpoint: API endpoint path (e.g., '/items')
            env: Environment name (optional)
            
        Returns:
            str: Full URL
        """
        return join_url(cls.get_base_url(env), endpoint)


def join_url(base_url, endpoint):
    """
    Join a base URL and an endpoint path with a single slash

    Absolute http(s) endpoints are returned unchanged.
    """
    if endpoint.startswith(('http://', 'https://')):
        return endpoint
    if not endpoint.startswith('/'):
        endpoint = f'/{endpoint}'
    return f"{base_url.rstrip('/')}{endpoint}"
