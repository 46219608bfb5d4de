"""
Graph Client Configuration Loader

This module provides functionality to load and validate graph client
configuration from YAML files, with environment variable overrides.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
import logging

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_SERVER_URL = "https://graph.facebook.com"

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    'GRAPH_CLIENT_SERVER_URL': ('server', 'url'),
    'GRAPH_CLIENT_API_VERSION': ('server', 'api_version'),
    'GRAPH_CLIENT_ACCESS_TOKEN': ('auth', 'access_token'),
    'GRAPH_CLIENT_TIMEOUT': ('client', 'timeout'),
}


class ClientConfigurationError(Exception):
    """Raised when there are client configuration loading or validation errors."""
    pass


class GraphClientConfig:
    """
    Graph client configuration loader and manager.

    Loads configuration from YAML files and provides access to configuration
    sections for connecting to a graph API server. Environment variables
    (optionally read from a .env file) override values from the file.
    """

    def __init__(self, config_path: Optional[str] = None, *, use_env: bool = True,
                 env_file: Optional[str] = None):
        """
        Initialize the client configuration loader.

        Args:
            config_path: Path to configuration file. If None, uses default locations or built-in defaults.
            use_env: Whether GRAPH_CLIENT_* environment variables override the file
            env_file: Optional .env file to load before reading the environment
        """
        self.config_data: Dict[str, Any] = {}
        self.config_path: Optional[str] = None

        if config_path is not None:
            self.load_config(config_path)
        else:
            self._load_default_config()

        if use_env:
            self.apply_env_overrides(env_file)

    def load_config(self, config_path: str) -> None:
        """
        Load configuration from a specific file path.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            ClientConfigurationError: If the file cannot be loaded or parsed
        """
        config_file = Path(config_path)

        if not config_file.exists():
            raise ClientConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                self.config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ClientConfigurationError(f"Error parsing YAML configuration: {e}")
        except OSError as e:
            raise ClientConfigurationError(f"Error loading configuration file: {e}")

        if not isinstance(self.config_data, dict):
            raise ClientConfigurationError(f"Configuration root must be a mapping: {config_path}")

        self.config_path = str(config_file.absolute())
        logger.info(f"Loaded client configuration from: {self.config_path}")

    def _load_default_config(self) -> None:
        """
        Load default configuration by searching standard locations or using built-in defaults.
        """
        default_paths = [
            "graphclient-config.yaml",
            os.path.expanduser("~/.graphrest/graphclient-config.yaml"),
            "/etc/graphrest/graphclient-config.yaml"
        ]

        for path in default_paths:
            if os.path.exists(path):
                try:
                    self.load_config(path)
                    logger.info(f"Found and loaded default config from: {path}")
                    return
                except ClientConfigurationError:
                    continue

        self.config_data = {
            'server': {
                'url': DEFAULT_SERVER_URL,
                'api_version': None
            },
            'auth': {
                'access_token': None
            },
            'client': {
                'timeout': 30,
                'use_mock_transport': False
            }
        }
        self.config_path = "<built-in defaults>"
        logger.info("Using built-in default configuration")

    def apply_env_overrides(self, env_file: Optional[str] = None) -> None:
        """
        Override configuration values from GRAPH_CLIENT_* environment variables.

        Args:
            env_file: Optional .env file loaded first (existing variables win)
        """
        if env_file is not None:
            load_dotenv(env_file, override=False)

        for env_name, (section, key) in ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is None or value == "":
                continue
            if key == 'timeout':
                try:
                    value = int(value)
                except ValueError:
                    raise ClientConfigurationError(f"{env_name} must be an integer, got {value!r}")
            self.config_data.setdefault(section, {})
            if self.config_data[section] is None:
                self.config_data[section] = {}
            self.config_data[section][key] = value
            logger.debug(f"Configuration {section}.{key} overridden from {env_name}")

    def _section(self, name: str) -> Dict[str, Any]:
        return self.config_data.get(name) or {}

    def get_server_config(self) -> Dict[str, Any]:
        """
        Get server configuration section.

        Returns:
            Dictionary containing server configuration
        """
        return self._section('server')

    def get_auth_config(self) -> Dict[str, Any]:
        """
        Get authentication configuration section.

        Returns:
            Dictionary containing auth configuration
        """
        return self._section('auth')

    def get_client_config(self) -> Dict[str, Any]:
        """
        Get client configuration section.

        Returns:
            Dictionary containing client configuration
        """
        return self._section('client')

    def get_server_url(self) -> str:
        """
        Get the graph API server URL.

        Returns:
            Server URL string
        """
        return self.get_server_config().get('url') or DEFAULT_SERVER_URL

    def get_api_version(self) -> Optional[str]:
        """
        Get the API version path prefix, if any.

        Returns:
            Version string such as "v19.0", or None
        """
        return self.get_server_config().get('api_version')

    def get_access_token(self) -> Optional[str]:
        """
        Get the configured access token.

        Returns:
            Access token string, or None when no credential is configured
        """
        return self.get_auth_config().get('access_token') or None

    def get_timeout(self) -> int:
        """
        Get the request timeout in seconds.

        Returns:
            Timeout in seconds
        """
        return self.get_client_config().get('timeout', 30)

    def get_user_agent(self) -> Optional[str]:
        return self.get_client_config().get('user_agent')

    def use_mock_transport(self) -> bool:
        """
        Get whether to use the in-memory mock transport instead of HTTP.

        Returns:
            True if the mock transport should be used (default: False)
        """
        return self.get_client_config().get('use_mock_transport', False)

    def validate_config(self) -> None:
        """
        Validate the loaded configuration.

        Raises:
            ClientConfigurationError: If configuration is invalid
        """
        server_url = self.get_server_url()
        if not isinstance(server_url, str):
            raise ClientConfigurationError("Server URL must be a non-empty string")

        if not server_url.startswith(('http://', 'https://')):
            raise ClientConfigurationError("Server URL must start with http:// or https://")

        api_version = self.get_api_version()
        if api_version is not None and not isinstance(api_version, str):
            raise ClientConfigurationError("api_version must be a string")

        access_token = self.get_access_token()
        if access_token is not None and not isinstance(access_token, str):
            raise ClientConfigurationError("access_token must be a string")

        timeout = self.get_timeout()
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ClientConfigurationError("Timeout must be a positive number")

        if not isinstance(self.use_mock_transport(), bool):
            raise ClientConfigurationError("use_mock_transport must be a boolean value")

        logger.info("Client configuration validation passed")

    def __str__(self) -> str:
        """String representation of the configuration."""
        return f"GraphClientConfig(path={self.config_path}, server_url={self.get_server_url()})"


# Global client configuration instance
_client_config_instance: Optional[GraphClientConfig] = None


def get_client_config(config_path: Optional[str] = None) -> GraphClientConfig:
    """
    Get the global client configuration instance.

    Args:
        config_path: Optional path to configuration file. Only used on first call.

    Returns:
        GraphClientConfig instance
    """
    global _client_config_instance

    if _client_config_instance is None:
        _client_config_instance = GraphClientConfig(config_path)
        _client_config_instance.validate_config()

    return _client_config_instance


def reload_client_config(config_path: Optional[str] = None) -> GraphClientConfig:
    """
    Reload the global client configuration instance.

    Args:
        config_path: Optional path to configuration file

    Returns:
        New GraphClientConfig instance
    """
    global _client_config_instance

    _client_config_instance = GraphClientConfig(config_path)
    _client_config_instance.validate_config()

    return _client_config_instance
