"""Graph Client Factory

Factory functions to create a graph client with the transport selected by
configuration settings.
"""

import logging
from typing import Optional

from .graph_client import GraphAPIClient
from .config.client_config_loader import GraphClientConfig, ClientConfigurationError
from .utils.client_utils import GraphClientError
from ..mock.mock_graph_transport import MockGraphTransport

logger = logging.getLogger(__name__)


def create_graph_client(config_path: Optional[str] = None, *, config: Optional[GraphClientConfig] = None,
                        access_token: Optional[str] = None) -> GraphAPIClient:
    """
    Create a graph client based on configuration settings.

    Returns a client on an HttpxTransport, or on a MockGraphTransport when
    the 'use_mock_transport' setting is enabled.

    Args:
        config_path: Path to the client configuration YAML file (optional if config provided)
        config: Pre-configured GraphClientConfig object (takes precedence over config_path)
        access_token: Access token overriding the configured one

    Returns:
        GraphAPIClient

    Raises:
        ClientConfigurationError: If configuration is invalid
        GraphClientError: If the client cannot be created
    """
    try:
        if config is not None:
            client_config = config
            logger.info("Using provided config object for client creation")
        elif config_path is not None:
            client_config = GraphClientConfig(config_path)
            logger.info(f"Loaded config from {config_path} for client creation")
        else:
            client_config = GraphClientConfig()
            logger.info("Using default config for client creation")

        client_config.validate_config()

        if client_config.use_mock_transport():
            logger.info("Creating GraphAPIClient on MockGraphTransport based on configuration setting")
            return GraphAPIClient(access_token, config=client_config, transport=MockGraphTransport())

        logger.info("Creating GraphAPIClient on HttpxTransport based on configuration setting")
        return GraphAPIClient(access_token, config=client_config)

    except ClientConfigurationError as e:
        logger.error(f"Configuration error while creating client: {e}")
        raise
    except GraphClientError:
        raise
    except Exception as e:
        logger.error(f"Unexpected error while creating client: {e}")
        raise GraphClientError(f"Failed to create client: {e}")


def create_mock_client(access_token: Optional[str] = None, *,
                       transport: Optional[MockGraphTransport] = None) -> GraphAPIClient:
    """
    Create a graph client on a mock transport for testing.

    Args:
        access_token: Optional access token
        transport: Existing MockGraphTransport to reuse

    Returns:
        GraphAPIClient whose transport is a MockGraphTransport
    """
    logger.info("Creating GraphAPIClient on MockGraphTransport for testing")
    if transport is None:
        transport = MockGraphTransport()
    return GraphAPIClient(access_token, transport=transport)
