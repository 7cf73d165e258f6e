"""Configuration management for the followed rooms client.

This module handles:
- Loading/saving the user config file (~/.followed_rooms/config.json)
- Reading credentials from environment variables
- Building a configured RoomListClient from those sources
"""

import json
import os
from pathlib import Path

from core.errors import ConfigurationError
from models.types import Credentials

# Configuration file path
USER_CONFIG_FILE = Path.home() / '.followed_rooms' / 'config.json'

# Environment variables take priority over the config file
SESSION_ID_ENV = 'CB_SESSION_ID'
CSRF_TOKEN_ENV = 'CB_CSRF_TOKEN'


def load_config() -> dict:
    """Load configuration from the user config file.

    Returns:
        Config dict, or an empty dict if the file does not exist

    Raises:
        ConfigurationError: If the file exists but does not hold a JSON object
    """
    if USER_CONFIG_FILE.exists():
        try:
            with open(USER_CONFIG_FILE, 'r') as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Config file {USER_CONFIG_FILE} is not valid JSON: {e}") from e
        if not isinstance(config, dict):
            raise ConfigurationError(f"Config file {USER_CONFIG_FILE} must hold a JSON object")
        return config
    return {}


def save_config(config: dict):
    """Save configuration to the user config file.

    Args:
        config: Configuration dict to save
    """
    USER_CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)

    with open(USER_CONFIG_FILE, 'w') as f:
        json.dump(config, f, indent=2)


def load_credentials(config: dict | None = None) -> Credentials | None:
    """Resolve credentials from the environment, then the config file.

    Each field is resolved independently, so an environment variable can
    override just one value from the file.

    Args:
        config: Already-loaded config dict (loaded from disk if None)

    Returns:
        Credentials dict, or None if either value is missing
    """
    if config is None:
        config = load_config()

    session_id = os.getenv(SESSION_ID_ENV) or config.get('session_id')
    csrf_token = os.getenv(CSRF_TOKEN_ENV) or config.get('csrf_token')

    if not session_id or not csrf_token:
        return None
    return {'session_id': session_id, 'csrf_token': csrf_token}


def build_client(**overrides):
    """Build a RoomListClient from config, environment and explicit overrides.

    Args:
        **overrides: RoomListClient keyword arguments; None values are ignored

    Returns:
        Configured RoomListClient

    Raises:
        ConfigurationError: If no complete credentials are available
    """
    from core.client import RoomListClient

    config = load_config()
    settings = {
        key: config[key]
        for key in ('additional_cookies', 'default_page_size', 'cache_ttl_ms')
        if key in config
    }
    credentials = load_credentials(config)
    if credentials:
        settings.update(credentials)
    settings.update({key: value for key, value in overrides.items() if value is not None})

    if not settings.get('session_id') or not settings.get('csrf_token'):
        raise ConfigurationError("No credentials configured (session_id and csrf_token are required)")

    return RoomListClient(**settings)
