#!/usr/bin/env python3
"""
Store configuration for the vintage product hider

Secrets (url_base, api_domain) come from a YAML file, usually
config/secrets.yml. Values in the environment (or a .env file) win over
the file so the script can run from CI without a secrets file on disk.
"""

import os
from dataclasses import dataclass
from typing import Optional

import yaml
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_CONFIG_FILE = os.path.join('config', 'secrets.yml')

# Rate limiting
DELAY_BETWEEN_REQUESTS = 0.11  # seconds

# Page range used when no command is given
START_PAGE = 1
END_PAGE = 100

REQUEST_TIMEOUT = 30
REPORT_DIR = 'data'

# Environment variables that override the secrets file
ENV_OVERRIDES = {
    'url_base': 'SHOPIFY_URL_BASE',
    'api_domain': 'SHOPIFY_API_DOMAIN',
    'access_token': 'SHOPIFY_ACCESS_TOKEN',
    'delay': 'DELAY_BETWEEN_REQUESTS',
    'report_dir': 'REPORT_DIR',
}

REQUIRED_SETTINGS = ['url_base']


class VintageHiderError(Exception):
    """Base error for the vintage hider"""


class ConfigError(VintageHiderError):
    """Raised when the store configuration is missing or unusable"""


@dataclass
class StoreConfig:
    """Connection settings for the store Admin API"""
    url_base: str
    api_domain: Optional[str] = None
    access_token: Optional[str] = None
    delay: float = DELAY_BETWEEN_REQUESTS
    timeout: int = REQUEST_TIMEOUT
    report_dir: str = REPORT_DIR


def load_secrets_file(path: str) -> dict:
    """Read the YAML secrets file, returning {} when it does not exist"""
    if not os.path.exists(path):
        return {}
    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Could not parse {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(data).__name__}")
    return data


def validate_config(settings: dict):
    """
    Validate that all required settings are present.

    api_domain is only needed to build url_base when url_base is not set,
    so load_config resolves that before validating.
    """
    missing = [name for name in REQUIRED_SETTINGS if not settings.get(name)]
    if missing:
        raise ConfigError(
            f"Missing required settings: {', '.join(missing)} (or api_domain to derive url_base)"
        )


def load_config(path: Optional[str] = None, delay: Optional[float] = None,
                report_dir: Optional[str] = None) -> StoreConfig:
    """
    Build the StoreConfig from the secrets file and the environment.

    Precedence: explicit arguments, then environment, then the file.
    """
    path = path or os.getenv('VINTAGEHIDER_CONFIG', DEFAULT_CONFIG_FILE)
    settings = dict(load_secrets_file(path))

    for key, env_var in ENV_OVERRIDES.items():
        value = os.getenv(env_var)
        if value:
            settings[key] = value

    if not settings.get('url_base') and settings.get('api_domain'):
        settings['url_base'] = f"https://{settings['api_domain']}/admin"

    validate_config(settings)

    if delay is None:
        delay = settings.get('delay', DELAY_BETWEEN_REQUESTS)
    try:
        delay = float(delay)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid request delay: {delay!r}") from e
    if delay < 0:
        raise ConfigError(f"Request delay must not be negative: {delay}")

    return StoreConfig(
        url_base=str(settings['url_base']).rstrip('/'),
        api_domain=settings.get('api_domain'),
        access_token=settings.get('access_token'),
        delay=delay,
        report_dir=report_dir or settings.get('report_dir') or REPORT_DIR,
    )
