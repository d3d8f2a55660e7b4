"""
Zabbix API Configuration

This module manages configuration for the shared Zabbix API client.
Configuration can be set via:
1. Environment variables
2. A config.env file (or the file named by ZABBIX_CONFIG_FILE)
3. Direct configuration via set_config()

Example using environment variables:
    # Create config.env file next to this module
    ZABBIX_HOST=https://zabbix.example.com
    ZABBIX_USERNAME=Admin
    ZABBIX_PASSWORD=zabbix

Example direct configuration:
    from zabbix_jsonrpc.config import set_config, get_client

    set_config({
        'zabbix_host': 'https://zabbix.example.com',
        'zabbix_token': 'your-session-token'
    })
    hosts = get_client().host_get({'output': ['hostid', 'name']})
"""

import logging
import os
from typing import Optional, Dict, Any
from pathlib import Path

from .errors import ZabbixConfigError

logger = logging.getLogger('zabbix_jsonrpc')

API_ENDPOINT = '/api_jsonrpc.php'


def read_env_file(path: Path) -> Dict[str, str]:
    """
    Parse a KEY=value settings file

    Blank lines, comments and lines without '=' are skipped. An 'export '
    prefix and matching surrounding quotes are stripped.
    """
    settings: Dict[str, str] = {}
    if not path.is_file():
        return settings

    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if line.startswith('export '):
            line = line[len('export '):].lstrip()
        key, sep, value = line.partition('=')
        if line.startswith('#') or not sep:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in '"\'':
            value = value[1:-1]
        settings[key.strip()] = value
    return settings


def config_file() -> Path:
    """ZABBIX_CONFIG_FILE, or config.env next to this module"""
    return Path(os.getenv('ZABBIX_CONFIG_FILE') or Path(__file__).parent / 'config.env')


def _is_true(value: str) -> bool:
    return value.strip().lower() in ('1', 'true', 'yes')


class ZabbixConfig:
    """Zabbix API configuration, the environment taking precedence over the config file"""

    def __init__(self):
        self._file_settings = read_env_file(config_file())
        self.zabbix_host: str = self._setting('ZABBIX_HOST', 'localhost')
        self.zabbix_user: str = self._setting('ZABBIX_USERNAME', 'admin')
        self.zabbix_password: str = self._setting('ZABBIX_PASSWORD', 'zabbix')
        self.http_user: Optional[str] = self._setting('ZABBIX_HTTP_USERNAME')
        self.http_password: Optional[str] = self._setting('ZABBIX_HTTP_PASSWORD')
        self.zabbix_token: Optional[str] = self._setting('ZABBIX_TOKEN')
        self.verify_ssl: bool = _is_true(self._setting('ZABBIX_VERIFY_SSL', 'true'))
        self.token_cache_dir: str = self._setting('ZABBIX_TOKEN_CACHE_DIR', '/tmp')
        self.debug: bool = _is_true(self._setting('DEBUG', 'false'))

    def _setting(self, name: str, default: Optional[str] = None) -> Optional[str]:
        if name in os.environ:
            return os.environ[name]
        return self._file_settings.get(name, default)


_FIELDS = (
    'zabbix_host',
    'zabbix_user',
    'zabbix_password',
    'http_user',
    'http_password',
    'zabbix_token',
    'verify_ssl',
    'token_cache_dir',
    'debug',
)

# Changing any of these invalidates the shared client
_CONNECTION_FIELDS = set(_FIELDS) - {'debug'}

# Global configuration instance
_config = ZabbixConfig()

# Shared client built from _config on first use
_client = None


def get_config() -> Dict[str, Any]:
    """
    Get current configuration

    Returns:
        Dictionary containing current configuration
    """
    return {field: getattr(_config, field) for field in _FIELDS}


def set_config(new_config: Dict[str, Any]) -> None:
    """
    Set configuration (merges with existing config)

    Args:
        new_config: Dictionary with configuration values to update

    Raises:
        ZabbixConfigError: If new_config holds an unknown key
    """
    global _client

    unknown = set(new_config) - set(_FIELDS)
    if unknown:
        raise ZabbixConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

    for key, value in new_config.items():
        setattr(_config, key, value)

    if _CONNECTION_FIELDS & set(new_config):
        _client = None

    debug_log('Configuration updated: '
              f'zabbix_host={_config.zabbix_host}, '
              f'has_token={bool(_config.zabbix_token)}, '
              f'has_user={bool(_config.zabbix_user)}, '
              f'verify_ssl={_config.verify_ssl}')


def reset_config() -> None:
    """Reset configuration to defaults (from environment variables)"""
    global _config, _client
    _config = ZabbixConfig()
    _client = None


def get_zabbix_api_url() -> str:
    """
    Get Zabbix API URL

    Returns:
        Full URL to Zabbix API endpoint

    Raises:
        ZabbixConfigError: If Zabbix host is not configured
    """
    if not _config.zabbix_host:
        raise ZabbixConfigError(
            'Zabbix host not configured. Set ZABBIX_HOST environment variable '
            'or call set_config()'
        )

    base_url = _config.zabbix_host.rstrip('/')
    if '://' not in base_url:
        base_url = f'http://{base_url}'
    if base_url.endswith(API_ENDPOINT):
        return base_url
    return f'{base_url}{API_ENDPOINT}'


def get_client():
    """
    Get the shared client, logging in on first use

    Returns:
        ZabbixApi built from the current configuration
    """
    global _client

    if _client is None:
        from .client import ZabbixApi

        _client = ZabbixApi(
            get_zabbix_api_url(),
            user=_config.zabbix_user or '',
            password=_config.zabbix_password or '',
            http_user=_config.http_user or '',
            http_password=_config.http_password or '',
            auth_token=_config.zabbix_token or '',
            check_ssl_peer=_config.verify_ssl,
            token_cache_dir=_config.token_cache_dir,
        )
    return _client


def setup_logging(level: int = logging.DEBUG) -> logging.Logger:
    """Attach a stderr handler to the package logger"""
    if not any(getattr(h, '_zabbix_jsonrpc', False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s'))
        handler._zabbix_jsonrpc = True
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def debug_log(message: str, *args: Any) -> None:
    """
    Debug log helper

    Args:
        message: Log message
        *args: Additional values appended to the message
    """
    if _config.debug and logger.getEffectiveLevel() > logging.DEBUG:
        setup_logging()
    if not logger.isEnabledFor(logging.DEBUG):
        return
    if args:
        message = ' '.join([message] + [str(arg) for arg in args])
    logger.debug('[Zabbix API] %s', message)
