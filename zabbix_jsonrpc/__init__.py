"""
Zabbix API - JSON-RPC Python Client

This package provides direct access to the Zabbix API from Python.
Every API method has a wrapper on ZabbixApi named after it, with the dot
replaced by an underscore.

Example - Basic usage:
    from zabbix_jsonrpc import ZabbixApi

    api = ZabbixApi('https://zabbix.example.com/api_jsonrpc.php', 'Admin', 'zabbix')

    # Get all hosts, keyed by hostid
    hosts = api.host_get({'output': 'extend'}, result_key='hostid')

    # Create a new host
    result = api.host_create({
        'host': 'server-01',
        'groups': [{'groupid': '1'}],
        'interfaces': [{
            'type': 1,
            'main': 1,
            'useip': 1,
            'ip': '192.168.1.100',
            'dns': '',
            'port': '10050'
        }]
    })

    # Delete-style methods take a bare list of ids
    api.host_delete(result['hostids'])

Example - Default parameters:
    api.set_default_params({'output': 'extend'})
    problems = api.problem_get({'limit': 100})

Example - Configuration from the environment:
    from zabbix_jsonrpc import get_client

    # ZABBIX_HOST, ZABBIX_USERNAME, ZABBIX_PASSWORD, ...
    version = get_client().apiinfo_version()
"""

from .client import ZabbixApi
from .config import get_config, set_config, reset_config, get_client
from .errors import (
    ZabbixError,
    ZabbixConnectionError,
    ZabbixReadError,
    ZabbixDecodeError,
    ZabbixAPIError,
    ZabbixConfigError,
)
from .methods import API_METHODS, ANONYMOUS_METHODS
from .params import get_request_params
from .types import Exchange

__version__ = '1.0.0'

__all__ = [
    # Client
    'ZabbixApi',
    'Exchange',
    'get_request_params',
    'API_METHODS',
    'ANONYMOUS_METHODS',

    # Configuration
    'get_config',
    'set_config',
    'reset_config',
    'get_client',

    # Errors
    'ZabbixError',
    'ZabbixConnectionError',
    'ZabbixReadError',
    'ZabbixDecodeError',
    'ZabbixAPIError',
    'ZabbixConfigError',
]
