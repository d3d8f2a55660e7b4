"""
Exceptions raised by the Zabbix JSON-RPC client

Every failure derives from ZabbixError so callers can catch the whole
family, or pick out the one they care about:

    from zabbix_jsonrpc import ZabbixApi, ZabbixAPIError, ZabbixConnectionError

    try:
        hosts = api.host_get({'output': ['hostid']})
    except ZabbixConnectionError:
        ...  # network problem
    except ZabbixAPIError as exc:
        print(exc.code, exc.data)  # server rejected the call
"""

from typing import Any, Optional, Union


class ZabbixError(Exception):
    """Base class for all client errors"""


class ZabbixConnectionError(ZabbixError, ConnectionError):
    """The HTTP transport to the API endpoint could not be opened"""

    def __init__(self, url: str, reason: Any = None):
        self.url = url
        self.reason = reason
        message = f'Could not connect to "{url}"'
        if reason:
            message = f'{message}: {reason}'
        super().__init__(message)


class ZabbixReadError(ZabbixError):
    """The connection was opened but the response body could not be read"""

    def __init__(self, url: str, reason: Any = None):
        self.url = url
        self.reason = reason
        message = f'Could not read data from "{url}"'
        if reason:
            message = f'{message}: {reason}'
        super().__init__(message)


class ZabbixDecodeError(ZabbixError, ValueError):
    """The response body is not a JSON-RPC response object"""

    def __init__(self, body: Union[bytes, str]):
        self.body = body
        super().__init__('Could not decode JSON response.')


class ZabbixAPIError(ZabbixError):
    """
    The server answered with a JSON-RPC error object

    Common codes:
        -32602 - Invalid params (eg already exists)
        -32500 - no permissions
    """

    def __init__(self, code: Any, message: Optional[str] = None, data: Any = None):
        self.code = code
        self.data = data
        self.message = message or f'API error {code}: {data}'
        super().__init__(self.message)


class ZabbixConfigError(ZabbixError, ValueError):
    """Invalid client configuration"""
