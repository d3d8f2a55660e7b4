"""
Zabbix API client

    from zabbix_jsonrpc import ZabbixApi

    api = ZabbixApi('https://zabbix.example.com/api_jsonrpc.php', 'Admin', 'zabbix')

    # One method per API call, dot replaced by an underscore
    hosts = api.host_get({'output': ['hostid', 'name']}, result_key='hostid')
    api.host_delete(['10084', '10085'])

    # Anything not in the method table
    api.call('proxygroup.get', {'output': 'extend'})
"""

import json
import logging
import ssl
import sys
from typing import Any, Dict, Optional, TextIO

from . import transport
from .auth import TokenCache
from .decoder import decode
from .errors import ZabbixAPIError, ZabbixConfigError
from .methods import API_METHODS, python_name, requires_auth
from .params import Params, get_request_params
from .types import Exchange, ParamsInput

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_CACHE_DIR = '/tmp'


class ZabbixApi:
    """
    Client for the Zabbix JSON-RPC API

    Args:
        api_url: Full URL of api_jsonrpc.php
        user: Login name; with password, logs in on construction
        password: Login password
        http_user: HTTP Basic username
        http_password: HTTP Basic password
        auth_token: Already issued session token, skips the login
        ssl_context: Custom SSLContext for https endpoints
        check_ssl_peer: Verify the TLS peer when no ssl_context is given
        print_communication: Write raw requests and responses to stream
        token_cache_dir: Directory of the session token cache, None to disable
        stream: Diagnostic stream for print_communication
    """

    def __init__(self, api_url: str = '', user: str = '', password: str = '',
                 http_user: str = '', http_password: str = '', auth_token: str = '',
                 ssl_context: Optional[ssl.SSLContext] = None, check_ssl_peer: bool = True,
                 print_communication: bool = False,
                 token_cache_dir: Optional[str] = DEFAULT_TOKEN_CACHE_DIR,
                 stream: Optional[TextIO] = None):
        self.api_url = api_url
        self.ssl_context = ssl_context
        self.check_ssl_peer = check_ssl_peer
        self.print_communication = print_communication
        self.token_cache_dir = token_cache_dir
        self.stream = stream or sys.stdout
        self._authorization = ''
        self._default_params: Dict[str, Any] = {}
        self._auth_token = ''

        if http_user and http_password:
            self.set_basic_authorization(http_user, http_password)

        if auth_token:
            self._auth_token = auth_token
        elif api_url and user and password:
            self.user_login({'user': user, 'password': password},
                            token_cache_dir=token_cache_dir)

    def __repr__(self):
        return f'<ZabbixApi {self.api_url!r} authenticated={bool(self._auth_token)}>'

    def get_api_url(self) -> str:
        return self.api_url

    def set_api_url(self, api_url: str) -> None:
        self.api_url = api_url

    def set_basic_authorization(self, user: str, password: str) -> None:
        """Send HTTP Basic credentials with every request; empty values turn it off"""
        if user and password:
            self._authorization = transport.basic_auth_header(user, password)
        else:
            self._authorization = ''

    def set_ssl_context(self, ssl_context: Optional[ssl.SSLContext]) -> None:
        self.ssl_context = ssl_context

    def get_default_params(self) -> Dict[str, Any]:
        return dict(self._default_params)

    def set_default_params(self, default_params: Dict[str, Any]) -> None:
        """
        Set parameters merged into every keyed request

        Raises:
            ZabbixConfigError: If default_params is not a mapping
        """
        if not isinstance(default_params, dict):
            raise ZabbixConfigError(
                'The argument default_params on set_default_params() has to be a dict.'
            )
        self._default_params = dict(default_params)

    def set_print_communication(self, print_communication: bool = True) -> None:
        self.print_communication = print_communication

    def get_auth_token(self) -> str:
        return self._auth_token

    def set_auth_token(self, auth_token: str) -> None:
        self._auth_token = auth_token or ''

    def get_request_params(self, params: ParamsInput = None) -> Params:
        """Normalize params and merge in the default parameters"""
        return get_request_params(params, self._default_params)

    def send(self, method: str, params: Any = None, result_key: str = '',
             auth: bool = True) -> Exchange:
        """
        Perform one JSON-RPC call

        Args:
            method: Zabbix API method (e.g., 'host.get')
            params: Already normalized params
            result_key: Result field used to key a list of objects
            auth: Attach the session token

        Returns:
            Exchange holding the raw request, the raw response and the result

        Raises:
            ZabbixConnectionError, ZabbixReadError, ZabbixDecodeError, ZabbixAPIError
        """
        if params is None:
            params = []
        elif not isinstance(params, (list, tuple, dict)):
            params = [params]

        envelope = transport.build_envelope(method, params, self._auth_token, auth)
        request = json.dumps(envelope)

        logger.debug('Calling %s (id %s)', method, envelope['id'])
        response = transport.post(
            self.api_url,
            request,
            authorization=self._authorization,
            verify_ssl=self.check_ssl_peer,
            ssl_context=self.ssl_context,
            print_communication=self.print_communication,
            stream=self.stream,
        )

        result = decode(response, result_key)
        return Exchange(method=method, request=request, response=response, result=result)

    def request(self, method: str, params: Any = None, result_key: str = '',
                auth: bool = True) -> Any:
        """Perform one JSON-RPC call and return its result"""
        return self.send(method, params, result_key, auth).result

    def call(self, method: str, params: ParamsInput = None, result_key: str = '') -> Any:
        """
        Call any API method by name

        Example:
            api.call('host.get', {'hostids': ['10084']})
        """
        return self.request(method, self.get_request_params(params), result_key,
                            requires_auth(method))

    def user_login(self, params: ParamsInput = None, result_key: str = '',
                   token_cache_dir: Optional[str] = DEFAULT_TOKEN_CACHE_DIR) -> str:
        """
        Log in and return the session token

        A token cached by an earlier login of the same user is reused after
        a user.get check succeeds. A rejected token is removed from the cache.

        Args:
            params: user.login params, e.g. {'user': 'Admin', 'password': 'zabbix'}
            result_key: Passed through to the request
            token_cache_dir: Directory of the token cache, None to disable

        Returns:
            Session token
        """
        self._auth_token = ''

        cache = TokenCache.for_login(token_cache_dir, params)
        if cache is not None and cache.exists():
            self._auth_token = cache.read()
            try:
                self.user_get({'countOutput': True})
                logger.debug('Reusing cached session token for %s', cache.username)
            except ZabbixAPIError as exc:
                logger.info('Cached session token for %s rejected: %s', cache.username, exc)
                self._auth_token = ''
                cache.delete()

        if not self._auth_token:
            params = self.get_request_params(params)
            self._auth_token = self.request('user.login', params, result_key, False)
            if cache is not None:
                cache.write(self._auth_token)

        return self._auth_token

    def user_logout(self, params: ParamsInput = None, result_key: str = '') -> Any:
        """Log out and forget the session token"""
        params = self.get_request_params(params)
        response = self.request('user.logout', params, result_key)
        self._auth_token = ''
        return response


def _api_method(method: str):
    def api_method(self, params: ParamsInput = None, result_key: str = '') -> Any:
        params = self.get_request_params(params)
        return self.request(method, params, result_key, requires_auth(method))

    api_method.__name__ = python_name(method)
    api_method.__qualname__ = f'ZabbixApi.{api_method.__name__}'
    api_method.__doc__ = f"Call the '{method}' API method"
    return api_method


for _method in API_METHODS:
    if not hasattr(ZabbixApi, python_name(_method)):
        setattr(ZabbixApi, python_name(_method), _api_method(_method))
