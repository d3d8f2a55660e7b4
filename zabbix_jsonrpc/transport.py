"""
HTTP transport for Zabbix JSON-RPC calls

One call is one POST on a fresh HTTP session. Nothing is pooled, retried
or timed out.
"""

import base64
import ssl
import sys
import time
from typing import Any, Dict, Optional, TextIO

import requests
from requests.adapters import HTTPAdapter

from .config import debug_log
from .errors import ZabbixConnectionError, ZabbixReadError

CONTENT_TYPE = 'application/json-rpc'


class SSLContextAdapter(HTTPAdapter):
    """
    Transport adapter that hands a caller built SSLContext to urllib3

    Peer verification follows the context's own verify_mode, and no CA
    bundle is loaded into it.
    """

    def __init__(self, ssl_context: ssl.SSLContext, **kwargs):
        self.ssl_context = ssl_context
        super().__init__(**kwargs)

    def init_poolmanager(self, *args, **kwargs):
        kwargs['ssl_context'] = self.ssl_context
        return super().init_poolmanager(*args, **kwargs)

    def proxy_manager_for(self, *args, **kwargs):
        kwargs['ssl_context'] = self.ssl_context
        return super().proxy_manager_for(*args, **kwargs)

    def cert_verify(self, conn, url, verify, cert):
        super().cert_verify(conn, url, False, cert)
        if url.lower().startswith('https'):
            conn.cert_reqs = self.ssl_context.verify_mode


def generate_request_id() -> str:
    """Current timestamp with microsecond precision, digits only"""
    return f'{time.time():.6f}'.replace('.', '')


def basic_auth_header(user: str, password: str) -> str:
    """Value of an HTTP Basic Authorization header"""
    credentials = f'{user}:{password}'.encode('utf-8')
    return 'Basic ' + base64.b64encode(credentials).decode('ascii')


def build_envelope(method: str, params: Any, auth_token: Optional[str] = None,
                   requires_auth: bool = True,
                   request_id: Optional[str] = None) -> Dict[str, Any]:
    """
    Build the JSON-RPC 2.0 request body

    "auth" is present for authenticated calls only, and is null when no
    token is held yet.
    """
    envelope: Dict[str, Any] = {
        'jsonrpc': '2.0',
        'method': method,
        'params': params,
        'id': request_id or generate_request_id(),
    }
    if requires_auth:
        envelope['auth'] = auth_token or None
    return envelope


def post(url: str, payload: str, authorization: str = '',
         verify_ssl: bool = True, ssl_context: Optional[ssl.SSLContext] = None,
         print_communication: bool = False, stream: Optional[TextIO] = None) -> bytes:
    """
    POST an encoded JSON-RPC request and return the raw response body

    Args:
        url: API endpoint, usually ending in /api_jsonrpc.php
        payload: JSON text of the request
        authorization: Optional Authorization header value (HTTP Basic)
        verify_ssl: Verify the TLS peer for https URLs
        ssl_context: Custom SSLContext, replaces verify_ssl and the CA bundle
        print_communication: Write the raw request and response to stream
        stream: Diagnostic stream, sys.stdout when omitted

    Raises:
        ZabbixConnectionError: If the connection cannot be opened
        ZabbixReadError: If the response body cannot be read
    """
    stream = stream or sys.stdout
    if print_communication:
        stream.write(f'API request: {payload}\n')

    headers = {'Content-type': CONTENT_TYPE}
    if authorization:
        headers['Authorization'] = authorization

    verify = True
    if ssl_context is not None:
        # the adapter takes verification from the context
        verify = False
    elif url.lower().startswith('https'):
        verify = verify_ssl

    with requests.Session() as session:
        if ssl_context is not None:
            session.mount('https://', SSLContextAdapter(ssl_context))

        try:
            response = session.post(url, data=payload.encode('utf-8'), headers=headers,
                                    verify=verify, stream=True)
        except requests.exceptions.RequestException as exc:
            debug_log(f'POST {url} failed:', str(exc))
            raise ZabbixConnectionError(url, exc) from exc

        try:
            if not response.ok:
                debug_log(f'POST {url} failed:', f'{response.status_code} {response.reason}')
                raise ZabbixConnectionError(url, f'{response.status_code} {response.reason}')

            try:
                body = response.content
            except requests.exceptions.RequestException as exc:
                debug_log(f'Reading response from {url} failed:', str(exc))
                raise ZabbixReadError(url, exc) from exc
        finally:
            response.close()

    if print_communication:
        stream.write(body.decode('utf-8', errors='replace') + '\n')

    return body
