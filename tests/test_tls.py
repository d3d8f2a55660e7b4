import json
import os
import ssl
import threading
import unittest
from http.server import BaseHTTPRequestHandler, HTTPServer
from pathlib import Path
from unittest import mock

from zabbix_jsonrpc import ZabbixApi, ZabbixConnectionError

DATA_DIR = Path(__file__).parent / "data"
CERT_FILE = DATA_DIR / "server.crt"
KEY_FILE = DATA_DIR / "server.key"


class ApiInfoHandler(BaseHTTPRequestHandler):
    def do_POST(self) -> None:
        length = int(self.headers.get("Content-Length", 0))
        request = json.loads(self.rfile.read(length))
        body = json.dumps({"jsonrpc": "2.0", "result": "6.0.21", "id": request["id"]}).encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args) -> None:
        pass


class SelfSignedServerTestCase(unittest.TestCase):
    """HTTPS endpoint with a self-signed certificate for localhost/127.0.0.1"""

    def setUp(self) -> None:
        proxy_env = mock.patch.dict(os.environ, {"NO_PROXY": "127.0.0.1,localhost", "no_proxy": "127.0.0.1,localhost"})
        proxy_env.start()
        self.addCleanup(proxy_env.stop)

        self.server = HTTPServer(("127.0.0.1", 0), ApiInfoHandler)
        server_context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
        server_context.load_cert_chain(str(CERT_FILE), str(KEY_FILE))
        self.server.socket = server_context.wrap_socket(self.server.socket, server_side=True)
        self.thread = threading.Thread(target=self.server.serve_forever, daemon=True)
        self.thread.start()
        self.addCleanup(self._stop)
        self.url = f"https://127.0.0.1:{self.server.server_address[1]}/api_jsonrpc.php"

    def _stop(self) -> None:
        self.server.shutdown()
        self.server.server_close()
        self.thread.join(timeout=5)

    def _trusting_context(self) -> ssl.SSLContext:
        context = ssl.create_default_context(cafile=str(CERT_FILE))
        # the test certificate doubles as its own CA
        if hasattr(ssl, "VERIFY_X509_STRICT"):
            context.verify_flags &= ~ssl.VERIFY_X509_STRICT
        return context

    def test_unverified_context_is_honoured(self) -> None:
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        api = ZabbixApi(self.url, ssl_context=context, token_cache_dir=None)
        self.assertEqual(api.apiinfo_version(), "6.0.21")
        self.assertEqual(context.verify_mode, ssl.CERT_NONE)
        self.assertFalse(context.check_hostname)

    def test_context_with_own_ca(self) -> None:
        context = self._trusting_context()
        api = ZabbixApi(self.url, ssl_context=context, token_cache_dir=None)
        self.assertEqual(api.apiinfo_version(), "6.0.21")
        self.assertEqual(context.verify_mode, ssl.CERT_REQUIRED)

    def test_context_without_ca_rejects_peer(self) -> None:
        context = ssl.create_default_context()
        api = ZabbixApi(self.url, ssl_context=context, token_cache_dir=None)
        with self.assertRaises(ZabbixConnectionError):
            api.apiinfo_version()

    def test_peer_check_flag_without_context(self) -> None:
        api = ZabbixApi(self.url, check_ssl_peer=False, token_cache_dir=None)
        self.assertEqual(api.apiinfo_version(), "6.0.21")
        strict = ZabbixApi(self.url, check_ssl_peer=True, token_cache_dir=None)
        with self.assertRaises(ZabbixConnectionError):
            strict.apiinfo_version()


if __name__ == "__main__":
    unittest.main()
