import json
from typing import Any, Dict, List
from unittest import mock

URL = "https://zabbix.example.com/api_jsonrpc.php"


def result(value: Any) -> Dict[str, Any]:
    return {"result": value}


def error(code: int, data: str, message: str = "Application error.") -> Dict[str, Any]:
    return {"error": {"code": code, "message": message, "data": data}}


class FakeServer:
    """Stands in for transport.post, answering calls from a script of responses"""

    def __init__(self, *responses: Dict[str, Any]):
        self.responses: List[Dict[str, Any]] = list(responses)
        self.requests: List[Dict[str, Any]] = []
        self.calls: List[Dict[str, Any]] = []

    def __call__(self, url: str, payload: str, **kwargs: Any) -> bytes:
        request = json.loads(payload)
        self.requests.append(request)
        self.calls.append(dict(kwargs, url=url))
        if not self.responses:
            raise AssertionError(f"unexpected call to {request['method']}")
        response = dict(self.responses.pop(0))
        response.setdefault("jsonrpc", "2.0")
        response.setdefault("id", request["id"])
        return json.dumps(response).encode("utf-8")

    @property
    def methods(self) -> List[str]:
        return [request["method"] for request in self.requests]

    def patch(self):
        return mock.patch("zabbix_jsonrpc.transport.post", side_effect=self)
