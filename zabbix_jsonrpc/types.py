"""
Type definitions for the Zabbix JSON-RPC client
"""

from dataclasses import dataclass
from typing import Union, List, Dict, Any

# Anything a wrapper accepts as params: None, a scalar, a list or a mapping
ParamsInput = Union[None, str, int, float, List[Any], Dict[Any, Any]]


@dataclass(frozen=True)
class Exchange:
    """One request/response pair as it went over the wire"""
    method: str
    request: str
    response: bytes
    result: Any
