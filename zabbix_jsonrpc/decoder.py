"""
JSON-RPC response decoding
"""

import json
import logging
from typing import Any, Union

from .errors import ZabbixAPIError, ZabbixDecodeError

logger = logging.getLogger(__name__)


def convert_to_structure(objects: list, key: str) -> Any:
    """
    Reshape a list of objects into a mapping keyed by one of their fields

    The list is returned unchanged when it is empty, or when any element is
    not an object, lacks the field, or holds an unhashable value in it.
    """
    if not objects:
        return objects
    if not all(isinstance(obj, dict) and key in obj for obj in objects):
        return objects
    try:
        return {obj[key]: obj for obj in objects}
    except TypeError:
        return objects


def decode(raw_body: Union[bytes, str], result_key: str = '') -> Any:
    """
    Decode a JSON-RPC response body

    Args:
        raw_body: Response body exactly as received
        result_key: Optional result field used to key a list of objects

    Returns:
        The "result" member, reshaped into a dict when result_key is given

    Raises:
        ZabbixDecodeError: If the body is not valid UTF-8 JSON, or not a
            JSON-RPC response object
        ZabbixAPIError: If the body carries an "error" member
    """
    try:
        if isinstance(raw_body, bytes):
            raw_body = raw_body.decode('utf-8')
        decoded = json.loads(raw_body)
    except ValueError:
        # UnicodeDecodeError is a ValueError too
        raise ZabbixDecodeError(raw_body)

    # A bare array is a batch response, which this client never requests
    if not isinstance(decoded, dict):
        raise ZabbixDecodeError(raw_body)

    if 'error' in decoded:
        error = decoded['error']
        if not isinstance(error, dict):
            error = {'data': error}
        code = error.get('code')
        data = error.get('data')
        logger.debug('API error %s: %s (%s)', code, error.get('message'), data)
        raise ZabbixAPIError(code, f'API error {code}: {data}', data)

    result = decoded.get('result')

    if result_key and isinstance(result, list):
        return convert_to_structure(result, result_key)
    return result
