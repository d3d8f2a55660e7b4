"""
Request parameter normalization

Zabbix methods are picky about the shape of "params": most take an object,
while the delete-style methods take a bare list of ids (``[1, 2, 3]``, not
``{"ids": [1, 2, 3]}``). Default parameters are merged into objects only.
"""

from typing import Any, Dict, List, Mapping, Optional, Union

Params = Union[List[Any], Dict[Any, Any]]


def is_positional(params: Any) -> bool:
    """
    Check whether a collection is a plain ordered list of values

    Lists and tuples are positional when they are non-empty. A mapping is
    positional when its keys are exactly 0..n-1, in that order.
    """
    if isinstance(params, (list, tuple)):
        return len(params) > 0
    if isinstance(params, Mapping):
        return len(params) > 0 and list(params.keys()) == list(range(len(params)))
    return False


def get_request_params(params: Any = None, defaults: Optional[Mapping[str, Any]] = None) -> Params:
    """
    Turn a caller supplied value into the "params" member of a request

    Args:
        params: None, a scalar, a list/tuple or a mapping
        defaults: Default parameters merged into keyed mappings

    Returns:
        A list for positional params, a dict for keyed params

    Example:
        get_request_params('10084')                 # ['10084']
        get_request_params(['1', '2'], defaults)    # ['1', '2']
        get_request_params({'limit': 5}, {'output': 'extend'})
        # {'output': 'extend', 'limit': 5}
    """
    defaults = defaults or {}

    if params is None:
        params = []
    elif not isinstance(params, (list, tuple, Mapping)):
        params = [params]

    if is_positional(params):
        if isinstance(params, Mapping):
            return [params[index] for index in range(len(params))]
        return list(params)

    if not params and not defaults:
        return {} if isinstance(params, Mapping) else []

    merged = dict(defaults)
    merged.update(params)
    return merged
