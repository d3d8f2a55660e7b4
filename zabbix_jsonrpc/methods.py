"""
Zabbix API method table

Each entry becomes a ZabbixApi method named after it, with the dot
replaced by an underscore ('host.get' -> ZabbixApi.host_get).
"""

from typing import Dict, FrozenSet, Tuple

# Methods that are called without an auth token
ANONYMOUS_METHODS: FrozenSet[str] = frozenset({
    'apiinfo.version',
})

_CRUD = ('get', 'create', 'update', 'delete')

_NAMESPACES: Dict[str, Tuple[str, ...]] = {
    'action': _CRUD,
    'alert': ('get',),
    'apiinfo': ('version',),
    'application': _CRUD + ('massadd', 'massremove'),
    'auditlog': ('get',),
    'authentication': ('get', 'update'),
    'autoregistration': ('get', 'update'),
    'configuration': ('export', 'import', 'importcompare'),
    'correlation': _CRUD,
    'dashboard': _CRUD,
    'dcheck': ('get',),
    'dhost': ('get',),
    'discoveryrule': _CRUD + ('copy',),
    'drule': _CRUD,
    'dservice': ('get',),
    'event': ('get', 'acknowledge'),
    'graph': _CRUD,
    'graphitem': ('get',),
    'graphprototype': _CRUD,
    'hanode': ('get',),
    'history': ('get', 'clear'),
    'host': _CRUD + ('massadd', 'massupdate', 'massremove'),
    'hostgroup': _CRUD + ('massadd', 'massupdate', 'massremove', 'propagate'),
    'hostinterface': _CRUD + ('massadd', 'massremove', 'replacehostinterfaces'),
    'hostprototype': _CRUD,
    'housekeeping': ('get', 'update'),
    'httptest': _CRUD,
    'iconmap': _CRUD,
    'image': _CRUD,
    'item': _CRUD,
    'itemprototype': _CRUD,
    'maintenance': _CRUD,
    'map': _CRUD,
    'mediatype': _CRUD,
    'module': _CRUD,
    'problem': ('get',),
    'proxy': _CRUD,
    'regexp': _CRUD,
    'report': _CRUD,
    'role': _CRUD,
    'screen': _CRUD,
    'screenitem': _CRUD + ('updatebyposition',),
    'script': _CRUD + ('execute', 'getscriptsbyhosts'),
    'service': _CRUD + ('getsla',),
    'settings': ('get', 'update'),
    'sla': _CRUD + ('getsli',),
    'task': ('get', 'create'),
    'template': _CRUD + ('massadd', 'massupdate', 'massremove'),
    'templategroup': _CRUD + ('massadd', 'massupdate', 'massremove', 'propagate'),
    'templatedashboard': _CRUD,
    'templatescreen': _CRUD + ('copy',),
    'templatescreenitem': ('get',),
    'token': _CRUD + ('generate',),
    'trend': ('get',),
    'trigger': _CRUD,
    'triggerprototype': _CRUD,
    'user': _CRUD + ('login', 'logout', 'checkauthentication', 'unblock'),
    'usergroup': _CRUD,
    'usermacro': _CRUD + (
        'createglobal', 'updateglobal', 'deleteglobal',
    ),
    'valuemap': _CRUD,
}

API_METHODS: Tuple[str, ...] = tuple(
    f'{namespace}.{verb}'
    for namespace, verbs in sorted(_NAMESPACES.items())
    for verb in verbs
)


def python_name(method: str) -> str:
    """Attribute name of the generated wrapper for an API method"""
    return method.replace('.', '_')


def requires_auth(method: str) -> bool:
    return method not in ANONYMOUS_METHODS
