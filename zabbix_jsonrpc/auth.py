"""
On-disk session token cache

One file per (username, OS user id) pair, holding the raw token. The file
is not locked, so two processes logging in at the same time can both miss
the cache and both write it.
"""

import hashlib
import logging
import os
import stat
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

TOKEN_FILE_PREFIX = '.zabbixapi-token-'


def _os_user_id() -> Any:
    getuid = getattr(os, 'getuid', None)
    if getuid is not None:
        return getuid()
    return os.getenv('USERNAME', '')


def login_username(params: Any) -> Optional[str]:
    """Username from user.login params ('user', or 'username' on Zabbix >= 5.4)"""
    if not isinstance(params, Mapping):
        return None
    return params.get('user') or params.get('username') or None


class TokenCache:
    """Session token file for one Zabbix user"""

    def __init__(self, directory: str, username: str):
        self.directory = directory
        self.username = username
        digest = hashlib.md5(f'{username}|{_os_user_id()}'.encode('utf-8')).hexdigest()
        self.path = os.path.join(directory, TOKEN_FILE_PREFIX + digest)

    @classmethod
    def for_login(cls, directory: Optional[str], params: Any) -> Optional['TokenCache']:
        """
        Build the cache for user.login params

        Returns None when caching is off, the directory is not writable or
        the params carry no username.
        """
        username = login_username(params)
        if not directory or not username:
            return None
        if not os.path.isdir(directory) or not os.access(directory, os.W_OK):
            logger.debug('Token cache directory %s is not writable', directory)
            return None
        return cls(directory, username)

    def exists(self) -> bool:
        return os.path.isfile(self.path)

    def read(self) -> str:
        with open(self.path, 'r', encoding='utf-8') as f:
            return f.read()

    def write(self, token: str) -> None:
        """Store the token, readable and writable by the owner only"""
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, stat.S_IRUSR | stat.S_IWUSR)
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(token)
        os.chmod(self.path, stat.S_IRUSR | stat.S_IWUSR)
        logger.debug('Cached session token in %s', self.path)

    def delete(self) -> None:
        try:
            os.remove(self.path)
        except FileNotFoundError:
            pass
        logger.debug('Removed session token cache %s', self.path)
