"""Local authorized_keys storage."""

from ask.store.authorized_keys import AuthorizedKeysError, AuthorizedKeysStore

__all__ = [
    "AuthorizedKeysError",
    "AuthorizedKeysStore",
]
