"""GitHub username validation.

Usernames are checked before any request is made, so a malformed name never
reaches the network.
"""

import re

from ask.constants import USERNAME_MAX_LENGTH, USERNAME_PATTERN

_USERNAME_RE = re.compile(USERNAME_PATTERN)


class InvalidUsernameError(ValueError):
    """Username does not follow GitHub naming rules."""

    pass


def validate_username(username: str) -> None:
    """Check a candidate username against GitHub naming rules.

    Rules: 1-39 characters, alphanumerics and hyphens, no leading or
    trailing hyphen, no consecutive hyphens.

    Raises:
        InvalidUsernameError: With a message describing the first rule broken
    """
    if not username:
        raise InvalidUsernameError("username cannot be empty")

    if not _USERNAME_RE.fullmatch(username) or len(username) > USERNAME_MAX_LENGTH:
        raise InvalidUsernameError("invalid GitHub username format")

    if "--" in username:
        raise InvalidUsernameError("username cannot contain consecutive hyphens")
