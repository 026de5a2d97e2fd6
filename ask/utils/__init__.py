"""Utility modules for ask."""

from ask.utils.logging import LogContext, setup_logging
from ask.utils.ssh_keys import is_valid_ssh_key, parse_keys, truncate_key
from ask.utils.validation import InvalidUsernameError, validate_username

__all__ = [
    # Logging
    "LogContext",
    "setup_logging",
    # SSH keys
    "is_valid_ssh_key",
    "parse_keys",
    "truncate_key",
    # Validation
    "InvalidUsernameError",
    "validate_username",
]
