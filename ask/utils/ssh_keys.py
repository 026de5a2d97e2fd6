"""Parsing of public key lines served by GitHub's /<user>.keys endpoint."""

import logging

from ask.constants import KEY_DISPLAY_WIDTH, VALID_KEY_TYPES

logger = logging.getLogger(__name__)


def is_valid_ssh_key(line: str) -> bool:
    """Check that a line is `<key-type> <material> [comment]` with a known type."""
    parts = line.split()
    if len(parts) < 2:
        return False
    return parts[0] in VALID_KEY_TYPES


def parse_keys(text: str) -> list[str]:
    """Extract recognized key lines from a raw response body.

    Lines are stripped; blank lines and lines with an unknown key type are
    dropped without error.
    """
    keys = []
    for line in text.strip().splitlines():
        line = line.strip()
        if not line:
            continue
        if not is_valid_ssh_key(line):
            logger.debug(f"Skipping unrecognized key line: {truncate_key(line)}")
            continue
        keys.append(line)
    return keys


def truncate_key(key: str, width: int = KEY_DISPLAY_WIDTH) -> str:
    """Shorten a key for display."""
    if len(key) > width:
        return key[: width - 3] + "..."
    return key
