"""Application constants - centralized configuration values."""

# =============================================================================
# GitHub
# =============================================================================
GITHUB_URL = "https://github.com"
GITHUB_API_URL = "https://api.github.com"
SEARCH_PAGE_SIZE = 10

# =============================================================================
# Usernames
# =============================================================================
USERNAME_MAX_LENGTH = 39
USERNAME_PATTERN = r"^[a-zA-Z0-9]([a-zA-Z0-9-]*[a-zA-Z0-9])?$"

# =============================================================================
# SSH keys
# =============================================================================
VALID_KEY_TYPES = frozenset(
    {
        "ssh-rsa",
        "ssh-dss",
        "ssh-ed25519",
        "ecdsa-sha2-nistp256",
        "ecdsa-sha2-nistp384",
        "ecdsa-sha2-nistp521",
    }
)
AUTHORIZED_KEYS_FILENAME = "authorized_keys"
SSH_DIR_MODE = 0o700
AUTHORIZED_KEYS_MODE = 0o600
KEY_DISPLAY_WIDTH = 80

# =============================================================================
# API Timeouts (in seconds)
# =============================================================================
HTTPX_TIMEOUT = 10.0
