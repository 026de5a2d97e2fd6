"""Add a GitHub user's public SSH keys to ~/.ssh/authorized_keys."""

__version__ = "0.1.0"
