"""Read and append entries of an OpenSSH authorized_keys file.

The file is treated as an ordered list of lines. Existing lines are never
rewritten or reordered; new keys are appended at the end. There is no
locking: a single process is assumed to own the file while it runs.
"""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ask.constants import AUTHORIZED_KEYS_FILENAME, AUTHORIZED_KEYS_MODE, SSH_DIR_MODE

logger = logging.getLogger(__name__)


class AuthorizedKeysError(Exception):
    """Filesystem error while preparing or updating authorized_keys.

    Attributes:
        added: Keys appended before the failure (merge is not atomic)
    """

    def __init__(self, message: str, added: int = 0):
        self.added = added
        super().__init__(message)


class AuthorizedKeysStore:
    """authorized_keys file inside an ssh directory.

    Usage:
        store = AuthorizedKeysStore(Path.home() / ".ssh")
        store.ensure()
        added = store.merge(keys)
    """

    def __init__(self, ssh_dir: Path):
        self.ssh_dir = Path(ssh_dir)
        self.path = self.ssh_dir / AUTHORIZED_KEYS_FILENAME

    def ensure(self) -> None:
        """Create the directory and file if needed and force their permissions.

        Permissions are applied on every call, so a file left at 0644 is
        brought back to 0600.

        Raises:
            AuthorizedKeysError: If anything cannot be created or chmod-ed
        """
        try:
            self.ssh_dir.mkdir(mode=SSH_DIR_MODE, parents=True, exist_ok=True)
        except OSError as e:
            raise AuthorizedKeysError(f"failed to create {self.ssh_dir} directory: {e}") from e

        try:
            self.ssh_dir.chmod(SSH_DIR_MODE)
        except OSError as e:
            raise AuthorizedKeysError(f"failed to set permissions on {self.ssh_dir}: {e}") from e

        try:
            self.path.touch(mode=AUTHORIZED_KEYS_MODE, exist_ok=True)
        except OSError as e:
            raise AuthorizedKeysError(f"failed to create {self.path}: {e}") from e

        try:
            self.path.chmod(AUTHORIZED_KEYS_MODE)
        except OSError as e:
            raise AuthorizedKeysError(f"failed to set permissions on {self.path}: {e}") from e

        logger.debug(f"Ensured {self.path} ({AUTHORIZED_KEYS_MODE:o})")

    def read_existing(self) -> list[str]:
        """Get the keys already present.

        Returns:
            Stripped lines in file order, without blanks, comments or repeats
        """
        try:
            with self.path.open(encoding="utf-8", errors="surrogateescape") as f:
                lines = [line.strip() for line in f]
        except OSError as e:
            raise AuthorizedKeysError(f"failed to read existing keys: {e}") from e

        # dict keeps insertion order
        keys = dict.fromkeys(line for line in lines if line and not line.startswith("#"))
        return list(keys)

    def _ends_with_newline(self) -> bool:
        """Check that appending starts a fresh line (true for an empty file)."""
        try:
            with self.path.open("rb") as f:
                if f.seek(0, os.SEEK_END) == 0:
                    return True
                f.seek(-1, os.SEEK_END)
                return f.read(1) == b"\n"
        except OSError as e:
            raise AuthorizedKeysError(f"failed to read existing keys: {e}") from e

    def merge(self, keys: Iterable[str]) -> int:
        """Append keys that are not already present.

        Comparison is exact string equality, so the same key with another
        comment is a new entry.

        Args:
            keys: Candidate key lines

        Returns:
            Number of keys appended

        Raises:
            AuthorizedKeysError: On read or write failure; ``added`` holds the
                number of keys written before the failure
        """
        existing = set(self.read_existing())
        needs_newline = not self._ends_with_newline()
        added = 0

        try:
            f = self.path.open("a", encoding="utf-8", errors="surrogateescape")
        except OSError as e:
            raise AuthorizedKeysError(f"failed to open {self.path}: {e}") from e

        try:
            with f:
                for key in keys:
                    if key in existing:
                        logger.debug(f"Key already present: {key[:40]}")
                        continue
                    if needs_newline:
                        f.write("\n")
                        needs_newline = False
                    f.write(key + "\n")
                    f.flush()
                    existing.add(key)
                    added += 1
        except OSError as e:
            raise AuthorizedKeysError(f"failed to write key to file: {e}", added=added) from e

        logger.info(f"Appended {added} key(s) to {self.path}")
        return added
