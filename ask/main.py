"""Command line entry point.

Usage:
    ask <github-username>     add the user's public SSH keys to authorized_keys
    ask search <query>        list up to 10 matching GitHub users
    ask --version
"""

import argparse
import logging
import sys
from collections.abc import Callable, Sequence

from pydantic import ValidationError

from ask import __version__
from ask.config import get_settings
from ask.models.schemas import GitHubUser
from ask.services.github.client import GitHubClient, GitHubError
from ask.store.authorized_keys import AuthorizedKeysError, AuthorizedKeysStore
from ask.utils.http_client import close_all_clients
from ask.utils.logging import LogContext, setup_logging
from ask.utils.ssh_keys import truncate_key
from ask.utils.validation import InvalidUsernameError, validate_username

logger = logging.getLogger(__name__)

USAGE = """Usage: ask <github-username>
       ask search <query>
       ask --version"""

SEARCH_USAGE = "Usage: ask search <query>"


class UsageError(Exception):
    """Command line could not be parsed."""

    pass


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports errors to the caller instead of exiting."""

    def error(self, message: str):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="ask",
        usage=USAGE.removeprefix("Usage: "),
        description="Add a GitHub user's public SSH keys to ~/.ssh/authorized_keys",
    )
    parser.add_argument("-v", "--version", action="store_true", help="Print version and exit")
    parser.add_argument("args", nargs="*", help="<github-username> or: search <query>")
    return parser


# ==================== Search ====================


def format_search_line(user: GitHubUser) -> str:
    """Render one search hit as `login - name (bio) [company]`."""
    line = f"  {user.login} - {user.display_name}"
    if user.bio:
        line += f" ({user.bio})"
    if user.company:
        line += f" [{user.company}]"
    return line


def search(query: str, client: GitHubClient) -> None:
    """Print up to 10 users matching query.

    Failures are printed, never raised: search does not affect the exit code.
    """
    print(f"Searching for users matching '{query}'...\n")

    try:
        result = client.search_users(query)
    except GitHubError as e:
        logger.debug(f"Search for {query!r} failed: {e!r}")
        print(f"Error searching users: {e}")
        return

    if result.total_count == 0:
        print("No users found matching your query.")
        return

    print(f"Found {len(result.items)} users:")
    for user in result.items:
        print(format_search_line(user))

    print("\nUse 'ask <username>' to add SSH keys from any of these users.")


# ==================== Add keys ====================


def confirm_add_keys(user: GitHubUser, input_func: Callable[[str], str] = input) -> bool:
    """Show the profile and ask for a y/N answer.

    Only "y" or "yes" (any case) confirms; end of input declines.
    """
    print(f"User: {user.login} ({user.display_name})")
    if user.bio:
        print(f"Bio: {user.bio}")
    if user.company:
        print(f"Company: {user.company}")
    if user.location:
        print(f"Location: {user.location}")
    print(f"Public repos: {user.public_repos}")

    try:
        response = input_func(f"\nAre you sure you want to add {user.display_name}'s SSH keys? (y/N): ")
    except EOFError:
        print()
        return False

    return response.strip().lower() in ("y", "yes")


def default_store() -> AuthorizedKeysStore:
    """Store for the configured ssh directory (~/.ssh unless ASK_SSH_DIR is set)."""
    try:
        ssh_dir = get_settings().authorized_keys_dir
    except RuntimeError as e:
        raise AuthorizedKeysError(f"failed to get user home directory: {e}") from e
    return AuthorizedKeysStore(ssh_dir)


def add_keys(
    username: str,
    client: GitHubClient,
    store: AuthorizedKeysStore | None = None,
    input_func: Callable[[str], str] = input,
) -> int:
    """Validate, confirm, fetch and merge a user's keys.

    Returns:
        Process exit code
    """
    try:
        validate_username(username)
    except InvalidUsernameError as e:
        print(f"Error: {e}")
        return 1

    with LogContext(logger, user=username) as log:
        try:
            user = client.get_user(username)
        except GitHubError as e:
            log.debug(f"profile fetch failed: {e!r}")
            print(f"Error fetching user info: {e}")
            return 1

        if not confirm_add_keys(user, input_func):
            log.info("cancelled by user")
            print("Operation cancelled.")
            return 0

        try:
            keys = client.get_keys(username)
        except GitHubError as e:
            log.debug(f"key fetch failed: {e!r}")
            print(f"Error fetching SSH keys: {e}")
            return 1

        if not keys:
            print(f"No SSH keys found for user '{username}'")
            return 1

        print(f"Found {len(keys)} SSH key(s) for user '{username}':")
        for i, key in enumerate(keys, start=1):
            print(f"  {i}. {truncate_key(key)}")

        try:
            if store is None:
                store = default_store()
            store.ensure()
        except AuthorizedKeysError as e:
            log.error(f"store setup failed: {e}")
            print(f"Error setting up SSH directory: {e}")
            return 1

        try:
            added = store.merge(keys)
        except AuthorizedKeysError as e:
            log.error(f"merge failed after {e.added} key(s): {e}")
            print(f"Error adding SSH keys: {e}")
            if e.added:
                print(f"{e.added} new SSH key(s) were added to {store.path} before the error")
            return 1

        log.info(f"added {added} of {len(keys)} key(s)")
        print(f"\nSuccessfully added {added} new SSH key(s) to {store.path}")
        return 0


# ==================== Entry point ====================


def run(
    argv: Sequence[str],
    client: GitHubClient | None = None,
    store: AuthorizedKeysStore | None = None,
    input_func: Callable[[str], str] = input,
) -> int:
    """Dispatch a command line and return the exit code.

    Args:
        argv: Arguments without the program name
        client: GitHub client (default: one on the shared httpx client)
        store: Keys store (default: the configured ssh directory)
        input_func: Reads the confirmation answer
    """
    try:
        args = build_parser().parse_args(list(argv))
    except UsageError as e:
        logger.debug(f"Bad command line {list(argv)!r}: {e}")
        print(USAGE)
        return 1

    if args.version:
        print(f"ask version {__version__}")
        return 0

    if not args.args:
        print(USAGE)
        return 1

    command, *rest = args.args

    if command == "search":
        if not rest:
            print(SEARCH_USAGE)
            return 1
        search(" ".join(rest), client or GitHubClient())
        return 0

    if rest:
        print(USAGE)
        return 1

    return add_keys(command, client or GitHubClient(), store, input_func)


def main(argv: Sequence[str] | None = None) -> int:
    """Console script entry point."""
    try:
        setup_logging()
    except ValidationError as e:
        print(f"Error: invalid ASK_* configuration: {e}")
        return 1

    try:
        return run(sys.argv[1:] if argv is None else argv)
    finally:
        close_all_clients()


if __name__ == "__main__":
    raise SystemExit(main())
