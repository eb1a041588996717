"""Google Cloud credentials lookup.

The service account key is whatever JSON file sits in the search folder;
the first one the directory listing yields wins.
"""

import logging
from pathlib import Path
from typing import Optional

from google.oauth2 import service_account

from ..exceptions import CredentialsError, CredentialsNotFoundError

logger = logging.getLogger(__name__)

CLOUD_PLATFORM_SCOPE = "https://www.googleapis.com/auth/cloud-platform"
DEFAULT_PATTERN = "*.json"


def default_search_dir() -> Path:
    """Return the folder searched when none is configured."""
    return Path.cwd() / "src"


def find_credentials_file(
    search_dir: Optional[Path] = None,
    pattern: str = DEFAULT_PATTERN,
) -> Path:
    """Find the first credentials file in a folder.

    The search is not recursive and the result is not cached.

    Args:
        search_dir: Folder to search. Defaults to ``./src``.
        pattern: Glob pattern a credentials file must match.

    Returns:
        Path to the first matching file.

    Raises:
        CredentialsNotFoundError: If no file matches.
    """
    search_dir = Path(search_dir) if search_dir else default_search_dir()

    if search_dir.is_dir():
        for candidate in search_dir.glob(pattern):
            if candidate.is_file():
                logger.debug(f"Using credentials file: {candidate}")
                return candidate

    raise CredentialsNotFoundError(
        f"Could not find JSON credentials file in {search_dir}!"
    )


def load_credentials(path: Path) -> service_account.Credentials:
    """Load scoped service account credentials from a key file.

    Args:
        path: Path to the service account JSON key.

    Returns:
        Credentials scoped to the Cloud Platform.

    Raises:
        CredentialsError: If the file is unreadable or not a valid key.
    """
    try:
        return service_account.Credentials.from_service_account_file(
            str(path), scopes=[CLOUD_PLATFORM_SCOPE]
        )
    except (OSError, ValueError) as e:
        raise CredentialsError(f"Failed to load credentials from {path}: {e}") from e
