"""File-backed cache for the OAuth2 user token."""

import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional, Union

from google.oauth2.credentials import Credentials
from pydantic import ValidationError

from ..config import DEFAULT_TOKEN_CACHE_PATH
from ..errors import TokenCacheError
from ..schema import CachedToken
from ..utils import get_logger


class TokenCache:
    """
    Persists an OAuth2 token so the consent step is not repeated every run.

    Writes go through a temporary file and ``os.replace``, so readers never see
    a half-written cache. There is no locking: two runs writing at the same
    time race, and the last writer wins.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_TOKEN_CACHE_PATH):
        self.path = Path(path)

    def ensure_directory(self) -> Path:
        """Create the cache directory if needed and return the cache file path."""
        try:
            self.path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
        except OSError as e:
            raise TokenCacheError(
                f"unable to get path to cached credential file. {e}"
            ) from e
        return self.path

    def load(self, client_section: Optional[Dict[str, Any]] = None) -> Optional[Credentials]:
        """
        Read the cached token.

        Args:
            client_section: Client ID file section supplying the client ID,
                            secret and token URI the token is refreshed with

        Returns:
            Credentials, or None if the file is missing or cannot be decoded
        """
        logger = get_logger()

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                raw = f.read()
        except OSError as e:
            logger.debug(f"No cached token at {self.path}: {e}")
            return None

        try:
            cached = CachedToken.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Ignoring undecodable token cache {self.path}: {e.error_count()} error(s)")
            return None

        logger.debug(f"Loaded cached token from {self.path}")
        return cached.to_credentials(client_section)

    def save(self, credentials: Credentials) -> None:
        """
        Write the token to the cache file, replacing any previous one.

        Raises:
            TokenCacheError: if the file cannot be written
        """
        get_logger().info(f"Saving credential file to: {self.path}")
        payload = CachedToken.from_credentials(credentials).model_dump_json(
            exclude_none=True, indent=2
        )

        directory = self.path.parent
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=directory
            )
            # mkstemp creates the file with mode 0600
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(payload)
            os.replace(tmp_path, self.path)
            tmp_path = None
        except OSError as e:
            raise TokenCacheError(f"Unable to cache oauth token: {e}") from e
        finally:
            if tmp_path is not None:
                Path(tmp_path).unlink(missing_ok=True)
