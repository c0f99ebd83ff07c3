"""Credential resolution for the Vision API: service account or OAuth2 user consent."""

import json
from typing import Any, Callable, Dict, List, Optional

from google.auth.credentials import Credentials as BaseCredentials
from google.oauth2 import service_account
from google_auth_oauthlib.flow import Flow

from ..config import OCRConfig
from ..errors import AuthenticationError, CredentialError
from ..utils import get_logger
from .prompt import AuthorizationPrompt, console_prompt
from .token_cache import TokenCache

VISION_SCOPES = [
    "https://www.googleapis.com/auth/cloud-platform",
    "https://www.googleapis.com/auth/cloud-vision",
]

# Used when the client file lists no redirect URI
OOB_REDIRECT_URI = "urn:ietf:wg:oauth:2.0:oob"

FlowFactory = Callable[..., Flow]


def load_service_account_credentials(path: str) -> service_account.Credentials:
    """
    Load service account credentials scoped for the Vision API.

    Raises:
        CredentialError: if the file is missing, unreadable or malformed
    """
    try:
        return service_account.Credentials.from_service_account_file(
            path, scopes=VISION_SCOPES
        )
    except (OSError, ValueError, TypeError, AttributeError, KeyError) as e:
        # google-auth assumes a JSON object; other JSON shapes fail outside ValueError
        raise CredentialError(f"unable to load service account file {path}: {e}") from e


def load_client_config(path: str) -> Dict[str, Any]:
    """
    Read an OAuth2 client ID file as downloaded from the Cloud Console.

    Raises:
        CredentialError: if the file cannot be read or is not a client ID file
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = f.read()
    except OSError as e:
        raise CredentialError(f"unable to read client id file: {e}") from e

    try:
        client_config = json.loads(raw)
    except ValueError as e:
        raise CredentialError(f"unable to parse client id file to config: {e}") from e

    if not isinstance(client_config, dict) or _client_section(client_config) is None:
        raise CredentialError(
            "unable to parse client id file to config: "
            "client secrets must be for a web or installed app"
        )
    return client_config


def _client_section(client_config: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Return the 'installed' or 'web' section, or None if neither is an object."""
    for key in ('installed', 'web'):
        section = client_config.get(key)
        if isinstance(section, dict):
            return section
    return None


def _redirect_uri(client_config: Dict[str, Any]) -> str:
    section = _client_section(client_config) or {}
    redirect_uris: List[str] = section.get('redirect_uris') or []
    return redirect_uris[0] if redirect_uris else OOB_REDIRECT_URI


class OAuthCredentialProvider:
    """Gets user credentials from the token cache, or from the consent flow on a miss."""

    def __init__(
        self,
        client_id_file: str,
        token_cache: TokenCache,
        prompt: AuthorizationPrompt = console_prompt,
        flow_factory: FlowFactory = Flow.from_client_config
    ):
        """
        Initialize the provider.

        Args:
            client_id_file: Path to the OAuth2 client ID JSON file
            token_cache: Cache holding the token between runs
            prompt: Shows the authorization URL and returns the pasted code
            flow_factory: Builds the OAuth2 flow from a client config
        """
        self.client_id_file = client_id_file
        self.token_cache = token_cache
        self.prompt = prompt
        self.flow_factory = flow_factory

    def get_credentials(self) -> BaseCredentials:
        client_config = load_client_config(self.client_id_file)

        self.token_cache.ensure_directory()
        credentials = self.token_cache.load(_client_section(client_config))
        if credentials is not None:
            get_logger().info("Using cached OAuth token")
            return credentials

        credentials = self._credentials_from_web(client_config)
        self.token_cache.save(credentials)
        return credentials

    def _credentials_from_web(self, client_config: Dict[str, Any]) -> BaseCredentials:
        try:
            flow = self.flow_factory(
                client_config,
                scopes=VISION_SCOPES,
                redirect_uri=_redirect_uri(client_config)
            )
        except (ValueError, KeyError) as e:
            raise CredentialError(f"unable to parse client id file to config: {e}") from e

        authorization_url, _ = flow.authorization_url(access_type='offline')
        code = self.prompt(authorization_url)

        try:
            flow.fetch_token(code=code)
        except Exception as e:
            raise AuthenticationError(f"Unable to retrieve token from web {e}") from e

        return flow.credentials


class CredentialResolver:
    """Picks the credential source named by the config and loads it."""

    def __init__(
        self,
        config: OCRConfig,
        prompt: AuthorizationPrompt = console_prompt,
        token_cache: Optional[TokenCache] = None,
        flow_factory: FlowFactory = Flow.from_client_config
    ):
        self.config = config
        self.prompt = prompt
        self.token_cache = token_cache or TokenCache(config.token_cache_path)
        self.flow_factory = flow_factory

    @property
    def source(self) -> str:
        return "service_account" if self.config.use_service_account else "oauth"

    def resolve(self) -> BaseCredentials:
        """
        Load credentials for the Vision client.

        Raises:
            CredentialError, AuthenticationError, TokenCacheError
        """
        logger = get_logger()

        if self.config.use_service_account:
            logger.info(f"Loading service account credentials from {self.config.service_account_file}")
            return load_service_account_credentials(self.config.service_account_file)

        logger.info(f"Using OAuth client ID file {self.config.client_id_file}")
        provider = OAuthCredentialProvider(
            client_id_file=self.config.client_id_file,
            token_cache=self.token_cache,
            prompt=self.prompt,
            flow_factory=self.flow_factory
        )
        return provider.get_credentials()
