"""Credential acquisition: service accounts, OAuth2 consent and the token cache."""

from .credentials import (
    VISION_SCOPES,
    CredentialResolver,
    OAuthCredentialProvider,
    load_client_config,
    load_service_account_credentials,
)
from .prompt import AuthorizationPrompt, console_prompt
from .token_cache import TokenCache

__all__ = [
    'VISION_SCOPES',
    'CredentialResolver',
    'OAuthCredentialProvider',
    'load_client_config',
    'load_service_account_credentials',
    'AuthorizationPrompt',
    'console_prompt',
    'TokenCache',
]
