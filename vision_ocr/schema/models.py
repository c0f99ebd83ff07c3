"""Data models for detected text and the cached OAuth2 token."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from google.oauth2.credentials import Credentials
from pydantic import BaseModel, Field, model_validator

DEFAULT_TOKEN_URI = "https://oauth2.googleapis.com/token"


class Vertex(BaseModel):
    """A corner of a bounding polygon, in image pixels."""

    x: int = 0
    y: int = 0


class TextAnnotation(BaseModel):
    """
    A unit of recognized text returned by the Vision API.

    The API returns the full concatenated text as the first annotation and
    the individual tokens after it.
    """

    description: str = Field(
        default="",
        description="Recognized text"
    )

    locale: Optional[str] = Field(
        default=None,
        description="Language code reported by the API, if any"
    )

    bounding_box: List[Vertex] = Field(
        default_factory=list,
        description="Vertices of the bounding polygon"
    )

    @classmethod
    def from_entity(cls, entity: Any) -> "TextAnnotation":
        """Build an annotation from a Vision ``EntityAnnotation``."""
        vertices = [
            Vertex(x=vertex.x, y=vertex.y)
            for vertex in entity.bounding_poly.vertices
        ]
        return cls(
            description=entity.description,
            locale=entity.locale or None,
            bounding_box=vertices
        )


class CachedToken(BaseModel):
    """
    On-disk form of an OAuth2 user token.

    Holds the access token, the optional refresh token, the expiry and the
    token type. The client ID and secret needed for a refresh are never
    cached; they come from the client ID file on every run.
    """

    token: Optional[str] = Field(
        default=None,
        description="OAuth2 access token"
    )

    refresh_token: Optional[str] = Field(
        default=None,
        description="OAuth2 refresh token (present when offline access was granted)"
    )

    token_type: str = Field(
        default="Bearer",
        description="Token type used in the Authorization header"
    )

    expiry: Optional[datetime] = Field(
        default=None,
        description="Access token expiry (UTC)"
    )

    scopes: Optional[List[str]] = None

    @model_validator(mode='after')
    def check_has_token(self) -> "CachedToken":
        """A cache entry is only usable with an access or refresh token."""
        if not self.token and not self.refresh_token:
            raise ValueError("cached token has neither an access token nor a refresh token")
        return self

    @classmethod
    def from_credentials(cls, credentials: Credentials) -> "CachedToken":
        """Capture the persistable token fields of google-auth user credentials."""
        expiry = credentials.expiry
        if expiry is not None and expiry.tzinfo is None:
            # google-auth keeps expiry as naive UTC
            expiry = expiry.replace(tzinfo=timezone.utc)

        scopes = list(credentials.scopes) if credentials.scopes else None

        return cls(
            token=credentials.token,
            refresh_token=credentials.refresh_token,
            expiry=expiry,
            scopes=scopes
        )

    def to_credentials(self, client_section: Optional[Dict[str, Any]] = None) -> Credentials:
        """
        Rebuild google-auth user credentials.

        Args:
            client_section: The ``installed`` or ``web`` section of the client
                            ID file; supplies client_id, client_secret and
                            token_uri so an expired token can be refreshed
        """
        client_section = client_section or {}
        credentials = Credentials(
            token=self.token,
            refresh_token=self.refresh_token,
            token_uri=client_section.get('token_uri') or DEFAULT_TOKEN_URI,
            client_id=client_section.get('client_id'),
            client_secret=client_section.get('client_secret'),
            scopes=self.scopes
        )
        if self.expiry is not None:
            expiry = self.expiry
            if expiry.tzinfo is not None:
                expiry = expiry.astimezone(timezone.utc).replace(tzinfo=None)
            credentials.expiry = expiry
        return credentials
