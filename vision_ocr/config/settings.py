"""Run configuration built once from the command line."""

from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, model_validator

from ..errors import ConfigurationError

DEFAULT_TOKEN_CACHE_DIR = Path("./credentials")
DEFAULT_TOKEN_CACHE_PATH = DEFAULT_TOKEN_CACHE_DIR / "cache.json"


class OCRConfig(BaseModel):
    """
    Settings for a single OCR run.

    Exactly one of ``service_account_file`` and ``client_id_file`` must be set,
    and ``input_path`` must be non-empty.
    """

    service_account_file: str = Field(
        default="",
        description="Path to a service account credentials file"
    )

    client_id_file: str = Field(
        default="",
        description="Path to a client ID credentials file"
    )

    input_path: str = Field(
        default="",
        description="Path to an image with text to be OCRed"
    )

    token_cache_path: Path = Field(
        default=DEFAULT_TOKEN_CACHE_PATH,
        description="Where the OAuth2 token is cached between runs"
    )

    @model_validator(mode='after')
    def check_options(self) -> "OCRConfig":
        """Credential options first, then the input path."""
        if not self.service_account_file and not self.client_id_file:
            raise ValueError("either -service_account or -client_id must be specified")
        if self.service_account_file and self.client_id_file:
            raise ValueError("-service_account and -client_id are mutually exclusive")
        if not self.input_path:
            raise ValueError("-input needs to be specified")
        return self

    @property
    def use_service_account(self) -> bool:
        return bool(self.service_account_file)

    @classmethod
    def from_values(cls, **values) -> "OCRConfig":
        """
        Build a validated config.

        Raises:
            ConfigurationError: with the first validation message
        """
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(_first_error_message(e)) from e


def _first_error_message(error: ValidationError) -> str:
    details = error.errors()[0]
    original = details.get('ctx', {}).get('error')
    if original is not None:
        return str(original)
    return details['msg']
