"""
vision-ocr: detect text in a local image with Google Cloud Vision.

Authenticates with a service account file or an interactive OAuth2 consent
flow (with a local token cache), then prints each detected text fragment.
"""

__version__ = "1.0.0"

from .config import OCRConfig
from .errors import (
    VisionOCRError,
    ConfigurationError,
    CredentialError,
    AuthenticationError,
    TokenCacheError,
    ImageReadError,
    DetectionError,
)
from .pipeline import DetectionPipeline, DetectionResult

__all__ = [
    'OCRConfig',
    'VisionOCRError',
    'ConfigurationError',
    'CredentialError',
    'AuthenticationError',
    'TokenCacheError',
    'ImageReadError',
    'DetectionError',
    'DetectionPipeline',
    'DetectionResult',
]
