"""Exception types raised by each stage of the OCR run."""


class VisionOCRError(Exception):
    """Base class for errors that end a run with a non-zero exit status."""


class ConfigurationError(VisionOCRError):
    """Missing or conflicting command-line options."""


class CredentialError(VisionOCRError):
    """A credential file could not be read or parsed, or the client could not be built."""


class AuthenticationError(VisionOCRError):
    """The OAuth2 authorization code could not be read or exchanged."""


class TokenCacheError(VisionOCRError):
    """The OAuth2 token could not be written to the cache file."""


class ImageReadError(VisionOCRError):
    """The input image could not be read."""


class DetectionError(VisionOCRError):
    """The Vision API returned an error for the text detection request."""
