"""Google Cloud Vision API client for text detection."""

from typing import Any, List

from google.api_core import exceptions as api_exceptions
from google.auth import exceptions as auth_exceptions
from google.auth.credentials import Credentials
from google.cloud import vision

from ..errors import AuthenticationError, CredentialError, DetectionError, ImageReadError
from ..schema import TextAnnotation
from ..utils import get_logger


def build_vision_client(credentials: Credentials) -> vision.ImageAnnotatorClient:
    """
    Create an image annotator client authenticated with the given credentials.

    Raises:
        CredentialError: if the client cannot be constructed
    """
    try:
        return vision.ImageAnnotatorClient(credentials=credentials)
    except (auth_exceptions.GoogleAuthError, ValueError) as e:
        raise CredentialError(f"Failed to create client: {e}") from e


class VisionTextDetector:
    """Runs TEXT_DETECTION on local image files."""

    def __init__(self, client: Any):
        """
        Initialize the detector.

        Args:
            client: A ``vision.ImageAnnotatorClient`` (or anything with the
                    same ``text_detection`` method)
        """
        self.client = client

    @staticmethod
    def read_image(image_path: str) -> bytes:
        """Read the image file into memory."""
        try:
            with open(image_path, 'rb') as image_file:
                return image_file.read()
        except OSError as e:
            raise ImageReadError(f"Failed to read file: {e}") from e

    def detect_text(self, image_path: str) -> List[TextAnnotation]:
        """
        Detect text in an image.

        No language hints are sent and no result limit is applied, so every
        annotation the API returns comes back in the API's order.

        Args:
            image_path: Path to the image file. Format checks are left to the API.

        Returns:
            List of TextAnnotation, full text first when any text was found
        """
        logger = get_logger()

        content = self.read_image(image_path)
        logger.debug(f"Read {len(content)} bytes from {image_path}")

        image = vision.Image(content=content)

        try:
            response = self.client.text_detection(image=image)
        except auth_exceptions.RefreshError as e:
            raise AuthenticationError(f"Unable to refresh access token: {e}") from e
        except api_exceptions.GoogleAPICallError as e:
            raise DetectionError(f"Error detecting text: {e}") from e

        # Check for errors
        if response.error.message:
            raise DetectionError(f"Error detecting text: {response.error.message}")

        return [
            TextAnnotation.from_entity(entity)
            for entity in response.text_annotations
        ]
