"""Pipeline running credential resolution, client setup and text detection in order."""

import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from google_auth_oauthlib.flow import Flow

from ..auth import AuthorizationPrompt, CredentialResolver, TokenCache, console_prompt
from ..config import OCRConfig
from ..ocr import VisionTextDetector, build_vision_client
from ..schema import TextAnnotation
from ..utils import get_logger, log_detection_result


class DetectionResult:
    """Result of a text detection run."""

    def __init__(
        self,
        annotations: List[TextAnnotation],
        image_path: str,
        credential_source: str,
        processing_time: float
    ):
        """
        Initialize detection result.

        Args:
            annotations: Annotations in the order returned by the API
            image_path: Image that was submitted
            credential_source: "service_account" or "oauth"
            processing_time: Total processing time in seconds
        """
        self.annotations = annotations
        self.image_path = image_path
        self.credential_source = credential_source
        self.processing_time = processing_time

    @property
    def full_text(self) -> str:
        """The API reports the concatenated text as the first annotation."""
        return self.annotations[0].description if self.annotations else ""

    @property
    def descriptions(self) -> List[str]:
        return [annotation.description for annotation in self.annotations]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'annotations': [annotation.model_dump() for annotation in self.annotations],
            'metadata': {
                'image_path': self.image_path,
                'credential_source': self.credential_source,
                'annotation_count': len(self.annotations),
                'processing_time_seconds': self.processing_time
            }
        }

    def __repr__(self) -> str:
        return f"DetectionResult(image={Path(self.image_path).name}, annotations={len(self.annotations)})"


class DetectionPipeline:
    """Full detection pipeline: credentials, client, one TEXT_DETECTION call."""

    def __init__(
        self,
        config: OCRConfig,
        prompt: AuthorizationPrompt = console_prompt,
        token_cache: Optional[TokenCache] = None,
        client_factory: Callable[[Any], Any] = build_vision_client,
        flow_factory: Callable[..., Flow] = Flow.from_client_config
    ):
        """
        Initialize detection pipeline.

        Args:
            config: Validated run configuration
            prompt: Reads the OAuth2 authorization code from the user
            token_cache: OAuth2 token cache (defaults to config.token_cache_path)
            client_factory: Builds the Vision client from credentials
            flow_factory: Builds the OAuth2 flow from a client config
        """
        self.config = config
        self.resolver = CredentialResolver(
            config,
            prompt=prompt,
            token_cache=token_cache,
            flow_factory=flow_factory
        )
        self.client_factory = client_factory

    def run(self) -> DetectionResult:
        """
        Run the pipeline.

        Pipeline steps:
        1. Resolve credentials (service account, or cached/interactive OAuth2)
        2. Create the Vision client
        3. Read the image and detect text

        Returns:
            DetectionResult with annotations and metadata

        Raises:
            VisionOCRError: from whichever step failed
        """
        start_time = time.time()

        logger = get_logger()
        logger.info("=" * 60)
        logger.info(f"TEXT DETECTION: {Path(self.config.input_path).name}")
        logger.info("=" * 60)

        # Step 1: Credentials
        logger.info("Step 1: Resolving credentials...")
        credentials = self.resolver.resolve()

        # Step 2: Client
        logger.info("Step 2: Creating Vision client...")
        client = self.client_factory(credentials)

        # Step 3: Text detection
        logger.info("Step 3: Detecting text...")
        detector = VisionTextDetector(client)
        annotations = detector.detect_text(self.config.input_path)

        result = DetectionResult(
            annotations=annotations,
            image_path=self.config.input_path,
            credential_source=self.resolver.source,
            processing_time=time.time() - start_time
        )
        log_detection_result(logger, result)
        return result
