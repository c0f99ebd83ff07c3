"""Logging utilities for the OCR command-line tool."""

import os
import re
import logging
from typing import Optional, Any

LOGGER_NAME = "vision_ocr"

# Global debug mode flag
DEBUG_MODE = os.getenv("VISION_OCR_DEBUG", "false").lower() == "true"

# Logger instance
_logger: Optional[logging.Logger] = None


def setup_logger(level: int = logging.INFO, debug_mode: bool = None) -> logging.Logger:
    """
    Set up logger for the OCR run.

    Records go to stderr so that stdout only carries detected text.

    Args:
        level: Logging level (default: INFO)
        debug_mode: Override debug mode (default: from env var)

    Returns:
        Configured logger instance
    """
    global _logger, DEBUG_MODE

    if debug_mode is not None:
        DEBUG_MODE = debug_mode

    if _logger is None:
        _logger = logging.getLogger(LOGGER_NAME)
        _logger.setLevel(logging.DEBUG if DEBUG_MODE else level)

        # Create console handler (stderr)
        handler = logging.StreamHandler()
        handler.setLevel(logging.DEBUG if DEBUG_MODE else level)

        # Create formatter
        if DEBUG_MODE:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
        else:
            formatter = logging.Formatter(
                '%(levelname)s - %(message)s'
            )

        handler.setFormatter(formatter)
        _logger.addHandler(handler)

        # Prevent duplicate logs
        _logger.propagate = False

    return _logger


def get_logger() -> logging.Logger:
    """Get the global logger instance."""
    if _logger is None:
        return setup_logger()
    return _logger


def reset_logger() -> None:
    """Drop the configured handlers so the next setup_logger() starts clean."""
    global _logger
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    _logger = None


def log_detection_result(logger: logging.Logger, result: Any):
    """
    Log a summary of a text detection run.

    Args:
        logger: Logger instance
        result: DetectionResult object
    """
    logger.info("=" * 60)
    logger.info("TEXT DETECTION COMPLETE")
    logger.info("=" * 60)
    logger.info(f"Image: {result.image_path}")
    logger.info(f"Credentials: {result.credential_source}")
    logger.info(f"Annotations: {len(result.annotations)}")
    logger.info(f"Processing time: {result.processing_time:.2f}s")

    if not result.annotations:
        logger.warning("No text detected")

    # Log full text in debug mode
    if DEBUG_MODE:
        full_text = result.full_text
        logger.debug("=" * 60)
        logger.debug("FULL TEXT:")
        logger.debug("=" * 60)
        logger.debug(full_text[:2000])  # First 2000 chars
        if len(full_text) > 2000:
            logger.debug(f"... (truncated, total length: {len(full_text)})")


def redact_sensitive_data(text: str, redact_tokens: bool = True) -> str:
    """
    Redact OAuth tokens and API keys from log messages.

    Args:
        text: Text to redact
        redact_tokens: Whether to redact anything at all

    Returns:
        Redacted text
    """
    if not redact_tokens:
        return text

    # Google OAuth access tokens (ya29....)
    text = re.sub(r'ya29\.[0-9A-Za-z_\-]+', 'ya29.REDACTED', text)

    # Google OAuth refresh tokens (1//...)
    text = re.sub(r'1//[0-9A-Za-z_\-]+', '1//REDACTED', text)

    # API keys
    text = re.sub(r'AIza[0-9A-Za-z_-]{35}', 'AIzaREDACTED', text)

    return text
