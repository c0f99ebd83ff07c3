"""OCR module for detecting text in images using Google Cloud Vision API."""

from .vision_client import VisionTextDetector, build_vision_client

__all__ = ['VisionTextDetector', 'build_vision_client']
