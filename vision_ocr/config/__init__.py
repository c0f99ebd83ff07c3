"""Run configuration."""

from .settings import OCRConfig, DEFAULT_TOKEN_CACHE_PATH

__all__ = ['OCRConfig', 'DEFAULT_TOKEN_CACHE_PATH']
