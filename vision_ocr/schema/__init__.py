"""Data models for detection results and cached tokens."""

from .models import Vertex, TextAnnotation, CachedToken

__all__ = ['Vertex', 'TextAnnotation', 'CachedToken']
