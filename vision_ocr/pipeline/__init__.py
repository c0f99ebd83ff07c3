"""Pipeline module for orchestrating the full detection flow."""

from .detection_pipeline import DetectionPipeline, DetectionResult

__all__ = ['DetectionPipeline', 'DetectionResult']
