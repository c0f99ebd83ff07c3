from .logger import setup_logger, get_logger, log_detection_result, redact_sensitive_data

__all__ = ['setup_logger', 'get_logger', 'log_detection_result', 'redact_sensitive_data']
