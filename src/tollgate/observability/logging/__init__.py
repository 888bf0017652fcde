"""Observability – structured logging helpers."""
from tollgate.observability.logging.factory import JsonLoggerFactory
from tollgate.observability.logging.processors import KeyRedactionProcessor, get_logger

__all__ = ["JsonLoggerFactory", "KeyRedactionProcessor", "get_logger"]
