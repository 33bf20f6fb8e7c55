"""Observability – structlog configuration, redaction and logger helper."""
from eventdripper.observability.logging.factory import JsonLoggerFactory
from eventdripper.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from eventdripper.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
