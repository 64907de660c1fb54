"""Observability – structured logging helpers."""
from dialwindow.observability.logging.factory import JsonLoggerFactory
from dialwindow.observability.logging.filters import (
    DEFAULT_PHONE_FIELDS,
    PhoneNumberMaskingFilter,
    mask_phone_number,
)
from dialwindow.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_PHONE_FIELDS",
    "JsonLoggerFactory",
    "PhoneNumberMaskingFilter",
    "get_logger",
    "mask_phone_number",
]
