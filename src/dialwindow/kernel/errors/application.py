"""Application-layer errors."""

from __future__ import annotations

from dialwindow.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting concern raised outside the pure engine (config, wiring)."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
