"""Root error class for the dialwindow error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of every error dialwindow raises on purpose.

    ``code`` is a stable slug for callers that branch on error kind; the
    ``detail`` mapping travels into structured logs unchanged, so it should
    stay JSON-friendly. Pass ``cause`` (or use ``raise ... from``) to keep
    the underlying exception visible in :meth:`to_dict`.
    """

    default_code: str = "dialwindow_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or type(self).default_code
        self.detail: dict[str, Any] = dict(detail or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


__all__ = ["BaseError"]
