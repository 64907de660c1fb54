"""Observability – PhoneNumberMaskingFilter."""
from __future__ import annotations

import re
from typing import Any

DEFAULT_PHONE_FIELDS: frozenset[str] = frozenset({
    "phone", "phone_number", "to_number", "from_number", "lead_phone",
})

_DIGIT_RE = re.compile(r"\d")


def mask_phone_number(value: str, *, keep: int = 4) -> str:
    """Replace every digit but the last *keep* with ``*``, preserving layout.

    ``"+1 (415) 555-1234"`` becomes ``"+* (***) ***-1234"``.
    """
    total = len(_DIGIT_RE.findall(value))
    to_mask = max(total - keep, 0)
    out: list[str] = []
    for ch in value:
        if to_mask and ch.isdigit():
            out.append("*")
            to_mask -= 1
        else:
            out.append(ch)
    return "".join(out)


class PhoneNumberMaskingFilter:
    """structlog processor masking phone-number values in the event dict.

    Usable standalone through :meth:`redact_deep`.
    """

    def __init__(self, phone_fields: frozenset[str] | None = None, *, keep: int = 4) -> None:
        self._fields = phone_fields or DEFAULT_PHONE_FIELDS
        self._keep = keep

    def __call__(
        self,
        logger: Any,       # noqa: ARG002
        method_name: str,  # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        return self.redact_deep(event_dict)

    def redact_deep(self, data: dict[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for k, v in data.items():
            if k.lower() in self._fields and isinstance(v, str):
                result[k] = mask_phone_number(v, keep=self._keep)
            elif isinstance(v, dict):
                result[k] = self.redact_deep(v)
            else:
                result[k] = v
        return result


__all__ = ["DEFAULT_PHONE_FIELDS", "PhoneNumberMaskingFilter", "mask_phone_number"]
