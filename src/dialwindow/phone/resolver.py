"""Phone number -> IANA timezone resolution.

NANP numbers (leading ``1``) are looked up by their 3-digit area code. All
other numbers, and NANP numbers with an unknown area code, fall back to the
country calling code table, probed longest prefix first so that e.g.
``+352`` is never shadowed by a 1-digit ``+3`` entry.
"""

from __future__ import annotations

from typing import Final, Mapping

from dialwindow.observability.logging import get_logger
from dialwindow.phone.area_codes import AREA_CODE_TIMEZONES
from dialwindow.phone.country_codes import COUNTRY_CODE_TIMEZONES
from dialwindow.phone.digits import is_resolvable_length, normalize_digits

NANP_PREFIX: Final = "1"
COUNTRY_CODE_LENGTHS: Final = (3, 2, 1)

_log = get_logger(__name__)


class TimezoneResolver:
    """Resolve phone numbers against a pair of static lookup tables.

    Holds no mutable state; one instance can be shared across threads.
    """

    def __init__(
        self,
        area_codes: Mapping[str, str] | None = None,
        country_codes: Mapping[str, str] | None = None,
    ) -> None:
        self._area_codes = AREA_CODE_TIMEZONES if area_codes is None else area_codes
        self._country_codes = COUNTRY_CODE_TIMEZONES if country_codes is None else country_codes

    def resolve(self, phone_number: str | None) -> str | None:
        """Return the IANA zone for *phone_number*, or ``None`` if unknown."""
        digits = normalize_digits(phone_number)
        if not is_resolvable_length(digits):
            _log.debug("timezone_unresolved", phone_number=phone_number or "", reason="too_short")
            return None

        tz = self.resolve_digits(digits)
        if tz is None:
            _log.debug("timezone_unresolved", phone_number=phone_number or "", reason="no_match")
        return tz

    def resolve_digits(self, digits: str) -> str | None:
        """Resolve an already-normalized digit sequence."""
        if digits.startswith(NANP_PREFIX) and len(digits) >= 4:
            tz = self._area_codes.get(digits[1:4])
            if tz:
                return tz

        for length in COUNTRY_CODE_LENGTHS:
            tz = self._country_codes.get(digits[:length])
            if tz:
                return tz
        return None


_default_resolver = TimezoneResolver()


def resolve_timezone(phone_number: str | None) -> str | None:
    """Resolve *phone_number* with the built-in area and country code tables."""
    return _default_resolver.resolve(phone_number)


__all__ = ["COUNTRY_CODE_LENGTHS", "NANP_PREFIX", "TimezoneResolver", "resolve_timezone"]
