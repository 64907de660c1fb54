"""Phone numbers – digit normalization and timezone resolution."""
from dialwindow.phone.area_codes import AREA_CODE_TIMEZONES
from dialwindow.phone.country_codes import COUNTRY_CODE_TIMEZONES
from dialwindow.phone.digits import MIN_RESOLVABLE_DIGITS, is_resolvable_length, normalize_digits
from dialwindow.phone.resolver import TimezoneResolver, resolve_timezone

__all__ = [
    "AREA_CODE_TIMEZONES",
    "COUNTRY_CODE_TIMEZONES",
    "MIN_RESOLVABLE_DIGITS",
    "TimezoneResolver",
    "is_resolvable_length",
    "normalize_digits",
    "resolve_timezone",
]
