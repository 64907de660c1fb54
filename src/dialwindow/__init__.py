"""
dialwindow – phone-number timezone resolution and calling-window enforcement.

Import path convention::

    from dialwindow.phone import resolve_timezone
    from dialwindow.window import CallingWindow, is_within_calling_window, next_valid_call_time
    from dialwindow.config import CallingWindowSettings, EnvSettingsLoader
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
