"""Module-level configuration for dtext defaults."""

import threading
from dataclasses import dataclass

from dtext.calendar import Calendar, GregorianCalendar


@dataclass
class DtextConfig:
    """Configuration for dtext defaults."""

    default_calendar: Calendar | None = None  # None = GregorianCalendar()
    scan_warning_days: int = 36_500  # ~100 years of day-by-day stepping


# Module-level singleton
_dtext_config: DtextConfig | None = None
_config_lock = threading.Lock()


def get_dtext_config() -> DtextConfig:
    """Get the global dtext configuration singleton."""
    global _dtext_config
    if _dtext_config is None:
        with _config_lock:
            if _dtext_config is None:
                _dtext_config = DtextConfig()
    return _dtext_config


def configure_dtext(
    default_calendar: Calendar | None = None,
    scan_warning_days: int | None = None,
) -> None:
    """Configure default dtext settings.

    Args:
        default_calendar: Calendar used for calendar-unit fields by
            ``date_diff`` when no calendar is passed explicitly.
        scan_warning_days: Business-day scans longer than this many calendar
            days log a ``financial_day_scan_large`` warning.

    Example:
        from dtext import GregorianCalendar, configure_dtext

        # Set global defaults
        configure_dtext(
            default_calendar=GregorianCalendar(),
            scan_warning_days=3650,
        )
    """
    config = get_dtext_config()
    with _config_lock:
        if default_calendar is not None:
            config.default_calendar = default_calendar
        if scan_warning_days is not None:
            if scan_warning_days < 0:
                raise ValueError(
                    f"scan_warning_days must be >= 0; got {scan_warning_days}"
                )
            config.scan_warning_days = scan_warning_days


def get_default_calendar() -> Calendar:
    """Get the default calendar."""
    config = get_dtext_config()
    if config.default_calendar is not None:
        return config.default_calendar
    return GregorianCalendar()


def get_scan_warning_days() -> int:
    return get_dtext_config().scan_warning_days


def reset_dtext_config() -> None:
    """Reset configuration to defaults. Useful for testing."""
    global _dtext_config
    with _config_lock:
        _dtext_config = DtextConfig()
