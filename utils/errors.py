"""Exceptions raised by the suite's own helpers (never by the system under test)."""


class ChargePointSuiteError(Exception):
    """Base class for suite errors."""


class ConfigError(ChargePointSuiteError):
    """Configuration is missing or invalid."""


class PageUnavailableError(ChargePointSuiteError):
    """Navigation to the UI answered with an HTTP error status."""

    def __init__(self, url: str, status: int):
        super().__init__(f"{url} answered with HTTP {status}")
        self.url = url
        self.status = status


class RowNotFoundError(ChargePointSuiteError):
    """No list row matches the requested serial number or id."""


class AmbiguousRowError(ChargePointSuiteError):
    """More than one list row matches a serial number."""

    def __init__(self, serial: str, count: int):
        super().__init__(f"{count} rows match serial number {serial!r}; expected exactly one")
        self.serial = serial
        self.count = count


class ListNotEmptyError(ChargePointSuiteError):
    """Deleting every entry did not leave the list empty before the timeout."""

    def __init__(self, remaining: int, timeout_s: float):
        super().__init__(f"{remaining} entries still listed after {timeout_s:g}s")
        self.remaining = remaining
        self.timeout_s = timeout_s
