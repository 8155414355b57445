"""Exceptions raised by hmcal."""


class HolidayMapError(Exception):
    """Base class for every error surfaced by hmcal."""

    pass


class ProviderError(HolidayMapError):
    """Raised when a remote holiday provider cannot be fetched or parsed."""

    def __init__(self, message: str, status: int | None = None, url: str | None = None):
        self.status = status
        self.url = url
        if status is not None:
            message = f"{message} (HTTP {status})"
        super().__init__(message)


class CacheCorruptError(HolidayMapError):
    """Raised when a cache file exists but cannot be read back."""

    pass


class NotFoundError(HolidayMapError):
    """Raised when there is no custom holiday to act on."""

    pass


class InvalidDateError(HolidayMapError):
    """Raised for a day/month pair that is not a real calendar date."""

    pass


class InvalidCountryError(HolidayMapError):
    """Raised for a malformed --country value."""

    pass
