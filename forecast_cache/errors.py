import json
from typing import Any


class WeatherAPIError(Exception):
    """Base class for failures surfaced by the forecast gate."""


class InvalidArgument(WeatherAPIError, ValueError):
    pass


class NetworkFailure(WeatherAPIError):
    """The provider could not be reached."""


class RemoteRejection(WeatherAPIError):
    """The provider answered, but the embedded ``cod`` was not 200.

    ``payload`` is the body exactly as the provider sent it (parsed JSON, or
    the raw text when it was not JSON).
    """

    def __init__(self, payload: Any):
        self.payload = payload
        text = payload if isinstance(payload, str) else json.dumps(payload)
        super().__init__(text)


class CacheIOFailure(WeatherAPIError):
    """Reading or writing the cache file failed."""
