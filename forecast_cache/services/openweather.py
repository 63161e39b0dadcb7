import logging
from typing import Any, Dict, Optional, Union

import httpx

from forecast_cache.errors import InvalidArgument, NetworkFailure, RemoteRejection

logger = logging.getLogger(__name__)

CityId = Union[int, str]


def is_success(payload: Any) -> bool:
    """OpenWeather reports success in the body (``cod``), as int or string."""
    if not isinstance(payload, dict):
        return False
    try:
        return int(payload.get("cod")) == 200
    except (TypeError, ValueError):
        return False


class OpenWeatherClient:
    def __init__(
        self,
        base_url: str,
        api_key: str,
        results_limit: int = 5,
        timeout_seconds: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not api_key:
            raise InvalidArgument("weather app key is missing")
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.results_limit = results_limit
        self.timeout = timeout_seconds
        self.transport = transport

    def forecast_params(self, city_id: CityId) -> Dict[str, Any]:
        return {"id": city_id, "cnt": self.results_limit, "appid": self.api_key}

    def forecast_url(self, city_id: CityId) -> str:
        return str(httpx.URL(f"{self.base_url}/forecast", params=self.forecast_params(city_id)))

    async def get_forecast(self, city_id: CityId) -> Dict[str, Any]:
        """5 day / 3 hour forecast for one city id.

        Raises NetworkFailure when the provider cannot be reached and
        RemoteRejection when the body does not carry ``cod == 200``.
        """
        url = f"{self.base_url}/forecast"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                r = await client.get(url, params=self.forecast_params(city_id))
        except httpx.HTTPError as exc:
            raise NetworkFailure(f"Cannot reach weather provider: {exc}") from exc

        try:
            data = r.json()
        except ValueError:
            raise RemoteRejection(r.text) from None

        if not is_success(data):
            logger.warning("Weather provider rejected city %s: %s", city_id, data)
            raise RemoteRejection(data)
        return data
