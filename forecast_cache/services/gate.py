import logging
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

import anyio
import httpx

from forecast_cache.errors import InvalidArgument
from forecast_cache.services.cache import ForecastFileCache
from forecast_cache.services.openweather import CityId, OpenWeatherClient

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://api.openweathermap.org/data/2.5"
DEFAULT_CACHE_PATH = Path(tempfile.gettempdir()) / "last-response.json"
CACHE_EXPIRE_MINUTES = 12
RESULTS_LIMIT = 5
TIMEOUT_SECONDS = 5.0


class ForecastGate:
    """Serves the forecast from the cache file, or from the provider once it expires.

    At most one provider request and one cache write happen per ``get`` call,
    and nothing is written when the provider call fails. Concurrent callers
    that all see a stale file each fetch and overwrite it; there is no lock.
    """

    def __init__(
        self,
        api_key: str,
        cache_path: Path = DEFAULT_CACHE_PATH,
        expire_minutes: float = CACHE_EXPIRE_MINUTES,
        base_url: str = DEFAULT_BASE_URL,
        results_limit: int = RESULTS_LIMIT,
        timeout_seconds: float = TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not api_key:
            raise InvalidArgument("weather app key is missing. Please provide it as the first argument")
        self.client = OpenWeatherClient(
            base_url,
            api_key,
            results_limit=results_limit,
            timeout_seconds=timeout_seconds,
            transport=transport,
        )
        self.cache = ForecastFileCache(cache_path, expire_minutes)

    async def get(self, city_id: Optional[CityId]) -> Dict[str, Any]:
        if city_id is None or city_id == "":
            raise InvalidArgument("cityid is missing")

        cached = await anyio.to_thread.run_sync(self.cache.stat)
        if not cached.exists:
            logger.info("No cached forecast, fetching city %s", city_id)
            return await self._fetch_and_store(city_id)

        if cached.stale:
            logger.info("Cached forecast is %.0fs old, refreshing city %s", cached.age_seconds, city_id)
            return await self._fetch_and_store(city_id)

        logger.debug("Serving cached forecast (%.0fs old)", cached.age_seconds)
        return await anyio.to_thread.run_sync(self.cache.read_json)

    async def _fetch_and_store(self, city_id: CityId) -> Dict[str, Any]:
        data = await self.client.get_forecast(city_id)
        await anyio.to_thread.run_sync(self.cache.write_json, data)
        return data
