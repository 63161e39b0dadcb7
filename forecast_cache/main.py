import logging

from fastapi import FastAPI
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError

from forecast_cache.config import settings
from forecast_cache.errors import CacheIOFailure, NetworkFailure, RemoteRejection
from forecast_cache.services.daily import summarize_forecast
from forecast_cache.services.gate import ForecastGate

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name)

gate = ForecastGate(
    settings.weather_app_key,
    cache_path=settings.cache_file_path,
    expire_minutes=settings.cache_expire_minutes,
    base_url=settings.openweather_base_url,
    results_limit=settings.forecast_results_limit,
    timeout_seconds=settings.openweather_timeout_seconds,
)

app.mount("/file", StaticFiles(directory=settings.static_dir, check_dir=False), name="file")


@app.get("/health")
def health():
    return {"status": "ok", "service": settings.app_name}


@app.get("/")
def root():
    return FileResponse(settings.static_dir / "index.html")


# ── Forecast endpoints ───────────────────────────────────────────────────────
# Only the default city is served; a city id in the path is ignored.

@app.get("/get-city")
@app.get("/get-city/{city_id}")
async def forecast_daily(city_id: str = ""):
    return await _get_forecast(details=False)


@app.get("/get-city-details")
@app.get("/get-city-details/{city_id}")
async def forecast_details(city_id: str = ""):
    return await _get_forecast(details=True)


# ── Shared helpers ───────────────────────────────────────────────────────────

async def _get_forecast(details: bool):
    """Fetch through the cache gate; provider and cache failures become error bodies."""
    try:
        data = await gate.get(settings.default_city_id)
    except RemoteRejection as exc:
        logger.error("Error from weather api: %s", exc)
        return JSONResponse(status_code=502, content=exc.payload)
    except NetworkFailure as exc:
        logger.error("Error from weather api: %s", exc)
        return JSONResponse(status_code=502, content={"detail": str(exc)})
    except CacheIOFailure as exc:
        logger.error("Forecast cache failure: %s", exc)
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    if not details:
        try:
            data = summarize_forecast(data)
        except ValidationError as exc:
            logger.error("Unexpected forecast payload: %s", exc)
            return JSONResponse(status_code=502, content={"detail": "Unexpected forecast payload"})
    return data
