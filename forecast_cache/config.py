from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from forecast_cache.services import gate


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # App
    app_name: str = "forecast-cache"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8181
    static_dir: Path = Path(__file__).parent / "static"

    # Provider
    weather_app_key: str
    openweather_base_url: str = gate.DEFAULT_BASE_URL
    openweather_timeout_seconds: float = gate.TIMEOUT_SECONDS
    forecast_results_limit: int = gate.RESULTS_LIMIT
    default_city_id: int = 727011  # Sofia

    # Cache tuning
    # The provider allows one request per 10 minutes; stay a bit above that.
    cache_file_path: Path = gate.DEFAULT_CACHE_PATH
    cache_expire_minutes: float = gate.CACHE_EXPIRE_MINUTES


settings = Settings()
