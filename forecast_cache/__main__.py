import uvicorn

from forecast_cache.config import settings


def run():
    uvicorn.run("forecast_cache.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
