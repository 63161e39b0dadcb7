import asyncio

import httpx
import pytest

from forecast_cache.errors import InvalidArgument, RemoteRejection
from forecast_cache.services.openweather import OpenWeatherClient, is_success


@pytest.mark.parametrize(
    "payload, expected",
    [
        ({"cod": "200"}, True),
        ({"cod": 200}, True),
        ({"cod": 401, "message": "Invalid API key."}, False),
        ({"cod": "abc"}, False),
        ({}, False),
        ("200", False),
    ],
)
def test_is_success(payload, expected):
    assert is_success(payload) is expected


def test_missing_key():
    with pytest.raises(InvalidArgument):
        OpenWeatherClient("http://example.test/data/2.5", "")


def test_forecast_url():
    ow = OpenWeatherClient("http://example.test/data/2.5/", "key123", results_limit=7)
    assert ow.forecast_url(727011) == "http://example.test/data/2.5/forecast?id=727011&cnt=7&appid=key123"


def test_rejection_keeps_raw_payload():
    body = {"cod": "404", "message": "city not found"}
    ow = OpenWeatherClient(
        "http://example.test/data/2.5",
        "key123",
        transport=httpx.MockTransport(lambda request: httpx.Response(404, json=body)),
    )

    with pytest.raises(RemoteRejection) as excinfo:
        asyncio.run(ow.get_forecast(1))
    assert excinfo.value.payload == body
    assert "city not found" in str(excinfo.value)
