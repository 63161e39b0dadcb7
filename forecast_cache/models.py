from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class WeatherCondition(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    id: Optional[int] = None
    main: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None


class MainReadings(BaseModel):
    """Temperatures are in Kelvin, as the provider sends them without ``units``."""

    model_config = ConfigDict(extra="allow", frozen=True)

    temp: Optional[float] = None
    temp_min: float
    temp_max: float


class ForecastPoint(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    dt: int
    dt_txt: str
    main: MainReadings
    weather: List[WeatherCondition] = Field(default_factory=list)

    @property
    def date(self) -> str:
        return self.dt_txt.split(" ")[0]


class CityInfo(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[int] = None
    name: Optional[str] = None
    country: Optional[str] = None
    coord: Optional[dict] = None


class ForecastResponse(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    cod: Union[int, str]
    city: Optional[CityInfo] = None
    cnt: Optional[int] = None
    points: List[ForecastPoint] = Field(default_factory=list, alias="list")


class DailySummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str
    temp_min: float
    temp_max: float
