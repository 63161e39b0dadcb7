from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Union

from forecast_cache.models import DailySummary, ForecastPoint, ForecastResponse

PointLike = Union[ForecastPoint, Dict[str, Any]]


@dataclass
class _DayAccumulator:
    temp_min: Optional[float] = None
    temp_max: Optional[float] = None
    date: Optional[str] = None

    def summary(self) -> DailySummary:
        return DailySummary(date=self.date, temp_min=self.temp_min, temp_max=self.temp_max)


def reduce_daily(points: Iterable[PointLike]) -> List[DailySummary]:
    """Collapse 3-hourly points into one min/max record per calendar day.

    Days come out in the order they first appear in ``points``; the input is
    expected to be chronological, as the provider sends it.
    """
    items = [p if isinstance(p, ForecastPoint) else ForecastPoint.model_validate(p) for p in points]

    result: List[DailySummary] = []
    acc = _DayAccumulator()

    for i, item in enumerate(items):
        date = item.date

        # acc.date still holds the previous point's date here.
        if acc.date is not None and date != acc.date:
            result.append(acc.summary())
            acc = _DayAccumulator()

        if acc.temp_min is None or item.main.temp_min < acc.temp_min:
            acc.temp_min = item.main.temp_min
        if acc.temp_max is None or item.main.temp_max > acc.temp_max:
            acc.temp_max = item.main.temp_max

        acc.date = date

        if i == len(items) - 1:
            result.append(acc.summary())

    return result


def summarize_forecast(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of a raw forecast payload with ``list`` replaced by daily summaries."""
    response = ForecastResponse.model_validate(payload)
    summarized = dict(payload)
    summarized["list"] = [day.model_dump() for day in reduce_daily(response.points)]
    return summarized
