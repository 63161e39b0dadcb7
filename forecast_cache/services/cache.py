import contextlib
import json
import logging
import os
import tempfile
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from forecast_cache.errors import CacheIOFailure

logger = logging.getLogger(__name__)


@dataclass
class CacheResult:
    exists: bool
    age_seconds: Optional[float]
    stale: bool


class ForecastFileCache:
    """
    Keeps the last provider response as a single JSON file:
      path -> {...raw forecast payload...}
    The file's mtime is the only freshness signal.
    """

    def __init__(self, path: Path, expire_minutes: float = 12):
        self.path = Path(path)
        self.expire_minutes = expire_minutes

    def stat(self) -> CacheResult:
        try:
            mtime = self.path.stat().st_mtime
        except FileNotFoundError:
            return CacheResult(exists=False, age_seconds=None, stale=False)
        except OSError as exc:
            raise CacheIOFailure(f"Cannot stat cache file {self.path}: {exc}") from exc

        now = time.time()
        return CacheResult(
            exists=True,
            age_seconds=max(0.0, now - mtime),
            stale=self.is_expired(mtime, now),
        )

    def is_expired(self, mtime: float, now: Optional[float] = None) -> bool:
        if now is None:
            now = time.time()
        return (now - mtime) / 60 >= self.expire_minutes

    def read_json(self) -> Dict[str, Any]:
        try:
            raw = self.path.read_text(encoding="utf-8")
            return json.loads(raw)
        except (OSError, ValueError) as exc:
            raise CacheIOFailure(f"Cannot read cache file {self.path}: {exc}") from exc

    def write_json(self, payload: Dict[str, Any]) -> None:
        # Write next to the target and swap it in, so readers never see a partial file.
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(payload, fh)
            os.replace(tmp_name, self.path)
        except (OSError, TypeError, ValueError) as exc:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
            raise CacheIOFailure(f"Cannot write cache file {self.path}: {exc}") from exc
        logger.debug("Cached forecast in %s", self.path)
