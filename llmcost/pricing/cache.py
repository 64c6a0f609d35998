"""Single-file snapshot cache for normalized models.

File format: ``{"timestamp": <epoch ms>, "models": [<Model>, ...]}``.
Every read failure (missing, unreadable, malformed, invalid) collapses to
"no cache". Write failures are logged and swallowed.
"""

import json
import logging
import os
import tempfile
import time
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..core.models import CacheSnapshot, Model

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 6 * 60 * 60  # 6 hours


class CacheStore:
    """Reads and writes the model cache file.

    The path and TTL are injected so tests can redirect the cache to a
    temporary directory.
    """

    def __init__(
        self,
        path: Path,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.path = Path(path)
        self.ttl_seconds = ttl_seconds
        self._clock = clock

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    def _load(self) -> CacheSnapshot | None:
        if not self.path.exists():
            return None
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
            return CacheSnapshot.model_validate(data)
        except (json.JSONDecodeError, UnicodeDecodeError, OSError, ValidationError) as e:
            logger.debug(f"Ignoring unreadable model cache {self.path}: {e}")
            return None

    def read(self) -> CacheSnapshot | None:
        """Return the cached snapshot if it exists and is within the TTL."""
        snapshot = self._load()
        if snapshot is None:
            return None
        age_ms = self._now_ms() - snapshot.timestamp
        if age_ms > self.ttl_seconds * 1000:
            logger.debug("Model cache expired")
            return None
        logger.debug(f"Loaded {len(snapshot.models)} models from cache")
        return snapshot

    def read_stale(self) -> CacheSnapshot | None:
        """Return the cached snapshot regardless of age."""
        return self._load()

    def write(self, models: Sequence[Model]) -> bool:
        """Persist models with the current timestamp.

        The file is written to a sibling temp file and moved into place, so
        a failed write leaves any previous snapshot intact.

        Returns:
            True if the snapshot was written.
        """
        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            payload = {
                "timestamp": self._now_ms(),
                "models": [m.model_dump(mode="json", by_alias=True) for m in models],
            }
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=".models-", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
            os.replace(tmp_name, self.path)
            tmp_name = None
            logger.debug(f"Saved model cache with {len(models)} models")
            return True
        except OSError as e:
            logger.debug(f"Failed to save model cache: {e}")
            return False
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass

    def clear(self) -> bool:
        """Delete the cache file. Returns True if a file was removed."""
        try:
            self.path.unlink()
            return True
        except FileNotFoundError:
            return False

    def info(self) -> dict[str, Any]:
        """Describe the cache file state (for diagnostics)."""
        info: dict[str, Any] = {
            "cache_file": str(self.path),
            "cache_exists": self.path.exists(),
            "ttl_hours": round(self.ttl_seconds / 3600, 2),
        }
        if info["cache_exists"]:
            snapshot = self._load()
            if snapshot is None:
                info["cache_corrupt"] = True
            else:
                age_hours = (self._now_ms() - snapshot.timestamp) / 3_600_000
                info["cache_age_hours"] = round(age_hours, 1)
                info["cache_fresh"] = age_hours * 3600 <= self.ttl_seconds
                info["cached_models"] = len(snapshot.models)
        return info
