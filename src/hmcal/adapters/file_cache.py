"""File-based holiday cache adapter."""

import json
import logging
import os
import tempfile
from pathlib import Path

from hmcal.core.holidays import CacheKey, HolidaySet
from hmcal.errors import CacheCorruptError

logger = logging.getLogger(__name__)

CACHE_VERSION = 1
MAX_CACHE_BYTES = 10 * 1024 * 1024


class FileHolidayStore:
    """
    File-based holiday cache.

    Implements HolidayStore protocol. Each (provider, year) key gets one
    JSON file named hm-<provider>-<year> under the cache directory.
    """

    def __init__(self, cache_dir: Path | str):
        self.cache_dir = Path(cache_dir).expanduser()

    def path_for(self, key: CacheKey) -> Path:
        """Get the file path for a cache key."""
        return self.cache_dir / key.filename

    def load(self, key: CacheKey) -> HolidaySet | None:
        """Load holidays for a key. Returns None if missing or unreadable."""
        try:
            return self._read(key)
        except CacheCorruptError as e:
            logger.warning(f"Ignoring corrupt cache, will refetch: {e}")
            return None

    def _read(self, key: CacheKey) -> HolidaySet | None:
        path = self.path_for(key)
        try:
            if path.stat().st_size > MAX_CACHE_BYTES:
                raise CacheCorruptError(f"{path} exceeds {MAX_CACHE_BYTES} bytes")
            raw = path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise CacheCorruptError(f"{path} is unreadable: {e}") from e

        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise CacheCorruptError(f"{path} is not valid JSON: {e}") from e

        if not isinstance(data, dict) or data.get("version") != CACHE_VERSION:
            logger.debug(f"Discarding {path}: legacy or unknown cache format")
            raise CacheCorruptError(f"{path} has an unknown format")
        if data.get("provider") != key.provider.slug or data.get("year") != key.year:
            raise CacheCorruptError(f"{path} belongs to a different cache key")

        try:
            return HolidaySet.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise CacheCorruptError(f"{path} has invalid holiday data: {e}") from e

    def save(self, key: CacheKey, holidays: HolidaySet) -> None:
        """
        Write holidays for a key.

        The file is written next to the target and renamed over it, so a
        failed write never clobbers the previous cache.
        """
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(key)
        payload = {
            "version": CACHE_VERSION,
            "provider": key.provider.slug,
            "year": key.year,
            **holidays.to_dict(),
        }
        content = json.dumps(payload, indent=2, ensure_ascii=False).encode("utf-8")

        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=self.cache_dir)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug(f"Saved {len(holidays.records())} holidays to {path}")

    def delete(self, key: CacheKey) -> None:
        """Remove the cache file for a key, if any."""
        self.path_for(key).unlink(missing_ok=True)
