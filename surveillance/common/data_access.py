"""
Helpers for reading the dashboard's static datasets (unified document, legacy files).

Usage:
    from surveillance.common.data_access import DataLoader, DocumentCache
    loader = DataLoader(base_url="https://dashboard.example.org/")
    cache = DocumentCache(loader.fetch_unified_document)
    document = cache.get()
"""

from __future__ import annotations

import io
import json
import logging
import threading
from pathlib import Path
from typing import Any, Callable, Optional
from urllib.parse import urljoin

import pandas as pd
import requests
import yaml

from .schema import validate_unified_document

logger = logging.getLogger(__name__)

ROOT_DIR = Path(__file__).resolve().parents[2]
DATASETS_CONFIG_PATH = ROOT_DIR / "config" / "datasets.yaml"
DEFAULT_TIMEOUT = 10.0

STATE_UNFETCHED = "unfetched"
STATE_PENDING = "pending"
STATE_READY = "ready"


class DataAccessError(Exception):
    """Base class for dataset access errors."""


class FetchError(DataAccessError):
    """Raised when an asset request fails or returns a non-success status."""


class ParseError(DataAccessError):
    """Raised when an asset body is not valid JSON/CSV or has the wrong shape."""


class DataLoader:
    """Accessor for dataset files under a deployed asset root (URL or directory)."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        config_path: Path = DATASETS_CONFIG_PATH,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._config = self._load_config(Path(config_path))
        self.base_url = base_url or self._config.get("base_url", "public")
        self.timeout = timeout
        self.session = session
        self.unified_path = self._config.get("unified_path", "data/unified-data.json")
        legacy_cfg = self._config.get("legacy", {}) or {}
        self.legacy_json_pattern = legacy_cfg.get("jakarta_json", "data/jakarta-{year}.json")
        self.legacy_years = [str(year) for year in legacy_cfg.get("jakarta_years", ["2022", "2023"])]
        self.delimited_dir = legacy_cfg.get("delimited_dir", "data")
        self.delimited_files: dict[str, str] = dict(legacy_cfg.get("delimited", {}) or {})

    @staticmethod
    def _load_config(path: Path) -> dict:
        if not path.exists():
            raise FileNotFoundError(f"Datasets config not found at {path}")
        with path.open() as f:
            return yaml.safe_load(f) or {}

    @property
    def is_remote(self) -> bool:
        return str(self.base_url).startswith(("http://", "https://"))

    def resolve(self, relative_path: str) -> str:
        """Return the absolute URL or filesystem path of an asset."""
        relative_path = relative_path.lstrip("/")
        if self.is_remote:
            base = self.base_url if self.base_url.endswith("/") else f"{self.base_url}/"
            return urljoin(base, relative_path)
        return str(Path(self.base_url) / relative_path)

    def fetch_unified_document(self) -> dict[str, Any]:
        """
        Fetch and parse the unified dataset document.

        Raises:
            FetchError: when the asset cannot be retrieved.
            ParseError: when the body is not JSON or lacks the expected sections.
        """
        text = self._fetch_text(self.unified_path)
        payload = self._parse_json(text, self.unified_path)
        try:
            validate_unified_document(payload)
        except ValueError as exc:
            raise ParseError(f"{self.unified_path}: {exc}") from exc
        return payload

    def fetch_legacy_json_by_year(self, year: str) -> dict[str, Any]:
        """Fetch a legacy per-year Jakarta file (``{data, total_file, message}``)."""
        year = str(year)
        if year not in self.legacy_years:
            raise FetchError(f"Legacy Jakarta data not available for year {year}")
        relative_path = self.legacy_json_pattern.format(year=year)
        payload = self._parse_json(self._fetch_text(relative_path), relative_path)
        if not isinstance(payload, dict) or not isinstance(payload.get("data"), list):
            raise ParseError(f"{relative_path}: expected an object with a 'data' list")
        return payload

    def fetch_delimited_text(self, filename: str) -> list[dict[str, str]]:
        """
        Fetch a header-row CSV file and return its rows as string dictionaries.

        Args:
            filename: file name under the legacy data directory, or a dataset key
                from the datasets config (e.g. ``cirebon``).

        Returns:
            list of rows; blank lines are skipped and every cell stays a string.
        """
        filename = self.delimited_files.get(filename, filename)
        relative_path = f"{self.delimited_dir.rstrip('/')}/{filename}"
        text = self._fetch_text(relative_path)
        if not text.strip():
            return []
        try:
            df = pd.read_csv(
                io.StringIO(text),
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
            )
        except (pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
            raise ParseError(f"{relative_path}: {exc}") from exc
        return df.to_dict(orient="records")

    def _fetch_text(self, relative_path: str) -> str:
        location = self.resolve(relative_path)
        logger.info("Fetching dataset asset %s", location)
        if self.is_remote:
            http = self.session or requests
            try:
                response = http.get(location, timeout=self.timeout)
                response.raise_for_status()
            except requests.exceptions.RequestException as exc:
                raise FetchError(f"Failed to fetch {location}: {exc}") from exc
            return response.text

        path = Path(location)
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise FetchError(f"Failed to read {location}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise ParseError(f"{location} is not valid UTF-8: {exc}") from exc

    @staticmethod
    def _parse_json(text: str, source: str) -> Any:
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ParseError(f"{source} is not valid JSON: {exc}") from exc


class DocumentCache:
    """Single get-or-fetch cell holding the unified document for one app lifetime.

    There is no TTL and no cache key; call ``reset()`` to force the next ``get()``
    to fetch again.
    """

    def __init__(self, fetch: Callable[[], dict[str, Any]]) -> None:
        self._fetch = fetch
        self._value: Optional[dict[str, Any]] = None
        self._state = STATE_UNFETCHED
        self._lock = threading.Lock()

    @property
    def state(self) -> str:
        return self._state

    def get(self) -> dict[str, Any]:
        # reset() clears _value before _state, so read the value first.
        value = self._value
        if value is not None and self._state == STATE_READY:
            return value

        with self._lock:
            # Another thread may have finished the fetch while we waited.
            if self._state == STATE_READY:
                return self._value  # type: ignore[return-value]

            self._state = STATE_PENDING
            try:
                value = self._fetch()
            except Exception:
                self._state = STATE_UNFETCHED
                raise
            self._value = value
            self._state = STATE_READY
            logger.info("Unified document cached")
            return value

    def reset(self) -> None:
        with self._lock:
            self._value = None
            self._state = STATE_UNFETCHED
