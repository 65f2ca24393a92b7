"""Loading of JSON documents from local paths or HTTP(S) URLs."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Optional
from urllib.parse import urlparse

import requests

from .config import LoaderConfig
from .errors import DocumentLoadError

logger = logging.getLogger(__name__)


class JsonObject(SimpleNamespace):
    """JSON object whose keys are exposed as attributes, so they compare as record fields."""


def is_url(source: str) -> bool:
    return urlparse(source).scheme in {"http", "https"}


class DocumentLoader:
    """Fetch and decode JSON documents for comparison."""

    def __init__(self, config: Optional[LoaderConfig] = None, session: Optional[requests.Session] = None) -> None:
        self.config = config or LoaderConfig()
        self._session = session

    def load(self, source: str) -> Any:
        if is_url(source):
            text = self._fetch(source)
        else:
            text = self._read(source)
        try:
            return json.loads(text, object_hook=lambda values: JsonObject(**values))
        except json.JSONDecodeError as exc:
            raise DocumentLoadError(f"{source} is not valid JSON: {exc}") from exc

    def _read(self, source: str) -> str:
        path = Path(source)
        try:
            return path.read_text(encoding=self.config.encoding)
        except OSError as exc:
            raise DocumentLoadError(f"Cannot read {source}: {exc}") from exc

    def _fetch(self, url: str) -> str:
        getter = self._session.get if self._session is not None else requests.get
        logger.info("Fetching %s", url)
        try:
            response = getter(
                url,
                timeout=self.config.timeout,
                headers={"User-Agent": self.config.user_agent, "Accept": "application/json"},
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise DocumentLoadError(f"Cannot fetch {url}: {exc}") from exc
        return response.text


__all__ = ["DocumentLoader", "JsonObject", "is_url"]
