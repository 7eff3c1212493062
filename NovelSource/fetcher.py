import logging
from typing import Any, Dict, Optional

import requests

from .config import SourceConfig
from .models import PageResponse


class Fetcher:
    """Performs the single synchronous GET request behind every source operation."""

    def __init__(self, config: SourceConfig, session: Optional[requests.Session] = None):
        # Without an injected session every call is a standalone requests.get, so no cookies carry over.
        self.config = config
        self.session = session
        self.headers = {
            'User-Agent': config.user_agent
        }
        self.logger = logging.getLogger(__name__)

    @property
    def _http(self):
        return self.session if self.session is not None else requests

    def get(self, url: str, params: Optional[Dict[str, Any]] = None) -> PageResponse:
        """Fetches a page. Transport errors, non-2xx statuses and empty bodies all come back as ok=False."""
        try:
            response = self._http.get(url, params=params, headers=self.headers, timeout=self.config.timeout)
        except requests.exceptions.RequestException as e:
            self.logger.error(f"Error fetching {url}: {e}")
            return PageResponse(ok=False, status_code=0, url=url)

        text = response.text or ''
        ok = 200 <= response.status_code < 300 and bool(text.strip())
        if not ok:
            self.logger.error(f"Error fetching {url}: status {response.status_code}, {len(text)} bytes")
        return PageResponse(ok=ok, status_code=response.status_code, text=text, url=str(response.url or url))

    def get_bytes(self, url: str) -> Optional[bytes]:
        """Downloads a binary resource such as a cover image."""
        try:
            response = self._http.get(url, headers=self.headers, timeout=self.config.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            self.logger.error(f"Error downloading {url}: {e}")
            return None
        return response.content or None
