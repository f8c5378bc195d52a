"""Download Lichess study exports."""

from __future__ import annotations

import logging
from typing import Any

import requests

from fen2pdf.config import FetchConfig
from fen2pdf.core.notation import looks_like_study
from fen2pdf.errors import FetchError, NotFoundError

_LOGGER = logging.getLogger(__name__)


class LichessStudyClient:
    """Fetches the PGN export of a study by its identifier."""

    __slots__ = ("_config", "_session")

    def __init__(
        self,
        config: FetchConfig | None = None,
        session: Any | None = None,
    ) -> None:
        self._config = config or FetchConfig()
        self._session = session or requests.Session()

    def fetch_study(self, study_id: str) -> str:
        """Return the raw PGN text of *study_id*.

        Raises:
            FetchError: the request failed or returned a non-success status.
            NotFoundError: the response holds no recognisable study.
        """
        url = self._config.study_url(study_id)
        _LOGGER.info("Downloading from: %s", url)
        try:
            response = self._session.get(url)
        except requests.RequestException as exc:
            raise FetchError(f"Request to {url} failed: {exc}") from exc

        if not response.ok:
            raise FetchError(f"Study not found: HTTP {response.status_code}")

        content = response.text
        if not looks_like_study(content):
            raise NotFoundError(
                "Study not found or invalid: no chess positions detected"
            )
        _LOGGER.info("Downloaded %d bytes", len(content))
        return content
