from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

import httpx

from src.app.ports.output import IRouteSearch, IStationSearch
from src.domain.exceptions import MalformedResponse, RemoteCallFailed
from src.domain.models import Itinerary, Station

from .config import EkispertConfig
from .parsing import parse_courses, parse_stations

logger = logging.getLogger(__name__)

STATION_PATH = "/v1/json/station/light"
COURSE_PATH = "/v1/json/search/course/extreme"


@dataclass(slots=True)
class HttpEkispertClient(IStationSearch, IRouteSearch):
    """Ekispert web API client (station search + plain course search).

    Env vars (via EkispertConfig.from_env when no config is given):
      - EKISPERT_API_KEY
      - EKISPERT_BASE_URL (default https://api.ekispert.jp)
      - EKISPERT_TIMEOUT_S (default 10)

    Notes:
      - Any non-200 response or transport error yields an empty result.
      - `transport` lets tests plug in an httpx.MockTransport.
    """

    config: EkispertConfig | None = None
    transport: httpx.BaseTransport | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.config is None:
            self.config = EkispertConfig.from_env()
        if not self.config.api_key:
            logger.warning("EKISPERT_API_KEY is not set; API calls will be rejected")

    def _get_json(self, path: str, params: Mapping[str, str]) -> Any:
        assert self.config is not None
        url = self.config.base_url + path
        query = {"key": self.config.api_key, **params}

        try:
            with httpx.Client(
                timeout=self.config.timeout_s, transport=self.transport
            ) as client:
                resp = client.get(url, params=query)
        except httpx.HTTPError as exc:
            raise RemoteCallFailed(url, f"{type(exc).__name__}: {exc}") from exc

        if resp.status_code != 200:
            raise RemoteCallFailed(url, f"HTTP {resp.status_code}")

        logger.debug("GET %s -> %s", path, resp.text)
        try:
            return resp.json()
        except ValueError as exc:
            raise RemoteCallFailed(url, "response is not JSON") from exc

    def search_stations(self, name: str) -> tuple[Station, ...]:
        params = {"name": name, "nameMatchType": "partial", "type": "train"}
        try:
            return parse_stations(self._get_json(STATION_PATH, params))
        except (RemoteCallFailed, MalformedResponse) as exc:
            logger.warning("Station search for %r returned no data: %s", name, exc)
            return ()

    def search_routes(self, station_codes: Sequence[str]) -> tuple[Itinerary, ...]:
        if not (2 <= len(station_codes) <= 4):
            raise ValueError(f"Expected 2-4 station codes, got {len(station_codes)}")

        params = {"viaList": ":".join(station_codes), "searchType": "plain"}
        try:
            return parse_courses(self._get_json(COURSE_PATH, params))
        except (RemoteCallFailed, MalformedResponse) as exc:
            logger.warning("Route search for %s returned no data: %s", params, exc)
            return ()
