# upstream/afad.py
"""
AFAD event API client.

Fetches one window of events from deprem.afad.gov.tr and decodes the JSON
array into ``EarthquakeRecord`` objects. One request per call, no retries.
"""

import logging
import time
from typing import List, Optional

import requests
from pydantic import TypeAdapter, ValidationError

from schemas.models import EarthquakeRecord
from upstream.errors import (
    RecordDecodeError,
    UpstreamNetworkError,
    UpstreamReadError,
    UpstreamStatusError,
    UpstreamURLError,
)

RESULT_LIMIT = 100
ORDER_BY = "timedesc"

log = logging.getLogger("eq_rows.upstream")

_records = TypeAdapter(List[EarthquakeRecord])


def build_params(start: str, end: str) -> dict:
    return {
        "start": start,
        "end": end,
        "limit": RESULT_LIMIT,
        "orderby": ORDER_BY,
    }


def decode_records(raw: bytes) -> List[EarthquakeRecord]:
    """Parse the upstream body as an ordered list of records.

    An empty array is a valid result. Anything else that is not an array of
    event objects raises RecordDecodeError carrying the parser message.
    """
    try:
        return _records.validate_json(raw)
    except ValidationError as exc:
        raise RecordDecodeError(f"Failed to parse JSON: {exc}") from exc


class AfadClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 15.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({
            "User-Agent": "eq-rows/0.1",
            "Accept": "application/json",
        })

    def fetch(self, start: str, end: str) -> bytes:
        """GET one window of events and return the raw body on HTTP 200."""
        params = build_params(start, end)
        started = time.monotonic()

        try:
            resp = self._session.get(
                self.base_url, params=params, timeout=self.timeout, stream=True
            )
        except (
            requests.exceptions.MissingSchema,
            requests.exceptions.InvalidSchema,
            requests.exceptions.InvalidURL,
        ) as exc:
            raise UpstreamURLError(f"Invalid upstream URL: {exc}") from exc
        except requests.RequestException as exc:
            log.warning("AFAD request failed: %s", exc)
            raise UpstreamNetworkError("Failed to fetch data.") from exc

        try:
            if resp.status_code != 200:
                log.warning("AFAD returned HTTP %d", resp.status_code)
                raise UpstreamStatusError("API returned error.", resp.status_code)
            try:
                body = resp.content
            except requests.RequestException as exc:
                log.warning("Reading AFAD body failed: %s", exc)
                raise UpstreamReadError("Failed to read response body.") from exc
        finally:
            resp.close()

        log.info(
            "AFAD %s..%s: %d bytes in %.2fs",
            start, end, len(body), time.monotonic() - started,
        )
        if log.isEnabledFor(logging.DEBUG):
            log.debug("AFAD response body: %s", body.decode("utf-8", errors="replace"))
        return body

    def fetch_records(self, start: str, end: str) -> List[EarthquakeRecord]:
        return decode_records(self.fetch(start, end))
