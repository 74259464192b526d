# api/routers/eq_rows.py
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from fastapi import APIRouter, Depends, Query, Request, Response

from api.render import render_rows
from upstream.afad import AfadClient

router = APIRouter(tags=["earthquakes"])

TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"
DEFAULT_WINDOW = timedelta(hours=24)


def resolve_window(
    start: Optional[str], end: Optional[str], now: Optional[datetime] = None
) -> Tuple[str, str]:
    """Return (start, end) for the upstream query.

    When either bound is missing both are replaced by the last 24 hours in
    UTC, even if the other one was given.
    """
    if start and end:
        return start, end
    now = now or datetime.now(timezone.utc)
    return (now - DEFAULT_WINDOW).strftime(TIME_FORMAT), now.strftime(TIME_FORMAT)


def get_client(request: Request) -> AfadClient:
    return request.app.state.afad_client


@router.get("/eq-rows")
def eq_rows(
    start: Optional[str] = Query(None),
    end: Optional[str] = Query(None),
    client: AfadClient = Depends(get_client),
):
    start, end = resolve_window(start, end)
    # UpstreamError propagates to the handler registered in api.main
    records = client.fetch_records(start, end)
    return Response(content=render_rows(records), media_type="text/html;charset=utf-8")
