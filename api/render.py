# api/render.py
from html import escape
from typing import Iterable, Tuple

from schemas.models import EarthquakeRecord

COLUMNS = 10
EMPTY_ROW = f"<tr><td colspan='{COLUMNS}'>No data found.</td></tr>"


def split_datetime(value: str) -> Tuple[str, str]:
    """'2024-01-01T12:30:45' -> ('2024-01-01', '12:30:45').

    Anything shorter than 19 characters comes back whole as the date with an
    empty time.
    """
    if len(value) >= 19:
        return value[:10], value[11:19]
    return value, ""


def render_row(record: EarthquakeRecord) -> str:
    date, time_ = split_datetime(record.date)
    cells = (
        date,
        time_,
        record.latitude,
        record.longitude,
        record.depth,
        record.magnitude,
        record.location,
        record.region,
        record.district,
        record.neighborhood,
    )
    return "<tr>" + "".join(f"<td>{escape(c)}</td>" for c in cells) + "</tr>"


def render_rows(records: Iterable[EarthquakeRecord]) -> str:
    rows = [render_row(r) for r in records]
    if not rows:
        return EMPTY_ROW
    return "\n".join(rows)
