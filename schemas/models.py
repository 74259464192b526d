# schemas/models.py
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EarthquakeRecord(BaseModel):
    """One AFAD event. Values are kept as the text upstream sent."""

    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    event_id: str = Field(alias="eventID")
    date: str
    location: str
    magnitude: str
    latitude: str
    longitude: str
    depth: str

    # administrative breakdown, not always filled in by AFAD
    country: str = ""
    province: str = ""
    district: str = ""
    neighborhood: str = ""

    is_event_update: Optional[bool] = Field(default=None, alias="isEventUpdate")
    last_update_date: Optional[str] = Field(default=None, alias="lastUpdateDate")

    @field_validator("country", "province", "district", "neighborhood", mode="before")
    @classmethod
    def _null_as_empty(cls, v):
        return "" if v is None else v

    @property
    def region(self) -> str:
        # province when AFAD resolved one, otherwise the country label
        return self.province or self.country
