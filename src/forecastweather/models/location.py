"""Location model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Location(BaseModel):
    """The place the provider resolved the query to."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    country: str
    region: str | None = None
    lat: float | None = None
    lon: float | None = None
    tz_id: str | None = None
    localtime: str | None = None
