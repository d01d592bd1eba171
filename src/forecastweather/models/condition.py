"""Weather condition model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Condition(BaseModel):
    """Human-readable condition with its provider icon.

    ``icon`` is protocol-relative, e.g. ``//cdn.weatherapi.com/weather/64x64/day/113.png``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    text: str
    icon: str
    code: int | None = None
