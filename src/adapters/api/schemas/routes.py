from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field


class StationSchema(BaseModel):
    name: str
    code: str


class SegmentSchema(BaseModel):
    boarding_station: str
    line: str
    alighting_station: str


class RouteBlockSchema(BaseModel):
    title: str
    price: int
    price_label: str
    column: int = Field(..., ge=1, description="1-based sheet column of the block")
    segments: list[SegmentSchema] = []


class RouteSearchRequestSchema(BaseModel):
    # When omitted, the stop names are read from the input sheet.
    stops: Annotated[list[str | None], Field(min_length=2, max_length=4)] | None = None


class RouteSearchResponseSchema(BaseModel):
    sheet_name: str
    stations: list[StationSchema] = []
    routes: list[RouteBlockSchema] = []
