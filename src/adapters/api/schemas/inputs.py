from __future__ import annotations

from pydantic import BaseModel

from src.adapters.api.schemas.routes import StationSchema


class InputEditSchema(BaseModel):
    value: str | None = None


class InputEditResponseSchema(BaseModel):
    slot: int
    value: str | None = None
    candidates: list[StationSchema] = []
