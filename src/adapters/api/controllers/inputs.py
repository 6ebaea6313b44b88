from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Path

from src.adapters.api.dependencies import get_candidate_refresh_service
from src.adapters.api.schemas.inputs import InputEditResponseSchema, InputEditSchema
from src.adapters.api.schemas.routes import StationSchema
from src.app.services.candidate_refresh_service import CandidateRefreshService

router = APIRouter(prefix="/inputs", tags=["inputs"])


@router.put("/{slot}", response_model=InputEditResponseSchema)
def edit_input(
    req: InputEditSchema,
    slot: int = Path(..., ge=1, description="1 = origin, last = destination"),
    service: CandidateRefreshService = Depends(get_candidate_refresh_service),
) -> InputEditResponseSchema:
    layout = service.layout
    if slot > layout.slots:
        raise HTTPException(status_code=404, detail=f"No input slot {slot}")

    # Goes through the host so every cell-changed subscriber sees the edit.
    results = service.host.edit_cell(
        layout.input_sheet, layout.row_for(slot - 1), layout.input_column, req.value
    )
    stations = next((r for r in results if r is not None), ())

    return InputEditResponseSchema(
        slot=slot,
        value=req.value,
        candidates=[StationSchema(name=s.name, code=s.code) for s in stations],
    )
