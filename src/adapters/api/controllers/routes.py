from __future__ import annotations

from fastapi import APIRouter, Body, Depends

from src.adapters.api.dependencies import get_route_orchestrator
from src.adapters.api.schemas.routes import (
    RouteBlockSchema,
    RouteSearchRequestSchema,
    RouteSearchResponseSchema,
    SegmentSchema,
    StationSchema,
)
from src.app.services.route_orchestrator import (
    BLOCK_STRIDE,
    RouteOrchestrator,
    RouteRunResult,
)

router = APIRouter(tags=["routes"])


def _result_to_schema(result: RouteRunResult) -> RouteSearchResponseSchema:
    return RouteSearchResponseSchema(
        sheet_name=result.sheet_name,
        stations=[StationSchema(name=s.name, code=s.code) for s in result.stations],
        routes=[
            RouteBlockSchema(
                title=block.title,
                price=price,
                price_label=block.price_label,
                column=1 + idx * BLOCK_STRIDE,
                segments=[
                    SegmentSchema(
                        boarding_station=boarding,
                        line=line,
                        alighting_station=alighting,
                    )
                    for boarding, line, alighting in block.rows
                ],
            )
            for idx, (block, price) in enumerate(zip(result.blocks, result.prices))
        ],
    )


@router.post("/routes/search", response_model=RouteSearchResponseSchema)
def search_routes(
    req: RouteSearchRequestSchema | None = Body(default=None),
    service: RouteOrchestrator = Depends(get_route_orchestrator),
) -> RouteSearchResponseSchema:
    if req is not None and req.stops is not None:
        result = service.run(req.stops)
    else:
        result = service.run_from_input()
    return _result_to_schema(result)
