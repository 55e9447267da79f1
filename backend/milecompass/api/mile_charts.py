"""Mile chart lookup, comparison and administration endpoints."""
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from milecompass.models.program import Program
from milecompass.schemas.mile_chart import (
    ChartComparisonResponse,
    ChartOptionResponse,
    MileChartCreate,
    MileChartResponse,
    MileChartRouteSchema,
    UpdateEventCreate,
    UpdateEventResponse,
)
from milecompass.services.mile_chart_registry import (
    DuplicateEntryError,
    MileChartRegistry,
    get_mile_chart_registry,
)

router = APIRouter()


@router.get("", response_model=list[MileChartResponse])
async def list_charts(registry: MileChartRegistry = Depends(get_mile_chart_registry)):
    return [MileChartResponse.from_chart(c) for c in registry.charts()]


@router.get("/lookup", response_model=list[ChartOptionResponse])
async def lookup_best_option(
    destination: str = Query(..., min_length=1),
    travel_date: date = Query(..., alias="date"),
    cabin: str = Query("economy"),
    registry: MileChartRegistry = Depends(get_mile_chart_registry),
):
    """Cheapest published redemption per program for a destination, cheapest first."""
    options = registry.find_best_option(destination, travel_date, cabin)
    return [
        ChartOptionResponse(
            program=o.program.value,
            amount=o.amount,
            season=o.chart_season,
            region=o.region,
            chart_id=o.chart_id,
            version=o.version,
            is_best=o.is_best,
        )
        for o in options
    ]


@router.get("/compare", response_model=ChartComparisonResponse)
async def compare_programs(
    destination: str = Query(..., min_length=1),
    cabin: str = Query("economy"),
    first: Program = Query(Program.ANA),
    second: Program = Query(Program.JAL),
    registry: MileChartRegistry = Depends(get_mile_chart_registry),
):
    comparison = registry.compare_programs(destination, cabin, first, second)
    return ChartComparisonResponse(
        destination=comparison.destination,
        cabin=comparison.cabin,
        first=comparison.first.value,
        second=comparison.second.value,
        first_route=MileChartRouteSchema.from_model(comparison.first_route) if comparison.first_route else None,
        second_route=MileChartRouteSchema.from_model(comparison.second_route) if comparison.second_route else None,
        recommendation=comparison.recommendation,
        savings=comparison.savings,
    )


@router.get("/updates", response_model=list[UpdateEventResponse])
async def latest_updates(
    limit: int = Query(5, ge=1, le=50),
    registry: MileChartRegistry = Depends(get_mile_chart_registry),
):
    return [UpdateEventResponse.from_event(e) for e in registry.latest_updates(limit)]


@router.post("", response_model=MileChartResponse, status_code=201)
async def add_chart(
    data: MileChartCreate,
    registry: MileChartRegistry = Depends(get_mile_chart_registry),
):
    chart = data.to_model()
    try:
        registry.add_chart(chart)
    except DuplicateEntryError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return MileChartResponse.from_chart(chart)


@router.post("/updates", response_model=UpdateEventResponse, status_code=201)
async def add_update_event(
    data: UpdateEventCreate,
    registry: MileChartRegistry = Depends(get_mile_chart_registry),
):
    event = data.to_model()
    try:
        registry.add_update_event(event)
    except DuplicateEntryError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return UpdateEventResponse.from_event(event)
