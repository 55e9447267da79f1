from fastapi import APIRouter, Depends

from milecompass.services.mile_chart_registry import MileChartRegistry, get_mile_chart_registry

router = APIRouter()


@router.get("/health")
async def health_check(registry: MileChartRegistry = Depends(get_mile_chart_registry)):
    charts = registry.charts()
    return {
        "status": "ok" if charts else "degraded",
        "mile_charts": len(charts),
    }
