"""Flight offer search endpoint."""
import logging
from datetime import date
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException

from milecompass.config import get_settings
from milecompass.schemas.search import SearchRequest, SearchResponse
from milecompass.services.mile_chart_registry import get_mile_chart_registry
from milecompass.services.offer_source import HttpOfferSource
from milecompass.services.search_pipeline import (
    SearchPipeline,
    SearchValidationError,
    validate_search_request,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@lru_cache
def get_offer_source() -> HttpOfferSource:
    return HttpOfferSource(get_settings())


def get_search_pipeline() -> SearchPipeline:
    return SearchPipeline(
        offer_source=get_offer_source(),
        registry=get_mile_chart_registry(),
        settings=get_settings(),
    )


def get_today() -> date:
    return date.today()


@router.post("/search", response_model=SearchResponse)
async def search_flights(
    request: SearchRequest,
    pipeline: SearchPipeline = Depends(get_search_pipeline),
    today: date = Depends(get_today),
):
    try:
        context = validate_search_request(request, today)
    except SearchValidationError as e:
        logger.info(f"Rejected search request: {e}")
        raise HTTPException(status_code=400, detail={"error": "VALIDATION_ERROR", "message": str(e)})

    result = await pipeline.run(context)
    logger.info(
        f"Search {context.origin}-{context.destination} {context.travel_date}: "
        f"{len(result.offers)} offers from {result.sources}"
    )
    return SearchResponse.from_result(result)
