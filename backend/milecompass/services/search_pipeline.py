"""
Flight search pipeline.

Runs one search request through the offer stages in order:

    distance -> upstream fetch (or fallback set) -> normalize -> supplement
    -> program filter/expansion -> valuation -> ranking

Only the upstream fetch does I/O. Every stage after it is pure computation.
"""
import asyncio
import logging
import re
from datetime import date
from typing import Optional

from milecompass.config import Settings
from milecompass.data.programs import resolve_program
from milecompass.models.offer import SearchContext, SearchResult
from milecompass.models.program import ComparisonMode, Program
from milecompass.schemas.search import SearchRequest
from milecompass.services.distance import DistanceResolver
from milecompass.services.fallback_offers import FallbackOfferFactory
from milecompass.services.mile_chart_registry import MileChartRegistry
from milecompass.services.mileage import MileageRequirementCalculator, get_season
from milecompass.services.offer_normalizer import OfferNormalizer
from milecompass.services.offer_source import FetchResult, OfferSource
from milecompass.services.offer_supplementer import OfferSupplementer
from milecompass.services.program_filter import ProgramFilter
from milecompass.services.result_assembler import ResultAssembler
from milecompass.services.valuation import ValuationEngine

logger = logging.getLogger(__name__)

AIRPORT_CODE_RE = re.compile(r"^[A-Z]{3}$")
MAX_PASSENGERS = 9
FALLBACK_SOURCES = ["fallback"]


class SearchValidationError(ValueError):
    pass


def validate_search_request(request: SearchRequest, today: date) -> SearchContext:
    """Check a search request and turn it into a SearchContext.

    Raises SearchValidationError with a user-facing message on the first problem found.
    """
    origin = (request.origin or "").strip().upper()
    destination = (request.destination or "").strip().upper()
    if not origin or not destination:
        raise SearchValidationError("Origin and destination are required")
    for code in (origin, destination):
        if not AIRPORT_CODE_RE.match(code):
            raise SearchValidationError(f"Invalid airport code: {code}")
    if origin == destination:
        raise SearchValidationError("Origin and destination must be different")

    if request.travel_date is None:
        raise SearchValidationError("Departure date is required")
    if request.travel_date < today:
        raise SearchValidationError("Departure date cannot be in the past")
    if request.return_date is not None and request.return_date < request.travel_date:
        raise SearchValidationError("Return date cannot be before the departure date")

    if not 1 <= request.passenger_count <= MAX_PASSENGERS:
        raise SearchValidationError(f"Passenger count must be between 1 and {MAX_PASSENGERS}")

    requested: list[Program] = []
    if request.comparison_mode != ComparisonMode.ALL:
        if not request.target_programs:
            raise SearchValidationError("At least one program must be selected")
        for identifier in request.target_programs:
            program = resolve_program(identifier)
            if program == Program.UNSUPPORTED:
                raise SearchValidationError(f"Unsupported program: {identifier}")
            if program not in requested:
                requested.append(program)
        if request.comparison_mode == ComparisonMode.SINGLE and len(requested) != 1:
            raise SearchValidationError("Single comparison mode requires exactly one program")

    return SearchContext(
        origin=origin,
        destination=destination,
        travel_date=request.travel_date,
        season=get_season(request.travel_date),
        passengers=request.passenger_count,
        return_date=request.return_date,
        requested_programs=requested,
        comparison_mode=request.comparison_mode,
        show_all_time_slots=request.show_all_time_slots,
        sort_by=request.sort_by,
    )


class SearchPipeline:
    def __init__(
        self,
        offer_source: OfferSource,
        registry: MileChartRegistry,
        settings: Settings,
        resolver: Optional[DistanceResolver] = None,
        factory: Optional[FallbackOfferFactory] = None,
    ):
        self.offer_source = offer_source
        self.registry = registry
        self.settings = settings
        self.resolver = resolver or DistanceResolver()
        self.factory = factory or FallbackOfferFactory()
        self.normalizer = OfferNormalizer(cap=settings.diversification_cap)
        self.supplementer = OfferSupplementer()
        self.program_filter = ProgramFilter(self.factory)
        self.assembler = ResultAssembler(
            result_limit=settings.result_limit,
            all_slots_result_limit=settings.all_slots_result_limit,
        )

    async def _fetch(self, context: SearchContext) -> FetchResult:
        try:
            return await asyncio.wait_for(
                self.offer_source.fetch_offers(
                    context.origin,
                    context.destination,
                    context.travel_date,
                    context.passengers,
                    return_date=context.return_date,
                ),
                timeout=self.settings.upstream_timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.warning(
                f"Offer source timed out after {self.settings.upstream_timeout_seconds}s "
                f"for {context.origin}-{context.destination}"
            )
            return FetchResult(success=False, source=self.offer_source.name, error="timeout")
        except Exception as e:
            logger.warning(f"Offer source failed for {context.origin}-{context.destination}: {e!r}")
            return FetchResult(success=False, source=self.offer_source.name, error=str(e) or type(e).__name__)

    async def run(self, context: SearchContext) -> SearchResult:
        distance_km = self.resolver.resolve(context.origin, context.destination)
        calculator = MileageRequirementCalculator(context.origin, context.destination, distance_km)

        fetched = await self._fetch(context)
        if fetched.success and fetched.offers:
            offers = fetched.offers
            sources = [fetched.source]
            fallback_used = False
        else:
            if not fetched.success:
                logger.info(f"Offer source unavailable ({fetched.error}), using fallback offers")
            else:
                logger.info(f"Offer source returned no offers for {context.origin}-{context.destination}")
            offers = self.factory.upstream_fallback(context)
            sources = list(FALLBACK_SOURCES)
            fallback_used = True

        offers = self.normalizer.normalize(offers, show_all_time_slots=context.show_all_time_slots)
        offers = self.supplementer.supplement(offers, context.origin, context.destination, distance_km)
        attributed = self.program_filter.apply(offers, context, distance_km)
        views = ValuationEngine(calculator).value(attributed, context)
        logger.debug(f"{context.origin}-{context.destination}: {len(offers)} offers -> {len(views)} views")

        chart_updates = self.registry.updates_for(
            {view.program for view in views},
            limit=self.settings.chart_update_notice_limit,
        )
        return self.assembler.assemble(
            views,
            context,
            distance_km,
            sources=sources,
            fallback_used=fallback_used,
            chart_updates=chart_updates,
        )
