import re
from typing import Optional

from milecompass.models.mile_chart import MileUpdateEvent
from milecompass.models.offer import OfferView, SearchContext, SearchResult
from milecompass.models.program import SortCriterion

_CLOCK_RE = re.compile(r"(\d{1,2}):(\d{2})")


def clock_time(value: str) -> str:
    """Zero-padded HH:MM from either "9:05" or an ISO datetime; unparseable sorts last."""
    match = _CLOCK_RE.search(value or "")
    if not match:
        return "99:99"
    return f"{int(match.group(1)):02d}:{match.group(2)}"


def _by_value(view: OfferView):
    missing = view.value_per_unit is None
    return (missing, -(view.value_per_unit or 0.0), view.price)


def _by_departure(view: OfferView):
    return (clock_time(view.departure_time), view.price)


class ResultAssembler:
    def __init__(self, result_limit: int = 10, all_slots_result_limit: int = 20):
        self.result_limit = result_limit
        self.all_slots_result_limit = all_slots_result_limit

    def assemble(
        self,
        views: list[OfferView],
        context: SearchContext,
        distance_km: int,
        sources: list[str],
        fallback_used: bool = False,
        chart_updates: Optional[list[MileUpdateEvent]] = None,
    ) -> SearchResult:
        key = _by_departure if context.sort_by == SortCriterion.DEPARTURE else _by_value
        limit = self.all_slots_result_limit if context.show_all_time_slots else self.result_limit

        return SearchResult(
            origin=context.origin,
            destination=context.destination,
            distance_km=distance_km,
            travel_date=context.travel_date,
            season=context.season,
            offers=sorted(views, key=key)[:limit],
            sources=sources,
            fallback_used=fallback_used,
            chart_updates=chart_updates or [],
        )
