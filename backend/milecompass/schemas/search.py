from datetime import date
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from milecompass.models.offer import OfferView, SearchResult
from milecompass.models.program import ComparisonMode, SortCriterion
from milecompass.schemas.mile_chart import UpdateEventResponse


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


class SearchRequest(CamelModel):
    # Left optional so missing fields produce a VALIDATION_ERROR instead of a schema error
    origin: Optional[str] = None
    destination: Optional[str] = None
    travel_date: Optional[date] = Field(default=None, alias="date")
    passenger_count: int = 1
    return_date: Optional[date] = None
    target_programs: list[str] = []
    comparison_mode: ComparisonMode = ComparisonMode.ALL
    show_all_time_slots: bool = False
    sort_by: SortCriterion = SortCriterion.VALUE


class RequiredAmount(CamelModel):
    off: int
    regular: int
    peak: int


class OfferViewResponse(CamelModel):
    display_name: str
    program: str
    program_label: str
    operating_program: str
    carrier_code: str
    flight_number: str
    departure_time: str
    arrival_time: str
    required_amount: RequiredAmount
    requirement_status: str
    price: int
    fees: int
    value_per_unit: Optional[float] = None
    efficiency_tier: str
    recommendation: str
    baseline_comparison: str
    provenance: str
    source: str
    available_seats: int = 0

    @classmethod
    def from_view(cls, view: OfferView) -> "OfferViewResponse":
        return cls(
            display_name=view.display_name,
            program=view.program.value,
            program_label=view.program_label,
            operating_program=view.operating_program.value,
            carrier_code=view.carrier_code,
            flight_number=view.flight_number,
            departure_time=view.departure_time,
            arrival_time=view.arrival_time,
            required_amount=RequiredAmount(
                off=view.required_amount.off,
                regular=view.required_amount.regular,
                peak=view.required_amount.peak,
            ),
            requirement_status=view.requirement_status.value,
            price=view.price,
            fees=view.fees,
            value_per_unit=view.value_per_unit,
            efficiency_tier=view.efficiency_tier.value,
            recommendation=view.recommendation.value,
            baseline_comparison=view.baseline_comparison,
            provenance=view.provenance.value,
            source=view.source,
            available_seats=view.available_seats,
        )


class RouteInfo(CamelModel):
    origin: str
    destination: str
    distance_km: int


class SearchResultResponse(CamelModel):
    route: RouteInfo
    travel_date: date = Field(alias="date")
    season: str
    offers: list[OfferViewResponse]
    chart_updates: list[UpdateEventResponse] = []


class SearchResponse(CamelModel):
    success: bool = True
    data: SearchResultResponse
    sources: list[str]
    fallback_used: bool = False

    @classmethod
    def from_result(cls, result: SearchResult) -> "SearchResponse":
        return cls(
            data=SearchResultResponse(
                route=RouteInfo(
                    origin=result.origin,
                    destination=result.destination,
                    distance_km=result.distance_km,
                ),
                travel_date=result.travel_date,
                season=result.season.value,
                offers=[OfferViewResponse.from_view(v) for v in result.offers],
                chart_updates=[UpdateEventResponse.from_event(e) for e in result.chart_updates],
            ),
            sources=result.sources,
            fallback_used=result.fallback_used,
        )
