"""Offer and request data shapes passed between pipeline stages."""
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from milecompass.models.program import (
    ComparisonMode,
    EfficiencyTier,
    Program,
    Provenance,
    Recommendation,
    Region,
    RequirementStatus,
    Season,
    SortCriterion,
)


@dataclass
class RawOffer:
    """A single upstream flight offer. Carrier identity is unresolved."""
    carrier_code: str = ""
    carrier_name: str = ""
    flight_number: str = ""
    departure_time: str = ""  # "HH:MM" or ISO datetime, as delivered
    arrival_time: str = ""
    price: int = 0  # total fare in JPY
    taxes: int = 0
    currency: str = "JPY"
    available_seats: int = 0
    source: str = "unknown"
    provenance: Provenance = Provenance.REAL
    offer_id: str = ""

    @property
    def carrier_id(self) -> str:
        return (self.carrier_code or self.carrier_name).strip()


@dataclass(frozen=True)
class SeasonAmounts:
    off: int = 0
    regular: int = 0
    peak: int = 0

    def for_season(self, season: Season) -> int:
        return getattr(self, season.value)


@dataclass
class MileageRequirement:
    program: Program
    amounts: SeasonAmounts
    status: RequirementStatus = RequirementStatus.OK
    zone: str = ""  # "zone2", "north_america", ...
    region: Optional[Region] = None

    @property
    def is_applicable(self) -> bool:
        return self.status == RequirementStatus.OK


@dataclass
class AttributedOffer:
    """One physical offer viewed through one loyalty program."""
    offer: RawOffer
    program: Program
    operating_program: Program
    label: str = ""

    @property
    def is_partner_award(self) -> bool:
        return self.program != self.operating_program


@dataclass
class OfferView:
    display_name: str
    program: Program
    program_label: str
    operating_program: Program
    carrier_code: str
    flight_number: str
    departure_time: str
    arrival_time: str
    required_amount: SeasonAmounts
    requirement_status: RequirementStatus
    price: int
    fees: int
    value_per_unit: Optional[float]
    efficiency_tier: EfficiencyTier
    recommendation: Recommendation
    baseline_comparison: str
    provenance: Provenance
    source: str
    available_seats: int = 0


@dataclass
class SearchContext:
    origin: str
    destination: str
    travel_date: date
    season: Season
    passengers: int = 1
    return_date: Optional[date] = None
    requested_programs: list[Program] = field(default_factory=list)
    comparison_mode: ComparisonMode = ComparisonMode.ALL
    show_all_time_slots: bool = False
    sort_by: SortCriterion = SortCriterion.VALUE


@dataclass
class SearchResult:
    origin: str
    destination: str
    distance_km: int
    travel_date: date
    season: Season
    offers: list[OfferView] = field(default_factory=list)
    sources: list[str] = field(default_factory=list)
    fallback_used: bool = False
    chart_updates: list = field(default_factory=list)
