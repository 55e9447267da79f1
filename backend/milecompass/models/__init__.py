from milecompass.models.program import (
    Program,
    Season,
    Region,
    RequirementStatus,
    Provenance,
    EfficiencyTier,
    Recommendation,
    ComparisonMode,
    SortCriterion,
)
from milecompass.models.offer import (
    RawOffer,
    SeasonAmounts,
    MileageRequirement,
    AttributedOffer,
    OfferView,
    SearchContext,
    SearchResult,
)
from milecompass.models.mile_chart import MileChart, MileChartRoute, MileUpdateEvent, Announcement

__all__ = [
    "Program", "Season", "Region", "RequirementStatus", "Provenance",
    "EfficiencyTier", "Recommendation", "ComparisonMode", "SortCriterion",
    "RawOffer", "SeasonAmounts", "MileageRequirement", "AttributedOffer",
    "OfferView", "SearchContext", "SearchResult",
    "MileChart", "MileChartRoute", "MileUpdateEvent", "Announcement",
]
