"""
Redemption value scoring.

value per mile = (cash price - fees) / required miles, compared with the
program's baseline JPY-per-mile value to decide between miles and cash.
"""
import logging
from typing import Optional

from milecompass.data.programs import PROGRAMS
from milecompass.data.zone_tables import FUEL_SURCHARGES
from milecompass.models.offer import AttributedOffer, OfferView, SearchContext
from milecompass.models.program import (
    EfficiencyTier,
    Program,
    Recommendation,
    Region,
)
from milecompass.services.mileage import MileageRequirementCalculator

logger = logging.getLogger(__name__)

# (minimum multiple of baseline, tier), checked in order
TIER_THRESHOLDS = [
    (1.5, EfficiencyTier.HIGH),
    (1.0, EfficiencyTier.STANDARD),
    (0.7, EfficiencyTier.LOW),
]

RATIO_LABELS = [
    (1.5, "well above baseline"),
    (1.2, "above baseline"),
    (0.8, "around baseline"),
    (0.5, "below baseline"),
]


def efficiency_tier(value_per_unit: float, baseline: float) -> EfficiencyTier:
    for multiple, tier in TIER_THRESHOLDS:
        if value_per_unit >= baseline * multiple:
            return tier
    return EfficiencyTier.VERY_LOW


def recommendation_for(tier: EfficiencyTier) -> Recommendation:
    if tier in (EfficiencyTier.HIGH, EfficiencyTier.STANDARD):
        return Recommendation.REDEEM
    if tier == EfficiencyTier.NOT_APPLICABLE:
        return Recommendation.CASH_ONLY
    return Recommendation.CASH


def baseline_comparison(value_per_unit: Optional[float], baseline: float) -> str:
    if value_per_unit is None or baseline <= 0:
        return "not applicable"
    ratio = value_per_unit / baseline
    label = "well below baseline"
    for minimum, text in RATIO_LABELS:
        if ratio >= minimum:
            label = text
            break
    return f"{ratio:.1f}x baseline ({label})"


def display_name(view: AttributedOffer) -> str:
    if view.offer.carrier_name:
        return view.offer.carrier_name
    if view.operating_program == Program.UNSUPPORTED:
        return view.offer.carrier_code or PROGRAMS[Program.UNSUPPORTED].display_name
    return PROGRAMS[view.operating_program].display_name


def fuel_surcharge(program: Program, region: Optional[Region]) -> int:
    if region is None:
        return 0
    return FUEL_SURCHARGES.get(program, {}).get(region, 0)


class ValuationEngine:
    def __init__(self, calculator: MileageRequirementCalculator):
        self.calculator = calculator

    def value(self, views: list[AttributedOffer], context: SearchContext) -> list[OfferView]:
        return [self.value_one(view, context) for view in views]

    def value_one(self, view: AttributedOffer, context: SearchContext) -> OfferView:
        offer = view.offer
        info = PROGRAMS[view.program]
        requirement = self.calculator.requirement_for(view.program)

        fees = offer.taxes
        if not self.calculator.domestic:
            fees += fuel_surcharge(view.program, self.calculator.region)

        required = requirement.amounts.for_season(context.season)
        value_per_unit = None
        tier = EfficiencyTier.NOT_APPLICABLE
        # not-applicable and no-program requirements carry zero amounts; never divide by them
        if requirement.is_applicable and required > 0:
            value_per_unit = round(max(offer.price - fees, 0) / required, 2)
            tier = efficiency_tier(value_per_unit, info.baseline_value)

        return OfferView(
            display_name=display_name(view),
            program=view.program,
            program_label=view.label,
            operating_program=view.operating_program,
            carrier_code=offer.carrier_code,
            flight_number=offer.flight_number,
            departure_time=offer.departure_time,
            arrival_time=offer.arrival_time,
            required_amount=requirement.amounts,
            requirement_status=requirement.status,
            price=offer.price,
            fees=fees,
            value_per_unit=value_per_unit,
            efficiency_tier=tier,
            recommendation=recommendation_for(tier),
            baseline_comparison=baseline_comparison(value_per_unit, info.baseline_value),
            provenance=offer.provenance,
            source=offer.source,
            available_seats=offer.available_seats,
        )
