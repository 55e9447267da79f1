"""Tests for value-per-mile scoring, tiers and recommendations."""
from datetime import date

import pytest

from milecompass.models.offer import AttributedOffer, RawOffer, SearchContext
from milecompass.models.program import (
    EfficiencyTier,
    Program,
    Provenance,
    Recommendation,
    RequirementStatus,
    Season,
)
from milecompass.services.mileage import MileageRequirementCalculator
from milecompass.services.valuation import (
    ValuationEngine,
    baseline_comparison,
    efficiency_tier,
    recommendation_for,
)


def _make_view(program=Program.ANA, operating=None, **offer_overrides) -> AttributedOffer:
    defaults = {
        "carrier_code": "NH",
        "carrier_name": "ANA",
        "flight_number": "NH15",
        "departure_time": "07:00",
        "price": 22000,
        "taxes": 0,
    }
    defaults.update(offer_overrides)
    return AttributedOffer(RawOffer(**defaults), program, operating or program)


def _make_context(origin="HND", destination="ITM", season=Season.REGULAR) -> SearchContext:
    return SearchContext(origin=origin, destination=destination, travel_date=date(2026, 6, 15), season=season)


class TestEfficiencyTier:
    def test_high(self):
        assert efficiency_tier(3.0, 2.0) == EfficiencyTier.HIGH

    def test_standard_at_baseline(self):
        assert efficiency_tier(2.0, 2.0) == EfficiencyTier.STANDARD

    def test_low_boundary(self):
        assert efficiency_tier(1.4, 2.0) == EfficiencyTier.LOW

    def test_very_low(self):
        assert efficiency_tier(1.39, 2.0) == EfficiencyTier.VERY_LOW

    def test_recommendations(self):
        assert recommendation_for(EfficiencyTier.HIGH) == Recommendation.REDEEM
        assert recommendation_for(EfficiencyTier.STANDARD) == Recommendation.REDEEM
        assert recommendation_for(EfficiencyTier.LOW) == Recommendation.CASH
        assert recommendation_for(EfficiencyTier.VERY_LOW) == Recommendation.CASH
        assert recommendation_for(EfficiencyTier.NOT_APPLICABLE) == Recommendation.CASH_ONLY


class TestBaselineComparison:
    def test_well_above(self):
        assert baseline_comparison(3.2, 2.0) == "1.6x baseline (well above baseline)"

    def test_above(self):
        assert baseline_comparison(2.4, 2.0) == "1.2x baseline (above baseline)"

    def test_around(self):
        assert baseline_comparison(2.0, 2.0) == "1.0x baseline (around baseline)"

    def test_well_below(self):
        assert baseline_comparison(0.6, 2.0) == "0.3x baseline (well below baseline)"

    def test_not_applicable(self):
        assert baseline_comparison(None, 2.0) == "not applicable"
        assert baseline_comparison(1.0, 0) == "not applicable"


class TestValuationEngine:
    def _engine(self, origin="HND", destination="ITM", distance=620):
        return ValuationEngine(MileageRequirementCalculator(origin, destination, distance))

    def test_domestic_redemption(self):
        view = self._engine().value_one(_make_view(), _make_context())
        assert view.required_amount.regular == 7000
        assert view.fees == 0
        # 22000 / 7000
        assert view.value_per_unit == pytest.approx(3.14)
        assert view.efficiency_tier == EfficiencyTier.HIGH
        assert view.recommendation == Recommendation.REDEEM
        assert view.baseline_comparison.endswith("(well above baseline)")

    def test_season_selects_amount(self):
        view = self._engine().value_one(_make_view(), _make_context(season=Season.PEAK))
        # 22000 / 8500
        assert view.value_per_unit == pytest.approx(2.59)

    def test_no_program_never_divides(self):
        view = self._engine().value_one(
            _make_view(Program.SKYMARK, carrier_code="BC", carrier_name="Skymark"), _make_context()
        )
        assert view.value_per_unit is None
        assert view.requirement_status == RequirementStatus.NO_PROGRAM
        assert view.efficiency_tier == EfficiencyTier.NOT_APPLICABLE
        assert view.recommendation == Recommendation.CASH_ONLY
        assert view.baseline_comparison == "not applicable"

    def test_unknown_region_not_applicable(self):
        engine = self._engine("HND", "XXX", 1000)
        view = engine.value_one(_make_view(), _make_context("HND", "XXX"))
        assert view.value_per_unit is None
        assert view.requirement_status == RequirementStatus.NOT_APPLICABLE
        assert view.recommendation == Recommendation.CASH_ONLY

    def test_international_fuel_surcharge_counts_as_fees(self):
        engine = self._engine("NRT", "LAX", 8770)
        view = engine.value_one(_make_view(price=150000, taxes=10000), _make_context("NRT", "LAX"))
        assert view.fees == 10000 + 46200
        # (150000 - 56200) / 50000
        assert view.value_per_unit == pytest.approx(1.88)
        assert view.efficiency_tier == EfficiencyTier.LOW
        assert view.recommendation == Recommendation.CASH

    def test_partner_view_has_own_amount_and_fees(self):
        engine = self._engine("NRT", "LAX", 8770)
        view = engine.value_one(
            _make_view(Program.UNITED, Program.ANA, price=150000, taxes=10000), _make_context("NRT", "LAX")
        )
        assert view.required_amount.regular == 80000
        assert view.fees == 10000
        assert view.program_label == ""
        assert view.operating_program == Program.ANA

    def test_fees_above_price_floor_at_zero(self):
        view = self._engine().value_one(_make_view(price=2000, taxes=3000), _make_context())
        assert view.value_per_unit == 0.0
        assert view.efficiency_tier == EfficiencyTier.VERY_LOW

    def test_provenance_propagates(self):
        view = self._engine().value_one(
            _make_view(provenance=Provenance.SYNTHETIC, source="estimated"), _make_context()
        )
        assert view.provenance == Provenance.SYNTHETIC
        assert view.source == "estimated"

    def test_display_name_fallbacks(self):
        engine = self._engine()
        assert engine.value_one(_make_view(carrier_name=""), _make_context()).display_name == "ANA"
        unsupported = _make_view(Program.UNSUPPORTED, carrier_code="ZZ", carrier_name="")
        assert engine.value_one(unsupported, _make_context()).display_name == "ZZ"

    def test_value_many(self):
        views = self._engine().value([_make_view(), _make_view(Program.JAL, carrier_code="JL")], _make_context())
        assert [v.program for v in views] == [Program.ANA, Program.JAL]
