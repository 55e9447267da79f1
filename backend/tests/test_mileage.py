"""Tests for season derivation and required-mileage lookup."""
from datetime import date

import pytest

from milecompass.data.zone_tables import AVIOS_ZONE_TABLE, DOMESTIC_ZONE_TABLES
from milecompass.models.offer import SeasonAmounts
from milecompass.models.program import Program, Region, RequirementStatus, Season
from milecompass.services.mileage import MileageRequirementCalculator, classify_region, get_season


class TestGetSeason:
    @pytest.mark.parametrize("month", [12, 1, 4, 5, 7, 8])
    def test_peak_months(self, month):
        assert get_season(date(2026, month, 10)) == Season.PEAK

    @pytest.mark.parametrize("month", [2, 3])
    def test_off_months(self, month):
        assert get_season(date(2026, month, 10)) == Season.OFF

    @pytest.mark.parametrize("month", [6, 9, 10, 11])
    def test_regular_months(self, month):
        assert get_season(date(2026, month, 10)) == Season.REGULAR


class TestDomesticRequirements:
    def test_hnd_itm_ana_zone2_regular(self):
        calc = MileageRequirementCalculator("HND", "ITM", 620)
        req = calc.requirement_for(Program.ANA)
        assert calc.domestic is True
        assert req.status == RequirementStatus.OK
        assert req.zone == "zone2"
        assert req.amounts.for_season(Season.REGULAR) == 7000

    def test_breakpoint_is_inclusive(self):
        calc = MileageRequirementCalculator("HND", "ITM", 600)
        req = calc.requirement_for(Program.ANA)
        assert req.zone == "zone1"
        assert req.amounts.regular == 5000

    def test_overflow_zone(self):
        calc = MileageRequirementCalculator("CTS", "OKA", 2300)
        assert calc.requirement_for(Program.JAL).amounts.peak == 24000

    def test_solaseed_two_zones(self):
        assert MileageRequirementCalculator("HND", "ITM", 620).requirement_for(Program.SOLASEED).amounts.regular == 5000
        assert MileageRequirementCalculator("HND", "OKA", 1570).requirement_for(Program.SOLASEED).amounts.regular == 8000

    def test_united_partner_award_on_domestic_route(self):
        req = MileageRequirementCalculator("HND", "ITM", 620).requirement_for(Program.UNITED)
        assert req.amounts == SeasonAmounts(off=6000, regular=7500, peak=10000)

    def test_avios_distance_zone(self):
        req = MileageRequirementCalculator("HND", "ITM", 620).requirement_for(Program.BRITISH)
        assert req.status == RequirementStatus.OK
        assert req.amounts.regular == 4500

    def test_program_without_domestic_table(self):
        req = MileageRequirementCalculator("HND", "ITM", 620).requirement_for(Program.VIRGIN)
        assert req.status == RequirementStatus.NOT_APPLICABLE
        assert req.is_applicable is False

    @pytest.mark.parametrize("program", [Program.SKYMARK, Program.PEACH, Program.JETSTAR])
    def test_carrier_without_miles(self, program):
        req = MileageRequirementCalculator("HND", "ITM", 620).requirement_for(program)
        assert req.status == RequirementStatus.NO_PROGRAM
        assert req.amounts.regular == 0

    def test_unsupported_is_no_program(self):
        req = MileageRequirementCalculator("HND", "ITM", 620).requirement_for(Program.UNSUPPORTED)
        assert req.status == RequirementStatus.NO_PROGRAM

    def test_result_is_cached(self):
        calc = MileageRequirementCalculator("HND", "ITM", 620)
        assert calc.requirement_for(Program.ANA) is calc.requirement_for(Program.ANA)


class TestMonotonicity:
    @pytest.mark.parametrize("program", list(DOMESTIC_ZONE_TABLES))
    @pytest.mark.parametrize("season", list(Season))
    def test_domestic_tables_non_decreasing(self, program, season):
        amounts = [a.for_season(season) for a in DOMESTIC_ZONE_TABLES[program].amounts]
        assert amounts == sorted(amounts)

    @pytest.mark.parametrize("season", list(Season))
    def test_avios_table_non_decreasing(self, season):
        amounts = [a.for_season(season) for a in AVIOS_ZONE_TABLE.amounts]
        assert amounts == sorted(amounts)

    def test_required_amount_grows_with_distance(self):
        previous = 0
        for distance in range(100, 3000, 100):
            amount = MileageRequirementCalculator("HND", "CTS", distance).requirement_for(Program.ANA).amounts.regular
            assert amount >= previous
            previous = amount


class TestInternationalRequirements:
    def test_nrt_lax_ana_north_america(self):
        calc = MileageRequirementCalculator("NRT", "LAX", 8770)
        req = calc.requirement_for(Program.ANA)
        assert calc.domestic is False
        assert req.region == Region.NORTH_AMERICA
        assert req.amounts.regular == 50000

    def test_direction_does_not_matter(self):
        req = MileageRequirementCalculator("LAX", "NRT", 8770).requirement_for(Program.ANA)
        assert req.amounts.regular == 50000

    def test_jal_flat_region_amount(self):
        req = MileageRequirementCalculator("NRT", "LAX", 8770).requirement_for(Program.JAL)
        assert req.amounts.off == req.amounts.regular == req.amounts.peak == 54000

    def test_avios_uses_distance_abroad(self):
        req = MileageRequirementCalculator("NRT", "LAX", 8770).requirement_for(Program.BRITISH)
        assert req.amounts.regular == 16250

    def test_region_missing_from_program_table(self):
        req = MileageRequirementCalculator("HND", "HNL", 6200).requirement_for(Program.UNITED)
        assert req.status == RequirementStatus.NOT_APPLICABLE

    def test_unknown_region_is_not_applicable(self):
        req = MileageRequirementCalculator("HND", "XXX", 1000).requirement_for(Program.ANA)
        assert req.status == RequirementStatus.NOT_APPLICABLE
        assert req.is_applicable is False

    def test_hawaii_override(self):
        req = MileageRequirementCalculator("HND", "HNL", 6200).requirement_for(Program.ANA)
        assert req.region == Region.HAWAII
        assert req.amounts.regular == 40000


class TestClassifyRegion:
    def test_airport_override_beats_country(self):
        # HNL is in the United States but priced as Hawaii
        assert classify_region("NRT", "HNL") == Region.HAWAII
        assert classify_region("NRT", "GUM") == Region.GUAM

    def test_country_classification(self):
        assert classify_region("NRT", "LHR") == Region.EUROPE
        assert classify_region("KIX", "BKK") == Region.SOUTHEAST_ASIA
        assert classify_region("HND", "TPE") == Region.EAST_ASIA

    def test_foreign_origin(self):
        assert classify_region("SYD", "HND") == Region.OCEANIA

    def test_unknown(self):
        assert classify_region("HND", "XXX") is None
