"""
Required-mileage lookup per loyalty program.

Domestic routes use distance zones, international routes use the region of
the foreign endpoint. Programs without miles never get a real amount.
"""
import logging
from datetime import date
from typing import Optional

from milecompass.data.airports import get_airport, is_domestic_route
from milecompass.data.programs import PROGRAMS
from milecompass.data.zone_tables import (
    COUNTRY_REGIONS,
    DISTANCE_ZONE_TABLES,
    DOMESTIC_ZONE_TABLES,
    INTERNATIONAL_REGION_TABLES,
    REGION_AIRPORT_OVERRIDES,
)
from milecompass.models.offer import MileageRequirement, SeasonAmounts
from milecompass.models.program import Program, Region, RequirementStatus, Season

logger = logging.getLogger(__name__)

PEAK_MONTHS = {12, 1, 4, 5, 7, 8}
OFF_MONTHS = {2, 3}

ZERO_AMOUNTS = SeasonAmounts()


def get_season(travel_date: date) -> Season:
    """Year-end, Golden Week and summer holidays are peak; Feb-Mar are off-peak."""
    if travel_date.month in PEAK_MONTHS:
        return Season.PEAK
    if travel_date.month in OFF_MONTHS:
        return Season.OFF
    return Season.REGULAR


def classify_region(origin: str, destination: str) -> Optional[Region]:
    """Region of the foreign endpoint. Destination wins when both are foreign."""
    for code in (destination, origin):
        code = code.upper()
        if code in REGION_AIRPORT_OVERRIDES:
            airport = get_airport(code)
            if airport is None or not airport.is_japanese:
                return REGION_AIRPORT_OVERRIDES[code]

    for code in (destination, origin):
        airport = get_airport(code)
        if airport is None or airport.is_japanese:
            continue
        return COUNTRY_REGIONS.get(airport.country)
    return None


class MileageRequirementCalculator:
    def __init__(self, origin: str, destination: str, distance_km: int):
        self.origin = origin.upper()
        self.destination = destination.upper()
        self.distance_km = distance_km
        self.domestic = is_domestic_route(self.origin, self.destination)
        self.region = None if self.domestic else classify_region(self.origin, self.destination)
        self._cache: dict[Program, MileageRequirement] = {}

    def requirement_for(self, program: Program) -> MileageRequirement:
        if program not in self._cache:
            self._cache[program] = self._calculate(program)
        return self._cache[program]

    def _calculate(self, program: Program) -> MileageRequirement:
        info = PROGRAMS.get(program)
        if info is None or not info.has_program:
            return MileageRequirement(program, ZERO_AMOUNTS, RequirementStatus.NO_PROGRAM)

        distance_table = DISTANCE_ZONE_TABLES.get(program)
        if distance_table is not None:
            index = distance_table.zone_index(self.distance_km)
            return MileageRequirement(
                program,
                distance_table.amounts[index],
                zone=f"zone{index + 1}",
                region=self.region,
            )

        if self.domestic:
            table = DOMESTIC_ZONE_TABLES.get(program)
            if table is None:
                return self._not_applicable(program)
            index = table.zone_index(self.distance_km)
            return MileageRequirement(program, table.amounts[index], zone=f"zone{index + 1}")

        if self.region is None:
            logger.debug(f"No award region for {self.origin}-{self.destination}")
            return self._not_applicable(program)

        amounts = INTERNATIONAL_REGION_TABLES.get(program, {}).get(self.region)
        if amounts is None:
            return self._not_applicable(program)
        return MileageRequirement(program, amounts, zone=self.region.value, region=self.region)

    def _not_applicable(self, program: Program) -> MileageRequirement:
        return MileageRequirement(
            program, ZERO_AMOUNTS, RequirementStatus.NOT_APPLICABLE, region=self.region
        )
