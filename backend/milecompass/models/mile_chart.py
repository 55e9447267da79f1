"""Versioned award charts and their update announcements."""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from milecompass.models.program import Program


@dataclass
class MileChartRoute:
    region: str
    destinations: list[str]  # IATA codes and/or city names
    regular: int
    low: Optional[int] = None
    high: Optional[int] = None
    notes: list[str] = field(default_factory=list)

    def amount_for(self, chart_season: str) -> int:
        """Seasons missing from the chart fall back to the regular amount."""
        value = getattr(self, chart_season, None)
        return value or self.regular

    def serves(self, destination: str) -> bool:
        needle = destination.strip().lower()
        if not needle:
            return False
        for dest in self.destinations:
            candidate = dest.lower()
            if needle in candidate or candidate in needle:
                return True
        return False


@dataclass
class MileChart:
    id: str
    program: Program
    cabin: str  # economy, premium, business, first
    direction: str  # one_way, round_trip
    effective_date: date
    version: str
    routes: list[MileChartRoute]
    expiry_date: Optional[date] = None
    last_updated: Optional[datetime] = None

    def is_effective_on(self, on: date) -> bool:
        if on < self.effective_date:
            return False
        return self.expiry_date is None or on <= self.expiry_date


@dataclass
class Announcement:
    date: date
    summary: str
    url: Optional[str] = None


@dataclass
class MileUpdateEvent:
    id: str
    program: Program
    change_type: str  # increase, decrease, restructure
    effective_date: date
    description: str
    announcement: Announcement
    impacted_routes: list[str] = field(default_factory=list)
    average_increase: Optional[float] = None
