"""
In-memory registry of versioned award charts and chart update announcements.

The registry is the only state shared between requests. Lookups take a
shared read lock; adding charts or update events takes the exclusive lock.
"""
import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import date
from functools import lru_cache
from typing import Iterable, Optional

from milecompass.data.mile_charts import seed_charts, seed_update_events
from milecompass.models.mile_chart import MileChart, MileChartRoute, MileUpdateEvent
from milecompass.models.program import Program, Season
from milecompass.services.mileage import get_season

logger = logging.getLogger(__name__)

CHART_SEASONS = {
    Season.OFF: "low",
    Season.REGULAR: "regular",
    Season.PEAK: "high",
}


class DuplicateEntryError(ValueError):
    pass


class ReadWriteLock:
    """Many concurrent readers or one writer. Waiting writers block new readers."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self):
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self):
        with self._cond:
            self._writers_waiting += 1
            while self._writer or self._readers:
                self._cond.wait()
            self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


@dataclass
class ChartOption:
    program: Program
    amount: int
    chart_season: str
    region: str
    chart_id: str
    version: str
    is_best: bool = False


@dataclass
class ChartComparison:
    destination: str
    cabin: str
    first: Program
    second: Program
    first_route: Optional[MileChartRoute] = None
    second_route: Optional[MileChartRoute] = None
    recommendation: Optional[str] = None  # program value, "same", or None when either is missing
    savings: int = 0


def _lowest_amount(route: MileChartRoute) -> int:
    return min(v for v in (route.low, route.regular, route.high) if v)


class MileChartRegistry:
    def __init__(
        self,
        charts: Optional[Iterable[MileChart]] = None,
        update_events: Optional[Iterable[MileUpdateEvent]] = None,
    ):
        self._lock = ReadWriteLock()
        self._charts: list[MileChart] = []
        self._events: list[MileUpdateEvent] = []
        for chart in charts or []:
            self._insert_chart(chart)
        for event in update_events or []:
            self._append_event(event)

    @classmethod
    def seeded(cls) -> "MileChartRegistry":
        return cls(seed_charts(), seed_update_events())

    def _insert_chart(self, chart: MileChart):
        if any(existing.id == chart.id for existing in self._charts):
            raise DuplicateEntryError(f"Mile chart {chart.id} already exists")
        self._charts.append(chart)
        # Newest version first, so the first match per program is the current one
        self._charts.sort(key=lambda c: c.effective_date, reverse=True)

    def _append_event(self, event: MileUpdateEvent):
        if any(existing.id == event.id for existing in self._events):
            raise DuplicateEntryError(f"Update event {event.id} already exists")
        self._events.append(event)

    def _current_charts(self, cabin: str, on: Optional[date]) -> dict[Program, MileChart]:
        current: dict[Program, MileChart] = {}
        for chart in self._charts:
            if chart.cabin != cabin or chart.program in current:
                continue
            if on is not None and not chart.is_effective_on(on):
                continue
            current[chart.program] = chart
        return current

    @staticmethod
    def _find_route(chart: MileChart, destination: str) -> Optional[MileChartRoute]:
        for route in chart.routes:
            if route.serves(destination):
                return route
        return None

    def charts(self) -> list[MileChart]:
        with self._lock.read():
            return list(self._charts)

    def find_best_option(self, destination: str, travel_date: date, cabin: str = "economy") -> list[ChartOption]:
        """Cheapest redemption per program among the charts in effect on ``travel_date``."""
        chart_season = CHART_SEASONS[get_season(travel_date)]
        options = []
        with self._lock.read():
            for chart in self._current_charts(cabin, travel_date).values():
                route = self._find_route(chart, destination)
                if route is None:
                    continue
                options.append(ChartOption(
                    program=chart.program,
                    amount=route.amount_for(chart_season),
                    chart_season=chart_season,
                    region=route.region,
                    chart_id=chart.id,
                    version=chart.version,
                ))

        if options:
            best = min(option.amount for option in options)
            for option in options:
                option.is_best = option.amount == best
        return sorted(options, key=lambda o: o.amount)

    def compare_programs(
        self,
        destination: str,
        cabin: str = "economy",
        first: Program = Program.ANA,
        second: Program = Program.JAL,
    ) -> ChartComparison:
        comparison = ChartComparison(destination=destination, cabin=cabin, first=first, second=second)
        with self._lock.read():
            current = self._current_charts(cabin, None)
            if first in current:
                comparison.first_route = self._find_route(current[first], destination)
            if second in current:
                comparison.second_route = self._find_route(current[second], destination)

        if comparison.first_route and comparison.second_route:
            first_min = _lowest_amount(comparison.first_route)
            second_min = _lowest_amount(comparison.second_route)
            if first_min < second_min:
                comparison.recommendation = first.value
            elif second_min < first_min:
                comparison.recommendation = second.value
            else:
                comparison.recommendation = "same"
            comparison.savings = abs(first_min - second_min)
        return comparison

    def latest_updates(self, limit: int = 5) -> list[MileUpdateEvent]:
        with self._lock.read():
            events = sorted(self._events, key=lambda e: e.announcement.date, reverse=True)
        return events[:limit]

    def updates_for(self, programs: Iterable[Program], limit: int = 3) -> list[MileUpdateEvent]:
        wanted = set(programs)
        with self._lock.read():
            events = [e for e in self._events if e.program in wanted]
        events.sort(key=lambda e: e.announcement.date, reverse=True)
        return events[:limit]

    def add_chart(self, chart: MileChart):
        with self._lock.write():
            self._insert_chart(chart)
        logger.info(f"Added mile chart {chart.id} ({chart.program.value} {chart.cabin} v{chart.version})")

    def add_update_event(self, event: MileUpdateEvent):
        with self._lock.write():
            self._append_event(event)
        logger.info(f"Added mile update event {event.id} for {event.program.value}")


@lru_cache
def get_mile_chart_registry() -> MileChartRegistry:
    return MileChartRegistry.seeded()
