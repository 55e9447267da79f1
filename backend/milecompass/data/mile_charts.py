"""Seed data for the mile-chart registry: 2025 ANA/JAL one-way economy charts."""
from datetime import date, datetime

from milecompass.models.mile_chart import Announcement, MileChart, MileChartRoute, MileUpdateEvent
from milecompass.models.program import Program


def _route(region, destinations, regular, low=None, high=None):
    return MileChartRoute(region=region, destinations=destinations, regular=regular, low=low, high=high)


def seed_charts() -> list[MileChart]:
    """Fresh chart objects each call so registries never share mutable state."""
    return [
        MileChart(
            id="ana_economy_2025_06",
            program=Program.ANA,
            cabin="economy",
            direction="one_way",
            effective_date=date(2025, 6, 24),
            version="2025.06.24",
            last_updated=datetime(2025, 6, 24),
            routes=[
                _route("Asia", ["ICN", "Seoul", "Korea", "MNL", "Manila", "TPE", "Taipei", "HKG", "Hong Kong"], 17000),
                _route("Asia", ["PVG", "Shanghai", "PEK", "Beijing", "BKK", "Bangkok", "SGN", "Ho Chi Minh City"],
                       20000, low=15000, high=25000),
                _route("Asia", ["SIN", "Singapore", "KUL", "Kuala Lumpur", "CGK", "Jakarta"],
                       23000, low=17500, high=30000),
                _route("Asia", ["DEL", "Delhi"], 30000, low=22500, high=37500),
                _route("Guam/Saipan", ["GUM", "Guam", "SPN", "Saipan"], 10000),
                _route("Hawaii", ["HNL", "Honolulu", "KOA", "Kona"], 40000, low=35000, high=43000),
                _route("North America West", ["LAX", "Los Angeles", "SFO", "San Francisco", "SEA", "Seattle",
                                              "SJC", "San Jose", "YVR", "Vancouver"],
                       50000, low=40000, high=55000),
                _route("North America East", ["JFK", "New York", "IAD", "Washington", "ORD", "Chicago"],
                       55000, low=45000, high=60000),
                _route("Europe", ["LHR", "London", "CDG", "Paris", "FRA", "Frankfurt", "MUC", "Munich",
                                  "Brussels", "Vienna"],
                       55000, low=45000, high=60000),
                _route("Oceania", ["SYD", "Sydney", "PER", "Perth"], 45000, low=37500, high=50000),
            ],
        ),
        MileChart(
            id="jal_economy_2025_06",
            program=Program.JAL,
            cabin="economy",
            direction="one_way",
            effective_date=date(2025, 6, 10),
            version="2025.06.10",
            last_updated=datetime(2025, 6, 10),
            routes=[
                _route("Asia", ["ICN", "Seoul", "Korea", "MNL", "Manila", "TPE", "Taipei", "HKG", "Hong Kong",
                                "PVG", "Shanghai", "BKK", "Bangkok"], 17500),
                _route("Asia", ["SIN", "Singapore", "KUL", "Kuala Lumpur", "CGK", "Jakarta", "SGN", "Ho Chi Minh City"],
                       25000, low=20000, high=30000),
                _route("India", ["DEL", "Delhi", "Bangalore"], 35000, low=27500, high=42500),
                _route("Guam", ["GUM", "Guam"], 10000),
                _route("Hawaii", ["HNL", "Honolulu", "KOA", "Kona"], 44000, low=40000, high=48000),
                _route("North America West", ["LAX", "Los Angeles", "SFO", "San Francisco", "SEA", "Seattle",
                                              "San Diego", "YVR", "Vancouver"],
                       60000, low=50000, high=65000),
                _route("North America East", ["JFK", "New York", "Boston", "DFW", "Dallas"],
                       65000, low=55000, high=70000),
                _route("Europe", ["LHR", "London", "CDG", "Paris", "FRA", "Frankfurt", "HEL", "Helsinki"],
                       62500, low=52500, high=67500),
                _route("Oceania", ["SYD", "Sydney", "MEL", "Melbourne"], 48000, low=40000, high=52000),
            ],
        ),
    ]


def seed_update_events() -> list[MileUpdateEvent]:
    return [
        MileUpdateEvent(
            id="ana_increase_2025_06",
            program=Program.ANA,
            change_type="increase",
            effective_date=date(2025, 6, 24),
            description="ANA international award ticket mileage revision",
            impacted_routes=["North America", "Europe", "Parts of Asia"],
            average_increase=12.5,
            announcement=Announcement(
                date=date(2025, 4, 15),
                url="https://www.ana.co.jp/ja/jp/amc/news/mile-chart-update/",
                summary="International award mileage changes from June 24, an average increase of 12.5%.",
            ),
        ),
        MileUpdateEvent(
            id="jal_increase_2025_06",
            program=Program.JAL,
            change_type="increase",
            effective_date=date(2025, 6, 10),
            description="JAL international award ticket mileage revision",
            impacted_routes=["Hawaii", "North America", "Europe"],
            average_increase=10.0,
            announcement=Announcement(
                date=date(2025, 3, 20),
                url="https://www.jal.co.jp/jalmile/news/mile-chart-2025/",
                summary="International award mileage changes from June 10.",
            ),
        ),
    ]
