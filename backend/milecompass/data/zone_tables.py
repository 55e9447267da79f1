"""
Award tables used to price redemptions.

Domestic tables are keyed by distance zone, international tables by region.
All amounts are economy, expressed as (off, regular, peak).
"""
from dataclasses import dataclass

from milecompass.models.offer import SeasonAmounts
from milecompass.models.program import Program, Region


@dataclass(frozen=True)
class ZoneTable:
    """Distance buckets with one amount set per zone.

    ``breakpoints`` are inclusive upper bounds; the last entry of ``amounts``
    is the overflow zone, so len(amounts) == len(breakpoints) + 1.
    """
    breakpoints: tuple[int, ...]
    amounts: tuple[SeasonAmounts, ...]

    def zone_index(self, distance_km: int) -> int:
        for index, limit in enumerate(self.breakpoints):
            if distance_km <= limit:
                return index
        return len(self.breakpoints)

    def amounts_for(self, distance_km: int) -> SeasonAmounts:
        return self.amounts[self.zone_index(distance_km)]


def _sa(off: int, regular: int, peak: int) -> SeasonAmounts:
    return SeasonAmounts(off=off, regular=regular, peak=peak)


DOMESTIC_ZONE_TABLES: dict[Program, ZoneTable] = {
    Program.ANA: ZoneTable(
        breakpoints=(600, 1200, 2000),
        amounts=(
            _sa(4500, 5000, 6000),
            _sa(6500, 7000, 8500),
            _sa(9000, 10000, 12000),
            _sa(13000, 15000, 18000),
        ),
    ),
    Program.JAL: ZoneTable(
        breakpoints=(600, 1200, 2000),
        amounts=(
            _sa(5000, 6000, 7500),
            _sa(8000, 10000, 12000),
            _sa(12000, 15000, 18000),
            _sa(16000, 20000, 24000),
        ),
    ),
    Program.SOLASEED: ZoneTable(
        breakpoints=(800,),
        amounts=(
            _sa(5000, 5000, 6000),
            _sa(8000, 8000, 10000),
        ),
    ),
    # Partner award on Japanese domestic flights
    Program.UNITED: ZoneTable(
        breakpoints=(300, 600, 900, 1600),
        amounts=(
            _sa(5000, 6000, 8000),
            _sa(6000, 7500, 10000),
            _sa(6000, 7500, 10000),
            _sa(8000, 10000, 12000),
            _sa(8000, 10000, 12000),
        ),
    ),
}

# Avios are distance based everywhere (651/1151/2000/3000/4000/5500/6500/7000 miles).
AVIOS_ZONE_TABLE = ZoneTable(
    breakpoints=(1046, 1852, 3219, 4828, 6437, 8851, 10461, 11265),
    amounts=(
        _sa(4500, 4500, 7500),
        _sa(7500, 7500, 12500),
        _sa(9000, 9000, 15000),
        _sa(10000, 10000, 20000),
        _sa(13000, 13000, 25000),
        _sa(16250, 16250, 30000),
        _sa(19000, 19000, 35000),
        _sa(21250, 21250, 40000),
        _sa(25000, 25000, 50000),
    ),
)

DISTANCE_ZONE_TABLES: dict[Program, ZoneTable] = {
    Program.BRITISH: AVIOS_ZONE_TABLE,
}

INTERNATIONAL_REGION_TABLES: dict[Program, dict[Region, SeasonAmounts]] = {
    Program.ANA: {
        Region.KOREA: _sa(12000, 15000, 24000),
        Region.EAST_ASIA: _sa(17000, 20000, 30000),
        Region.SOUTHEAST_ASIA: _sa(30000, 35000, 50000),
        Region.HAWAII: _sa(35000, 40000, 43000),
        Region.NORTH_AMERICA: _sa(40000, 50000, 72000),
        Region.EUROPE: _sa(45000, 55000, 78000),
        Region.OCEANIA: _sa(35000, 40000, 58000),
    },
    Program.JAL: {
        Region.KOREA: _sa(15000, 15000, 15000),
        Region.EAST_ASIA: _sa(18000, 18000, 18000),
        Region.SOUTHEAST_ASIA: _sa(27000, 27000, 27000),
        Region.HAWAII: _sa(40000, 44000, 48000),
        Region.NORTH_AMERICA: _sa(54000, 54000, 54000),
        Region.EUROPE: _sa(54000, 54000, 54000),
        Region.OCEANIA: _sa(40000, 40000, 40000),
    },
    Program.UNITED: {
        Region.KOREA: _sa(22000, 25000, 35000),
        Region.EAST_ASIA: _sa(40000, 40000, 50000),
        Region.SOUTHEAST_ASIA: _sa(70000, 75000, 85000),
        Region.NORTH_AMERICA: _sa(70000, 80000, 90000),
        Region.EUROPE: _sa(70000, 80000, 90000),
        Region.OCEANIA: _sa(80000, 85000, 95000),
        Region.MIDDLE_EAST: _sa(80000, 90000, 100000),
    },
    Program.SINGAPORE: {
        Region.KOREA: _sa(25000, 25000, 32500),
        Region.EAST_ASIA: _sa(35000, 35000, 45000),
        Region.SOUTHEAST_ASIA: _sa(35000, 42500, 52500),
        Region.NORTH_AMERICA: _sa(67500, 80000, 97500),
        Region.EUROPE: _sa(67500, 80000, 97500),
        Region.OCEANIA: _sa(42500, 50000, 62500),
        Region.MIDDLE_EAST: _sa(52500, 62500, 77500),
    },
}

# Checked before the country classification.
REGION_AIRPORT_OVERRIDES: dict[str, Region] = {
    "HNL": Region.HAWAII,
    "KOA": Region.HAWAII,
    "OGG": Region.HAWAII,
    "GUM": Region.GUAM,
    "SPN": Region.GUAM,
    "ICN": Region.KOREA,
    "GMP": Region.KOREA,
}

COUNTRY_REGIONS: dict[str, Region] = {
    "South Korea": Region.KOREA,
    "Taiwan": Region.EAST_ASIA,
    "Hong Kong": Region.EAST_ASIA,
    "Macau": Region.EAST_ASIA,
    "China": Region.EAST_ASIA,
    "Singapore": Region.SOUTHEAST_ASIA,
    "Thailand": Region.SOUTHEAST_ASIA,
    "Malaysia": Region.SOUTHEAST_ASIA,
    "Philippines": Region.SOUTHEAST_ASIA,
    "Vietnam": Region.SOUTHEAST_ASIA,
    "Indonesia": Region.SOUTHEAST_ASIA,
    "India": Region.SOUTH_ASIA,
    "United States": Region.NORTH_AMERICA,
    "Canada": Region.NORTH_AMERICA,
    "United Kingdom": Region.EUROPE,
    "France": Region.EUROPE,
    "Germany": Region.EUROPE,
    "Netherlands": Region.EUROPE,
    "Switzerland": Region.EUROPE,
    "Italy": Region.EUROPE,
    "Finland": Region.EUROPE,
    "Australia": Region.OCEANIA,
    "New Zealand": Region.OCEANIA,
    "United Arab Emirates": Region.MIDDLE_EAST,
    "Qatar": Region.MIDDLE_EAST,
}

# Round-trip fuel surcharge in JPY, charged on the carrier's own award tickets.
FUEL_SURCHARGES: dict[Program, dict[Region, int]] = {
    Program.ANA: {
        Region.KOREA: 4400,
        Region.EAST_ASIA: 12200,
        Region.SOUTHEAST_ASIA: 22000,
        Region.NORTH_AMERICA: 46200,
        Region.EUROPE: 46200,
        Region.OCEANIA: 30000,
    },
    Program.JAL: {
        Region.KOREA: 7000,
        Region.EAST_ASIA: 17000,
        Region.SOUTHEAST_ASIA: 36000,
        Region.NORTH_AMERICA: 66000,
        Region.EUROPE: 66000,
        Region.OCEANIA: 50000,
    },
}

# Observed one-way economy fares in JPY, stored one way only.
ROUTE_BASE_PRICES: dict[tuple[str, str], int] = {
    ("HND", "ITM"): 22000,
    ("NRT", "KIX"): 25000,
    ("HND", "CTS"): 35000,
    ("NRT", "FUK"): 38000,
    ("HND", "FUK"): 39000,
    ("KIX", "CTS"): 45000,
    ("ITM", "CTS"): 44000,
}

# (max distance km, base price) buckets for routes without an observed fare.
DISTANCE_PRICE_BUCKETS: tuple[tuple[int, int], ...] = (
    (300, 15000),
    (600, 25000),
    (800, 35000),
    (1000, 40000),
    (2000, 50000),
)
LONG_HAUL_BASE_PRICE = 60000


def estimate_base_price(origin: str, destination: str, distance_km: int) -> int:
    """Estimated one-way cash fare for a route, used for synthetic offers."""
    key = (origin.upper(), destination.upper())
    price = ROUTE_BASE_PRICES.get(key) or ROUTE_BASE_PRICES.get((key[1], key[0]))
    if price:
        return price
    for limit, bucket_price in DISTANCE_PRICE_BUCKETS:
        if distance_km <= limit:
            return bucket_price
    return LONG_HAUL_BASE_PRICE
