import math
import logging
from typing import Optional

from milecompass.data.airports import (
    AIRPORTS,
    DEFAULT_DISTANCE_KM,
    ROUTE_DISTANCES_KM,
    Airport,
)

logger = logging.getLogger(__name__)


def _haversine(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate distance in km between two lat/long points."""
    R = 6371  # Earth radius in km
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)
    a = math.sin(dlat / 2) ** 2 + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(dlon / 2) ** 2
    return R * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


class DistanceResolver:
    """Resolves the flight distance between two airports.

    Lookup order: the precomputed table, the same pair reversed, great-circle
    distance from coordinates, then a fixed fallback. Never raises.
    """

    def __init__(
        self,
        distances: Optional[dict[tuple[str, str], int]] = None,
        airports: Optional[dict[str, Airport]] = None,
        default_km: int = DEFAULT_DISTANCE_KM,
    ):
        self.distances = ROUTE_DISTANCES_KM if distances is None else distances
        self.airports = AIRPORTS if airports is None else airports
        self.default_km = default_km

    def resolve(self, origin: str, destination: str) -> int:
        a = (origin or "").strip().upper()
        b = (destination or "").strip().upper()
        if a == b:
            return 0

        if (a, b) in self.distances:
            return self.distances[(a, b)]
        if (b, a) in self.distances:
            return self.distances[(b, a)]

        start, end = self.airports.get(a), self.airports.get(b)
        if (
            start is not None and end is not None
            and start.latitude is not None and start.longitude is not None
            and end.latitude is not None and end.longitude is not None
        ):
            return round(_haversine(start.latitude, start.longitude, end.latitude, end.longitude))

        logger.debug(f"No coordinates for {a}-{b}, using {self.default_km}km")
        return self.default_km
