"""
Synthetic offer generation.

Every offer built here is tagged ``Provenance.SYNTHETIC`` so the UI can
disclose that prices and schedules are estimates.
"""
import logging

from milecompass.data.programs import PROGRAMS
from milecompass.data.zone_tables import estimate_base_price
from milecompass.models.offer import RawOffer, SearchContext
from milecompass.models.program import Program, Provenance

logger = logging.getLogger(__name__)

FALLBACK_SOURCE = "server-fallback"
PROGRAM_FALLBACK_SOURCE = "program-fallback"

# (carrier code, carrier name, departure, arrival) used when the upstream source fails
UPSTREAM_FALLBACK_ROSTER = [
    ("NH", "ANA", "06:30", "09:00"),
    ("JL", "JAL", "10:00", "12:30"),
    ("UA", "United", "14:00", "16:30"),
    ("BC", "スカイマーク", "18:00", "20:30"),
    ("MM", "ピーチ", "20:30", "22:00"),
]
FALLBACK_BASE_TOTAL = 20800
FALLBACK_PRICE_STEP = 2500
FALLBACK_TAXES = 2800
FALLBACK_BASE_SEATS = 3

# (departure, price offset) rotation for offers generated per requested program
PROGRAM_TIME_SLOTS = [
    ("08:00", 0),
    ("12:30", 1500),
    ("17:45", 3000),
]
PROGRAM_FALLBACK_TAXES = 2800
PROGRAM_FALLBACK_SEATS = 4


def add_minutes(clock: str, minutes: int) -> str:
    hours, mins = (int(part) for part in clock.split(":")[:2])
    total = (hours * 60 + mins + minutes) % (24 * 60)
    return f"{total // 60:02d}:{total % 60:02d}"


def estimate_arrival(departure: str, distance_km: int) -> str:
    """Departure plus 40 minutes of ground time and 800km per hour in the air."""
    return add_minutes(departure, 40 + distance_km * 60 // 800)


def make_synthetic_offer(
    carrier_code: str,
    carrier_name: str,
    flight_number: str,
    departure_time: str,
    arrival_time: str,
    price: int,
    taxes: int,
    seats: int,
    source: str,
) -> RawOffer:
    return RawOffer(
        carrier_code=carrier_code,
        carrier_name=carrier_name,
        flight_number=flight_number,
        departure_time=departure_time,
        arrival_time=arrival_time,
        price=price,
        taxes=taxes,
        currency="JPY",
        available_seats=seats,
        source=source,
        provenance=Provenance.SYNTHETIC,
        offer_id=f"{source}-{flight_number}",
    )


class FallbackOfferFactory:
    """Builds deterministic synthetic offer sets.

    Used for exactly two situations: the upstream offer source failed (or
    timed out, or returned nothing), and program filtering left no offers.
    """

    def upstream_fallback(self, context: SearchContext) -> list[RawOffer]:
        offers = []
        for index, (code, name, departure, arrival) in enumerate(UPSTREAM_FALLBACK_ROSTER):
            offers.append(make_synthetic_offer(
                carrier_code=code,
                carrier_name=name,
                flight_number=f"{code}{100 + index}",
                departure_time=departure,
                arrival_time=arrival,
                price=FALLBACK_BASE_TOTAL + index * FALLBACK_PRICE_STEP,
                taxes=FALLBACK_TAXES,
                seats=FALLBACK_BASE_SEATS + index,
                source=FALLBACK_SOURCE,
            ))
        logger.info(f"Using {len(offers)} fallback offers for {context.origin}-{context.destination}")
        return offers

    def for_programs(
        self,
        context: SearchContext,
        programs: list[Program],
        distance_km: int,
    ) -> list[RawOffer]:
        base_price = estimate_base_price(context.origin, context.destination, distance_km)
        offers = []
        for program_index, program in enumerate(programs):
            info = PROGRAMS.get(program)
            if info is None or not info.carrier_code:
                continue
            for slot_index, (departure, offset) in enumerate(PROGRAM_TIME_SLOTS):
                offers.append(make_synthetic_offer(
                    carrier_code=info.carrier_code,
                    carrier_name=info.display_name,
                    flight_number=f"{info.carrier_code}{500 + program_index * 10 + slot_index}",
                    departure_time=departure,
                    arrival_time=estimate_arrival(departure, distance_km),
                    price=base_price + offset,
                    taxes=PROGRAM_FALLBACK_TAXES,
                    seats=PROGRAM_FALLBACK_SEATS,
                    source=PROGRAM_FALLBACK_SOURCE,
                ))
        logger.info(
            f"Generated {len(offers)} offers for programs "
            f"{[p.value for p in programs]} on {context.origin}-{context.destination}"
        )
        return offers
