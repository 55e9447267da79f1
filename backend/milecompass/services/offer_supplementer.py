import logging
from typing import Optional

from milecompass.data.airports import in_domestic_market
from milecompass.data.programs import EXPECTED_DOMESTIC_ROSTER, PROGRAMS, resolve_program
from milecompass.data.zone_tables import estimate_base_price
from milecompass.models.offer import RawOffer
from milecompass.models.program import Program
from milecompass.services.fallback_offers import estimate_arrival, make_synthetic_offer

logger = logging.getLogger(__name__)

SUPPLEMENT_SOURCE = "estimated"
SUPPLEMENT_PRICE_STEP = 1500
SUPPLEMENT_SEATS = 5
DEPARTURE_ROTATION = ["07:00", "09:30", "12:00", "15:30", "18:00", "20:30"]


def offer_program(offer: RawOffer) -> Program:
    """Program operating an offer, trying the carrier code before the carrier name."""
    program = resolve_program(offer.carrier_code)
    if program == Program.UNSUPPORTED:
        program = resolve_program(offer.carrier_name)
    return program


class OfferSupplementer:
    """Adds a placeholder offer for each expected domestic carrier missing from the list."""

    def __init__(self, roster: Optional[list[Program]] = None):
        self.roster = EXPECTED_DOMESTIC_ROSTER if roster is None else roster

    def supplement(
        self,
        offers: list[RawOffer],
        origin: str,
        destination: str,
        distance_km: int,
    ) -> list[RawOffer]:
        if not in_domestic_market(origin, destination):
            return offers

        present = {offer_program(offer) for offer in offers}
        base_price = estimate_base_price(origin, destination, distance_km)

        added = []
        for index, program in enumerate(self.roster):
            if program in present:
                continue
            info = PROGRAMS[program]
            departure = DEPARTURE_ROTATION[index % len(DEPARTURE_ROTATION)]
            added.append(make_synthetic_offer(
                carrier_code=info.carrier_code,
                carrier_name=info.display_name,
                flight_number=f"{info.carrier_code}{300 + index}",
                departure_time=departure,
                arrival_time=estimate_arrival(departure, distance_km),
                price=base_price + index * SUPPLEMENT_PRICE_STEP,
                taxes=0,
                seats=SUPPLEMENT_SEATS,
                source=SUPPLEMENT_SOURCE,
            ))

        if added:
            logger.debug(f"Supplemented {len(added)} missing carriers on {origin}-{destination}")
        return offers + added
