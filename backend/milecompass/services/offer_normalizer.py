import logging

from milecompass.models.offer import RawOffer
from milecompass.models.program import Program
from milecompass.services.offer_supplementer import offer_program

logger = logging.getLogger(__name__)

DEFAULT_DIVERSIFICATION_CAP = 2


def carrier_identity(offer: RawOffer) -> str:
    """Program key when the carrier resolves, so NH, ANA and 全日空 group together."""
    program = offer_program(offer)
    if program != Program.UNSUPPORTED:
        return program.value
    return offer.carrier_id.upper()


class OfferNormalizer:
    """Drops duplicate offers and limits how many offers one carrier contributes.

    A carrier with more than ``cap`` offers is reduced to its single cheapest
    offer; a carrier at or under the cap keeps everything. Output keeps the
    input's relative order.
    """

    def __init__(self, cap: int = DEFAULT_DIVERSIFICATION_CAP):
        self.cap = cap

    def normalize(self, offers: list[RawOffer], show_all_time_slots: bool = False) -> list[RawOffer]:
        if show_all_time_slots:
            return list(offers)

        unique = self.deduplicate(offers)
        result = self.diversify(unique)
        logger.debug(f"Normalized {len(offers)} offers -> {len(unique)} unique -> {len(result)} kept")
        return result

    @staticmethod
    def deduplicate(offers: list[RawOffer]) -> list[RawOffer]:
        seen = set()
        unique = []
        for offer in offers:
            key = (carrier_identity(offer), offer.price, offer.departure_time)
            if key in seen:
                continue
            seen.add(key)
            unique.append(offer)
        return unique

    def diversify(self, offers: list[RawOffer]) -> list[RawOffer]:
        groups: dict[str, list[int]] = {}
        for index, offer in enumerate(offers):
            groups.setdefault(carrier_identity(offer), []).append(index)

        keep: set[int] = set()
        for indexes in groups.values():
            if len(indexes) > self.cap:
                # min() returns the first of equal prices, so ties keep the earliest offer
                keep.add(min(indexes, key=lambda i: offers[i].price))
            else:
                keep.update(indexes)

        return [offer for index, offer in enumerate(offers) if index in keep]
