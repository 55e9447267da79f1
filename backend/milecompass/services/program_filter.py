import logging

from milecompass.data.programs import PROGRAMS, partners_of
from milecompass.models.offer import AttributedOffer, RawOffer, SearchContext
from milecompass.models.program import ComparisonMode, Program
from milecompass.services.fallback_offers import FallbackOfferFactory
from milecompass.services.offer_supplementer import offer_program

logger = logging.getLogger(__name__)


def view_label(program: Program, operating: Program) -> str:
    if program == operating:
        return PROGRAMS[program].program_name
    return f"Booked with {PROGRAMS[program].program_name} miles on {PROGRAMS[operating].display_name}"


class ProgramFilter:
    """Attributes offers to loyalty programs.

    In ``all`` mode each offer gets one view under its operating program.
    Otherwise an offer produces one view for every requested program that is
    either its operating program or a partner of it, in request order.
    """

    def __init__(self, factory: FallbackOfferFactory):
        self.factory = factory

    def apply(
        self,
        offers: list[RawOffer],
        context: SearchContext,
        distance_km: int,
    ) -> list[AttributedOffer]:
        if context.comparison_mode == ComparisonMode.ALL:
            views = []
            for offer in offers:
                operating = offer_program(offer)
                views.append(AttributedOffer(offer, operating, operating, view_label(operating, operating)))
            return views

        requested = context.requested_programs
        views = self.expand(offers, requested)
        if not views and requested:
            logger.info(
                f"No offers left for {[p.value for p in requested]} on "
                f"{context.origin}-{context.destination}, generating program offers"
            )
            synthetic = self.factory.for_programs(context, requested, distance_km)
            views = self.expand(synthetic, requested)
        return views

    @staticmethod
    def expand(offers: list[RawOffer], requested: list[Program]) -> list[AttributedOffer]:
        views = []
        for offer in offers:
            operating = offer_program(offer)
            if operating == Program.UNSUPPORTED:
                continue
            redeemable = partners_of(operating)
            for program in requested:
                if program == operating or program in redeemable:
                    views.append(AttributedOffer(offer, program, operating, view_label(program, operating)))
        return views
