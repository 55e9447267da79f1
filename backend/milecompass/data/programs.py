"""Loyalty program directory, carrier alias table and partnership table."""
from dataclasses import dataclass, field
from typing import Optional

from milecompass.models.program import Program


@dataclass(frozen=True)
class ProgramInfo:
    program: Program
    display_name: str  # operating carrier name shown to users
    program_name: str  # loyalty currency name
    carrier_code: str  # representative IATA code
    baseline_value: float  # JPY per mile; 0 means the carrier has no mileage program
    alliance: str = "Independent"
    notes: list[str] = field(default_factory=list)

    @property
    def has_program(self) -> bool:
        return self.baseline_value > 0


PROGRAMS: dict[Program, ProgramInfo] = {
    Program.ANA: ProgramInfo(
        Program.ANA, "ANA", "ANA Mileage Club", "NH", 2.0, "Star Alliance",
        ["Domestic 1.5-2.5 JPY/mile", "International economy 2.0-4.0 JPY/mile"],
    ),
    Program.JAL: ProgramInfo(
        Program.JAL, "JAL", "JAL Mileage Bank", "JL", 2.2, "oneworld",
        ["Award Ticket PLUS pricing varies with demand"],
    ),
    Program.UNITED: ProgramInfo(
        Program.UNITED, "United Airlines", "United MileagePlus", "UA", 1.8, "Star Alliance",
        ["No fuel surcharges on partner awards"],
    ),
    Program.BRITISH: ProgramInfo(
        Program.BRITISH, "British Airways", "British Airways Avios", "BA", 1.5, "oneworld",
        ["Distance-based chart, strongest on short sectors"],
    ),
    Program.SINGAPORE: ProgramInfo(
        Program.SINGAPORE, "Singapore Airlines", "KrisFlyer", "SQ", 2.0, "Star Alliance",
    ),
    Program.VIRGIN: ProgramInfo(
        Program.VIRGIN, "Virgin Atlantic", "Virgin Atlantic Flying Club", "VS", 3.0,
        notes=["Redeemable on ANA-operated flights"],
    ),
    Program.ALASKA: ProgramInfo(
        Program.ALASKA, "Alaska Airlines", "Alaska Mileage Plan", "AS", 2.5, "oneworld",
    ),
    Program.AEROPLAN: ProgramInfo(
        Program.AEROPLAN, "Air Canada", "Air Canada Aeroplan", "AC", 1.8, "Star Alliance",
    ),
    Program.SOLASEED: ProgramInfo(
        Program.SOLASEED, "Solaseed Air", "Solaseed Air Smile Club", "6J", 1.0,
        notes=["Miles convertible to ANA"],
    ),
    Program.SKYMARK: ProgramInfo(Program.SKYMARK, "Skymark", "No mileage program", "BC", 0.0),
    Program.PEACH: ProgramInfo(Program.PEACH, "Peach", "Peach Points (no miles)", "MM", 0.0),
    Program.JETSTAR: ProgramInfo(Program.JETSTAR, "Jetstar Japan", "No mileage program", "GK", 0.0),
    Program.UNSUPPORTED: ProgramInfo(Program.UNSUPPORTED, "Unsupported carrier", "Unsupported", "", 0.0),
}

# Keys are matched lower-cased; Japanese names are stored as written.
CARRIER_ALIASES: dict[str, Program] = {
    # ANA
    "nh": Program.ANA, "ana": Program.ANA, "all nippon airways": Program.ANA,
    "全日空": Program.ANA, "全日本空輸": Program.ANA, "ana mileage club": Program.ANA,
    # JAL
    "jl": Program.JAL, "jal": Program.JAL, "japan airlines": Program.JAL,
    "日本航空": Program.JAL, "jal mileage bank": Program.JAL,
    # United
    "ua": Program.UNITED, "united": Program.UNITED, "united airlines": Program.UNITED,
    "ユナイテッド航空": Program.UNITED, "mileageplus": Program.UNITED,
    # British Airways
    "ba": Program.BRITISH, "british": Program.BRITISH, "british airways": Program.BRITISH,
    "ブリティッシュ・エアウェイズ": Program.BRITISH, "avios": Program.BRITISH,
    # Singapore
    "sq": Program.SINGAPORE, "singapore": Program.SINGAPORE,
    "singapore airlines": Program.SINGAPORE, "シンガポール航空": Program.SINGAPORE,
    "krisflyer": Program.SINGAPORE,
    # Virgin Atlantic
    "vs": Program.VIRGIN, "virgin": Program.VIRGIN, "virgin atlantic": Program.VIRGIN,
    "ヴァージン・アトランティック航空": Program.VIRGIN,
    # Alaska
    "as": Program.ALASKA, "alaska": Program.ALASKA, "alaska airlines": Program.ALASKA,
    "アラスカ航空": Program.ALASKA,
    # Air Canada
    "ac": Program.AEROPLAN, "aeroplan": Program.AEROPLAN, "air canada": Program.AEROPLAN,
    "エア・カナダ": Program.AEROPLAN,
    # Solaseed
    "6j": Program.SOLASEED, "sna": Program.SOLASEED, "solaseed": Program.SOLASEED,
    "solaseed air": Program.SOLASEED, "ソラシドエア": Program.SOLASEED,
    # Skymark
    "bc": Program.SKYMARK, "sky": Program.SKYMARK, "skymark": Program.SKYMARK,
    "skymark airlines": Program.SKYMARK, "スカイマーク": Program.SKYMARK,
    # Peach
    "mm": Program.PEACH, "apj": Program.PEACH, "peach": Program.PEACH,
    "peach aviation": Program.PEACH, "ピーチ": Program.PEACH,
    # Jetstar Japan
    "gk": Program.JETSTAR, "jjp": Program.JETSTAR, "3k": Program.JETSTAR,
    "jetstar": Program.JETSTAR, "jetstar japan": Program.JETSTAR,
    "ジェットスター": Program.JETSTAR, "ジェットスター・ジャパン": Program.JETSTAR,
}

# Pairs of programs whose miles are mutually redeemable on each other's flights.
PARTNERSHIPS: list[tuple[Program, Program]] = [
    (Program.ANA, Program.UNITED),
    (Program.ANA, Program.SINGAPORE),
    (Program.ANA, Program.AEROPLAN),
    (Program.ANA, Program.VIRGIN),
    (Program.ANA, Program.SOLASEED),
    (Program.UNITED, Program.SINGAPORE),
    (Program.UNITED, Program.AEROPLAN),
    (Program.SINGAPORE, Program.AEROPLAN),
    (Program.JAL, Program.BRITISH),
    (Program.JAL, Program.ALASKA),
    (Program.BRITISH, Program.ALASKA),
]


def _build_partner_table(pairs: list[tuple[Program, Program]]) -> dict[Program, frozenset[Program]]:
    table: dict[Program, set[Program]] = {}
    for a, b in pairs:
        table.setdefault(a, set()).add(b)
        table.setdefault(b, set()).add(a)
    return {program: frozenset(partners) for program, partners in table.items()}


# Operating program -> programs whose miles can be redeemed on it
PARTNERS: dict[Program, frozenset[Program]] = _build_partner_table(PARTNERSHIPS)

# Carriers expected on every domestic-market route, in display order.
EXPECTED_DOMESTIC_ROSTER: list[Program] = [
    Program.ANA,
    Program.JAL,
    Program.SKYMARK,
    Program.SOLASEED,
    Program.PEACH,
    Program.JETSTAR,
]


def resolve_program(identifier: Optional[str]) -> Program:
    """Map a carrier code, English name or Japanese name to its program.

    Unknown identifiers resolve to ``Program.UNSUPPORTED``, never to a default carrier.
    """
    if not identifier:
        return Program.UNSUPPORTED
    key = identifier.strip().lower()
    if key in CARRIER_ALIASES:
        return CARRIER_ALIASES[key]
    try:
        return Program(key)
    except ValueError:
        return Program.UNSUPPORTED


def partners_of(program: Program) -> frozenset[Program]:
    return PARTNERS.get(program, frozenset())
