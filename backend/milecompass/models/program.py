"""Enumerations shared across the offer pipeline."""
import enum


class Program(str, enum.Enum):
    """Canonical loyalty programs.

    Carrier codes, English names and Japanese names are resolved to one of
    these through the alias table in ``milecompass.data.programs``.
    """
    ANA = "ana"
    JAL = "jal"
    UNITED = "united"
    BRITISH = "british"
    SINGAPORE = "singapore"
    VIRGIN = "virgin"
    ALASKA = "alaska"
    AEROPLAN = "aeroplan"
    SOLASEED = "solaseed"
    SKYMARK = "skymark"
    PEACH = "peach"
    JETSTAR = "jetstar"
    UNSUPPORTED = "unsupported"


class Season(str, enum.Enum):
    OFF = "off"
    REGULAR = "regular"
    PEAK = "peak"


class Region(str, enum.Enum):
    """International award regions, as seen from Japan."""
    KOREA = "korea"
    EAST_ASIA = "east_asia"
    SOUTHEAST_ASIA = "southeast_asia"
    SOUTH_ASIA = "south_asia"
    GUAM = "guam"
    HAWAII = "hawaii"
    NORTH_AMERICA = "north_america"
    EUROPE = "europe"
    OCEANIA = "oceania"
    MIDDLE_EAST = "middle_east"


class RequirementStatus(str, enum.Enum):
    OK = "ok"
    NO_PROGRAM = "no_program"
    NOT_APPLICABLE = "not_applicable"


class Provenance(str, enum.Enum):
    REAL = "real"
    SYNTHETIC = "synthetic"


class EfficiencyTier(str, enum.Enum):
    HIGH = "high"
    STANDARD = "standard"
    LOW = "low"
    VERY_LOW = "very_low"
    NOT_APPLICABLE = "not_applicable"


class Recommendation(str, enum.Enum):
    REDEEM = "redeem"
    CASH = "cash"
    CASH_ONLY = "cash_only"


class ComparisonMode(str, enum.Enum):
    SINGLE = "single"
    MULTIPLE = "multiple"
    ALL = "all"


class SortCriterion(str, enum.Enum):
    VALUE = "value"
    DEPARTURE = "departure"
