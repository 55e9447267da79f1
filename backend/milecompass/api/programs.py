from fastapi import APIRouter
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from milecompass.data.programs import PROGRAMS, partners_of
from milecompass.models.program import Program

router = APIRouter()


class ProgramResponse(BaseModel):
    key: str
    display_name: str
    program_name: str
    carrier_code: str
    alliance: str
    baseline_value: float
    has_program: bool
    partners: list[str]

    class Config:
        alias_generator = to_camel
        populate_by_name = True


@router.get("", response_model=list[ProgramResponse])
async def list_programs():
    """Loyalty programs with their baseline JPY-per-mile value and redemption partners."""
    return [
        ProgramResponse(
            key=info.program.value,
            display_name=info.display_name,
            program_name=info.program_name,
            carrier_code=info.carrier_code,
            alliance=info.alliance,
            baseline_value=info.baseline_value,
            has_program=info.has_program,
            partners=sorted(p.value for p in partners_of(info.program)),
        )
        for info in PROGRAMS.values()
        if info.program != Program.UNSUPPORTED
    ]
