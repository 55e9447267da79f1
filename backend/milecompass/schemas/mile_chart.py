from datetime import date, datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from milecompass.models.mile_chart import Announcement, MileChart, MileChartRoute, MileUpdateEvent
from milecompass.models.program import Program


class _CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


class AnnouncementSchema(_CamelModel):
    announced_on: date = Field(alias="date")
    summary: str
    url: Optional[str] = None


class MileChartRouteSchema(_CamelModel):
    region: str
    destinations: list[str]
    regular: int = Field(gt=0)
    low: Optional[int] = Field(default=None, gt=0)
    high: Optional[int] = Field(default=None, gt=0)
    notes: list[str] = []

    def to_model(self) -> MileChartRoute:
        return MileChartRoute(
            region=self.region,
            destinations=list(self.destinations),
            regular=self.regular,
            low=self.low,
            high=self.high,
            notes=list(self.notes),
        )

    @classmethod
    def from_model(cls, route: MileChartRoute) -> "MileChartRouteSchema":
        return cls(
            region=route.region,
            destinations=route.destinations,
            regular=route.regular,
            low=route.low,
            high=route.high,
            notes=route.notes,
        )


class MileChartCreate(_CamelModel):
    id: str = Field(min_length=1)
    program: Program
    cabin: str = "economy"
    direction: str = "one_way"
    effective_date: date
    expiry_date: Optional[date] = None
    version: str
    routes: list[MileChartRouteSchema] = Field(min_length=1)

    def to_model(self) -> MileChart:
        return MileChart(
            id=self.id,
            program=self.program,
            cabin=self.cabin,
            direction=self.direction,
            effective_date=self.effective_date,
            expiry_date=self.expiry_date,
            version=self.version,
            routes=[r.to_model() for r in self.routes],
            last_updated=datetime.now(timezone.utc),
        )


class MileChartResponse(_CamelModel):
    id: str
    program: str
    cabin: str
    direction: str
    effective_date: date
    expiry_date: Optional[date] = None
    version: str
    routes: list[MileChartRouteSchema]

    @classmethod
    def from_chart(cls, chart: MileChart) -> "MileChartResponse":
        return cls(
            id=chart.id,
            program=chart.program.value,
            cabin=chart.cabin,
            direction=chart.direction,
            effective_date=chart.effective_date,
            expiry_date=chart.expiry_date,
            version=chart.version,
            routes=[MileChartRouteSchema.from_model(r) for r in chart.routes],
        )


class UpdateEventCreate(_CamelModel):
    id: str = Field(min_length=1)
    program: Program
    change_type: str = Field(pattern="^(increase|decrease|restructure)$")
    effective_date: date
    description: str
    impacted_routes: list[str] = []
    average_increase: Optional[float] = None
    announcement: AnnouncementSchema

    def to_model(self) -> MileUpdateEvent:
        return MileUpdateEvent(
            id=self.id,
            program=self.program,
            change_type=self.change_type,
            effective_date=self.effective_date,
            description=self.description,
            impacted_routes=list(self.impacted_routes),
            average_increase=self.average_increase,
            announcement=Announcement(
                date=self.announcement.announced_on,
                summary=self.announcement.summary,
                url=self.announcement.url,
            ),
        )


class UpdateEventResponse(_CamelModel):
    id: str
    program: str
    change_type: str
    effective_date: date
    description: str
    impacted_routes: list[str]
    average_increase: Optional[float] = None
    announcement: AnnouncementSchema

    @classmethod
    def from_event(cls, event: MileUpdateEvent) -> "UpdateEventResponse":
        return cls(
            id=event.id,
            program=event.program.value,
            change_type=event.change_type,
            effective_date=event.effective_date,
            description=event.description,
            impacted_routes=event.impacted_routes,
            average_increase=event.average_increase,
            announcement=AnnouncementSchema(
                announced_on=event.announcement.date,
                summary=event.announcement.summary,
                url=event.announcement.url,
            ),
        )


class ChartOptionResponse(_CamelModel):
    program: str
    amount: int
    season: str
    region: str
    chart_id: str
    version: str
    is_best: bool


class ChartComparisonResponse(_CamelModel):
    destination: str
    cabin: str
    first: str
    second: str
    first_route: Optional[MileChartRouteSchema] = None
    second_route: Optional[MileChartRouteSchema] = None
    recommendation: Optional[str] = None
    savings: int = 0
