from datetime import date
import enum

from pydantic import BaseModel, ConfigDict


class DateRangeToken(str, enum.Enum):
    today = "today"
    yesterday = "yesterday"
    last_7_days = "last_7_days"
    this_week = "this_week"
    last_week = "last_week"
    last_30_days = "last_30_days"
    this_month = "this_month"
    last_month = "last_month"
    year_to_date = "year_to_date"
    lifetime = "lifetime"


class ReportType(str, enum.Enum):
    leads = "leads"
    performance = "performance"


class ReportFormat(str, enum.Enum):
    pdf = "pdf"
    excel = "excel"
    csv = "csv"


class DateRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Both ends inclusive.
    start: date
    end: date

    def as_params(self) -> dict[str, str]:
        return {"start_date": self.start.isoformat(), "end_date": self.end.isoformat()}


class ResolvedRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: str
    label: str
    bounds: DateRange | None = None
    is_known: bool = True


class ExportRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    report_type: ReportType
    format: ReportFormat
    range: ResolvedRange
    filename: str

    @property
    def period_label(self) -> str:
        return f"Period: {self.range.label}"

    def as_query_params(self) -> dict[str, str]:
        params = {
            "type": self.report_type.value,
            "format": self.format.value,
            "range": self.range.token,
        }
        if self.range.bounds is not None:
            params.update(self.range.bounds.as_params())
        return params
