from datetime import date

from crm_metrics.schemas.report import DateRangeToken, ExportRequest, ReportFormat, ReportType
from crm_metrics.services.ranges import DEFAULT_RANGE, current_report_date, resolve_range

FILE_EXTENSIONS = {
    ReportFormat.pdf: "pdf",
    ReportFormat.excel: "xlsx",
    ReportFormat.csv: "csv",
}


def export_filename(report_type: ReportType, fmt: ReportFormat, day: date) -> str:
    return f"{report_type.value}_report_{day.isoformat()}.{FILE_EXTENSIONS[fmt]}"


def build_export_request(
    report_type: ReportType | str,
    fmt: ReportFormat | str,
    range_token: DateRangeToken | str = DEFAULT_RANGE,
    today: date | None = None,
) -> ExportRequest:
    """
    Describe a report export for the external export service.

    Only the range is resolved here; the artifact itself is produced
    elsewhere. Raises ValueError for an unsupported report type or format.
    """
    report_type = ReportType(report_type)
    fmt = ReportFormat(fmt)
    day = today if today is not None else current_report_date()
    return ExportRequest(
        report_type=report_type,
        format=fmt,
        range=resolve_range(range_token, today=day),
        filename=export_filename(report_type, fmt, day),
    )
