"""
Error classes for the dashboard metrics engine.

Hierarchy:
    MetricsError
    ├── EmptyInputError
    └── PayloadValidationError

Unknown date-range tokens are not errors: they degrade to a pass-through
label and are logged by the resolver.
"""


class MetricsError(Exception):
    """Base exception for all metrics engine errors."""

    def __init__(self, message: str, code: str = "UNKNOWN", details: dict = None):
        self.code = code
        self.details = details or {}
        super().__init__(f"[{code}] {message}")


class EmptyInputError(MetricsError):
    """An aggregate was requested over zero records."""

    def __init__(self, what: str = "records"):
        super().__init__(
            f"Cannot aggregate over empty {what}",
            code="EMPTY_INPUT", details={"what": what},
        )


class PayloadValidationError(MetricsError):
    """Raw dashboard payload doesn't match the expected schema."""

    def __init__(self, message: str, errors: list = None):
        errors = errors or []
        fields = [".".join(str(p) for p in e.get("loc", ())) for e in errors]
        super().__init__(
            message, code="SCHEMA_INVALID",
            details={"fields": fields, "errors": errors},
        )
