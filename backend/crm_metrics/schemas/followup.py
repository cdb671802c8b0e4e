from datetime import datetime

from pydantic import BaseModel, ConfigDict


class FollowupRecord(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    lead_id: int
    salesperson_id: int
    scheduled_at: datetime
    is_completed: bool = False
    completed_at: datetime | None = None
    notes: str | None = None


class FollowupBuckets(BaseModel):
    model_config = ConfigDict(frozen=True)

    overdue: list[FollowupRecord]
    upcoming: list[FollowupRecord]
    completed: list[FollowupRecord]
