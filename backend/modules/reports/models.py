"""
Reports module data models.
"""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field


class Report(BaseModel):
    """A user's report flagging a survey for moderation."""

    id: str = Field(..., description="Report ID (ObjectId)")
    survey_id: str = Field(..., description="Reported survey")
    reporter: EmailStr = Field(..., description="Who filed the report")
    reason: str = Field(..., description="Free-text reason")
    created_at: datetime


class CreateReportRequest(BaseModel):
    """Request to report a survey."""

    survey_id: str = Field(..., min_length=1)
    reason: str = Field(..., min_length=1, max_length=2000)
