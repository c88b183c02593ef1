"""
Report endpoints.

Any signed-in user may report a survey; admins review and dismiss reports.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_report_service
from api.middleware.auth import get_current_user, require_role
from shared.models import AuthenticatedUser, DeleteResponse, UserRole

from .interfaces import IReportService
from .models import Report, CreateReportRequest

router = APIRouter()


@router.post("", response_model=Report)
async def create_report(
    request: CreateReportRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IReportService = Depends(get_report_service),
) -> Report:
    """Report a survey."""
    return await service.create_report(user, request)


@router.get("", response_model=list[Report])
async def list_reports(
    _admin: AuthenticatedUser = Depends(require_role(UserRole.ADMIN)),
    service: IReportService = Depends(get_report_service),
) -> list[Report]:
    """List all reports. Admin only."""
    return await service.list_reports()


@router.delete("/{report_id}", response_model=DeleteResponse)
async def delete_report(
    report_id: str,
    _admin: AuthenticatedUser = Depends(require_role(UserRole.ADMIN)),
    service: IReportService = Depends(get_report_service),
) -> DeleteResponse:
    """Dismiss a report. Admin only."""
    await service.delete_report(report_id)
    return DeleteResponse(id=report_id)
