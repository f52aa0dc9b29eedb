"""
Audit log endpoints for API v1.

Provides read access to the record of saloon mutations.  Only
principals listed in ``ADMIN_PRINCIPALS`` may view it.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from saloon_api.app.api.dependencies import get_audit_service
from saloon_api.app.core.errors import PermissionDeniedError
from saloon_api.app.core.security import get_current_principal, is_admin
from saloon_api.app.schemas.response import ApiResponse, success_response
from saloon_api.app.services.audit_service import AuditService

router = APIRouter()


@router.get("/logs", response_model=ApiResponse[List[Dict[str, Any]]])
async def list_audit_logs(
    actor: Optional[str] = Query(None, description="Filter by acting principal"),
    object_id: Optional[str] = Query(None, description="Filter by saloon id"),
    action: Optional[str] = Query(None, description="Filter by action (create, add_service, rate, update, delete)"),
    limit: int = Query(100, ge=1, le=500, description="Maximum number of logs to return"),
    offset: int = Query(0, ge=0, description="Number of logs to skip"),
    caller: str = Depends(get_current_principal),
    audit: AuditService = Depends(get_audit_service),
) -> dict:
    """Retrieve audit logs, newest first."""
    if not is_admin(caller):
        raise PermissionDeniedError("Insufficient permissions")
    logs = await audit.list_logs(
        actor=actor,
        object_id=object_id,
        action=action,
        limit=limit,
        offset=offset,
    )
    return success_response(logs, "Audit logs retrieved successfully")
