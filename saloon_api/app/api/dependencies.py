"""
FastAPI dependencies that provide service instances.

The services are built from the application settings.  Tests replace
them through ``app.dependency_overrides``.
"""

from ..core.config import settings
from ..core.db import SaloonStore
from ..services.audit_service import AuditService
from ..services.saloon_service import SaloonService


def get_audit_service() -> AuditService:
    return AuditService(settings.database_url)


def get_saloon_service() -> SaloonService:
    return SaloonService(
        SaloonStore(settings.database_url),
        audit=get_audit_service(),
        update_requires_owner=settings.update_requires_owner,
        service_append_touches_updated_at=settings.service_append_touches_updated_at,
    )
