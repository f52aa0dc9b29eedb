"""
Saloon endpoints for API v1.

These routes expose the saloon service: listing and fetching saloons
is public, while creating, updating, rating, deleting and adding
services require a bearer token identifying the caller.  Service
errors propagate to the global error handlers, which render them as
the failure envelope.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from saloon_api.app.api.dependencies import get_saloon_service
from saloon_api.app.core.security import get_current_principal
from saloon_api.app.schemas.response import ApiResponse, success_response
from saloon_api.app.schemas.saloon import (
    RatingSubmission,
    Saloon,
    SaloonPayload,
    ServiceRenderedPayload,
)
from saloon_api.app.services.saloon_service import SaloonService


router = APIRouter()


@router.get("/", response_model=ApiResponse[List[Saloon]])
async def list_saloons(
    service: SaloonService = Depends(get_saloon_service),
) -> dict:
    """List every saloon.

    Responds with 404 ``EMPTY_COLLECTION`` when no saloons exist.
    """
    saloons = await service.list_saloons()
    return success_response(saloons, "Saloons retrieved successfully")


@router.get("/{saloon_id}", response_model=ApiResponse[Saloon])
async def get_saloon(
    saloon_id: str,
    service: SaloonService = Depends(get_saloon_service),
) -> dict:
    """Retrieve a single saloon by its id."""
    saloon = await service.get_saloon(saloon_id)
    return success_response(saloon, "Saloon retrieved successfully")


@router.post("/", response_model=ApiResponse[Saloon], status_code=status.HTTP_201_CREATED)
async def create_saloon(
    payload: SaloonPayload,
    caller: str = Depends(get_current_principal),
    service: SaloonService = Depends(get_saloon_service),
) -> dict:
    """Create a saloon owned by the caller."""
    saloon = await service.create_saloon(payload, caller)
    return success_response(saloon, "Saloon created successfully")


@router.post(
    "/{saloon_id}/services",
    response_model=ApiResponse[Saloon],
    status_code=status.HTTP_201_CREATED,
)
async def add_service(
    saloon_id: str,
    payload: ServiceRenderedPayload,
    caller: str = Depends(get_current_principal),
    service: SaloonService = Depends(get_saloon_service),
) -> dict:
    """Append a service to a saloon.  Only the owner may do this."""
    saloon = await service.add_service(saloon_id, payload, caller)
    return success_response(saloon, "Service added successfully")


@router.post("/{saloon_id}/rating", response_model=ApiResponse[Saloon])
async def rate_saloon(
    saloon_id: str,
    submission: RatingSubmission,
    caller: str = Depends(get_current_principal),
    service: SaloonService = Depends(get_saloon_service),
) -> dict:
    """Submit a rating between 0 and 5 inclusive."""
    saloon = await service.rate_saloon(saloon_id, submission.rate, caller)
    return success_response(saloon, "Saloon rated successfully")


@router.put("/{saloon_id}", response_model=ApiResponse[Saloon])
async def update_saloon(
    saloon_id: str,
    payload: SaloonPayload,
    caller: str = Depends(get_current_principal),
    service: SaloonService = Depends(get_saloon_service),
) -> dict:
    """Update a saloon's name, location or attachment.

    Fields omitted from the body keep their current value.
    """
    saloon = await service.update_saloon(saloon_id, payload, caller)
    return success_response(saloon, "Saloon updated successfully")


@router.delete("/{saloon_id}", response_model=ApiResponse[Saloon])
async def delete_saloon(
    saloon_id: str,
    caller: str = Depends(get_current_principal),
    service: SaloonService = Depends(get_saloon_service),
) -> dict:
    """Delete a saloon and return the removed record.  Owner only."""
    saloon = await service.delete_saloon(saloon_id, caller)
    return success_response(saloon, "Saloon deleted successfully")
