"""
Pydantic models for saloon data.

``Saloon`` is the aggregate stored under its id; its services are
embedded as a list of ``ServiceRendered``.  ``SaloonPayload`` carries
the three mutable text fields for both create and update requests.
Its fields are optional at the schema level so that the service can
report missing values with its own error message.

Floats are finite throughout: ``Infinity`` and ``NaN`` have no JSON
representation in the stored document.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialising field names in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SaloonPayload(CamelModel):
    """Schema for creating or updating a saloon."""

    saloon_name: Optional[str] = Field(None, examples=["Fade Masters"])
    saloon_location: Optional[str] = Field(None, examples=["12 Market Street, Lagos"])
    attachment_url: Optional[str] = Field(
        None, alias="attachmentURL", examples=["https://example.com/fade-masters.jpg"]
    )


class ServiceRenderedPayload(CamelModel):
    """Schema for appending a service to a saloon."""

    service_name: str = Field(..., examples=["Haircut"])
    service_description: str = Field(..., examples=["Classic scissor cut and style"])
    service_amount: float = Field(..., allow_inf_nan=False, examples=[25.0])


class ServiceRendered(CamelModel):
    """A service offered by a saloon, owned by its parent record."""

    id: str
    service_name: str
    service_description: str
    service_amount: float = Field(..., allow_inf_nan=False)
    created_at: int


class Saloon(CamelModel):
    """Schema for a stored saloon record."""

    id: str
    owner: str
    saloon_name: str
    saloon_location: str
    attachment_url: str = Field(..., alias="attachmentURL")
    services_rendered: List[ServiceRendered] = Field(default_factory=list)
    rating: float = 1.0
    created_at: int
    updated_at: Optional[int] = None


class RatingSubmission(BaseModel):
    """Schema for rating a saloon.

    The range check (0 to 5 inclusive) is performed by the service so
    that out‑of‑range values produce the service's own error.
    """

    rate: float = Field(..., allow_inf_nan=False, examples=[4.5])
