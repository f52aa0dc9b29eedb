"""
Response envelope shared by all endpoints.

Successful responses carry ``success = True`` together with ``data``
and a human readable ``message``.  Failures are rendered by the error
handlers with ``success = False`` and an ``error`` object (see
``core.errors``).
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Tagged success envelope."""

    success: bool = True
    data: Optional[T] = None
    message: str = "Operation successful"


def success_response(data=None, message: str = "Operation successful") -> dict:
    return {"success": True, "data": data, "message": message}
