"""
Business logic for saloons.

The ``SaloonService`` implements every saloon operation on top of a
``SaloonStore``.  Each operation reads at most one record, validates
its input, checks ownership where required, computes the new value
and writes it back with a single insert or remove.  Expected failures
are raised as ``SaloonError`` subclasses; nothing is written when an
operation fails.

The clock and id generator are injected so that hosts and tests can
control them.  The caller principal is passed to each mutating
operation explicitly.
"""

import logging
from typing import List, Optional

from ..core.db import SaloonStore
from ..core.errors import (
    EmptyCollectionError,
    InvalidArgumentError,
    NotFoundError,
    PermissionDeniedError,
)
from ..core.runtime import Clock, IdFactory, current_timestamp, new_unique_id
from ..schemas.saloon import (
    Saloon,
    SaloonPayload,
    ServiceRendered,
    ServiceRenderedPayload,
)
from .audit_service import AuditService

logger = logging.getLogger(__name__)

MIN_RATING = 0
MAX_RATING = 5
INITIAL_RATING = 1.0


class SaloonService:
    """Service for managing saloons and the services they offer."""

    def __init__(
        self,
        store: SaloonStore,
        clock: Clock = current_timestamp,
        id_factory: IdFactory = new_unique_id,
        audit: Optional[AuditService] = None,
        update_requires_owner: bool = True,
        service_append_touches_updated_at: bool = False,
    ) -> None:
        self.store = store
        self.clock = clock
        self.id_factory = id_factory
        self.audit = audit
        self.update_requires_owner = update_requires_owner
        self.service_append_touches_updated_at = service_append_touches_updated_at

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def list_saloons(self) -> List[Saloon]:
        """Return every stored saloon.

        An empty store is reported as ``EmptyCollectionError`` rather
        than an empty list.
        """
        saloons = self.store.values()
        if not saloons:
            raise EmptyCollectionError("No saloons found.")
        return saloons

    async def get_saloon(self, saloon_id: str) -> Saloon:
        """Retrieve a single saloon by id."""
        if not saloon_id:
            raise InvalidArgumentError("Invalid id")
        return self._require_saloon(saloon_id, f"Saloon with id={saloon_id} does not exist")

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def create_saloon(self, payload: SaloonPayload, caller: str) -> Saloon:
        """Create a new saloon owned by ``caller``.

        All three payload fields are required and must be non-empty.
        The new saloon starts with a rating of 1.0, no services and no
        ``updated_at``.
        """
        if not (payload.saloon_name and payload.saloon_location and payload.attachment_url):
            logger.warning("Rejected saloon creation by %s: missing fields", caller)
            raise InvalidArgumentError("Missing required fields in payload")
        saloon = Saloon(
            id=self.id_factory(),
            owner=caller,
            saloon_name=payload.saloon_name,
            saloon_location=payload.saloon_location,
            attachment_url=payload.attachment_url,
            services_rendered=[],
            rating=INITIAL_RATING,
            created_at=self.clock(),
            updated_at=None,
        )
        self.store.insert(saloon.id, saloon)
        logger.info("User %s created saloon %s ('%s')", caller, saloon.id, saloon.saloon_name)
        await self._audit(caller, "create", saloon.id, {"saloon_name": saloon.saloon_name})
        return saloon

    async def add_service(
        self, saloon_id: str, payload: ServiceRenderedPayload, caller: str
    ) -> Saloon:
        """Append a service to a saloon owned by ``caller``.

        Existence is checked before ownership.  The new entry is placed
        after all existing ones.
        """
        saloon = self._require_saloon(saloon_id, f"Saloon with id={saloon_id} does not exist")
        self._ensure_owner(saloon, caller)
        now = self.clock()
        service = ServiceRendered(
            id=self.id_factory(),
            service_name=payload.service_name,
            service_description=payload.service_description,
            service_amount=payload.service_amount,
            created_at=now,
        )
        changes = {"services_rendered": [*saloon.services_rendered, service]}
        if self.service_append_touches_updated_at:
            changes["updated_at"] = now
        updated = saloon.model_copy(update=changes)
        self.store.insert(updated.id, updated)
        logger.info("User %s added service %s to saloon %s", caller, service.id, saloon_id)
        await self._audit(
            caller,
            "add_service",
            saloon_id,
            {"service_id": service.id, "service_name": service.service_name},
        )
        return updated

    async def delete_saloon(self, saloon_id: str, caller: str) -> Saloon:
        """Delete a saloon owned by ``caller`` and return the removed record.

        Ownership is verified before anything is removed, so a rejected
        request leaves the saloon in place.
        """
        saloon = self._require_saloon(
            saloon_id, f"couldn't delete saloon with this id={saloon_id}. saloon not found."
        )
        self._ensure_owner(saloon, caller)
        removed = self.store.remove(saloon_id)
        if removed is None:
            raise NotFoundError(
                f"couldn't delete saloon with this id={saloon_id}. saloon not found.",
                details={"id": saloon_id},
            )
        logger.info("User %s deleted saloon %s", caller, saloon_id)
        await self._audit(caller, "delete", saloon_id, None)
        return removed

    async def rate_saloon(self, saloon_id: str, rate: float, caller: str) -> Saloon:
        """Blend a new 0‑5 rating into a saloon's current rating.

        The new rating is ``(current + rate) / 5``, applied the same way
        regardless of how many ratings were submitted before.
        """
        # ``not (a <= x <= b)`` also rejects NaN
        if (
            isinstance(rate, bool)
            or not isinstance(rate, (int, float))
            or not (MIN_RATING <= rate <= MAX_RATING)
        ):
            logger.warning("Rejected rating %r for saloon %s", rate, saloon_id)
            raise InvalidArgumentError(
                f"Error rating saloon with the id={saloon_id}. Invalid rating value. "
                f"Value should not be more than {MAX_RATING} or less than {MIN_RATING}",
                details={"rate": repr(rate), "min": MIN_RATING, "max": MAX_RATING},
            )
        saloon = self._require_saloon(
            saloon_id, f"Error rating saloon with the id={saloon_id}. Saloon not found"
        )
        rating = (saloon.rating + rate) / 5
        updated = saloon.model_copy(update={"rating": rating, "updated_at": self.clock()})
        self.store.insert(updated.id, updated)
        logger.info("User %s rated saloon %s with %s; rating is now %s", caller, saloon_id, rate, rating)
        await self._audit(caller, "rate", saloon_id, {"rate": rate, "rating": rating})
        return updated

    async def update_saloon(self, saloon_id: str, payload: SaloonPayload, caller: str) -> Saloon:
        """Merge the provided payload fields into an existing saloon.

        Only fields that are set (not ``None``) are changed.  When
        ``update_requires_owner`` is enabled, only the owner may update.
        """
        saloon = self._require_saloon(
            saloon_id, f"couldn't update the saloon with this id={saloon_id}. saloon not found"
        )
        if self.update_requires_owner:
            self._ensure_owner(saloon, caller)
        changes = payload.model_dump(exclude_none=True)
        updated = saloon.model_copy(update={**changes, "updated_at": self.clock()})
        self.store.insert(updated.id, updated)
        logger.info("User %s updated saloon %s (%s)", caller, saloon_id, ", ".join(changes) or "no fields")
        await self._audit(caller, "update", saloon_id, changes)
        return updated

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_saloon(self, saloon_id: str, message: str) -> Saloon:
        saloon = self.store.get(saloon_id)
        if saloon is None:
            raise NotFoundError(message, details={"id": saloon_id})
        return saloon

    @staticmethod
    def _ensure_owner(saloon: Saloon, caller: str) -> None:
        """Authorization guard shared by all owner-only operations."""
        if saloon.owner != caller:
            logger.warning("User %s denied write access to saloon %s", caller, saloon.id)
            raise PermissionDeniedError("You are not the owner of this saloon")

    async def _audit(
        self, actor: str, action: str, saloon_id: str, details: Optional[dict]
    ) -> None:
        if self.audit is None:
            return
        try:
            await self.audit.log(
                actor=actor,
                action=action,
                object_type="saloon",
                object_id=saloon_id,
                details=details,
            )
        except Exception:
            # Audit failures must not undo a mutation that already happened
            logger.exception("Failed to write audit record for %s on saloon %s", action, saloon_id)
