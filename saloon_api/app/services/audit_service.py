"""
Audit service for recording and querying saloon mutations.

This module provides a small API for writing audit events to the
``audit_logs`` table and retrieving them with filters and pagination.
The saloon service records every successful create, service append,
rating, update and delete here.  Only administrators may read the log.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from ..core.db import get_cursor


class AuditService:
    """Service for writing and retrieving audit logs."""

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path

    async def log(
        self,
        actor: Optional[str],
        action: str,
        object_type: str,
        object_id: Optional[str] = None,
        details: Optional[dict] = None,
    ) -> None:
        """Insert a new audit record.

        Parameters
        ----------
        actor : Optional[str]
            Principal performing the action.
        action : str
            Short description of the action (e.g. "create", "rate", "delete").
        object_type : str
            Type of object affected (e.g. "saloon").
        object_id : Optional[str]
            Identifier of the affected object, if applicable.
        details : Optional[dict]
            Additional structured data about the action, stored as JSON.
        """
        details_json = json.dumps(details) if details else None
        with get_cursor(self.db_path) as cursor:
            cursor.execute(
                """
                INSERT INTO audit_logs (actor, action, object_type, object_id, details)
                VALUES (?, ?, ?, ?, ?)
                """,
                (actor, action, object_type, object_id, details_json),
            )

    async def list_logs(
        self,
        actor: Optional[str] = None,
        object_id: Optional[str] = None,
        action: Optional[str] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> List[Dict[str, Any]]:
        """Retrieve audit records with optional filters and pagination.

        Records are returned newest first.
        """
        where_clauses: List[str] = []
        params: List[Any] = []
        if actor:
            where_clauses.append("actor = ?")
            params.append(actor)
        if object_id:
            where_clauses.append("object_id = ?")
            params.append(object_id)
        if action:
            where_clauses.append("action = ?")
            params.append(action)
        query = "SELECT id, actor, action, object_type, object_id, timestamp, details FROM audit_logs"
        if where_clauses:
            query += " WHERE " + " AND ".join(where_clauses)
        # ``id`` breaks ties between records written within the same second
        query += " ORDER BY timestamp DESC, id DESC LIMIT ? OFFSET ?"
        params.extend([limit, offset])
        with get_cursor(self.db_path) as cursor:
            rows = cursor.execute(query, tuple(params)).fetchall()
        logs = []
        for row in rows:
            details_data = None
            if row["details"]:
                try:
                    details_data = json.loads(row["details"])
                except json.JSONDecodeError:
                    details_data = row["details"]
            logs.append(
                {
                    "id": row["id"],
                    "actor": row["actor"],
                    "action": row["action"],
                    "object_type": row["object_type"],
                    "object_id": row["object_id"],
                    "timestamp": row["timestamp"],
                    "details": details_data,
                }
            )
        return logs
