"""
PeakPerformance Backend — Resource Service (Generic CRUD Handler)
===================================================================

What:  The list / get / create / update / delete workflow shared by all nine
       resources.
Why:   Every resource follows the same contract; only the table, the
       payload schemas and the message strings differ. One implementation
       parametrised nine times keeps the behaviour identical everywhere.
How:   Statements are built with SQLAlchemy Core against the model's table
       and executed on the per-request AsyncSession. Columns are addressed by
       their database name, which is also the JSON key on the wire.
Who:   Called by the routers built in `peakperformance.routes.resources`.

Outcome mapping (raised here, turned into HTTP by main.py):
    required field missing on create  → ValidationError (400)
    zero rows matched                 → NotFoundError   (404)
    any exception from the database   → DatabaseError   (500)

Hooks for subclasses:
    prepare_insert(values)   transform the full column map before INSERT
    prepare_update(values)   transform the submitted column map before UPDATE
    created_response(...)    shape the 201 body
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Type

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from peakperformance.database import Base
from peakperformance.exceptions import DatabaseError, NotFoundError, ValidationError
from peakperformance.schemas.common import ResourcePayload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceMessages:
    """
    Client-visible strings for one resource.

    Existing clients compare these byte for byte, so they are kept exactly
    as deployed (including spelling and trailing whitespace).
    """

    list_error: str
    get_error: str
    not_found: str
    required: str
    create_error: str
    update_not_found: str
    updated: str
    update_error: str
    delete_not_found: str
    deleted: str
    delete_error: str


class ResourceService:
    """
    CRUD handler for a single table.

    Stateless: the session is passed into every call, so one instance
    serves all concurrent requests.

    Attributes:
        name:           Resource name used in logs (e.g. "producto")
        table:          SQLAlchemy Table behind the model
        identity:       Primary key column; never written by update
        create_schema:  Pydantic body for POST
        update_schema:  Pydantic body for PUT (the updatable subset)
        messages:       Per-resource response strings
    """

    def __init__(
        self,
        name: str,
        model: Type[Base],
        create_schema: Type[ResourcePayload],
        update_schema: Type[ResourcePayload],
        messages: ResourceMessages,
    ):
        self.name = name
        self.model = model
        self.table = model.__table__
        self.create_schema = create_schema
        self.update_schema = update_schema
        self.messages = messages
        self.columns = {column.name: column for column in self.table.columns}
        self.identity = next(iter(self.table.primary_key.columns))

    # ── Helpers ───────────────────────────────────────────────────────────

    def _row_to_record(self, row) -> Dict[str, Any]:
        mapping = row._mapping
        return {name: mapping[column] for name, column in self.columns.items()}

    def _bind(self, values: Dict[str, Any]) -> Dict[Any, Any]:
        # Column objects as keys: attribute names may differ from column names
        return {self.columns[name]: value for name, value in values.items()}

    def _database_error(self, message: str, operation: str, exc: Exception) -> DatabaseError:
        logger.error(
            "Failure during %s on %s: %s",
            operation,
            self.table.name,
            str(exc),
            exc_info=True,
        )
        return DatabaseError(
            message=message,
            context={
                "resource": self.name,
                "operation": operation,
                "error_type": type(exc).__name__,
            },
        )

    # ── Hooks ─────────────────────────────────────────────────────────────

    async def prepare_insert(self, values: Dict[str, Any]) -> Dict[str, Any]:
        return values

    async def prepare_update(self, values: Dict[str, Any]) -> Dict[str, Any]:
        return values

    def created_response(
        self,
        identity: Any,
        payload: ResourcePayload,
        values: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Inserted identity first, then every field the client sent, verbatim."""
        body = {"id": identity}
        body.update(payload.submitted_fields())
        return body

    # ── Operations ────────────────────────────────────────────────────────

    async def list_records(self, db: AsyncSession) -> List[Dict[str, Any]]:
        """
        Fetch every row of the table.

        Order is whatever the database returns; no sorting is applied.

        Raises:
            DatabaseError: Query execution failed (→ 500)
        """
        try:
            result = await db.execute(select(self.table))
            return [self._row_to_record(row) for row in result]
        except Exception as e:
            raise self._database_error(self.messages.list_error, "list", e)

    async def get_record(self, db: AsyncSession, record_id: str) -> Dict[str, Any]:
        """
        Fetch the row whose identity equals `record_id`.

        The id is bound exactly as received from the path segment; the
        database performs any type conversion.

        Raises:
            NotFoundError: No matching row (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        try:
            result = await db.execute(select(self.table).where(self.identity == record_id))
            row = result.first()
            if row is None:
                raise NotFoundError(
                    message=self.messages.not_found,
                    resource=self.name,
                    resource_id=record_id,
                )
            return self._row_to_record(row)
        except NotFoundError:
            raise
        except Exception as e:
            raise self._database_error(self.messages.get_error, "get", e)

    async def create_record(self, db: AsyncSession, payload: ResourcePayload) -> Dict[str, Any]:
        """
        Insert one row from a full payload.

        Workflow:
            1. Reject the payload if any required field is falsy (no query issued)
            2. Apply `prepare_insert` (e.g. password hashing); a failure here
               answers like a failed insert
            3. INSERT every declared column; unset fields are written as NULL
            4. Return the created record with the identity from the insert result

        Raises:
            ValidationError: A required field is missing or falsy (→ 400)
            DatabaseError: Hashing or insert failed (→ 500)
        """
        missing = payload.missing_required()
        if missing:
            raise ValidationError(
                message=self.messages.required,
                fields=missing,
                context={"resource": self.name},
            )

        try:
            values = await self.prepare_insert(payload.all_fields())
            result = await db.execute(insert(self.table).values(self._bind(values)))
            await db.commit()
        except Exception as e:
            raise self._database_error(self.messages.create_error, "create", e)

        inserted = result.inserted_primary_key
        identity = inserted[0] if inserted else values.get(self.identity.name)
        logger.info("Created %s %s", self.name, identity)
        return self.created_response(identity, payload, values)

    async def update_record(
        self,
        db: AsyncSession,
        record_id: str,
        payload: ResourcePayload,
    ) -> Dict[str, str]:
        """
        Write the submitted fields to the row matching `record_id`.

        Only keys present in the body are written; omitted fields keep their
        stored value. No required-field check is made on update. A body with
        nothing to write still answers 404 for an unknown identity.

        Raises:
            NotFoundError: No row matched (→ 404)
            DatabaseError: Hashing or update failed (→ 500)
        """
        try:
            values = await self.prepare_update(payload.submitted_fields())
            if values:
                result = await db.execute(
                    update(self.table)
                    .where(self.identity == record_id)
                    .values(self._bind(values))
                )
                affected = result.rowcount
            else:
                result = await db.execute(select(self.identity).where(self.identity == record_id))
                affected = 0 if result.first() is None else 1
            await db.commit()
        except Exception as e:
            raise self._database_error(self.messages.update_error, "update", e)

        if affected == 0:
            raise NotFoundError(
                message=self.messages.update_not_found,
                resource=self.name,
                resource_id=record_id,
            )

        logger.info("Updated %s %s (%s)", self.name, record_id, ", ".join(values) or "no fields")
        return {"message": self.messages.updated}

    async def delete_record(self, db: AsyncSession, record_id: str) -> Dict[str, str]:
        """
        Delete the row matching `record_id`.

        Deleting twice is safe: the second call finds nothing and answers 404.

        Raises:
            NotFoundError: No row matched (→ 404)
            DatabaseError: Delete failed (→ 500)
        """
        try:
            result = await db.execute(delete(self.table).where(self.identity == record_id))
            affected = result.rowcount
            await db.commit()
        except Exception as e:
            raise self._database_error(self.messages.delete_error, "delete", e)

        if affected == 0:
            raise NotFoundError(
                message=self.messages.delete_not_found,
                resource=self.name,
                resource_id=record_id,
            )

        logger.info("Deleted %s %s", self.name, record_id)
        return {"message": self.messages.deleted}
