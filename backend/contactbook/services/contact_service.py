"""
ContactBook Backend: Contact Service (Data Access)
==================================================

What:  One coroutine per contact operation, each running exactly one
       parameterized statement on a session borrowed from the pool.
Who:   Called by the route handlers in routes/contacts.py.

Statements:
    create_contact   INSERT INTO contacts (name, email) VALUES (...) RETURNING id
    get_contact      SELECT ... FROM contacts WHERE id = :id
    list_contacts    SELECT ... FROM contacts
    update_contact   UPDATE contacts SET name = ..., email = ... WHERE id = :id
    delete_contact   DELETE FROM contacts WHERE id = :id

Error Handling:
    Driver errors and statement timeouts are logged and raised as
    DatabaseError. A missing row on get_contact raises NotFoundError.
    Update and delete report 0 rows affected for a missing id instead.
    Ids outside the range of the id column cannot match a row; they are
    answered the same way without sending a statement.

    Writes commit inside the call, so the change is durable before the
    handler returns its response.

The service is stateless; the session (and the statement deadline stored in
`session.info`) arrives with every call.
"""

import asyncio
import logging
from typing import Any, Awaitable, List, TypeVar

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from contactbook.database import STATEMENT_TIMEOUT_KEY
from contactbook.exceptions import DatabaseError, NotFoundError
from contactbook.models.contact import ID_COLUMN_MAX, ID_COLUMN_MIN, Contact
from contactbook.schemas.contact import ContactResponse

logger = logging.getLogger(__name__)

DEFAULT_STATEMENT_TIMEOUT = 10.0

T = TypeVar("T")


class ContactService:
    """
    Data-access layer for contact records.

    Responsibilities:
        - create_contact(): insert and return the generated id
        - get_contact(): primary key lookup with not-found handling
        - list_contacts(): every row, in database order
        - update_contact() / delete_contact(): rows-affected counts
    """

    @staticmethod
    def _fits_id_column(contact_id: int) -> bool:
        return ID_COLUMN_MIN <= contact_id <= ID_COLUMN_MAX

    async def _run(self, db: AsyncSession, awaitable: Awaitable[T], operation: str, **context: Any) -> T:
        """
        Await one database call (execute or commit) under the session's deadline.

        If the surrounding request task is cancelled, the pending call is
        cancelled with it; the session dependency then rolls back.

        Raises:
            DatabaseError: driver error or deadline exceeded
        """
        timeout = db.info.get(STATEMENT_TIMEOUT_KEY, DEFAULT_STATEMENT_TIMEOUT)
        try:
            return await asyncio.wait_for(awaitable, timeout=timeout)
        except asyncio.TimeoutError:
            logger.error("Statement timed out after %.1fs during %s %s", timeout, operation, context)
            raise DatabaseError(
                message="The database did not respond in time. Please try again.",
                context={"operation": operation, "timeout": timeout, **context},
            )
        except SQLAlchemyError as e:
            logger.error("Database error during %s %s: %s", operation, context, str(e), exc_info=True)
            raise DatabaseError(
                context={"operation": operation, "error_type": type(e).__name__, **context},
            )

    async def create_contact(self, db: AsyncSession, name: str, email: str) -> int:
        """
        Insert a contact and return its database-generated id.

        The insert is committed before returning, so the row is visible to
        the next request as soon as the client has the response.

        Args:
            db: Async database session
            name: Contact name
            email: Contact email

        Returns:
            The new primary key.
        """
        statement = insert(Contact).values(name=name, email=email).returning(Contact.id)
        result = await self._run(db, db.execute(statement), "create_contact")
        contact_id = result.scalar_one()
        await self._run(db, db.commit(), "create_contact", contact_id=contact_id)
        logger.info("Inserted a single record %d", contact_id)
        return contact_id

    async def get_contact(self, db: AsyncSession, contact_id: int) -> ContactResponse:
        """
        Fetch one contact by id.

        Raises:
            NotFoundError: No row has this id (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        if not self._fits_id_column(contact_id):
            raise NotFoundError(resource="contact", resource_id=str(contact_id))

        result = await self._run(
            db,
            db.execute(select(Contact).where(Contact.id == contact_id)),
            "get_contact",
            contact_id=contact_id,
        )
        contact = result.scalar_one_or_none()

        if contact is None:
            raise NotFoundError(resource="contact", resource_id=str(contact_id))

        return ContactResponse.model_validate(contact)

    async def list_contacts(self, db: AsyncSession) -> List[ContactResponse]:
        """Fetch every contact. No ORDER BY: rows come back in database order."""
        result = await self._run(db, db.execute(select(Contact)), "list_contacts")
        contacts = result.scalars().all()
        return [ContactResponse.model_validate(contact) for contact in contacts]

    async def update_contact(self, db: AsyncSession, contact_id: int, name: str, email: str) -> int:
        """
        Overwrite name and email of one contact, and commit.

        Returns:
            Rows affected: 1 when the id exists, 0 otherwise.
        """
        if not self._fits_id_column(contact_id):
            logger.info("Total rows/record affected 0 (update id=%d out of range)", contact_id)
            return 0

        statement = (
            update(Contact)
            .where(Contact.id == contact_id)
            .values(name=name, email=email)
            .execution_options(synchronize_session=False)
        )
        result = await self._run(db, db.execute(statement), "update_contact", contact_id=contact_id)
        rows_affected = result.rowcount
        await self._run(db, db.commit(), "update_contact", contact_id=contact_id)
        logger.info("Total rows/record affected %d (update id=%d)", rows_affected, contact_id)
        return rows_affected

    async def delete_contact(self, db: AsyncSession, contact_id: int) -> int:
        """
        Delete one contact, and commit.

        Returns:
            Rows affected: 1 when the id existed, 0 otherwise.
        """
        if not self._fits_id_column(contact_id):
            logger.info("Total rows/record affected 0 (delete id=%d out of range)", contact_id)
            return 0

        statement = (
            delete(Contact)
            .where(Contact.id == contact_id)
            .execution_options(synchronize_session=False)
        )
        result = await self._run(db, db.execute(statement), "delete_contact", contact_id=contact_id)
        rows_affected = result.rowcount
        await self._run(db, db.commit(), "delete_contact", contact_id=contact_id)
        logger.info("Total rows/record affected %d (delete id=%d)", rows_affected, contact_id)
        return rows_affected


# ── Singleton Instance ────────────────────────────────────────────────────
contact_service = ContactService()
