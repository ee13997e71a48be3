"""
ContactBook Backend: Contact Route Handlers
===========================================

What:  The five CRUD endpoints under /api/contacts.
How:   FastAPI parses the path id (signed 64-bit int) and the JSON body
       (ContactIn); the handler calls ContactService and returns a response model.

Input errors never reach these functions: a non-numeric or out-of-range id,
or a malformed body, raises RequestValidationError, which main.py answers with HTTP 400.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from contactbook.database import get_db_session
from contactbook.schemas.contact import (
    ContactIn,
    ContactMutationResponse,
    ContactResponse,
    ErrorResponse,
)
from contactbook.services.contact_service import contact_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Contacts"])

# Ids are parsed as signed 64-bit integers; anything wider is a malformed id
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1

_ERRORS = {
    400: {"description": "Malformed id or body", "model": ErrorResponse},
    500: {"description": "Database error", "model": ErrorResponse},
}


@router.post(
    "/contacts",
    response_model=ContactMutationResponse,
    responses=_ERRORS,
    summary="Create a contact",
)
async def create_contact(
    payload: ContactIn,
    db: AsyncSession = Depends(get_db_session),
) -> ContactMutationResponse:
    """Insert a contact. Any `id` in the body is ignored."""
    contact_id = await contact_service.create_contact(db, name=payload.name, email=payload.email)
    return ContactMutationResponse(id=contact_id, message="Contact created successfully")


@router.get(
    "/contacts/{contact_id}",
    response_model=ContactResponse,
    responses={
        **_ERRORS,
        404: {"description": "Contact not found", "model": ErrorResponse},
    },
    summary="Get a single contact by ID",
)
async def get_contact(
    contact_id: int = Path(ge=ID_MIN, le=ID_MAX),
    db: AsyncSession = Depends(get_db_session),
) -> ContactResponse:
    return await contact_service.get_contact(db, contact_id)


@router.get(
    "/contacts",
    response_model=List[ContactResponse],
    responses={500: _ERRORS[500]},
    summary="List all contacts",
)
async def list_contacts(
    db: AsyncSession = Depends(get_db_session),
) -> List[ContactResponse]:
    return await contact_service.list_contacts(db)


@router.put(
    "/contacts/{contact_id}",
    response_model=ContactMutationResponse,
    responses=_ERRORS,
    summary="Update a contact",
    description="Overwrites name and email. The message reports how many rows changed (0 for an unknown id).",
)
async def update_contact(
    payload: ContactIn,
    contact_id: int = Path(ge=ID_MIN, le=ID_MAX),
    db: AsyncSession = Depends(get_db_session),
) -> ContactMutationResponse:
    updated_rows = await contact_service.update_contact(
        db, contact_id, name=payload.name, email=payload.email
    )
    return ContactMutationResponse(
        id=contact_id,
        message=f"Contact updated successfully. Total rows/record affected {updated_rows}",
    )


@router.delete(
    "/contacts/{contact_id}",
    response_model=ContactMutationResponse,
    responses=_ERRORS,
    summary="Delete a contact",
    description="The message reports how many rows were removed (0 for an unknown id).",
)
async def delete_contact(
    contact_id: int = Path(ge=ID_MIN, le=ID_MAX),
    db: AsyncSession = Depends(get_db_session),
) -> ContactMutationResponse:
    deleted_rows = await contact_service.delete_contact(db, contact_id)
    return ContactMutationResponse(
        id=contact_id,
        message=f"Contact deleted successfully. Total rows/record affected {deleted_rows}",
    )
