"""
ContactBook Backend: Pydantic Request/Response Schemas
======================================================

What:  Pydantic models defining the API contract.
How:   FastAPI validates request bodies against these models, serializes
       responses through them, and generates the OpenAPI document from them.

Schemas are kept separate from the SQLAlchemy model so the API contract
controls exactly which fields are accepted and exposed.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class ContactIn(BaseModel):
    """
    Body of POST /api/contacts and PUT /api/contacts/{id}.

    An `id` key in the body is ignored: the database assigns ids on insert
    and the path supplies the id on update. A missing or null `name` or
    `email` is stored as an empty string.
    """
    name: str = Field(default="", description="Display name")
    email: str = Field(default="", description="Email address")

    model_config = {
        "extra": "ignore",
        "json_schema_extra": {"examples": [{"name": "Ada", "email": "ada@x.io"}]},
    }

    @field_validator("name", "email", mode="before")
    @classmethod
    def null_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class ContactResponse(BaseModel):
    """Full representation of a stored contact."""
    id: int = Field(description="Database-generated identifier")
    name: Optional[str] = Field(default=None, description="Display name")
    email: Optional[str] = Field(default=None, description="Email address")

    model_config = {"from_attributes": True}


class ContactMutationResponse(BaseModel):
    """
    Returned by create, update and delete.

    For update and delete the message carries the rows-affected count, e.g.
    "Contact updated successfully. Total rows/record affected 1".
    """
    id: int = Field(description="Id of the created, updated or deleted contact")
    message: str = Field(description="Human-readable result")


# ══════════════════════════════════════════════════════════════════════════
# Error and Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standardized error body for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "contact with ID '7' was not found",
            "details": null,
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[Any] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
