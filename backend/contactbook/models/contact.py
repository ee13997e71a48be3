"""
ContactBook Backend: Contact SQLAlchemy Model
=============================================

What:  ORM model for the `contacts` table.
Who:   Used by ContactService for statements and by Alembic for migrations.

Table:
    contacts(id SERIAL PRIMARY KEY, name TEXT, email TEXT)

    Uniqueness of `id` is the only invariant; the database enforces it.
"""

from typing import Optional

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from contactbook.database import Base

# Range of the SERIAL (int4) id column
ID_COLUMN_MIN = -(2**31)
ID_COLUMN_MAX = 2**31 - 1


class Contact(Base):
    """
    A single contact record.

    Query Patterns:
        - Get one:  SELECT ... WHERE id = :id   (primary key lookup)
        - List all: SELECT ... FROM contacts    (no ordering clause)
    """

    __tablename__ = "contacts"

    # SERIAL on PostgreSQL, INTEGER PRIMARY KEY (rowid alias) on SQLite
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    email: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Contact(id={self.id}, name='{self.name}', email='{self.email}')>"
