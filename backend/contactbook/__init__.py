"""
ContactBook Backend: Application Package
========================================

What: A small HTTP service exposing CRUD operations over contact records.
How:  FastAPI routes delegate to a data-access service that runs one
      parameterized statement per call against PostgreSQL.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │        Services (Data Access)       │  ← one statement per operation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← pooled async engine
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
