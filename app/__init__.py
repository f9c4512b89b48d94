"""
Products API: Application Package
=================================

What: The `app` package for the products CRUD service.
Who:  Imported by uvicorn (`app.main:app`), pytest, and the package modules.

Layout:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (Validation, Queries)    │  ← product rules and statements
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Connection Pool)   │  ← Async engine + sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
