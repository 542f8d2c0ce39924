"""
Books API Application Package

A single "book" resource over HTTP, in three layers.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: Database handle (engine + sessions) and the get_db dependency
- main.py: FastAPI application factory, error envelope handlers
- dependencies.py: Dependency injection functions
- exceptions.py: Domain exceptions (validation, not found, storage)
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Business rules (validation, pagination)
- repositories/: SQL access
"""

__version__ = "0.1.0"
