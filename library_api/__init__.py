"""
Library Lending API Package

Backend for a small library catalog: books, borrowers, and the lending
relationship between them.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy database connection and session management
- main.py: FastAPI application factory and exception translation
- dependencies.py: Dependency injection aliases
- exceptions.py: Domain error hierarchy
- validation.py: Field guards used by the services
- mappers.py: Entity <-> schema translation
- repositories.py: Persistence gateway over SQLAlchemy
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Catalog, registration and lending logic
"""

__version__ = "0.1.0"
