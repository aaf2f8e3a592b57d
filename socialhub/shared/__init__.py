"""
Shared Module

Contains the application core used by the API layer:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions, authorization policy
- Adapters: External service integrations

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions, permissions
    ├── db/             ← Database session management
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    ├── adapters/       ← Object storage
    ├── migrations/     ← Alembic environment and revisions
    └── utils/          ← Security utilities

Usage:
======
    from socialhub.shared.models import User, Post
    from socialhub.shared.repositories import UserRepository
    from socialhub.shared.services import AuthService
    from socialhub.shared.schemas import SignupRequest, AuthTokenResponse
    from socialhub.shared.core import logger, SocialHubException
"""
