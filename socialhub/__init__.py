"""
SocialHub Backend

Social-networking REST API: users, posts, comments, likes, shares, follows.

Package Structure:
==================
    socialhub/
    ├── api/        ← FastAPI application
    ├── shared/     ← Shared code (models, repositories, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    # Apply migrations
    alembic upgrade head

    # API Server
    uvicorn socialhub.api.main:app --reload
"""
