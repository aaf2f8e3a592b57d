"""
API Module

FastAPI application and route handlers.

Package Structure:
==================
    api/
    ├── main.py           ← Application entry point
    ├── routes.py         ← Route registration
    ├── dependencies/     ← FastAPI dependencies (db, auth, services)
    ├── handlers/         ← Route handlers
    └── middleware/       ← Exception handlers

Usage:
======
    # Run the API
    uvicorn socialhub.api.main:app --reload

    # Import the app
    from socialhub.api.main import app, create_application
"""
