"""
Adapters Package

External service integrations.

Contents:
=========
- storage_adapter: S3-compatible object storage for uploaded images

Note: Database access is handled by shared/db/session.py using async SQLAlchemy.

Usage:
======
    from socialhub.shared.adapters.storage_adapter import get_storage_adapter

    stored = get_storage_adapter().upload_image(data, "avatar.png", "image/png")
"""
