"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- security: Password hashing, password policy and session tokens

Usage:
======
    from socialhub.shared.utils.security import SecurityUtils
"""

from socialhub.shared.utils.security import (
    SecurityUtils,
    PASSWORD_POLICY_MESSAGE,
    SESSION_CLAIMS,
)

__all__ = [
    "SecurityUtils",
    "PASSWORD_POLICY_MESSAGE",
    "SESSION_CLAIMS",
]
