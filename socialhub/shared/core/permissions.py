"""
Authorization Policy

Stateless ownership rules shared by every mutating service.

The only question answered here is "may this requestor act on a resource
owned by that user?". Identifiers arrive in different shapes (UUID objects
from the database, strings from token claims or path parameters), so both
sides are reduced to a canonical string before comparing.

Usage:
======
    from socialhub.shared.core.permissions import ensure_can_act

    post = await post_repo.get(post_id)
    ensure_can_act(current_user_id, post.user_id)
"""

from typing import Optional, Union
from uuid import UUID

from socialhub.shared.core.exceptions import PermissionDeniedError


Identifier = Union[UUID, str]


def canonical_id(value: Optional[Identifier]) -> Optional[str]:
    """
    Normalize an identifier to its canonical string form.

    Strings that parse as UUIDs are re-rendered (lowercase, hyphenated) so
    ``"550E8400E29B41D4A716446655440000"`` and the UUID object compare equal.
    Anything else is compared verbatim.
    """
    if value is None:
        return None
    if isinstance(value, UUID):
        return str(value)
    try:
        return str(UUID(str(value)))
    except ValueError:
        return str(value)


def can_act(requestor_id: Optional[Identifier], owner_id: Optional[Identifier]) -> bool:
    """Allow iff both identifiers are present and canonically equal."""
    requestor = canonical_id(requestor_id)
    owner = canonical_id(owner_id)
    if requestor is None or owner is None:
        return False
    return requestor == owner


def ensure_can_act(
    requestor_id: Optional[Identifier],
    owner_id: Optional[Identifier],
    message: Optional[str] = None,
) -> None:
    """
    Raise PermissionDeniedError unless the requestor owns the resource.

    Raises:
        PermissionDeniedError: On deny
    """
    if not can_act(requestor_id, owner_id):
        if message:
            raise PermissionDeniedError(message)
        raise PermissionDeniedError()
